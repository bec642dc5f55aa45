"""
Fee estimates and the units they are priced in.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import (
    ETH_ERC20_CONTRACT_ADDRESS,
    STRK_ERC20_CONTRACT_ADDRESS,
    U64_MAX,
)
from .felt import Felt
from .util import InvalidFeltEncodingException


class PriceUnit(Enum):
    """Unit of a fee: WEI for ETH, FRI for STRK"""

    WEI = "WEI"
    FRI = "FRI"


class FeeToken(Enum):
    """Tokens fees can be paid in"""

    ETH = (ETH_ERC20_CONTRACT_ADDRESS, PriceUnit.WEI)
    STRK = (STRK_ERC20_CONTRACT_ADDRESS, PriceUnit.FRI)

    @property
    def address(self) -> int:
        """Address of the token contract"""
        return self.value[0]

    @property
    def unit(self) -> PriceUnit:
        """Unit fees in this token are priced in"""
        return self.value[1]


def _assert_u64(name: str, value: int):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U64_MAX:
        raise InvalidFeltEncodingException(
            message=f"{name} must be an unsigned 64-bit integer; got: {value!r}."
        )


@dataclass(frozen=True)
class FeeEstimate:
    """Estimated fee: overall_fee = gas_consumed * gas_price"""

    gas_consumed: int
    gas_price: int
    overall_fee: int
    unit: PriceUnit

    @staticmethod
    def new(gas_consumed: int, gas_price: int, unit: PriceUnit) -> "FeeEstimate":
        """Builds an estimate priced in `unit`."""
        _assert_u64("gas_consumed", gas_consumed)
        _assert_u64("gas_price", gas_price)
        return FeeEstimate(
            gas_consumed=gas_consumed,
            gas_price=gas_price,
            overall_fee=gas_consumed * gas_price,
            unit=unit,
        )

    @staticmethod
    def new_in_wei_units(gas_consumed: int, gas_price: int) -> "FeeEstimate":
        """Estimate of a fee paid in ETH"""
        return FeeEstimate.new(gas_consumed, gas_price, PriceUnit.WEI)

    @staticmethod
    def new_in_strk_units(gas_consumed: int, gas_price: int) -> "FeeEstimate":
        """Estimate of a fee paid in STRK"""
        return FeeEstimate.new(gas_consumed, gas_price, PriceUnit.FRI)

    @staticmethod
    def from_actual_fee(
        actual_fee: int, gas_price: int, unit: PriceUnit = PriceUnit.WEI
    ) -> "FeeEstimate":
        """Derives the consumed gas from a fee charged by the executor."""
        gas_consumed = actual_fee // gas_price if gas_price else 0
        return FeeEstimate.new(gas_consumed, gas_price, unit)

    def dump(self) -> dict:
        """JSON-RPC representation"""
        return {
            "gas_consumed": Felt(self.gas_consumed).to_prefixed_hex_str(),
            "gas_price": Felt(self.gas_price).to_prefixed_hex_str(),
            "overall_fee": Felt(self.overall_fee).to_prefixed_hex_str(),
            "unit": self.unit.value,
        }
