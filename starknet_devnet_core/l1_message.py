"""
Messages sent from L1 to L2, and their conversion to L1 handler transactions
for fee estimation.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from starkware.starknet.business_logic.transaction.objects import InternalL1Handler
from starkware.starkware_utils.error_handling import StarkErrorCode
from web3 import Web3

from .constants import ETH_ADDRESS_BYTES, L1_HANDLER_PAID_FEE_ON_L1
from .felt import ContractAddress, Felt
from .util import InvalidFeltEncodingException, StarknetDevnetException

BlockId = Union[str, dict]

BLOCK_TAGS = ("latest", "pending")


@dataclass(frozen=True)
class EthAddress:
    """A 20-byte Ethereum address, as 0x followed by 40 hex digits"""

    address: str

    def __post_init__(self):
        if (
            not isinstance(self.address, str)
            or not self.address.startswith("0x")
            or len(self.address) != 2 + 2 * ETH_ADDRESS_BYTES
            or not Web3.is_address(self.address)
        ):
            raise InvalidFeltEncodingException(
                message=f"Expected an Ethereum address of {ETH_ADDRESS_BYTES} bytes; "
                f"got: '{self.address}'."
            )

    def to_felt(self) -> Felt:
        """The address as a field element; 160 bits always fit"""
        return Felt(int(self.address, 16))

    def to_checksum_address(self) -> str:
        """EIP-55 form of the address"""
        return Web3.to_checksum_address(self.address)


@dataclass(frozen=True)
class MessageFromL1:
    """A message sent to an L2 contract by an L1 contract"""

    from_address: EthAddress
    to_address: Felt
    entry_point_selector: Felt
    payload: List[Felt] = field(default_factory=list)

    @staticmethod
    def load(raw_message: dict) -> "MessageFromL1":
        """Parses the JSON-RPC representation of the message."""
        if not isinstance(raw_message, dict):
            raise StarknetDevnetException(
                code=StarkErrorCode.MALFORMED_REQUEST,
                status_code=400,
                message="Message must be an object.",
            )

        try:
            raw_payload = raw_message.get("payload", [])
            if not isinstance(raw_payload, list):
                raise InvalidFeltEncodingException(message="Payload must be an array.")

            return MessageFromL1(
                from_address=EthAddress(raw_message["from_address"]),
                to_address=Felt.from_value(raw_message["to_address"]),
                entry_point_selector=Felt.from_value(raw_message["entry_point_selector"]),
                payload=[Felt.from_value(element) for element in raw_payload],
            )
        except KeyError as error:
            raise StarknetDevnetException(
                code=StarkErrorCode.MALFORMED_REQUEST,
                status_code=400,
                message=f"Message is missing the {error.args[0]} field.",
            ) from error

    def dump(self) -> dict:
        """JSON-RPC representation"""
        return {
            "from_address": self.from_address.address,
            "to_address": self.to_address.to_prefixed_hex_str(),
            "entry_point_selector": self.entry_point_selector.to_prefixed_hex_str(),
            "payload": [element.to_prefixed_hex_str() for element in self.payload],
        }


def validate_block_id(block_id: BlockId) -> BlockId:
    """Accepts a block tag, {"block_number": n} or {"block_hash": h}"""
    if isinstance(block_id, str) and block_id in BLOCK_TAGS:
        return block_id

    if isinstance(block_id, dict) and len(block_id) == 1:
        if "block_number" in block_id:
            block_number = block_id["block_number"]
            if (
                isinstance(block_number, int)
                and not isinstance(block_number, bool)
                and block_number >= 0
            ):
                return block_id
        if "block_hash" in block_id:
            Felt.from_value(block_id["block_hash"])
            return block_id

    raise StarknetDevnetException(
        code=StarkErrorCode.MALFORMED_REQUEST,
        status_code=400,
        message=f"Invalid block id: {block_id}.",
    )


@dataclass(frozen=True)
class L1HandlerTransaction:
    """
    An L1 handler invocation ready to be run by the executor.
    The hash stays unset: the transaction is only used for fee estimation.
    """

    contract_address: ContractAddress
    entry_point_selector: Felt
    calldata: List[Felt]
    paid_fee_on_l1: int = L1_HANDLER_PAID_FEE_ON_L1
    transaction_hash: Optional[Felt] = None

    def to_internal(self, chain_id: int, nonce: int = 0) -> InternalL1Handler:
        """Builds the cairo-lang transaction consumed by the executor."""
        return InternalL1Handler.create(
            contract_address=int(self.contract_address),
            entry_point_selector=int(self.entry_point_selector),
            calldata=[int(element) for element in self.calldata],
            nonce=nonce,
            chain_id=chain_id,
            paid_fee_on_l1=self.paid_fee_on_l1,
        )


@dataclass(frozen=True)
class EstimateMessageFeeRequest:
    """Request to estimate the fee of handling `message` on top of block `block_id`"""

    message: MessageFromL1
    block_id: BlockId = "latest"

    @staticmethod
    def load(raw_request: dict) -> "EstimateMessageFeeRequest":
        """
        Parses a request of the form
        {"message": {...} or the message fields inline, "block_id": ...}.
        """
        if not isinstance(raw_request, dict):
            raise StarknetDevnetException(
                code=StarkErrorCode.MALFORMED_REQUEST,
                status_code=400,
                message="Request must be an object.",
            )

        raw_message = raw_request.get("message", raw_request)
        return EstimateMessageFeeRequest(
            message=MessageFromL1.load(raw_message),
            block_id=validate_block_id(raw_request.get("block_id", "latest")),
        )

    def get_from_address(self) -> EthAddress:
        return self.message.from_address

    def get_to_address(self) -> Felt:
        return self.message.to_address

    def get_entry_point_selector(self) -> Felt:
        return self.message.entry_point_selector

    def get_payload(self) -> List[Felt]:
        return list(self.message.payload)

    def get_block_id(self) -> BlockId:
        return self.block_id

    def create_l1_handler_transaction(self) -> L1HandlerTransaction:
        """
        The handler receives the L1 sender as its first argument, followed by the payload.
        """
        calldata = [self.get_from_address().to_felt(), *self.get_payload()]

        return L1HandlerTransaction(
            contract_address=ContractAddress.from_value(self.get_to_address()),
            entry_point_selector=self.get_entry_point_selector(),
            calldata=calldata,
        )
