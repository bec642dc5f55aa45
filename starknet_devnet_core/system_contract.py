"""Contracts deployed at fixed addresses when the devnet starts"""

import logging
import sys
from typing import Iterable, List, Union

from .contract_class import ContractClass, ContractClassKind
from .fee_estimate import FeeToken
from .felt import Balance, ClassHash, ContractAddress, Felt
from .state import DevnetState
from .util import UnexpectedInternalErrorException

logger = logging.getLogger(__name__)

REPRESENTATION_KINDS = {
    "cairo0": ContractClassKind.RAW_JSON,
    "cairo1": ContractClassKind.SIERRA,
}


class SystemContract:
    """
    A built-in contract with a precalculated class hash and a fixed address.
    Token bookkeeping of system contracts lives in their own storage.
    """

    def __init__(
        self,
        class_hash: ClassHash,
        address: ContractAddress,
        contract_class: ContractClass,
    ):
        self.class_hash = class_hash
        self.address = address
        self.contract_class = contract_class

    @classmethod
    def from_representation(
        cls,
        class_hash: Union[str, int],
        address: Union[str, int],
        contract_class_json_str: str,
        kind: ContractClassKind,
    ) -> "SystemContract":
        """Loads the class JSON into the representation `kind`."""
        return cls(
            class_hash=Felt.from_value(class_hash),
            address=ContractAddress.from_value(address),
            contract_class=ContractClass.from_representation(
                kind, contract_class_json_str
            ),
        )

    @classmethod
    def new_cairo0(
        cls, class_hash: Union[str, int], address: Union[str, int], contract_class_json_str: str
    ) -> "SystemContract":
        """System contract whose Cairo 0 class is kept as raw JSON"""
        return cls.from_representation(
            class_hash, address, contract_class_json_str, ContractClassKind.RAW_JSON
        )

    @classmethod
    def new_cairo1(
        cls, class_hash: Union[str, int], address: Union[str, int], contract_class_json_str: str
    ) -> "SystemContract":
        """System contract with a Cairo 1 (Sierra) class"""
        return cls.from_representation(
            class_hash, address, contract_class_json_str, ContractClassKind.SIERRA
        )

    def deploy(self, state: DevnetState):
        """Declare the class unless already declared, then deploy it at the fixed address"""
        if not state.is_contract_declared(self.class_hash):
            state.declare_contract_class(self.class_hash, self.contract_class)

        state.deploy_contract(self.address, self.class_hash)

    def get_address(self) -> ContractAddress:
        """Fixed address of the contract"""
        return self.address

    # pylint: disable=unused-argument
    def set_initial_balance(self, state: DevnetState):
        """System contracts are not funded"""

    # pylint: disable=unused-argument
    def get_balance(self, state: DevnetState, token: FeeToken) -> Balance:
        """System contracts hold no fee-token balance of their own"""
        return Felt(0)

    def verify_class_hash(self):
        """Recompute the class hash and compare it to the precalculated one"""
        computed = self.contract_class.generate_hash()
        if computed != self.class_hash:
            raise UnexpectedInternalErrorException(
                message=f"Precalculated class hash {self.class_hash} of system contract at "
                f"{self.address} does not match the computed {computed}."
            )

    def print(self):
        print("Predeployed system contract")
        print(f"Address: {self.address}")
        print(f"Class Hash: {self.class_hash}\n")
        sys.stdout.flush()


def deploy_system_contracts(
    state: DevnetState, system_contracts: Iterable[SystemContract]
) -> List[ContractAddress]:
    """Deploy `system_contracts` in order; returns their addresses"""
    addresses = []
    for system_contract in system_contracts:
        system_contract.deploy(state)
        logger.info(
            "Deployed system contract of class %s at %s",
            system_contract.class_hash,
            system_contract.get_address(),
        )
        addresses.append(system_contract.get_address())
    return addresses
