"""
Ledger state: declared classes, deployed contracts and contract storage
"""

from typing import Dict, Sequence, Tuple, Union

from .contract_class import ContractClass
from .contracts import ContractRegistry
from .felt import ClassHash, ContractAddress, Felt, StorageKey
from .storage import get_storage_var_address


class DevnetState:
    """
    Owns the contract registry and contract storage.
    Callers hold exclusive access while mutating.
    """

    def __init__(self):
        self.contracts = ContractRegistry()
        self.__storage: Dict[Tuple[ContractAddress, StorageKey], Felt] = {}

    def is_contract_declared(self, class_hash: ClassHash) -> bool:
        """Check if the class is declared."""
        return self.contracts.is_contract_declared(class_hash)

    def declare_contract_class(
        self, class_hash: ClassHash, contract_class: ContractClass
    ) -> None:
        """Declare `contract_class` under `class_hash`; no-op if already declared."""
        self.contracts.declare_contract_class(class_hash, contract_class)

    def deploy_contract(self, address: ContractAddress, class_hash: ClassHash) -> None:
        """Bind `address` to the declared `class_hash`."""
        self.contracts.deploy_contract(address, class_hash)

    def get_storage_at(self, address: ContractAddress, key: StorageKey) -> Felt:
        """Returns the value stored under `key`; unwritten slots hold zero."""
        return self.__storage.get((address, key), Felt(0))

    def set_storage_at(self, address: ContractAddress, key: StorageKey, value: Felt):
        """Writes `value` under `key` of the contract at `address`."""
        self.__storage[(address, key)] = value

    def get_storage_var(
        self,
        address: ContractAddress,
        storage_var_name: str,
        args: Sequence[Union[Felt, int, str]] = (),
    ) -> Felt:
        """Reads a storage variable by name."""
        return self.get_storage_at(
            address, get_storage_var_address(storage_var_name, args)
        )

    def set_storage_var(
        self,
        address: ContractAddress,
        storage_var_name: str,
        value: Felt,
        args: Sequence[Union[Felt, int, str]] = (),
    ):
        """Writes a storage variable by name."""
        self.set_storage_at(
            address, get_storage_var_address(storage_var_name, args), value
        )

    def reset(self):
        """Clears classes, deployments and storage."""
        self.contracts.clear()
        self.__storage.clear()
