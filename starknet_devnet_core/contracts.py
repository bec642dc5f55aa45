"""
Class for storing declared contract classes and deployed contracts
"""

import logging
from typing import Dict, List

from .contract_class import ContractClass
from .felt import ClassHash, ContractAddress
from .util import UndeclaredClassDevnetException, UninitializedContractException

logger = logging.getLogger(__name__)


class ContractRegistry:
    """
    Declared classes by class hash, and the class hash each deployed address is bound to.
    Not synchronized: the owner of the ledger state serializes writes.
    """

    def __init__(self):
        self.__classes: Dict[ClassHash, ContractClass] = {}
        self.__instances: Dict[ContractAddress, ClassHash] = {}

    def is_contract_declared(self, class_hash: ClassHash) -> bool:
        """Check if the class is declared."""
        return class_hash in self.__classes

    def declare_contract_class(
        self, class_hash: ClassHash, contract_class: ContractClass
    ) -> None:
        """
        Store contract class under `class_hash`.
        Declaring an already declared hash is a no-op.
        """
        if self.is_contract_declared(class_hash):
            logger.debug("Class %s already declared", class_hash)
            return

        self.__classes[class_hash] = contract_class
        logger.debug("Declared class %s", class_hash)

    def deploy_contract(self, address: ContractAddress, class_hash: ClassHash) -> None:
        """
        Bind `address` to the declared class `class_hash`.
        A previous binding of `address` is overwritten.
        """
        if not self.is_contract_declared(class_hash):
            raise UndeclaredClassDevnetException(int(class_hash))

        previous_class_hash = self.__instances.get(address)
        if previous_class_hash is not None and previous_class_hash != class_hash:
            logger.info(
                "Rebinding contract %s from class %s to class %s",
                address,
                previous_class_hash,
                class_hash,
            )

        self.__instances[address] = class_hash
        logger.debug("Deployed class %s at %s", class_hash, address)

    def is_deployed(self, address: ContractAddress) -> bool:
        """
        Check if the contract is deployed.
        """
        return address in self.__instances

    def get_class_hash_at(self, address: ContractAddress) -> ClassHash:
        """Gets the class hash at the provided address."""
        if not self.is_deployed(address):
            raise UninitializedContractException(int(address))

        return self.__instances[address]

    def get_class_by_hash(self, class_hash: ClassHash) -> ContractClass:
        """Gets the class from the provided class_hash."""
        if not self.is_contract_declared(class_hash):
            raise UndeclaredClassDevnetException(int(class_hash))

        return self.__classes[class_hash]

    def get_class_by_address(self, address: ContractAddress) -> ContractClass:
        """Gets the class of the contract deployed at `address`."""
        return self.get_class_by_hash(self.get_class_hash_at(address))

    def declared_class_hashes(self) -> List[ClassHash]:
        """Class hashes in declaration order."""
        return list(self.__classes)

    def deployed_addresses(self) -> List[ContractAddress]:
        """Addresses in first deployment order."""
        return list(self.__instances)

    def clear(self) -> None:
        """Forget all classes and deployments."""
        self.__classes.clear()
        self.__instances.clear()
