"""
Tests of the registry of declared classes and deployed contracts
"""

import logging

import pytest

from starknet_devnet_core.contract_class import ContractClass, ContractClassKind
from starknet_devnet_core.contracts import ContractRegistry
from starknet_devnet_core.felt import ContractAddress, Felt
from starknet_devnet_core.util import (
    UndeclaredClassDevnetException,
    UninitializedContractException,
)

from .shared import DUMMY_CLASS_HASH
from .util import assert_equal

OTHER_CLASS_HASH = Felt.from_prefixed_hex_str("0xdd11")


@pytest.fixture(name="registry")
def fixture_registry():
    """Empty registry"""
    return ContractRegistry()


@pytest.fixture(name="class_hash")
def fixture_class_hash():
    """Hash the storage class is declared under"""
    return Felt.from_prefixed_hex_str(DUMMY_CLASS_HASH)


@pytest.mark.state
def test_declare_and_get(registry, class_hash, storage_class):
    """A declared class is returned by its hash"""
    assert not registry.is_contract_declared(class_hash)
    registry.declare_contract_class(class_hash, storage_class)
    assert registry.is_contract_declared(class_hash)
    assert registry.get_class_by_hash(class_hash) is storage_class


@pytest.mark.state
def test_declaring_twice_keeps_first_class(registry, class_hash, storage_class):
    """Re-declaring a hash is a no-op"""
    other_class = ContractClass(ContractClassKind.RAW_JSON, {"abi": []})
    registry.declare_contract_class(class_hash, storage_class)
    registry.declare_contract_class(class_hash, other_class)

    assert registry.get_class_by_hash(class_hash) is storage_class
    assert_equal(registry.declared_class_hashes(), [class_hash])


@pytest.mark.state
def test_deploy_requires_declaration(registry, class_hash, dummy_address):
    """Deploying an unknown class fails and leaves no instance"""
    with pytest.raises(UndeclaredClassDevnetException) as error:
        registry.deploy_contract(dummy_address, class_hash)

    assert_equal(error.value.class_hash, int(class_hash))
    assert_equal(error.value.status_code, 400)
    assert not registry.is_deployed(dummy_address)


@pytest.mark.state
def test_deploy(registry, class_hash, storage_class, dummy_address):
    """A deployed address resolves to its class"""
    registry.declare_contract_class(class_hash, storage_class)
    registry.deploy_contract(dummy_address, class_hash)

    assert registry.is_deployed(dummy_address)
    assert_equal(registry.get_class_hash_at(dummy_address), class_hash)
    assert registry.get_class_by_address(dummy_address) is storage_class


@pytest.mark.state
def test_redeploy_rebinds(registry, class_hash, storage_class, dummy_address, caplog):
    """Deploying at a used address replaces its class"""
    registry.declare_contract_class(class_hash, storage_class)
    registry.declare_contract_class(OTHER_CLASS_HASH, storage_class)
    registry.deploy_contract(dummy_address, class_hash)

    with caplog.at_level(logging.INFO, logger="starknet_devnet_core.contracts"):
        registry.deploy_contract(dummy_address, OTHER_CLASS_HASH)

    assert_equal(registry.get_class_hash_at(dummy_address), OTHER_CLASS_HASH)
    assert_equal(registry.deployed_addresses(), [dummy_address])
    assert "Rebinding" in caplog.text


@pytest.mark.state
def test_undeployed_address(registry):
    """Nothing is deployed at a fresh address"""
    address = ContractAddress.from_value(0x123)
    assert not registry.is_deployed(address)
    with pytest.raises(UninitializedContractException):
        registry.get_class_hash_at(address)
    with pytest.raises(UninitializedContractException):
        registry.get_class_by_address(address)


@pytest.mark.state
def test_undeclared_class(registry, class_hash):
    """Unknown class hashes are reported"""
    with pytest.raises(UndeclaredClassDevnetException):
        registry.get_class_by_hash(class_hash)


@pytest.mark.state
def test_clear(registry, class_hash, storage_class, dummy_address):
    """Clearing forgets classes and deployments"""
    registry.declare_contract_class(class_hash, storage_class)
    registry.deploy_contract(dummy_address, class_hash)
    registry.clear()

    assert not registry.is_contract_declared(class_hash)
    assert not registry.is_deployed(dummy_address)
    assert_equal(registry.deployed_addresses(), [])
