"""
Fixtures for tests
"""

from __future__ import annotations

import pytest

from starknet_devnet_core.contract_class import ContractClass
from starknet_devnet_core.felt import ContractAddress, Felt
from starknet_devnet_core.state import DevnetState

from .shared import DUMMY_ADDRESS, SIERRA_CLASS_PATH, STORAGE_CLASS_PATH
from .util import artifact_path, load_file_content, load_json_from_path


@pytest.fixture(name="storage_class_json")
def fixture_storage_class_json() -> dict:
    """
    Raw JSON of the storage test class; a fresh copy per test
    """
    return load_json_from_path(artifact_path(STORAGE_CLASS_PATH))


@pytest.fixture(name="storage_class_json_str")
def fixture_storage_class_json_str() -> str:
    """
    Raw JSON string of the storage test class
    """
    return load_file_content(artifact_path(STORAGE_CLASS_PATH))


@pytest.fixture(name="storage_class")
def fixture_storage_class(storage_class_json_str) -> ContractClass:
    """
    The storage test class kept as raw JSON
    """
    return ContractClass.from_json_str(storage_class_json_str)


@pytest.fixture(name="devnet_state")
def fixture_devnet_state() -> DevnetState:
    """
    Empty ledger state
    """
    return DevnetState()


@pytest.fixture(name="dummy_address")
def fixture_dummy_address() -> ContractAddress:
    """
    Address used where any valid address will do
    """
    return ContractAddress.from_value(DUMMY_ADDRESS)


@pytest.fixture(name="dummy_felt")
def fixture_dummy_felt() -> Felt:
    """
    Felt used where any value will do
    """
    return Felt.from_prefixed_hex_str("0xDD10")


@pytest.fixture(name="sierra_class_json_str")
def fixture_sierra_class_json_str() -> str:
    """
    Raw JSON string of a minimal Cairo 1 class
    """
    return load_file_content(artifact_path(SIERRA_CLASS_PATH))
