"""
Tests of hash primitives against reference values
"""

from functools import reduce

import pytest
from starkware.crypto.signature.signature import pedersen_hash as reference_pedersen_hash
from starkware.starknet.public.abi import get_selector_from_name as reference_selector

from starknet_devnet_core.constants import MASK_250
from starknet_devnet_core.crypto import (
    get_selector_from_name,
    pedersen,
    pedersen_array,
    starknet_keccak,
)
from starknet_devnet_core.felt import Felt

from .shared import (
    EXECUTE_SELECTOR,
    PEDERSEN_INPUT_A,
    PEDERSEN_INPUT_B,
    PEDERSEN_OUTPUT,
    REPLACE_CLASS_SELECTOR,
    TRANSFER_SELECTOR,
)
from .util import assert_equal


@pytest.mark.hashing
def test_pedersen_vector():
    """Known pedersen test vector"""
    assert_equal(pedersen(PEDERSEN_INPUT_A, PEDERSEN_INPUT_B), Felt(PEDERSEN_OUTPUT))


@pytest.mark.hashing
@pytest.mark.parametrize("inputs", [(0, 0), (1, 2), (2, 1), (PEDERSEN_INPUT_B, 7)])
def test_pedersen_matches_reference_implementation(inputs):
    """The patched backend agrees with the pure Python implementation"""
    assert_equal(int(pedersen(*inputs)), reference_pedersen_hash(*inputs))


@pytest.mark.hashing
def test_pedersen_array_appends_length():
    """Fold from zero, then hash in the number of elements"""
    elements = [Felt(3), Felt(5), Felt(7)]
    folded = reduce(
        lambda acc, element: reference_pedersen_hash(acc, element),
        [3, 5, 7],
        0,
    )
    expected = reference_pedersen_hash(folded, len(elements))
    assert_equal(pedersen_array(elements), Felt(expected))


@pytest.mark.hashing
def test_pedersen_array_of_nothing():
    """An empty sequence hashes its zero length"""
    assert_equal(pedersen_array([]), Felt(reference_pedersen_hash(0, 0)))


@pytest.mark.hashing
@pytest.mark.parametrize(
    "name, expected",
    [
        ("__execute__", EXECUTE_SELECTOR),
        ("transfer", TRANSFER_SELECTOR),
        ("replace_class", REPLACE_CLASS_SELECTOR),
    ],
)
def test_selectors(name, expected):
    """Selectors of well known entry points"""
    assert_equal(get_selector_from_name(name).to_prefixed_hex_str(), expected)


@pytest.mark.hashing
@pytest.mark.parametrize("data", [b"", b"balance", bytes(range(256))])
def test_starknet_keccak_fits_250_bits(data):
    """The digest is masked to its low 250 bits"""
    digest = starknet_keccak(data)
    assert int(digest) <= MASK_250


@pytest.mark.hashing
def test_selector_matches_reference():
    """Selector is starknet_keccak of the UTF-8 name"""
    assert_equal(int(get_selector_from_name("increase_balance")), reference_selector("increase_balance"))
    assert_equal(get_selector_from_name("deposit"), starknet_keccak(b"deposit"))
