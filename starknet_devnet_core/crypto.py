"""
Hash primitives over the Starknet field.
The cryptography itself comes from cairo-lang; these wrappers only fix the Felt interface.
"""

from typing import Iterable, Union

from starkware.cairo.common.hash_state import compute_hash_on_elements
from starkware.crypto.signature import fast_pedersen_hash
from starkware.starknet.public import abi as starknet_abi

from .felt import Felt

FeltLike = Union[Felt, int]


def pedersen(a: FeltLike, b: FeltLike) -> Felt:
    """Pedersen hash of two field elements."""
    return Felt(fast_pedersen_hash.pedersen_hash(int(a), int(b)))


def pedersen_array(elements: Iterable[FeltLike]) -> Felt:
    """
    Folds pedersen over `elements` starting from 0, then hashes the accumulator
    with the number of elements.
    """
    return Felt(
        compute_hash_on_elements(
            [int(element) for element in elements],
            hash_func=fast_pedersen_hash.pedersen_hash,
        )
    )


def starknet_keccak(data: bytes) -> Felt:
    """Keccak-256 of `data` masked to its low 250 bits."""
    return Felt(starknet_abi.starknet_keccak(data))


def get_selector_from_name(name: str) -> Felt:
    """Selector of an entry point or storage variable called `name`."""
    return starknet_keccak(name.encode("utf-8"))
