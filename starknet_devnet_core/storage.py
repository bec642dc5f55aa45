"""
Storage variable addressing.
"""

from typing import Sequence, Union

from .constants import ADDR_BOUND
from .crypto import get_selector_from_name, pedersen
from .felt import Felt, PatriciaKey, StorageKey
from .util import UnexpectedInternalErrorException


def get_storage_var_address(
    storage_var_name: str, args: Sequence[Union[Felt, int, str]] = ()
) -> StorageKey:
    """
    Returns the storage address of a Starknet storage variable given its name and arguments.
    The name selector is hashed together with each argument in turn, and the result is
    reduced into [0, 2**251 - 256) so that every slot of a multi-slot value is addressable.
    """
    if not storage_var_name.isascii():
        raise UnexpectedInternalErrorException(
            message=f"Storage variable name must be ASCII; got: '{storage_var_name}'."
        )

    address = get_selector_from_name(storage_var_name)
    for arg in args:
        address = pedersen(address, Felt.from_value(arg))

    return mask_to_patricia_key(address)


def mask_to_patricia_key(value: Felt) -> PatriciaKey:
    """Reduces `value` into the storage address range."""
    return PatriciaKey(Felt(int(value) % ADDR_BOUND))
