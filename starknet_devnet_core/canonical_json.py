"""
Canonical JSON of a Cairo 0 class, as hashed into its class hash.

The serialized form must reproduce the reference byte for byte:
key order is the order of the input (never sorted), separators are
", " and ": ", and non-ASCII characters are escaped.
"""

import json
from typing import Any, Callable

from .crypto import starknet_keccak
from .felt import Felt

HINT_FIELDS_OMITTED_WHEN_EMPTY = ("attributes", "accessible_scopes")


def traverse_and_exclude_recursively(
    value: Any, exclude: Callable[[str, Any], bool]
) -> Any:
    """
    Returns a copy of `value` without the object entries for which `exclude(key, value)` holds.
    Objects keep their original key order.
    """
    if isinstance(value, dict):
        return {
            key: traverse_and_exclude_recursively(child, exclude)
            for key, child in value.items()
            if not exclude(key, child)
        }

    if isinstance(value, list):
        return [traverse_and_exclude_recursively(child, exclude) for child in value]

    return value


def _is_empty_hint_field(key: str, value: Any) -> bool:
    return key in HINT_FIELDS_OMITTED_WHEN_EMPTY and value == []


def exclude_empty_hint_fields(value: Any) -> Any:
    """Drops every empty `attributes` and `accessible_scopes` list, at any depth."""
    return traverse_and_exclude_recursively(value, _is_empty_hint_field)


def canonical_dumps(value: Any) -> str:
    """Serializes `value` the way the class hash reference does."""
    return json.dumps(value, separators=(", ", ": "), ensure_ascii=True)


def compute_hinted_hash(class_json: dict) -> Felt:
    """
    Hash of the ABI and the program of a Cairo 0 class, debug info excluded.
    """
    program = class_json.get("program")
    if isinstance(program, dict) and "debug_info" in program:
        program = {**program, "debug_info": None}

    hinted_json = {
        "abi": class_json.get("abi"),
        "program": program,
    }

    serialized = canonical_dumps(exclude_empty_hint_fields(hinted_json))
    return starknet_keccak(serialized.encode("utf-8"))
