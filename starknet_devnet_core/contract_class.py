"""
Contract classes and their class hashes.

A `ContractClass` is a tagged union over the representations a class can arrive in:
- STRUCTURED: a parsed Cairo 0 class (`DeprecatedCompiledClass`)
- RAW_JSON: a Cairo 0 class kept as the JSON it was submitted as
- SIERRA: a parsed Cairo 1 class
Every representation can produce its class hash; the algorithm is chosen by the tag.
"""

import json
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Union

from marshmallow.exceptions import ValidationError
from starkware.starknet.core.os.contract_class.class_hash import compute_class_hash
from starkware.starknet.core.os.contract_class.deprecated_class_hash import (
    compute_deprecated_class_hash,
)
from starkware.starknet.services.api.contract_class.contract_class import (
    ContractClass as SierraContractClass,
)
from starkware.starknet.services.api.contract_class.contract_class import (
    DeprecatedCompiledClass,
    EntryPointType,
)

from .canonical_json import compute_hinted_hash
from .crypto import pedersen_array
from .felt import ClassHash, Felt
from .util import MalformedClassException, parse_hex_string, str_to_felt

# Order in which entry point groups enter the class hash
ENTRY_POINT_TYPES = (
    EntryPointType.EXTERNAL,
    EntryPointType.L1_HANDLER,
    EntryPointType.CONSTRUCTOR,
)

# Version component of the Cairo 0 class hash
API_VERSION = Felt(0)


class ContractClassKind(Enum):
    """Representation a contract class is held in"""

    STRUCTURED = auto()
    RAW_JSON = auto()
    SIERRA = auto()


def _load_json(json_str: str) -> Any:
    try:
        return json.loads(json_str)
    except json.JSONDecodeError as error:
        raise MalformedClassException(
            message=f"Contract class is not valid JSON: {error}"
        ) from error


def _get_required(json_object: dict, key: str, where: str) -> Any:
    if not isinstance(json_object, dict) or key not in json_object:
        raise MalformedClassException(message=f"Missing {key} entry in {where}.")
    return json_object[key]


def _parse_offset(raw_offset: Any) -> Felt:
    if isinstance(raw_offset, bool):
        raise MalformedClassException(message=f"Invalid entry point offset: {raw_offset}.")
    if isinstance(raw_offset, int):
        return Felt(raw_offset)
    if isinstance(raw_offset, str):
        return Felt(parse_hex_string(raw_offset))
    raise MalformedClassException(message=f"Invalid entry point offset: {raw_offset}.")


def _flatten_entry_points(entry_points: Any) -> List[Felt]:
    if not isinstance(entry_points, list):
        raise MalformedClassException(message="Entry points must be listed in an array.")

    flattened = []
    for entry_point in entry_points:
        selector = _get_required(entry_point, "selector", "entry point")
        offset = _get_required(entry_point, "offset", "entry point")
        flattened.append(Felt.from_value(selector))
        flattened.append(_parse_offset(offset))
    return flattened


def _hash_entry_points(entry_points_by_type: dict, entry_point_type: EntryPointType) -> Felt:
    entry_points = _get_required(
        entry_points_by_type, entry_point_type.name, "entry_points_by_type"
    )
    return pedersen_array(_flatten_entry_points(entry_points))


def _optional_array(program: dict, key: str) -> list:
    value = program.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedClassException(message=f"Program {key} must be an array.")
    return value


def _encode_builtin(builtin: Any) -> Felt:
    """The builtin name's UTF-8 bytes, read as a big-endian number."""
    if not isinstance(builtin, str):
        raise MalformedClassException(message=f"Builtin name must be a string; got: {builtin}.")
    return Felt(str_to_felt(builtin))


def _parse_data_item(item: Any) -> Felt:
    if not isinstance(item, str):
        raise MalformedClassException(message=f"Program data must be hex strings; got: {item}.")
    return Felt.from_prefixed_hex_str(item)


def compute_raw_json_class_hash(class_json: dict) -> ClassHash:
    """
    Computes the class hash of a Cairo 0 class given as JSON, without parsing it into a
    `DeprecatedCompiledClass`.
    """
    entry_points_by_type = _get_required(class_json, "entry_points_by_type", "contract class")
    program = _get_required(class_json, "program", "contract class")
    if not isinstance(program, dict):
        raise MalformedClassException(message="Program entry must be an object.")

    hashes = [API_VERSION]
    hashes.extend(
        _hash_entry_points(entry_points_by_type, entry_point_type)
        for entry_point_type in ENTRY_POINT_TYPES
    )
    hashes.append(
        pedersen_array(_encode_builtin(b) for b in _optional_array(program, "builtins"))
    )
    hashes.append(compute_hinted_hash(class_json))
    hashes.append(
        pedersen_array(_parse_data_item(d) for d in _optional_array(program, "data"))
    )

    return pedersen_array(hashes)


def _compute_structured_class_hash(contract_class: DeprecatedCompiledClass) -> ClassHash:
    return Felt(compute_deprecated_class_hash(contract_class))


def _compute_sierra_class_hash(contract_class: SierraContractClass) -> ClassHash:
    return Felt(compute_class_hash(contract_class))


_CLASS_HASHERS: Dict[ContractClassKind, Callable[[Any], ClassHash]] = {
    ContractClassKind.STRUCTURED: _compute_structured_class_hash,
    ContractClassKind.RAW_JSON: compute_raw_json_class_hash,
    ContractClassKind.SIERRA: _compute_sierra_class_hash,
}


@dataclass
class ContractClass:
    """A contract class in one of its representations"""

    kind: ContractClassKind
    inner: Union[DeprecatedCompiledClass, SierraContractClass, dict]

    @staticmethod
    def from_json_str(json_str: str) -> "ContractClass":
        """Keeps a Cairo 0 class as raw JSON."""
        raw = _load_json(json_str)
        if not isinstance(raw, dict):
            raise MalformedClassException(message="Contract class must be a JSON object.")
        return ContractClass(ContractClassKind.RAW_JSON, raw)

    @staticmethod
    def from_json_file(path: str) -> "ContractClass":
        """Keeps the Cairo 0 class stored at `path` as raw JSON."""
        with open(path, mode="r", encoding="utf-8") as class_file:
            return ContractClass.from_json_str(class_file.read())

    @staticmethod
    def deprecated_from_json_str(json_str: str) -> "ContractClass":
        """Parses a Cairo 0 class."""
        return ContractClass(
            ContractClassKind.STRUCTURED,
            _load_with_schema(DeprecatedCompiledClass, _load_json(json_str)),
        )

    @staticmethod
    def cairo_1_from_sierra_json_str(json_str: str) -> "ContractClass":
        """Parses a Cairo 1 (Sierra) class."""
        return ContractClass(
            ContractClassKind.SIERRA,
            _load_with_schema(SierraContractClass, _load_json(json_str)),
        )

    @staticmethod
    def from_representation(kind: ContractClassKind, json_str: str) -> "ContractClass":
        """Loads `json_str` into the representation `kind`."""
        loaders = {
            ContractClassKind.STRUCTURED: ContractClass.deprecated_from_json_str,
            ContractClassKind.RAW_JSON: ContractClass.from_json_str,
            ContractClassKind.SIERRA: ContractClass.cairo_1_from_sierra_json_str,
        }
        return loaders[kind](json_str)

    def generate_hash(self) -> ClassHash:
        """Computes the class hash with the algorithm of this representation."""
        return _CLASS_HASHERS[self.kind](self.inner)

    def to_structured(self) -> "ContractClass":
        """Parses a raw JSON class; other representations are returned as they are."""
        if self.kind is not ContractClassKind.RAW_JSON:
            return self
        return ContractClass(
            ContractClassKind.STRUCTURED,
            _load_with_schema(DeprecatedCompiledClass, self.inner),
        )

    def get_abi(self):
        """Returns the ABI of the class, if it has one."""
        if self.kind is ContractClassKind.RAW_JSON:
            return self.inner.get("abi")
        return self.inner.abi


def _load_with_schema(schema_class, raw: Any):
    if not isinstance(raw, dict):
        raise MalformedClassException(message="Contract class must be a JSON object.")
    try:
        return schema_class.load(raw)
    except ValidationError as error:
        raise MalformedClassException(
            message=f"Invalid contract class: {error.messages}"
        ) from error
