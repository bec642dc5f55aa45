"""
Field element value types: Felt and the range-restricted keys built on it.
"""

from dataclasses import dataclass
from typing import Union

from .constants import FIELD_PRIME, PATRICIA_KEY_UPPER_BOUND
from .util import InvalidFeltEncodingException, parse_hex_string


@dataclass(frozen=True, order=True)
class Felt:
    """
    An element of the Starknet field: an integer in [0, P).
    Construction never wraps: out-of-range values are rejected.
    Arithmetic results are reduced mod P.
    """

    value: int = 0

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidFeltEncodingException(
                message=f"Expected an integer field element; got: {self.value!r}."
            )
        if not 0 <= self.value < FIELD_PRIME:
            raise InvalidFeltEncodingException(
                message=f"Value {self.value:#x} is out of the field element range."
            )

    @staticmethod
    def from_prefixed_hex_str(hex_str: str) -> "Felt":
        """Parses a 0x-prefixed hex string."""
        return Felt(parse_hex_string(hex_str))

    @staticmethod
    def from_bytes_be(data: bytes) -> "Felt":
        """Parses at most 32 big-endian bytes."""
        if len(data) > 32:
            raise InvalidFeltEncodingException(
                message=f"Expected at most 32 bytes; got: {len(data)}."
            )
        return Felt(int.from_bytes(data, "big"))

    @staticmethod
    def from_value(value: Union["Felt", int, str]) -> "Felt":
        """Accepts a Felt, an int or a 0x-prefixed hex string."""
        if isinstance(value, Felt):
            return value
        if isinstance(value, str):
            return Felt.from_prefixed_hex_str(value)
        return Felt(value)

    def to_prefixed_hex_str(self) -> str:
        """Lowercase, 0x-prefixed, no padding."""
        return hex(self.value)

    def to_bytes_be(self) -> bytes:
        """Canonical 32-byte big-endian form."""
        return self.value.to_bytes(32, "big")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __add__(self, other: "Felt") -> "Felt":
        return Felt((self.value + int(other)) % FIELD_PRIME)

    def __mul__(self, other: "Felt") -> "Felt":
        return Felt((self.value * int(other)) % FIELD_PRIME)

    def __str__(self) -> str:
        return self.to_prefixed_hex_str()


ClassHash = Felt
Balance = Felt


@dataclass(frozen=True, order=True)
class PatriciaKey:
    """A field element below 2**251, used as a key of a Patricia-Merkle tree."""

    felt: Felt

    def __post_init__(self):
        if not isinstance(self.felt, Felt):
            raise InvalidFeltEncodingException(
                message=f"Expected a Felt as Patricia key; got: {self.felt!r}."
            )
        if self.felt.value >= PATRICIA_KEY_UPPER_BOUND:
            raise InvalidFeltEncodingException(
                message=f"Patricia key {self.felt} is out of range [0, 2**251)."
            )

    @staticmethod
    def from_value(value: Union[Felt, int, str]) -> "PatriciaKey":
        """Accepts a Felt, an int or a 0x-prefixed hex string."""
        return PatriciaKey(Felt.from_value(value))

    def to_felt(self) -> Felt:
        """Returns the underlying field element."""
        return self.felt

    def __int__(self) -> int:
        return self.felt.value

    def __str__(self) -> str:
        return str(self.felt)


StorageKey = PatriciaKey


@dataclass(frozen=True, order=True)
class ContractAddress:
    """Address of a deployed contract instance."""

    key: PatriciaKey

    def __post_init__(self):
        if not isinstance(self.key, PatriciaKey):
            raise InvalidFeltEncodingException(
                message=f"Expected a Patricia key as contract address; got: {self.key!r}."
            )

    @staticmethod
    def from_value(value: Union[Felt, int, str]) -> "ContractAddress":
        """Accepts a Felt, an int or a 0x-prefixed hex string."""
        return ContractAddress(PatriciaKey.from_value(value))

    def to_felt(self) -> Felt:
        """Returns the underlying field element."""
        return self.key.felt

    def __int__(self) -> int:
        return int(self.key)

    def __str__(self) -> str:
        return str(self.key)
