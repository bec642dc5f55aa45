"""
Utility functions and exceptions used across the project.
"""
import re
import sys

from starkware.starknet.definitions.error_codes import StarknetErrorCode
from starkware.starkware_utils.error_handling import StarkErrorCode, StarkException


class StarknetDevnetException(StarkException):
    """
    Exception raised across the project.
    Indicates the raised issue is devnet-related.
    """

    def __init__(self, code: StarknetErrorCode, status_code=500, message=None):
        super().__init__(code=code, message=message)
        self.status_code = status_code


class MalformedClassException(StarknetDevnetException):
    """Raised when a contract class is missing required fields or cannot be parsed"""

    def __init__(self, message: str):
        super().__init__(
            code=StarkErrorCode.MALFORMED_REQUEST,
            status_code=400,
            message=message,
        )


class InvalidFeltEncodingException(StarknetDevnetException):
    """Raised when a value cannot be interpreted as a field element"""

    def __init__(self, message: str):
        super().__init__(
            code=StarkErrorCode.SCHEMA_VALIDATION_ERROR,
            status_code=400,
            message=message,
        )


class UndeclaredClassDevnetException(StarknetDevnetException):
    """Exception raised when Devnet has to use an undeclared class"""

    def __init__(self, class_hash: int):
        super().__init__(
            code=StarknetErrorCode.UNDECLARED_CLASS,
            status_code=400,
            message=f"Class with hash {class_hash:#x} is not declared.",
        )
        self.class_hash = class_hash


class UninitializedContractException(StarknetDevnetException):
    """Exception raised when nothing is deployed at the requested address"""

    def __init__(self, address: int):
        super().__init__(
            code=StarknetErrorCode.UNINITIALIZED_CONTRACT,
            status_code=400,
            message=f"Contract with address {address:#x} is not deployed.",
        )


class UnexpectedInternalErrorException(StarknetDevnetException):
    """Wraps a failure of an underlying primitive that should never happen"""

    def __init__(self, message: str):
        super().__init__(
            code=StarknetErrorCode.UNEXPECTED_FAILURE,
            message=f"Unexpected internal error: {message}",
        )


HEX_DIGITS_REGEX = re.compile(r"[0-9a-fA-F]+")


def parse_hex_string(arg: str) -> int:
    """
    Converts the argument to an integer only if it is `0x` followed by hex digits.
    """
    if (
        isinstance(arg, str)
        and arg.startswith(("0x", "0X"))
        and HEX_DIGITS_REGEX.fullmatch(arg, 2)
    ):
        return int(arg, 16)

    raise InvalidFeltEncodingException(
        message=f"Expected a hexadecimal string starting with 0x; got: '{arg}'."
    )


def str_to_felt(text: str) -> int:
    """Converts string to felt."""
    return int.from_bytes(bytes(text, "utf-8"), "big")


def warn(msg: str, file=None):
    """Log a warning to `file`, stderr by default"""
    print(f"\033[93m{msg}\033[0m", file=file or sys.stderr)
