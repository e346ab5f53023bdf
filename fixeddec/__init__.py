"""
Fixed-point decimal numbers backed by fixed-width integers.

A ``FixedDec[kind, digits]`` value stores one integer of the chosen kind and
reads it with ``digits`` implicit fractional decimal places, giving
deterministic decimal arithmetic without floating point.

Example:
    >>> from fixeddec import FixedDec
    >>> a = FixedDec["i32", 2](12345)
    >>> str(a)
    '123.45'
"""
# ruff: noqa: E402

from loguru import logger

# Silent unless the application opts in, including messages emitted on import
logger.disable("fixeddec")

from fixeddec.core.enums import IntegerKind
from fixeddec.core.exceptions.numeric import (
    FixedDecException,
    KindConversionError,
    ParseError,
    PrecisionError,
    PrecisionMismatchError,
    ValidationError,
)
from fixeddec.core.log_config import setup_logging
from fixeddec.core.number import (
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    BackingInteger,
    SignedInteger,
    UnsignedInteger,
    backing_for,
)
from fixeddec.core.protocols import Number
from fixeddec.core.types import PI32, PI64, PI128, FixedDec

__all__ = [
    # Types
    "FixedDec",
    "Number",
    "BackingInteger",
    "UnsignedInteger",
    "SignedInteger",
    "IntegerKind",
    "backing_for",
    # Backing kinds
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    # Constants
    "PI32",
    "PI64",
    "PI128",
    # Exceptions
    "FixedDecException",
    "ValidationError",
    "PrecisionError",
    "ParseError",
    "KindConversionError",
    "PrecisionMismatchError",
    # Logging
    "setup_logging",
]
