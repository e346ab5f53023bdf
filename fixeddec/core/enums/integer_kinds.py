"""
Backing integer kind enumerations.

This module defines the primitive integer kinds that can store a
fixed-point value.
"""

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fixeddec.core.number import BackingInteger


class IntegerKind(StrEnum):
    """
    Supported backing integer kinds.

    Named after the fixed-width primitive they emulate: a leading ``u`` or
    ``i`` for the signedness followed by the bit width.
    """

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"

    @property
    def bits(self) -> int:
        """Bit width of the kind."""
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        """Check if the kind can hold negative values."""
        return self.value.startswith("i")

    @property
    def backing(self) -> "BackingInteger":
        """Capability object implementing arithmetic for this kind."""
        from fixeddec.core.number import backing_for

        return backing_for(self)

    @classmethod
    def from_string(cls, value: str) -> "IntegerKind":
        """
        Convert string to IntegerKind enum, with case-insensitive matching.

        Accepts the short form (``u32``, ``i64``) as well as the long
        form (``uint32``, ``int64``).

        Args:
            value: String representation of the kind

        Returns:
            Corresponding IntegerKind enum value

        Raises:
            ValueError: If the kind is not supported
        """
        value_lower = value.strip().lower()

        if value_lower.startswith("uint"):
            value_lower = "u" + value_lower[4:]
        elif value_lower.startswith("int"):
            value_lower = "i" + value_lower[3:]

        for kind in cls:
            if kind.value == value_lower:
                return kind

        raise ValueError(
            f"Unsupported integer kind: {value}. "
            f"Supported kinds: {', '.join([k.value for k in cls])}"
        )
