"""
Core protocols.

This module defines the capability set a backing integer kind must provide
so that a fixed-point type can be written once over every kind.
"""

from typing import Protocol, runtime_checkable

from fixeddec.core.enums import IntegerKind


@runtime_checkable
class Number(Protocol):
    """Protocol defining what makes an integer kind usable as fixed-point storage.

    Checked operations return None when the exact result falls outside
    ``[min_value, max_value]`` or when dividing by zero.
    """

    kind: IntegerKind
    bits: int
    signed: bool
    min_value: int
    max_value: int
    zero: int

    @property
    def name(self) -> str:
        """Short kind name, e.g. ``i32``."""
        ...

    @property
    def max_precision(self) -> int:
        """Largest p for which 10^p fits the kind."""
        ...

    def ten_power(self, p: int) -> int | None:
        """Return 10^p, or None if it overflows the kind."""
        ...

    def checked_add(self, lhs: int, rhs: int) -> int | None:
        """Add, None on overflow."""
        ...

    def checked_sub(self, lhs: int, rhs: int) -> int | None:
        """Subtract, None on overflow."""
        ...

    def checked_mul(self, lhs: int, rhs: int) -> int | None:
        """Multiply, None on overflow."""
        ...

    def checked_div(self, lhs: int, rhs: int) -> int | None:
        """Divide truncating toward zero, None on overflow or division by zero."""
        ...

    def checked_rem(self, lhs: int, rhs: int) -> int | None:
        """Remainder, None on division by zero."""
        ...

    def digit(self, char: str) -> int | None:
        """Convert a single ASCII digit to its value."""
        ...

    def contains(self, value: int) -> bool:
        """Check if value is representable by the kind."""
        ...

    def wrap(self, value: int) -> int:
        """Reduce value into range with two's complement wraparound."""
        ...

    def format(self, value: int) -> str:
        """Render value as decimal text."""
        ...
