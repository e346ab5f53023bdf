"""
Backing integer capability implementations.

Python integers are unbounded, so each kind computes the exact result and
then checks it against the range of the fixed-width primitive it stands
for. Signed and unsigned kinds differ only in remainder semantics: the
remainder of a signed value is taken on its absolute value, so a
fractional part extracted from a negative value is never negative.
"""

from abc import ABC, abstractmethod

from fixeddec.core.constants import RADIX
from fixeddec.core.enums import IntegerKind
from fixeddec.core.exceptions.numeric import ValidationError
from fixeddec.core.utils.validation import validate_non_negative


def truncating_divmod(lhs: int, rhs: int) -> tuple[int, int]:
    """Divide rounding the quotient toward zero.

    The remainder takes the sign of the dividend, as with fixed-width
    integer division (``-7 / 2 == -3``, ``-7 % 2 == -1``).

    Raises:
        ZeroDivisionError: If rhs is zero
    """
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient
    return quotient, lhs - rhs * quotient


class BackingInteger(ABC):
    """Shared arithmetic for a fixed-width integer kind."""

    def __init__(self, kind: IntegerKind):
        self.kind = kind
        self.bits = kind.bits
        self.signed = kind.signed
        if self.signed:
            self.min_value = -(1 << (self.bits - 1))
            self.max_value = (1 << (self.bits - 1)) - 1
        else:
            self.min_value = 0
            self.max_value = (1 << self.bits) - 1
        self.zero = 0
        self._powers = self._build_power_table()

    def _build_power_table(self) -> tuple[int, ...]:
        """Powers of ten by repeated checked multiplication, stopping at overflow."""
        powers = [1]
        while (next_power := self.checked_mul(powers[-1], RADIX)) is not None:
            powers.append(next_power)
        return tuple(powers)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def max_precision(self) -> int:
        return len(self._powers) - 1

    def ten_power(self, p: int) -> int | None:
        p = validate_non_negative(p, "p")
        if p < len(self._powers):
            return self._powers[p]
        return None

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def _checked(self, value: int) -> int | None:
        return value if self.contains(value) else None

    def checked_add(self, lhs: int, rhs: int) -> int | None:
        return self._checked(lhs + rhs)

    def checked_sub(self, lhs: int, rhs: int) -> int | None:
        return self._checked(lhs - rhs)

    def checked_mul(self, lhs: int, rhs: int) -> int | None:
        return self._checked(lhs * rhs)

    def checked_div(self, lhs: int, rhs: int) -> int | None:
        if rhs == 0:
            return None
        quotient, _ = truncating_divmod(lhs, rhs)
        return self._checked(quotient)

    @abstractmethod
    def checked_rem(self, lhs: int, rhs: int) -> int | None:
        """Remainder, None on division by zero."""
        pass

    def digit(self, char: str) -> int | None:
        if len(char) == 1 and "0" <= char <= "9":
            return ord(char) - ord("0")
        return None

    def wrap(self, value: int) -> int:
        mask = (1 << self.bits) - 1
        if self.signed:
            offset = 1 << (self.bits - 1)
            return ((value + offset) & mask) - offset
        return value & mask

    def coerce(self, value: object, param_name: str = "value") -> int:
        """Validate that value is an int of this kind.

        Raises:
            ValidationError: If value is not an int or lies outside the kind's range
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(f"{param_name} must be int, got {type(value).__name__}")
        if not self.contains(value):
            raise ValidationError(
                f"{param_name} {value} out of range for {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value

    def format(self, value: int) -> str:
        return str(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BackingInteger):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class UnsignedInteger(BackingInteger):
    """Unsigned kind: ordinary checked remainder."""

    def checked_rem(self, lhs: int, rhs: int) -> int | None:
        if rhs == 0:
            return None
        _, remainder = truncating_divmod(lhs, rhs)
        return self._checked(remainder)


class SignedInteger(BackingInteger):
    """Signed kind: remainder of the absolute value.

    The absolute value is taken on the exact integer, so the kind's minimum
    does not overflow; the remainder is always smaller than ``abs(rhs)``.
    """

    def checked_rem(self, lhs: int, rhs: int) -> int | None:
        if rhs == 0:
            return None
        _, remainder = truncating_divmod(abs(lhs), rhs)
        return self._checked(remainder)


U8 = UnsignedInteger(IntegerKind.U8)
U16 = UnsignedInteger(IntegerKind.U16)
U32 = UnsignedInteger(IntegerKind.U32)
U64 = UnsignedInteger(IntegerKind.U64)
U128 = UnsignedInteger(IntegerKind.U128)
I8 = SignedInteger(IntegerKind.I8)
I16 = SignedInteger(IntegerKind.I16)
I32 = SignedInteger(IntegerKind.I32)
I64 = SignedInteger(IntegerKind.I64)
I128 = SignedInteger(IntegerKind.I128)

BACKING_INTEGERS: dict[IntegerKind, BackingInteger] = {
    backing.kind: backing for backing in (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128)
}


def backing_for(kind: "BackingInteger | IntegerKind | str") -> BackingInteger:
    """Resolve a kind given as capability object, enum or name.

    Raises:
        ValueError: If a kind name is not supported
        TypeError: If kind has an unsupported type
    """
    if isinstance(kind, BackingInteger):
        return kind
    if isinstance(kind, IntegerKind):
        return BACKING_INTEGERS[kind]
    if isinstance(kind, str):
        return BACKING_INTEGERS[IntegerKind.from_string(kind)]
    raise TypeError(f"kind must be IntegerKind, str or BackingInteger, got {type(kind).__name__}")
