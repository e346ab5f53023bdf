"""
Fixed-point decimal type.

``FixedDec[kind, digits]`` wraps a single backing integer and reads it with
an implicit decimal point ``digits`` places from the right: raw value 1234 in
``FixedDec["u32", 3]`` represents 1.234. The digit count belongs to the type,
not to the value, so values of different precisions cannot be combined
without an explicit ``set_precision`` call.

Checked methods return None on overflow. The ``+ - * /`` operators wrap
around the backing kind's range like fixed-width primitives do.
"""

import functools
from threading import RLock
from typing import Any, ClassVar, Self

from cachetools import LRUCache
from loguru import logger

from fixeddec.core.constants import TYPE_CACHE_SIZE
from fixeddec.core.enums import IntegerKind
from fixeddec.core.exceptions.numeric import KindConversionError, ParseError, PrecisionError
from fixeddec.core.number import BackingInteger, backing_for, truncating_divmod
from fixeddec.core.types.text import format_raw, parse_raw
from fixeddec.core.utils.decorators import validate_inputs
from fixeddec.core.utils.validation import validate_digit_count

_TypeKey = tuple[IntegerKind, int]

_TYPE_CACHE: LRUCache[_TypeKey, type["FixedDec"]] = LRUCache(maxsize=TYPE_CACHE_SIZE)
_TYPE_CACHE_LOCK = RLock()  # Thread-safe type creation


def _parameterize(kind: BackingInteger, precision: int) -> type["FixedDec"]:
    """Return the unique FixedDec subclass for (kind, precision)."""
    key = (kind.kind, precision)
    with _TYPE_CACHE_LOCK:
        fixed_type = _TYPE_CACHE.get(key)
        if fixed_type is None:
            name = f"FixedDec[{kind.name}, {precision}]"
            namespace = {
                "__slots__": (),
                "__qualname__": name,
                "__module__": __name__,
                "kind": kind,
                "precision": precision,
            }
            fixed_type = type(name, (FixedDec,), namespace)
            _TYPE_CACHE[key] = fixed_type
            logger.debug("Created fixed-point type {}", name)
    return fixed_type


def _restore(kind: str, precision: int, value: int) -> "FixedDec":
    """Rebuild a pickled value."""
    return FixedDec[kind, precision](value)


@functools.total_ordering
class FixedDec:
    """A backing integer with a fixed number of fractional decimal digits.

    Parameterize before use::

        Price = FixedDec["i64", 2]
        price = Price(12345)          # 123.45
        Price.parse("123.45")         # same value
        price.set_precision(4)        # FixedDec[i64, 4]('123.4500')

    At precision 0 the value is a plain integer.
    """

    __slots__ = ("_value",)

    kind: ClassVar[BackingInteger]
    precision: ClassVar[int]

    def __class_getitem__(cls, params: Any) -> type["FixedDec"]:
        if getattr(cls, "kind", None) is not None:
            raise TypeError(f"{cls.__name__} is already parameterized")
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("FixedDec takes exactly two parameters: FixedDec[kind, digits]")

        kind, precision = params
        return _parameterize(backing_for(kind), validate_digit_count(precision))

    def __init__(self, value: int) -> None:
        """Create a value from a raw backing integer already at this precision.

        Raises:
            PrecisionError: If 10^precision does not fit the backing kind
            ValidationError: If value is not an int of the backing kind
        """
        kind, precision = type(self)._parameters()
        if kind.ten_power(precision) is None:
            raise PrecisionError(kind.name, precision)
        self._value = kind.coerce(value)

    @classmethod
    def _parameters(cls) -> tuple[BackingInteger, int]:
        kind = getattr(cls, "kind", None)
        if kind is None:
            raise TypeError("FixedDec must be parameterized first, e.g. FixedDec['i32', 3]")
        return kind, cls.precision

    @classmethod
    def _from_raw(cls, value: int) -> Self:
        # Only for raw values derived from an existing value of a valid type
        instance = object.__new__(cls)
        instance._value = value
        return instance

    def _checked_result(self, value: int | None) -> Self | None:
        return None if value is None else self._from_raw(value)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_integral(cls, value: int) -> Self | None:
        """Create a value from a whole number, scaling it by 10^precision.

        Returns:
            The scaled value, or None if scaling overflows the backing kind
        """
        kind, precision = cls._parameters()
        value = kind.coerce(value)
        scale = kind.ten_power(precision)
        if scale is None:
            return None
        scaled = kind.checked_mul(value, scale)
        return None if scaled is None else cls._from_raw(scaled)

    @classmethod
    def min_value(cls) -> Self:
        """Smallest representable value."""
        kind, _ = cls._parameters()
        return cls(kind.min_value)

    @classmethod
    def max_value(cls) -> Self:
        """Largest representable value."""
        kind, _ = cls._parameters()
        return cls(kind.max_value)

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Parse ``[-]digits[.digits]`` text.

        Fractional digits beyond the type's precision are dropped, not
        rounded: ``"1.02345"`` at precision 4 reads as 1.0234.

        Raises:
            ParseError: If the text is malformed or overflows the backing kind
        """
        kind, precision = cls._parameters()
        return cls._from_raw(parse_raw(text, kind, precision))

    @classmethod
    def parse(cls, text: str) -> Self | None:
        """Parse text like ``from_string``, returning None when it is rejected."""
        try:
            return cls.from_string(text)
        except ParseError as e:
            logger.debug("{} rejected text: {}", cls.__name__, e)
            return None

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    @validate_inputs
    def set_precision(self, precision: int) -> "FixedDec | None":
        """Rescale to another digit count.

        Narrowing divides by a power of ten and truncates the dropped
        digits; widening multiplies and fills with zeros.

        Returns:
            Value of type ``FixedDec[kind, precision]``, or None if the
            target precision is unavailable for the kind or rescaling
            overflows
        """
        kind = self.kind
        if kind.ten_power(precision) is None:
            logger.debug("Precision {} unavailable for {}", precision, kind.name)
            return None
        target = _parameterize(kind, precision)

        if precision == self.precision:
            value: int | None = self._value
        elif precision < self.precision:
            value = kind.checked_div(self._value, kind.ten_power(self.precision - precision))
        else:
            value = kind.checked_mul(self._value, kind.ten_power(precision - self.precision))

        if value is None:
            logger.debug("{!r} overflows {}", self, target.__name__)
            return None
        return target._from_raw(value)

    def convert_kind(self, kind: "BackingInteger | IntegerKind | str") -> "FixedDec":
        """Move the raw value to another backing kind at the same precision.

        Raises:
            KindConversionError: If the raw value is out of the target kind's range
            PrecisionError: If the precision is unavailable for the target kind
        """
        target_kind = backing_for(kind)
        if not target_kind.contains(self._value):
            logger.debug("{!r} does not fit {}", self, target_kind.name)
            raise KindConversionError(self._value, target_kind.name)
        return _parameterize(target_kind, self.precision)(self._value)

    # ------------------------------------------------------------------
    # Checked arithmetic
    # ------------------------------------------------------------------

    @validate_inputs
    def checked_add(self, other: Self) -> Self | None:
        return self._checked_result(self.kind.checked_add(self._value, other._value))

    @validate_inputs
    def checked_sub(self, other: Self) -> Self | None:
        return self._checked_result(self.kind.checked_sub(self._value, other._value))

    @validate_inputs
    def checked_mul(self, rhs: int) -> Self | None:
        """Scale by an integer of the backing kind."""
        return self._checked_result(self.kind.checked_mul(self._value, rhs))

    @validate_inputs
    def checked_div(self, rhs: int) -> Self | None:
        """Divide by an integer of the backing kind, truncating toward zero."""
        return self._checked_result(self.kind.checked_div(self._value, rhs))

    @validate_inputs
    def checked_rem(self, rhs: int) -> Self | None:
        return self._checked_result(self.kind.checked_rem(self._value, rhs))

    @validate_inputs
    def round_at(self, precision: int) -> Self:
        """Zero every digit below ``precision`` fractional places.

        Despite the name this truncates toward zero and never rounds half-up:
        1.234 at precision 2 gives 1.230, -1.234 gives -1.230. A precision at
        or above the type's own returns the value unchanged.
        """
        if precision >= self.precision:
            return self

        scale = self.kind.ten_power(self.precision - precision)
        remainder = self.kind.checked_rem(self._value, scale)
        if self._value < 0:
            return self._from_raw(self._value + remainder)
        return self._from_raw(self._value - remainder)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def integral(self) -> int:
        """Whole-number part, truncated toward zero."""
        return self.kind.checked_div(self._value, self.kind.ten_power(self.precision))

    def fractional(self) -> int:
        """Fractional digits as a non-negative integer, e.g. 234 for -1.234."""
        return self.kind.checked_rem(self._value, self.kind.ten_power(self.precision))

    @property
    def value(self) -> int:
        """Raw backing value, unscaled."""
        return self._value

    # ------------------------------------------------------------------
    # Unchecked operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Self:
        if not isinstance(other, FixedDec) or type(other) is not type(self):
            return NotImplemented
        return self._from_raw(self.kind.wrap(self._value + other._value))

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, FixedDec) or type(other) is not type(self):
            return NotImplemented
        return self._from_raw(self.kind.wrap(self._value - other._value))

    def __mul__(self, rhs: object) -> Self:
        if not isinstance(rhs, int) or isinstance(rhs, bool):
            return NotImplemented
        rhs = self.kind.coerce(rhs, "rhs")
        return self._from_raw(self.kind.wrap(self._value * rhs))

    def __truediv__(self, rhs: object) -> Self:
        if not isinstance(rhs, int) or isinstance(rhs, bool):
            return NotImplemented
        rhs = self.kind.coerce(rhs, "rhs")
        quotient, _ = truncating_divmod(self._value, rhs)
        return self._from_raw(self.kind.wrap(quotient))

    # ------------------------------------------------------------------
    # Comparison, hashing, text
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedDec) or type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedDec) or type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((self.kind.kind, self.precision, self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (self.kind.name, self.precision, self._value))

    def __str__(self) -> str:
        return format_raw(self._value, self.kind, self.precision)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"
