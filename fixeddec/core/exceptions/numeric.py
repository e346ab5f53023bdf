"""
Custom exception hierarchy for fixed-point arithmetic.

Overflow in checked operations is reported as ``None``, never raised.
The exceptions below cover programming errors and the raising
counterparts of checked operations.
"""


class FixedDecException(Exception):
    """Base exception for all fixed-point errors."""

    pass


class ValidationError(FixedDecException):
    """Raised when argument validation fails."""

    pass


class PrecisionError(FixedDecException):
    """Raised when a digit count is too large for the backing kind."""

    def __init__(self, kind: str, precision: int):
        self.kind = kind
        self.precision = precision
        super().__init__(
            f"Precision {precision} unavailable for {kind}: 10^{precision} overflows the kind"
        )


class ParseError(ValidationError):
    """Raised when text cannot be read as a fixed-point value."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")


class KindConversionError(FixedDecException, ValueError):
    """Raised when a raw value does not fit the destination backing kind."""

    def __init__(self, value: int, kind: str):
        self.value = value
        self.kind = kind
        super().__init__(f"Value {value} out of range for {kind}")


class PrecisionMismatchError(FixedDecException, TypeError):
    """Raised when values of different fixed-point types are combined."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(f"Cannot combine {left} with {right} without an explicit conversion")
