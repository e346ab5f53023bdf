"""
Text codec for fixed-point values.

Text form: ``[-]<digits>.<digits>`` with the fractional part padded to
exactly the type's digit count when formatting. Parsing truncates excess
fractional digits; it never rounds.
"""

from fixeddec.core.constants import DECIMAL_SEPARATOR, NEGATIVE_SIGN, RADIX
from fixeddec.core.exceptions.numeric import ParseError
from fixeddec.core.protocols import Number
from fixeddec.core.utils.validation import validate_text


def format_raw(value: int, kind: Number, precision: int) -> str:
    """Render a raw backing value as ``[-]integral.fraction``.

    At precision 0 the separator is still emitted (``"123."``).

    Args:
        value: Raw backing value, already scaled by 10^precision
        kind: Backing kind of the value
        precision: Number of fractional digits

    Returns:
        Text with exactly ``precision`` fractional digits
    """
    scale = kind.ten_power(precision)
    integral = kind.checked_div(value, scale)
    fractional = kind.checked_rem(value, scale)

    sign = NEGATIVE_SIGN if value < 0 else ""
    fraction_text = kind.format(fractional).zfill(precision) if precision else ""
    return f"{sign}{kind.format(abs(integral))}{DECIMAL_SEPARATOR}{fraction_text}"


def _check_digits(digits: str, kind: Number, text: str) -> None:
    for char in digits:
        if kind.digit(char) is None:
            raise ParseError(text, f"non-digit character {char!r}")


def _accumulate(digits: str, kind: Number, negative: bool, text: str) -> int:
    """Fold ASCII digits into a value with checked multiply-by-ten-and-add.

    Negative values accumulate downward so the kind's minimum is reachable.
    """
    value = kind.zero
    for char in digits:
        digit = kind.digit(char)
        if digit is None:
            raise ParseError(text, f"non-digit character {char!r}")

        shifted = kind.checked_mul(value, RADIX)
        if shifted is not None:
            step = kind.checked_sub if negative else kind.checked_add
            shifted = step(shifted, digit)
        if shifted is None:
            raise ParseError(text, f"value overflows {kind.name}")
        value = shifted
    return value


def parse_raw(text: str, kind: Number, precision: int) -> int:
    """Parse text into a raw backing value scaled by 10^precision.

    Fractional text shorter than ``precision`` is padded with implicit
    zeros; longer fractional text is truncated after ``precision`` digits.

    Args:
        text: ASCII text, optionally signed, with at most one separator
        kind: Backing kind to accumulate into
        precision: Number of fractional digits of the target type

    Returns:
        Raw backing value

    Raises:
        ParseError: If the text is malformed or the value overflows the kind
    """
    text = validate_text(text)

    scale = kind.ten_power(precision)
    if scale is None:
        raise ParseError(text, f"precision {precision} unavailable for {kind.name}")

    negative = text.startswith(NEGATIVE_SIGN)
    if negative and not kind.signed:
        raise ParseError(text, f"negative value for unsigned kind {kind.name}")
    body = text[len(NEGATIVE_SIGN) :] if negative else text

    integral_text, separator, fractional_text = body.partition(DECIMAL_SEPARATOR)
    if not integral_text and not fractional_text:
        raise ParseError(text, "no digits")

    integral = _accumulate(integral_text, kind, negative, text)
    scaled = kind.checked_mul(integral, scale)
    if scaled is None:
        raise ParseError(text, f"value overflows {kind.name} at precision {precision}")
    if not separator:
        return scaled

    kept_digits, dropped_digits = fractional_text[:precision], fractional_text[precision:]
    _check_digits(dropped_digits, kind, text)

    fractional = _accumulate(kept_digits, kind, negative, text)
    # Below 10^precision, always representable
    padded = fractional * kind.ten_power(precision - len(kept_digits))
    combined = kind.checked_add(scaled, padded)
    if combined is None:
        raise ParseError(text, f"value overflows {kind.name} at precision {precision}")
    return combined
