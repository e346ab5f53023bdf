"""
Validation utilities for fixed-point parameters.

Provides consistent validation across the library.
"""

from typing import Any

from fixeddec.core.constants import MAX_DIGIT_COUNT
from fixeddec.core.exceptions.numeric import ValidationError


def validate_digit_count(value: Any, param_name: str = "precision") -> int:
    """Validate that a value is a usable fractional digit count.

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated digit count

    Raises:
        ValidationError: If value is not an int between 0 and MAX_DIGIT_COUNT
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{param_name} must be int, got {type(value).__name__}")
    if value < 0 or value > MAX_DIGIT_COUNT:
        raise ValidationError(
            f"{param_name} must be between 0 and {MAX_DIGIT_COUNT}, got {value}"
        )
    return value


def validate_text(value: Any, param_name: str = "text") -> str:
    """Validate that a value is a string.

    Raises:
        ValidationError: If value is not a str
    """
    if not isinstance(value, str):
        raise ValidationError(f"{param_name} must be str, got {type(value).__name__}")
    return value


def validate_non_negative(value: Any, param_name: str = "precision") -> int:
    """Validate that a value is a non-negative int, with no upper bound.

    Raises:
        ValidationError: If value is not an int or is negative
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{param_name} must be int, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{param_name} must be non-negative, got {value}")
    return value
