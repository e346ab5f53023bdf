"""
Unit tests for validation utilities.
"""

import pytest

from fixeddec.core.constants import MAX_DIGIT_COUNT
from fixeddec.core.exceptions.numeric import ValidationError
from fixeddec.core.utils.validation import (
    validate_digit_count,
    validate_non_negative,
    validate_text,
)


class TestValidateDigitCount:
    """Tests for validate_digit_count."""

    @pytest.mark.parametrize("value", [0, 3, MAX_DIGIT_COUNT])
    def test_should_accept_valid_digit_counts(self, value: int) -> None:
        """Test values in range are returned unchanged."""
        assert validate_digit_count(value) == value

    @pytest.mark.parametrize("value", [-1, MAX_DIGIT_COUNT + 1])
    def test_should_reject_out_of_range_digit_counts(self, value: int) -> None:
        """Test values outside 0..MAX_DIGIT_COUNT."""
        with pytest.raises(ValidationError, match="precision must be between 0 and 127"):
            validate_digit_count(value)

    @pytest.mark.parametrize("value", [True, 1.0, "3", None])
    def test_should_reject_non_int_digit_counts(self, value: object) -> None:
        """Test non-int values, including bool."""
        with pytest.raises(ValidationError, match="precision must be int"):
            validate_digit_count(value)

    def test_should_use_parameter_name_in_message(self) -> None:
        """Test custom parameter name."""
        with pytest.raises(ValidationError, match="digits must be between"):
            validate_digit_count(-5, "digits")


class TestValidateText:
    """Tests for validate_text."""

    def test_should_accept_text(self) -> None:
        """Test str input."""
        assert validate_text("1.5") == "1.5"

    def test_should_reject_non_text(self) -> None:
        """Test non-str input."""
        with pytest.raises(ValidationError, match="text must be str, got bytes"):
            validate_text(b"1.5")


class TestValidateNonNegative:
    """Tests for validate_non_negative."""

    @pytest.mark.parametrize("value", [0, 3, MAX_DIGIT_COUNT + 1, 10_000])
    def test_should_accept_any_non_negative_int(self, value: int) -> None:
        """Test that there is no upper bound."""
        assert validate_non_negative(value) == value

    def test_should_reject_negative_values(self) -> None:
        """Test values below zero."""
        with pytest.raises(ValidationError, match="precision must be non-negative, got -1"):
            validate_non_negative(-1)

    @pytest.mark.parametrize("value", [False, 1.5, "3"])
    def test_should_reject_non_int_values(self, value: object) -> None:
        """Test non-int values, including bool."""
        with pytest.raises(ValidationError, match="p must be int"):
            validate_non_negative(value, "p")
