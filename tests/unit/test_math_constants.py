"""
Unit tests for fixed-point mathematical constants.
"""

from fixeddec.core.types.fixed_dec import FixedDec
from fixeddec.core.types.math_constants import PI32, PI64, PI128

REFERENCE_PI = "3.14159265358979323846264338327950288419"


class TestPiConstants:
    """Tests for PI at each backing width."""

    def test_should_display_reference_digits(self) -> None:
        """Test that the widest constant matches the reference digits."""
        assert str(PI128) == REFERENCE_PI

    def test_should_nest_narrower_constants(self) -> None:
        """Test that narrower constants are prefixes of wider ones."""
        assert str(PI128).startswith(str(PI64))
        assert str(PI128).startswith(str(PI32))
        assert str(PI64) == "3.141592653589793238"
        assert str(PI32) == "3.141592653"

    def test_should_use_widest_precision_of_each_kind(self) -> None:
        """Test constant types."""
        assert type(PI32) is FixedDec["u32", 9]
        assert type(PI64) is FixedDec["u64", 18]
        assert type(PI128) is FixedDec["u128", 38]

    def test_should_truncate_when_narrowing(self) -> None:
        """Test changing precision of PI64."""
        assert PI64.set_precision(0) == FixedDec["u64", 0](3)
        assert PI64.set_precision(1) == FixedDec["u64", 1](31)
        assert PI64.set_precision(2) == FixedDec["u64", 2](314)
        assert PI64.set_precision(3) == FixedDec["u64", 3](3141)
        assert PI64.set_precision(4) == FixedDec["u64", 4](31415)

    def test_should_not_widen_past_kind(self) -> None:
        """Test widening PI64 beyond what u64 can hold."""
        assert PI64.set_precision(19) is None

    def test_should_split_components(self) -> None:
        """Test integral and fractional parts."""
        assert PI32.integral() == 3
        assert PI32.fractional() == 141_592_653
