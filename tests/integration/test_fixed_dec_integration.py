"""
Integration tests for fixed-point values.

Tests parsing, arithmetic, precision changes and kind conversion working
together the way a currency or measurement consumer uses them.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from fixeddec import FixedDec, IntegerKind, KindConversionError
from scripts.bench import FixedDecBenchmark


class TestCurrencyLedger:
    """Integration tests for cent-precision amounts."""

    @pytest.fixture
    def cents(self) -> type[FixedDec]:
        """Signed 64-bit amounts with two fractional digits."""
        return FixedDec["i64", 2]

    def test_should_total_parsed_amounts(self, cents: type[FixedDec]) -> None:
        """Test summing text amounts with checked addition."""
        entries = ["19.99", "5.01", "-2.50", "100", "0.5"]

        total = cents(0)
        for entry in entries:
            amount = cents.parse(entry)
            assert amount is not None
            total = total.checked_add(amount)
            assert total is not None

        assert str(total) == "123.00"
        assert total.integral() == 123
        assert total.fractional() == 0

    def test_should_split_bill_without_losing_cents(self, cents: type[FixedDec]) -> None:
        """Test dividing an amount and accounting for the remainder."""
        bill = cents.from_string("100.00")

        share = bill.checked_div(3)
        assert share is not None
        assert str(share) == "33.33"

        allocated = share.checked_mul(3)
        assert allocated is not None
        leftover = bill.checked_sub(allocated)
        assert str(leftover) == "0.01"

    def test_should_convert_to_tax_precision_and_back(self, cents: type[FixedDec]) -> None:
        """Test widening for an intermediate calculation then narrowing."""
        price = cents.from_string("19.99")

        precise = price.set_precision(4)
        assert precise is not None
        assert str(precise) == "19.9900"

        # 7.5% tax computed at four digits: * 75 / 1000
        tax = precise.checked_mul(75)
        assert tax is not None
        tax = tax.checked_div(1000)
        assert str(tax) == "1.4992"

        assert str(tax.set_precision(2)) == "1.49"
        assert str(tax.round_at(2)) == "1.4900"

    def test_should_detect_overflow_in_large_totals(self, cents: type[FixedDec]) -> None:
        """Test that checked arithmetic reports overflow instead of wrapping."""
        largest = cents.max_value()

        assert largest.checked_add(cents(1)) is None
        assert (largest + cents(1)) == cents.min_value()


class TestMeasurementConversion:
    """Integration tests for unit conversion across kinds and precisions."""

    def test_should_move_between_kinds(self) -> None:
        """Test narrowing a reading into a smaller kind."""
        meters = FixedDec["i64", 3].from_string("12.345")

        narrow = meters.convert_kind(IntegerKind.I32)
        assert str(narrow) == "12.345"

        with pytest.raises(KindConversionError):
            meters.convert_kind(IntegerKind.U8)

    def test_should_round_trip_every_kind(self) -> None:
        """Test text round trips at the widest precision of each kind."""
        for kind in IntegerKind:
            backing = kind.backing
            fixed_type = FixedDec[kind, backing.max_precision]

            for raw in (backing.min_value, backing.zero, backing.max_value):
                value = fixed_type(raw)
                assert fixed_type.parse(str(value)) == value


class TestTypeCacheConcurrency:
    """Integration tests for concurrent type parameterization."""

    def test_should_create_one_type_per_parameters(self) -> None:
        """Test that concurrent lookups share one class."""

        def lookup(_: int) -> type[FixedDec]:
            return FixedDec["u16", 2]

        with ThreadPoolExecutor(max_workers=8) as executor:
            types = set(executor.map(lookup, range(64)))

        assert len(types) == 1


class TestBenchmarkScript:
    """Smoke test for the benchmark runner."""

    def test_should_time_every_case(self) -> None:
        """Test that each case produces a positive timing."""
        benchmark = FixedDecBenchmark(IntegerKind.U32, 3, number=10, repeat=1)

        results = benchmark.run()

        assert set(results) == set(benchmark.cases())
        assert all(nanoseconds > 0 for nanoseconds in results.values())
