#!/usr/bin/env python3
"""
Micro-benchmarks: fixed-point arithmetic versus float

Times construction, addition, integral extraction and parsing of FixedDec
values next to the equivalent float operations.
"""

import argparse
import sys
import timeit
from collections.abc import Callable

from loguru import logger

from fixeddec import FixedDec, FixedDecException, IntegerKind, setup_logging


class FixedDecBenchmark:
    """Runs timed operations on one FixedDec parameterization."""

    def __init__(self, kind: IntegerKind, precision: int, number: int, repeat: int):
        self.fixed_type = FixedDec[kind, precision]
        self.number = number
        self.repeat = repeat

    def cases(self) -> dict[str, Callable[[], object]]:
        """Build the benchmarked callables, keyed by name."""
        fixed_type = self.fixed_type
        one = fixed_type(1)
        two = fixed_type(2)
        base = fixed_type.from_integral(2)
        text = str(base)

        return {
            "from_integral": lambda: fixed_type.from_integral(10),
            "add_fixeddec": lambda: one + two,
            "add_float": lambda: 0.1 + 0.2,
            "checked_add_fixeddec": lambda: one.checked_add(two),
            "fixeddec_integral": lambda: (base + one).integral(),
            "float_integral": lambda: int(2.0 + 0.001),
            "parse_fixeddec": lambda: fixed_type.parse(text),
            "format_fixeddec": lambda: str(base),
        }

    def run(self) -> dict[str, float]:
        """Run every case and return the best time per call in nanoseconds."""
        results = {}
        for name, case in self.cases().items():
            logger.debug(f"Timing {name}")
            timings = timeit.repeat(case, number=self.number, repeat=self.repeat)
            results[name] = min(timings) / self.number * 1e9
        return results


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark fixed-point decimal operations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python bench.py
  python bench.py --kind i64 --precision 8
  python bench.py --number 100000 --repeat 3 --debug
        """,
    )

    parser.add_argument(
        "--kind",
        type=str,
        default="u32",
        help="Backing integer kind, e.g. u32, i64, uint128 (default: u32)",
    )

    parser.add_argument(
        "--precision", type=int, default=3, help="Fractional digit count (default: 3)"
    )

    parser.add_argument(
        "--number", type=int, default=10000, help="Calls per timing run (default: 10000)"
    )

    parser.add_argument("--repeat", type=int, default=5, help="Timing runs per case (default: 5)")

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    setup_logging(args.debug)

    try:
        kind = IntegerKind.from_string(args.kind)
        benchmark = FixedDecBenchmark(kind, args.precision, args.number, args.repeat)
        if benchmark.fixed_type.from_integral(2) is None:
            logger.error(f"{benchmark.fixed_type.__name__} cannot represent the benchmark values")
            return 1
    except (ValueError, FixedDecException) as e:
        logger.error(f"Invalid arguments: {e}")
        return 1

    logger.info(f"Benchmarking {benchmark.fixed_type.__name__}")
    for name, nanoseconds in benchmark.run().items():
        logger.info(f"{name:<22} {nanoseconds:>10.1f} ns/call")

    logger.success("Benchmark complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
