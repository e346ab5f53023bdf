"""
Core constants and limits.

Defines the text format symbols and the limits applied to fixed-point
type parameters.
"""

# Text format
DECIMAL_SEPARATOR = "."  # Splits integral and fractional digits
NEGATIVE_SIGN = "-"  # Only accepted for signed backing kinds
RADIX = 10

# Backing kinds
SUPPORTED_BIT_WIDTHS = (8, 16, 32, 64, 128)
SUPPORTED_KIND_COUNT = 2 * len(SUPPORTED_BIT_WIDTHS)  # Signed and unsigned

# Type parameters
MAX_DIGIT_COUNT = 127  # Upper bound accepted by FixedDec[kind, digits]
TYPE_CACHE_SIZE = SUPPORTED_KIND_COUNT * (MAX_DIGIT_COUNT + 1)  # Never evicts
