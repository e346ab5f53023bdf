"""
Core type definitions.
"""

# Re-export the fixed-point type and its constants for easy access
from .fixed_dec import FixedDec
from .math_constants import PI32, PI64, PI128
from .text import format_raw, parse_raw

__all__ = [
    # Types
    "FixedDec",
    # Text codec
    "format_raw",
    "parse_raw",
    # Constants
    "PI32",
    "PI64",
    "PI128",
]
