"""
Core enumerations for the fixed-point library.
"""

from .integer_kinds import IntegerKind

__all__ = ["IntegerKind"]
