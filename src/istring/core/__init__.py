"""Core utilities shared across syntax and runtime layers.

This package provides foundational helpers that both the syntax layer
(parsing, selector classification) and runtime layer (matching) depend on:

    core <- syntax <- runtime

Exports:
    ascii_lower, equals_ignore_case: ASCII-only case folding
    parse_double, parse_integer_as_double: C-compatible selector parsing
    tolerance_equal: Relative float comparison for exact selectors

Python 3.13+.
"""

from .numbers import (
    has_integer_prefix,
    has_numeric_prefix,
    parse_double,
    parse_integer_as_double,
    tolerance_equal,
)
from .text import ascii_lower, equals_ignore_case

__all__ = [
    "ascii_lower",
    "equals_ignore_case",
    "has_integer_prefix",
    "has_numeric_prefix",
    "parse_double",
    "parse_integer_as_double",
    "tolerance_equal",
]
