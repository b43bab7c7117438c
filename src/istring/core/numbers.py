"""Numeric parsing helpers for numeric selectors.

Selector bounds are parsed the way C strtod/strtol read them: leading
whitespace is skipped, the longest numeric prefix is converted, trailing
text is ignored. A selector that does not parse, or that overflows, reads
as 0. This keeps one template resolving identically in every runtime that
interprets it.

Python 3.13+. Zero external dependencies.
"""

import math
import re
import sys

from istring.constants import (
    INTEGER_OVERFLOW_DIVISOR,
    LONG_MAX,
    LONG_MIN,
    TOLERANCE_SCALE,
)

__all__ = [
    "has_integer_prefix",
    "has_numeric_prefix",
    "parse_double",
    "parse_integer_as_double",
    "tolerance_equal",
]

# C isspace(): space, \t, \n, \v, \f, \r
_C_WHITESPACE = " \t\n\v\f\r"

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_SPECIAL_RE = re.compile(r"[+-]?(?:inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE)

_INTEGER_PREFIX_RE = re.compile(r"[+-]?[0-9]")

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Magnitude guard for integer selectors. C truncates the negative bound
# toward zero, hence the negated positive quotient.
_INTEGER_GUARD_MAX = LONG_MAX // INTEGER_OVERFLOW_DIVISOR
_INTEGER_GUARD_MIN = -(-LONG_MIN // INTEGER_OVERFLOW_DIVISOR)


def _strip_leading_space(text: str) -> str:
    return text.lstrip(_C_WHITESPACE)


def _scan_double(text: str) -> float | None:
    """Convert the longest floating-point prefix of text.

    Returns:
        The converted value, 0.0 on overflow or underflow (C reports
        ERANGE), or None if no prefix converts.
    """
    text = _strip_leading_space(text)

    if match := _HEX_FLOAT_RE.match(text):
        literal = match.group(0)
        try:
            return float.fromhex(literal)
        except OverflowError:
            return 0.0

    if match := _SPECIAL_RE.match(text):
        literal = match.group(0).split("(", 1)[0]
        return float(literal)

    if match := _DECIMAL_RE.match(text):
        literal = match.group(0)
        value = float(literal)
        if math.isinf(value):
            return 0.0
        if value != 0.0 and abs(value) < sys.float_info.min:
            return 0.0
        return value

    return None


def has_numeric_prefix(text: str) -> bool:
    """Check whether text starts with something parse_double can convert."""
    return _scan_double(text) is not None


def has_integer_prefix(text: str) -> bool:
    """Check whether text starts with a base-10 integer (after C whitespace)."""
    return _INTEGER_PREFIX_RE.match(_strip_leading_space(text)) is not None


def parse_double(text: str) -> float:
    """Parse the floating-point prefix of text.

    Args:
        text: Selector bound, e.g. "10", " 2.5e3 kg", "inf"

    Returns:
        The parsed value; 0.0 if nothing parses or the value overflows.

    Examples:
        >>> parse_double("2.5")
        2.5
        >>> parse_double("7 apples")
        7.0
        >>> parse_double("abc")
        0.0
        >>> parse_double("1e999")
        0.0
    """
    value = _scan_double(text)
    return 0.0 if value is None else value


def parse_integer_as_double(text: str, base: int = 10) -> float:
    """Parse the integer prefix of text and return it as a float.

    Args:
        text: Selector text, e.g. "42", "-3", "12abc"
        base: Radix between 2 and 36; base 16 accepts a "0x" prefix

    Returns:
        The parsed value as float; 0.0 if nothing parses, the value is
        outside the 64-bit signed range, or its magnitude exceeds
        LONG_MAX // 100000.

    Raises:
        ValueError: If base is outside 2..36

    Examples:
        >>> parse_integer_as_double("42")
        42.0
        >>> parse_integer_as_double("1.9")
        1.0
        >>> parse_integer_as_double("100000000000000")
        0.0
    """
    if not 2 <= base <= 36:
        msg = f"base must be between 2 and 36, got {base}"
        raise ValueError(msg)

    text = _strip_leading_space(text)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    valid = _DIGITS[:base] + _DIGITS[:base].upper()
    if base == 16 and text[:2] in ("0x", "0X") and text[2:3] and text[2] in valid:
        text = text[2:]

    end = 0
    while end < len(text) and text[end] in valid:
        end += 1
    if end == 0:
        return 0.0

    value = sign * int(text[:end], base)
    if value > LONG_MAX or value < LONG_MIN:
        return 0.0
    if value > _INTEGER_GUARD_MAX or value < _INTEGER_GUARD_MIN:
        return 0.0
    return float(value)


def tolerance_equal(value1: float, value2: float) -> bool:
    """Compare two floats with a relative tolerance of 1e-12.

    The threshold scales with the smaller magnitude, so a comparison
    against exactly 0 passes only for exactly 0.

    Examples:
        >>> tolerance_equal(1.0000000000001, 1.0)
        True
        >>> tolerance_equal(0.0, 0.0000001)
        False
        >>> tolerance_equal(0.0, 0.0)
        True
    """
    return abs(value1 - value2) * TOLERANCE_SCALE <= min(abs(value1), abs(value2))
