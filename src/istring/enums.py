"""Kinds of references and selectors.

Both enums are StrEnum so members compare equal to, and log as, their
values.

Python 3.13+.
"""

from enum import StrEnum


class ReferenceKind(StrEnum):
    """Kind of reference value a choice is resolved against."""

    BOOLEAN = "boolean"
    """Boolean reference: selectors true/yes/on/1 and false/no/off/0"""

    TEXT = "text"
    """String reference: selectors are regular expressions"""

    NUMBER = "number"
    """Numeric reference: comparisons, ranges and exact values"""


class SelectorKind(StrEnum):
    """Syntactic shape of a selector, as the numeric matcher reads it.

    String references treat every non-empty selector as a pattern, so
    PATTERN is reported only for selectors no other kind describes.
    """

    DEFAULT = "default"
    """Empty selector: #other"""

    BOOLEAN = "boolean"
    """Boolean keyword: true#Yes"""

    LESS_EQUAL = "less_equal"
    """Comparison: <=5#few"""

    GREATER_EQUAL = "greater_equal"
    """Comparison: >=5#many"""

    LESS = "less"
    """Comparison: <5#few"""

    GREATER = "greater"
    """Comparison: >5#many"""

    RANGE = "range"
    """Inclusive integer range: 2-4#some"""

    EXACT = "exact"
    """Exact integer: 7#seven"""

    PATTERN = "pattern"
    """Regular expression: m.*#male"""


__all__ = [
    "ReferenceKind",
    "SelectorKind",
]
