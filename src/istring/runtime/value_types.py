"""Reference values for choice resolution.

A choice template is resolved against one of three reference kinds, each
with its own selector semantics:
    - BooleanReference: boolean keywords (true/yes/on/1, false/no/off/0)
    - TextReference: selectors are regular expressions, whole-string match
    - NumberReference: comparisons, inclusive ranges, exact values

ChoiceReference is the tagged union of the three. Plain Python values are
coerced by to_reference(), so callers rarely build these directly.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

from istring.enums import ReferenceKind

__all__ = [
    "BooleanReference",
    "ChoiceReference",
    "NumberReference",
    "ReferenceValue",
    "TextReference",
    "to_reference",
]

@dataclass(frozen=True, slots=True)
class BooleanReference:
    """Boolean reference value."""

    value: bool

    @property
    def kind(self) -> ReferenceKind:
        return ReferenceKind.BOOLEAN


@dataclass(frozen=True, slots=True)
class TextReference:
    """String reference value."""

    value: str

    @property
    def kind(self) -> ReferenceKind:
        return ReferenceKind.TEXT


@dataclass(frozen=True, slots=True)
class NumberReference:
    """Numeric reference value."""

    value: float

    @property
    def kind(self) -> ReferenceKind:
        return ReferenceKind.NUMBER


def _int_to_float(value: int) -> float:
    """float(value), saturating to +-inf past the float range."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


ChoiceReference: TypeAlias = BooleanReference | TextReference | NumberReference

# Everything get_choice() accepts as a reference.
ReferenceValue: TypeAlias = ChoiceReference | bool | str | int | float | Decimal


def to_reference(value: ReferenceValue) -> ChoiceReference:
    """Coerce a plain Python value into a ChoiceReference.

    Args:
        value: A ChoiceReference, bool, str, int, float or Decimal

    Returns:
        The matching ChoiceReference. bool is checked before int.

    Raises:
        TypeError: For any other type

    Examples:
        >>> to_reference(True)
        BooleanReference(value=True)
        >>> to_reference(3)
        NumberReference(value=3.0)
        >>> to_reference(10**19)
        NumberReference(value=1e+19)
    """
    match value:
        case BooleanReference() | TextReference() | NumberReference():
            return value
        case bool():
            return BooleanReference(value)
        case str():
            return TextReference(value)
        case int():
            return NumberReference(_int_to_float(value))
        case float():
            return NumberReference(value)
        case Decimal():
            return NumberReference(float(value))
        case _:
            msg = f"Unsupported reference type: {type(value).__name__}"
            raise TypeError(msg)
