"""Selector classification.

Python 3.13+. Zero external dependencies.
"""

from istring.constants import FALSE_KEYWORDS, TRUE_KEYWORDS
from istring.core.numbers import has_integer_prefix
from istring.core.text import equals_ignore_case
from istring.enums import SelectorKind

__all__ = ["classify_boolean", "classify_selector"]


def classify_boolean(token: str) -> int:
    """Classify a selector as a boolean keyword.

    Args:
        token: Selector text

    Returns:
        1 for true/yes/on/1, 0 for false/no/off/0 (ASCII case-insensitive),
        -1 for anything else.

    Examples:
        >>> classify_boolean("Yes")
        1
        >>> classify_boolean("OFF")
        0
        >>> classify_boolean("maybe")
        -1
    """
    if any(equals_ignore_case(token, keyword) for keyword in TRUE_KEYWORDS):
        return 1
    if any(equals_ignore_case(token, keyword) for keyword in FALSE_KEYWORDS):
        return 0
    return -1


def classify_selector(selector: str) -> SelectorKind:
    """Classify a selector by the branch the numeric matcher takes for it.

    Checks run in matcher order, so "<=" wins over "<" and a dash anywhere
    makes a range: "<-5" is LESS, "a-b" is RANGE.
    """
    match selector:
        case "":
            return SelectorKind.DEFAULT
        case _ if len(selector) > 2 and selector.startswith("<="):
            return SelectorKind.LESS_EQUAL
        case _ if len(selector) > 2 and selector.startswith(">="):
            return SelectorKind.GREATER_EQUAL
        case _ if len(selector) > 1 and selector.startswith("<"):
            return SelectorKind.LESS
        case _ if len(selector) > 1 and selector.startswith(">"):
            return SelectorKind.GREATER
        case _ if "-" in selector:
            return SelectorKind.RANGE
        case _ if classify_boolean(selector) >= 0:
            return SelectorKind.BOOLEAN
        case _ if has_integer_prefix(selector):
            return SelectorKind.EXACT
        case _:
            return SelectorKind.PATTERN
