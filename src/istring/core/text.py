"""ASCII-only text helpers.

Selector and keyword matching folds ASCII letters only, so
str.lower() (full Unicode folding) is not used here.

Python 3.13+. Zero external dependencies.
"""

import string

__all__ = ["ascii_lower", "equals_ignore_case"]

_ASCII_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters A-Z; every other character is kept as is.

    Examples:
        >>> ascii_lower("MÄRZ")
        'mÄrz'
    """
    return text.translate(_ASCII_LOWER_TABLE)


def equals_ignore_case(source: str, target: str) -> bool:
    """ASCII case-insensitive equality.

    Examples:
        >>> equals_ignore_case("TRUE", "true")
        True
        >>> equals_ignore_case("Ä", "ä")
        False
    """
    if len(source) != len(target):
        return False
    return ascii_lower(source) == ascii_lower(target)
