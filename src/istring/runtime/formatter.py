"""Placeholder substitution.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from istring.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from istring.runtime.sources import StringMapSource, to_string_map

__all__ = ["format_tokens"]


def format_tokens(
    text: str, values: Mapping[str, object] | StringMapSource | None
) -> str:
    """Replace {key} placeholders in text.

    For each key, only the FIRST occurrence of "{key}" is replaced. Keys
    are applied in sorted order, so a value that itself contains a
    placeholder is substituted only by keys that sort after it.
    Placeholders without a value are left verbatim.

    Args:
        text: Text containing {key} placeholders
        values: Mapping, StringMapSource or None

    Returns:
        Formatted text; text unchanged if there are no values

    Examples:
        >>> format_tokens("{a} and {a}", {"a": "X"})
        'X and {a}'
        >>> format_tokens("Hello {name}, {missing}", {"name": "Ann"})
        'Hello Ann, {missing}'
    """
    string_map = to_string_map(values)
    if not string_map:
        return text

    formatted = text
    for key in sorted(string_map):
        placeholder = f"{PLACEHOLDER_OPEN}{key}{PLACEHOLDER_CLOSE}"
        if placeholder in formatted:
            formatted = formatted.replace(placeholder, string_map[key], 1)
    return formatted
