"""Placeholder introspection for template texts.

Python 3.13+.
"""

import re

__all__ = ["extract_placeholders"]

# A placeholder is the literal text between '{' and the next '}', braces excluded.
_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


def extract_placeholders(text: str) -> frozenset[str]:
    """Extract the keys of all {key} placeholders in text.

    Args:
        text: Template or choice text

    Returns:
        Frozen set of placeholder keys (each key reported once)

    Example:
        >>> sorted(extract_placeholders("{count} files in {dir}, {count} new"))
        ['count', 'dir']
    """
    return frozenset(_PLACEHOLDER_RE.findall(text))
