"""Value sources for placeholder substitution.

The formatter consumes a flat mapping of key to string. Anything else that
can produce such a mapping implements StringMapSource; JsonValueSource
adapts JSON documents the way JSON objects are passed to format().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Protocol, runtime_checkable

__all__ = [
    "JsonValueSource",
    "StringMapSource",
    "format_value",
    "to_string_map",
]


@runtime_checkable
class StringMapSource(Protocol):
    """Anything that can produce the key/value mapping used by format()."""

    def to_string_map(self) -> dict[str, str]:
        ...  # pragma: no cover  # Protocol stub - not executable


def _jsonable(value: object) -> object:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, str):
        return [_jsonable(v) for v in value]
    return value


def format_value(value: object) -> str:
    """Render a substitution value as text.

    Handles:
    - str: returned as-is
    - bool: "true"/"false" (JSON convention)
    - None: empty string
    - int/float/Decimal: str()
    - mappings and sequences: compact JSON
    - anything else: str()
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case None:
            return ""
        case int() | float() | Decimal():
            return str(value)
        case Mapping() | list() | tuple():
            return json.dumps(_jsonable(value), ensure_ascii=False, separators=(",", ":"))
        case _:
            return str(value)


class JsonValueSource:
    """StringMapSource over a JSON document.

    Only a JSON object contributes entries: each member becomes one
    key/value pair rendered with format_value(). null, arrays and scalars
    produce an empty mapping.

    Examples:
        >>> JsonValueSource('{"n": 3, "ok": true}').to_string_map()
        {'n': '3', 'ok': 'true'}
        >>> JsonValueSource([1, 2]).to_string_map()
        {}
    """

    __slots__ = ("_document",)

    def __init__(self, document: object) -> None:
        """Wrap a parsed JSON value, or JSON text to be decoded.

        Raises:
            json.JSONDecodeError: If document is str/bytes and not valid JSON
        """
        if isinstance(document, (str, bytes, bytearray)):
            document = json.loads(document)
        self._document = document

    @property
    def is_null(self) -> bool:
        return self._document is None

    def to_string_map(self) -> dict[str, str]:
        if not isinstance(self._document, Mapping):
            return {}
        return {str(key): format_value(value) for key, value in self._document.items()}

    def __repr__(self) -> str:
        return f"JsonValueSource({self._document!r})"


def to_string_map(values: Mapping[str, object] | StringMapSource | None) -> dict[str, str]:
    """Flatten any accepted value source into a key/string mapping.

    Args:
        values: Mapping (values rendered with format_value), a
            StringMapSource, or None

    Returns:
        Plain dict of key to string; empty for None
    """
    if values is None:
        return {}
    if isinstance(values, StringMapSource):
        return values.to_string_map()
    return {str(key): format_value(value) for key, value in values.items()}
