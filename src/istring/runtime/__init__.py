"""Runtime: choice resolution, placeholder substitution and the IString API.

Python 3.13+. Zero external dependencies.
"""

from .config import MessageConfig
from .formatter import format_tokens
from .matchers import resolve_boolean, resolve_numeric, resolve_string
from .message import IString, format_choice, format_message
from .sources import JsonValueSource, StringMapSource, format_value
from .value_types import (
    BooleanReference,
    ChoiceReference,
    NumberReference,
    TextReference,
    to_reference,
)

__all__ = [
    "BooleanReference",
    "ChoiceReference",
    "IString",
    "JsonValueSource",
    "MessageConfig",
    "NumberReference",
    "StringMapSource",
    "TextReference",
    "format_choice",
    "format_message",
    "format_tokens",
    "format_value",
    "resolve_boolean",
    "resolve_numeric",
    "resolve_string",
    "to_reference",
]
