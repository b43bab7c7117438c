"""istring - shareable message templates with placeholders and choices.

Templates use {key} placeholders and pipe-delimited choices
("0#no files|1#one file|#{n} files") selected by a boolean, string or
numeric reference. Template strings are plain text and can be shared
across applications that resolve them with the same rules.

Public API:
    IString - Template with format(), get_choice() and format_choice()
    format_message - One-shot placeholder substitution
    format_choice - One-shot choice resolution and substitution
    parse_choices - Parse a choice template into a ChoiceFormat
    validate_choices - Report malformed choices and suspicious selectors
    extract_placeholders - Keys of {key} placeholders in a text
    MessageConfig - Strict/eager/pattern-limit settings for IString
    JsonValueSource - Placeholder values from a JSON object
    StringMapSource - Protocol for custom placeholder value sources

Exceptions (strict mode only):
    IStringError - Base exception class
    ChoiceSyntaxError - Choice without '#'
    ChoicePatternError - Selector that does not compile as a pattern

Submodules:
    istring.syntax - Splitter, parser, selector classification
    istring.runtime - Matchers, formatter, reference value types
    istring.diagnostics - Diagnostic codes, templates and validation results
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import ChoicePatternError, ChoiceSyntaxError, IStringError
from .introspection import extract_placeholders
from .runtime import (
    BooleanReference,
    ChoiceReference,
    IString,
    JsonValueSource,
    MessageConfig,
    NumberReference,
    StringMapSource,
    TextReference,
    format_choice,
    format_message,
)
from .syntax import ChoiceFormat, parse_choices
from .validation import validate_choices

# Version comes from installed package metadata.
try:
    __version__ = _get_version("istring")
except PackageNotFoundError:
    # Running from a source checkout
    __version__ = "0.0.0+dev"

__all__ = [
    "BooleanReference",
    "ChoiceFormat",
    "ChoicePatternError",
    "ChoiceReference",
    "ChoiceSyntaxError",
    "IString",
    "IStringError",
    "JsonValueSource",
    "MessageConfig",
    "NumberReference",
    "StringMapSource",
    "TextReference",
    "__version__",
    "extract_placeholders",
    "format_choice",
    "format_message",
    "parse_choices",
    "validate_choices",
]
