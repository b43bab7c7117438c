"""IString - main API for choice templates.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, TypeAlias, assert_never

from istring.constants import INT_MAX, LONG_MAX, REFERENCE_OVERFLOW_DIVISOR
from istring.core.text import equals_ignore_case
from istring.introspection import extract_placeholders
from istring.runtime.config import MessageConfig
from istring.runtime.formatter import format_tokens
from istring.runtime.matchers import (
    CompiledPattern,
    compile_patterns,
    select_boolean,
    select_numeric,
    select_string,
)
from istring.runtime.sources import StringMapSource, to_string_map
from istring.runtime.value_types import (
    BooleanReference,
    NumberReference,
    ReferenceValue,
    TextReference,
    to_reference,
)
from istring.syntax.parser import ChoiceParser

if TYPE_CHECKING:
    from istring.diagnostics import ValidationResult
    from istring.syntax.ast import ChoiceFormat

__all__ = ["IString", "format_choice", "format_message"]

logger = logging.getLogger(__name__)

# Template text in debug records is clipped to this many characters.
_LOG_TRUNCATE_DEBUG: int = 50

# format_choice() reads int references outside this magnitude as 1.0.
_INTEGER_REFERENCE_LIMIT: int = LONG_MAX // REFERENCE_OVERFLOW_DIVISOR

Values: TypeAlias = Mapping[str, object] | StringMapSource | None


class IString:
    """A translatable string with placeholders and choice selection.

    The template text is immutable. Choice resolution parses it once into
    a ChoiceFormat (and, for string references, compiles its selectors)
    and caches the result on the instance.

    Thread Safety:
        The lazy parse and pattern compilation run under an internal lock,
        so concurrent first use from several threads parses exactly once.
        Everything else only reads immutable state. MessageConfig(eager=True)
        parses at construction instead.

    Examples:
        >>> IString("Hello {name}").format({"name": "Ann"})
        'Hello Ann'
        >>> msg = IString("0#no files|1#one file|#{n} files")
        >>> msg.format_choice(0)
        'no files'
        >>> msg.format_choice(7, {"n": "7"})
        '7 files'
        >>> IString("m.*#He|f.*#She|#They").format_choice("Female")
        'She'
    """

    __slots__ = ("_choices", "_config", "_lock", "_patterns", "_text")

    def __init__(self, text: str, /, *, config: MessageConfig | None = None) -> None:
        """Create an IString.

        Args:
            text: Template text [positional-only]
            config: Resolution settings (default: MessageConfig())

        Raises:
            ChoiceSyntaxError: With config.strict and config.eager, if the
                template has a choice without '#'
        """
        self._text = text
        self._config = config if config is not None else MessageConfig()
        self._lock = threading.Lock()
        self._choices: ChoiceFormat | None = None
        self._patterns: tuple[CompiledPattern, ...] | None = None

        if self._config.eager:
            self._ensure_parsed()

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def _ensure_parsed(self) -> ChoiceFormat:
        choices = self._choices
        if choices is None:
            with self._lock:
                if self._choices is None:
                    parser = ChoiceParser(strict=self._config.strict)
                    self._choices = parser.parse(self._text)
                choices = self._choices
        return choices

    def _ensure_patterns(self, choices: ChoiceFormat) -> tuple[CompiledPattern, ...]:
        patterns = self._patterns
        if patterns is None:
            with self._lock:
                if self._patterns is None:
                    self._patterns = compile_patterns(
                        choices,
                        max_pattern_length=self._config.max_pattern_length,
                        strict=self._config.strict,
                    )
                patterns = self._patterns
        return patterns

    def parse_choices(self) -> ChoiceFormat:
        """Re-parse the template, replacing the cached parse.

        Compiled patterns are discarded and rebuilt on the next string
        reference.

        Returns:
            The fresh ChoiceFormat
        """
        parser = ChoiceParser(strict=self._config.strict)
        choices = parser.parse(self._text)
        with self._lock:
            self._choices = choices
            self._patterns = None
        return choices

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def config(self) -> MessageConfig:
        return self._config

    @property
    def choices(self) -> ChoiceFormat:
        """Parsed choices (parses on first access)."""
        return self._ensure_parsed()

    @property
    def placeholders(self) -> frozenset[str]:
        """Keys of all {key} placeholders in the template text."""
        return extract_placeholders(self._text)

    def format(self, values: Values = None) -> str:
        """Substitute {key} placeholders in the template text.

        Args:
            values: Mapping, StringMapSource (e.g. JsonValueSource) or None

        Returns:
            Formatted text. Each key replaces its first placeholder only.
        """
        return format_tokens(self._text, values)

    def get_choice(self, reference: ReferenceValue) -> IString | None:
        """Select the choice matching reference.

        Args:
            reference: bool, str, int, float, Decimal or ChoiceReference

        Returns:
            A new IString holding the chosen text (the default text if no
            selector matches), or None if the template text is empty.

        Raises:
            TypeError: If reference has an unsupported type
            ChoiceSyntaxError: In strict mode, for a choice without '#'
            ChoicePatternError: In strict mode, for a string reference when
                a selector does not compile
        """
        ref = to_reference(reference)
        if not self._text:
            return None

        choices = self._ensure_parsed()
        match ref:
            case BooleanReference(value=value):
                index = select_boolean(choices, value)
            case TextReference(value=value):
                index = select_string(self._ensure_patterns(choices), value)
            case NumberReference(value=value):
                index = select_numeric(choices, value)
            case _:
                assert_never(ref)

        text = choices.default_text if index is None else choices.choices[index].text
        logger.debug(
            "Resolved %s reference to choice %s: %s",
            ref.kind,
            "default" if index is None else index,
            text[:_LOG_TRUNCATE_DEBUG],
        )
        return IString(text)

    def format_choice(self, reference: ReferenceValue, values: Values = None) -> str:
        """Select the choice matching reference and format it.

        Args:
            reference: bool, str, int, float, Decimal or ChoiceReference
            values: Placeholder values; None or empty returns the chosen
                text unformatted

        Returns:
            Formatted choice text; "" if the template text is empty
        """
        result = self.get_choice(reference)
        if result is None:
            return ""
        string_map = to_string_map(values)
        if not string_map:
            return result.text
        return result.format(string_map)

    def validate(self) -> ValidationResult:
        """Check the template for malformed choices and suspicious selectors."""
        from istring.validation import validate_choices  # noqa: PLC0415 - circular

        return validate_choices(
            self._text, max_pattern_length=self._config.max_pattern_length
        )

    def length(self) -> int:
        """Length of the template text, clamped to INT_MAX."""
        length = len(self._text)
        if length > INT_MAX:
            logger.warning("Template length %d clamped to %d", length, INT_MAX)
            return INT_MAX
        return length

    def to_string(self) -> str:
        return self._text

    @staticmethod
    def equals_ignore_case(source: str, target: str) -> bool:
        """ASCII case-insensitive equality (equal length required)."""
        return equals_ignore_case(source, target)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"IString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IString):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)


def format_message(text: str, values: Values = None) -> str:
    """Substitute {key} placeholders in text.

    Examples:
        >>> format_message("{count} new", {"count": 3})
        '3 new'
    """
    return IString(text).format(values)


def format_choice(
    text: str,
    reference: ReferenceValue,
    values: Values = None,
    *,
    config: MessageConfig | None = None,
) -> str:
    """Resolve reference against the choice template text and format it.

    An int reference whose magnitude exceeds LONG_MAX // 10000 is read as
    1.0. IString.format_choice uses every reference as given.

    Examples:
        >>> format_choice("1#one item|#{n} items", 1)
        'one item'
        >>> format_choice("1#one item|#{n} items", 4, {"n": 4})
        '4 items'
        >>> format_choice("1#one|#many", 10**15)
        'one'
    """
    match reference:
        case bool():
            pass
        case int() if not -_INTEGER_REFERENCE_LIMIT <= reference <= _INTEGER_REFERENCE_LIMIT:
            reference = 1.0
    return IString(text, config=config).format_choice(reference, values)
