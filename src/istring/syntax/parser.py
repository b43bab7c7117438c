"""Choice grammar parser.

Grammar:
    ChoiceString := Choice ( '|' Choice )*
    Choice       := Selector '#' Text | Selector
    Text         := any characters, may contain '#'

Only the first '#' of a choice separates selector from text. A choice
without '#' is malformed: lenient parsing keeps the whole choice as the
selector with empty text, strict parsing raises ChoiceSyntaxError.

Python 3.13+. Zero external dependencies.
"""

import logging

from istring.constants import CHOICE_DELIMITER, SELECTOR_DELIMITER
from istring.diagnostics import (
    ChoiceSyntaxError,
    Diagnostic,
    ErrorTemplate,
    SourceSpan,
)
from istring.syntax.ast import Choice, ChoiceFormat
from istring.syntax.splitter import split_by_symbol, split_with_offsets

__all__ = ["ChoiceParser", "parse_choices"]

logger = logging.getLogger(__name__)

_LOG_TRUNCATE_WARNING: int = 100


class ChoiceParser:
    """Parser for pipe-delimited choice templates.

    Attributes:
        strict: Raise ChoiceSyntaxError on a choice without '#'

    Examples:
        >>> fmt = ChoiceParser().parse("1#one|2#two|#other")
        >>> fmt.selectors
        ('1', '2', '')
        >>> fmt.texts
        ('one', 'two', 'other')
        >>> fmt.default_text
        'other'
    """

    __slots__ = ("strict",)

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def parse(self, text: str) -> ChoiceFormat:
        """Parse a choice template.

        Args:
            text: Template text

        Returns:
            ChoiceFormat with choices in source order. The default text is
            taken from the LAST choice whose selector is empty.

        Raises:
            ChoiceSyntaxError: In strict mode, for a choice without '#'
        """
        choices: list[Choice] = []
        diagnostics: list[Diagnostic] = []
        default_text = ""
        seen_default = False

        for index, (start, end, entry) in enumerate(
            split_with_offsets(text, CHOICE_DELIMITER)
        ):
            span = SourceSpan(start=start, end=end)
            choice = self._parse_choice(entry, index, span, diagnostics)
            choices.append(choice)

            if choice.is_default:
                if seen_default:
                    diagnostics.append(ErrorTemplate.duplicate_default(index, span))
                default_text = choice.text
                seen_default = True

        logger.debug("Parsed %d choices (default=%s)", len(choices), seen_default)
        return ChoiceFormat(
            choices=tuple(choices),
            default_text=default_text,
            diagnostics=tuple(diagnostics),
        )

    def _parse_choice(
        self,
        entry: str,
        index: int,
        span: SourceSpan,
        diagnostics: list[Diagnostic],
    ) -> Choice:
        parts = split_by_symbol(entry, SELECTOR_DELIMITER)

        if len(parts) > 2:
            return Choice(
                selector=parts[0],
                text=entry[entry.find(SELECTOR_DELIMITER) + 1 :],
                span=span,
            )
        if len(parts) == 2:
            return Choice(selector=parts[0], text=parts[1], span=span)

        diagnostic = ErrorTemplate.malformed_choice(entry, index, span)
        if self.strict:
            raise ChoiceSyntaxError(diagnostic)
        logger.warning(
            "Malformed choice %d without '%s': %s",
            index,
            SELECTOR_DELIMITER,
            entry[:_LOG_TRUNCATE_WARNING],
        )
        diagnostics.append(diagnostic)
        return Choice(selector=entry, text="", span=span, malformed=True)


def parse_choices(text: str, *, strict: bool = False) -> ChoiceFormat:
    """Parse a choice template into selectors, texts and default text.

    Convenience wrapper around ChoiceParser.

    Examples:
        >>> parse_choices("true#Yes|false#No").selectors
        ('true', 'false')
        >>> parse_choices("one").texts
        ('',)
    """
    return ChoiceParser(strict=strict).parse(text)
