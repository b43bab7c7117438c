"""Parsed representation of a choice template.

A template "1#one|2#two|#other" parses into a ChoiceFormat holding one
Choice per pipe-delimited entry, plus the default text.

Design:
    - Immutable: frozen dataclasses with slots
    - Parallel views: selectors/texts are derived from one tuple of
      Choice records, so they are always index-aligned

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from istring.diagnostics import Diagnostic, SourceSpan
from istring.enums import SelectorKind
from istring.introspection import extract_placeholders
from istring.syntax.selectors import classify_selector

__all__ = ["Choice", "ChoiceFormat"]


@dataclass(frozen=True, slots=True)
class Choice:
    """One selector#text entry of a choice template.

    Attributes:
        selector: Gating expression; "" marks a default choice
        text: Output text, may contain '#' and {key} placeholders
        span: Location of the raw entry in the template
        malformed: True if the entry had no '#' separator
    """

    selector: str
    text: str
    span: SourceSpan | None = None
    malformed: bool = False

    @property
    def is_default(self) -> bool:
        return self.selector == ""

    @property
    def kind(self) -> SelectorKind:
        return classify_selector(self.selector)


@dataclass(frozen=True, slots=True)
class ChoiceFormat:
    """Parse result of a choice template.

    Attributes:
        choices: Choices in source order
        default_text: Text of the last choice with an empty selector, or ""
        diagnostics: Parser findings (malformed choices, redefined defaults).
            Diagnostics never change the parse result.
    """

    choices: tuple[Choice, ...]
    default_text: str = ""
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def selectors(self) -> tuple[str, ...]:
        return tuple(choice.selector for choice in self.choices)

    @property
    def texts(self) -> tuple[str, ...]:
        return tuple(choice.text for choice in self.choices)

    def __len__(self) -> int:
        return len(self.choices)

    def selector_kinds(self) -> tuple[SelectorKind, ...]:
        """Classify every selector, index-aligned with choices."""
        return tuple(choice.kind for choice in self.choices)

    def placeholders(self) -> frozenset[str]:
        """Placeholder keys used by any choice text, including the default."""
        keys: set[str] = set()
        for choice in self.choices:
            keys |= extract_placeholders(choice.text)
        return frozenset(keys)
