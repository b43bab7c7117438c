"""Diagnostic records for choice templates.

A Diagnostic describes one finding about one choice: what is wrong (code
and message), where it is (choice index and character span) and what to do
about it (hint).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, TypeAlias

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Severity",
    "SourceSpan",
]

Severity: TypeAlias = Literal["error", "warning"]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for template findings.

    3xxx: choice grammar
    4xxx: pattern selectors
    5xxx: selector semantics (reported by validation only)
    """

    MALFORMED_CHOICE = 3001
    DUPLICATE_DEFAULT = 3002

    PATTERN_INVALID = 4001
    PATTERN_TOO_LONG = 4002

    NUMBER_INVALID = 5001
    PATTERN_UPPERCASE = 5002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open [start, end) range of a raw choice within its template.

    Offsets count code points in the template as written, before quotes
    and trailing commas are cleaned up.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            msg = f"Invalid span {self.start}..{self.end}: need 0 <= start <= end"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One finding about one choice of a template.

    Attributes:
        code: Kind of finding
        message: One-line description, quoting the selector where useful
        span: Raw location of the choice, when the parser knows it
        hint: How to fix the choice, or what resolution does instead
        selector: Selector the finding is about
        choice_index: 0-based position of the choice
        severity: "error" if the choice cannot work as written
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    selector: str | None = None
    choice_index: int | None = None
    severity: Severity = "error"

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Render in the multi-line compiler style.

        Example:
            error[MALFORMED_CHOICE]: Choice 'one' has no '#' separator
              --> choice 0, characters 0..3
              = help: Write choices as selector#text; the whole choice is used as selector
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
