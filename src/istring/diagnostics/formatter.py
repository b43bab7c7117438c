"""Rendering of diagnostics for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Escaped so template text cannot start a new log line.
_CONTROL_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t"})


class OutputFormat(StrEnum):
    """Diagnostic rendering styles."""

    RUST = "rust"  # Multi-line, compiler style
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # One JSON object


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders Diagnostic records.

    Attributes:
        output_format: Rendering style
        max_text_length: Clip message, selector and hint to this many
            characters (None keeps them whole)

    Example:
        >>> from istring.diagnostics import ErrorTemplate
        >>> formatter = DiagnosticFormatter(OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.malformed_choice("one", 0))
        "MALFORMED_CHOICE: Choice 'one' has no '#' separator"
    """

    output_format: OutputFormat = OutputFormat.RUST
    max_text_length: int | None = None

    def format(self, diagnostic: Diagnostic) -> str:
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._fields(diagnostic), ensure_ascii=False)
            case _:
                return "\n".join(self._compiler_lines(diagnostic))

    def format_many(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def _compiler_lines(self, diagnostic: Diagnostic) -> Iterator[str]:
        yield f"{diagnostic.severity}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"

        where: list[str] = []
        if diagnostic.choice_index is not None:
            where.append(f"choice {diagnostic.choice_index}")
        if diagnostic.span is not None:
            where.append(f"characters {diagnostic.span.start}..{diagnostic.span.end}")
        if where:
            yield "  --> " + ", ".join(where)

        if diagnostic.hint:
            yield f"  = help: {self._clean(diagnostic.hint)}"

    def _fields(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        span = diagnostic.span
        optional: dict[str, str | int | None] = {
            "start": None if span is None else span.start,
            "end": None if span is None else span.end,
            "choice_index": diagnostic.choice_index,
            "selector": None if diagnostic.selector is None else self._clean(diagnostic.selector),
            "hint": self._clean(diagnostic.hint) if diagnostic.hint else None,
        }
        fields: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": diagnostic.severity,
            "message": self._clean(diagnostic.message),
        }
        fields.update({key: value for key, value in optional.items() if value is not None})
        return fields

    def _clean(self, text: str) -> str:
        text = text.translate(_CONTROL_ESCAPES)
        limit = self.max_text_length
        if limit is not None and len(text) > limit:
            return text[:limit] + "..."
        return text
