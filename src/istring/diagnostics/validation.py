"""Validation findings for choice templates.

istring.validation turns parser and selector diagnostics into these
records: errors for choices that cannot work as written, warnings for
choices that work but probably not as intended.

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


def _where(choice_index: int | None) -> str:
    return "" if choice_index is None else f" (choice {choice_index})"


def _clip(text: str, limit: int | None) -> str:
    if limit is not None and len(text) > limit:
        return text[:limit] + "..."
    return text


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A choice that cannot behave as written.

    Attributes:
        code: Finding code, e.g. "malformed-choice", "invalid-pattern"
        message: Description quoting the selector
        selector: Selector of the offending choice
        choice_index: Position of the choice in the template
    """

    code: str
    message: str
    selector: str
    choice_index: int | None = None

    def describe(self, *, max_length: int | None = None) -> str:
        """One-line description; max_length clips the message."""
        return f"{self.code}{_where(self.choice_index)}: {_clip(self.message, max_length)}"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """A choice that works, but probably not as its author intended.

    Attributes:
        code: Finding code, e.g. "duplicate-default", "uppercase-pattern"
        message: Description quoting the selector
        selector: Selector of the choice
        choice_index: Position of the choice in the template
        hint: What resolution does with the choice
    """

    code: str
    message: str
    selector: str
    choice_index: int | None = None
    hint: str | None = None

    def describe(self, *, max_length: int | None = None) -> str:
        text = f"{self.code}{_where(self.choice_index)}: {_clip(self.message, max_length)}"
        return f"{text} ({self.hint})" if self.hint else text


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one template.

    Warnings never make a template invalid.

    Example:
        >>> result = ValidationResult()
        >>> result.is_valid, result.error_count
        (True, 0)
    """

    errors: tuple[ValidationError, ...] = ()
    warnings: tuple[ValidationWarning, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def codes(self) -> tuple[str, ...]:
        """Finding codes, errors first, each group in choice order."""
        return tuple(e.code for e in self.errors) + tuple(w.code for w in self.warnings)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls()

    def format(self, *, include_warnings: bool = True, max_length: int | None = None) -> str:
        """Multi-line report: a count line, then one line per finding.

        Args:
            include_warnings: List warnings as well as errors
            max_length: Clip each finding's message to this many characters
        """
        warnings = self.warnings if include_warnings else ()
        if not self.errors and not warnings:
            return "OK: no findings"

        lines = [f"{self.error_count} error(s), {len(warnings)} warning(s)"]
        lines.extend(f"  error: {e.describe(max_length=max_length)}" for e in self.errors)
        lines.extend(f"  warning: {w.describe(max_length=max_length)}" for w in warnings)
        return "\n".join(lines)
