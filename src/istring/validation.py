"""Choice template validation.

Parsing and resolution never fail on a bad template; they degrade to the
default text. validate_choices() reports what would degrade, so template
authors and CI checks can catch it:

Errors (the choice cannot behave as written):
    - malformed-choice: no '#' between selector and text
    - invalid-pattern: selector does not compile as a regular expression

Warnings:
    - duplicate-default: more than one empty selector (the last one wins)
    - pattern-too-long: selector exceeds the pattern length limit
    - invalid-number: comparison or range bound with no numeric prefix
    - uppercase-pattern: pattern selector with literal uppercase letters,
      which can never match a lowercased string reference

Python 3.13+.
"""

import logging
import re

from istring.constants import DEFAULT_MAX_PATTERN_LENGTH
from istring.core.numbers import has_numeric_prefix
from istring.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from istring.enums import SelectorKind
from istring.syntax.ast import Choice
from istring.syntax.parser import parse_choices

__all__ = ["validate_choices"]

logger = logging.getLogger(__name__)

# Escapes such as \W, \S, \D and \b are not literal letters.
_ESCAPE_RE = re.compile(r"\\.", re.DOTALL)
_UPPERCASE_RE = re.compile(r"[A-Z]")

# Diagnostic code -> validation code
_VALIDATION_CODES: dict[DiagnosticCode, str] = {
    DiagnosticCode.MALFORMED_CHOICE: "malformed-choice",
    DiagnosticCode.DUPLICATE_DEFAULT: "duplicate-default",
    DiagnosticCode.PATTERN_INVALID: "invalid-pattern",
    DiagnosticCode.PATTERN_TOO_LONG: "pattern-too-long",
    DiagnosticCode.NUMBER_INVALID: "invalid-number",
    DiagnosticCode.PATTERN_UPPERCASE: "uppercase-pattern",
}


def _numeric_bounds(choice: Choice) -> tuple[str, ...]:
    selector = choice.selector
    match choice.kind:
        case SelectorKind.LESS_EQUAL | SelectorKind.GREATER_EQUAL:
            return (selector[2:],)
        case SelectorKind.LESS | SelectorKind.GREATER:
            return (selector[1:],)
        case SelectorKind.RANGE:
            start, _, end = selector.partition("-")
            return (start, end)
        case _:
            return ()


def _check_selector(
    choice: Choice, index: int, max_pattern_length: int
) -> list[Diagnostic]:
    """Check one selector as both a numeric and a pattern selector."""
    findings: list[Diagnostic] = []
    selector = choice.selector
    if not selector or choice.malformed:
        return findings

    if any(not has_numeric_prefix(bound) for bound in _numeric_bounds(choice)):
        findings.append(ErrorTemplate.number_invalid(selector, index))

    if len(selector) > max_pattern_length:
        findings.append(ErrorTemplate.pattern_too_long(selector, index, max_pattern_length))
        return findings

    try:
        re.compile(selector)
    except (re.error, OverflowError) as e:
        findings.append(ErrorTemplate.pattern_invalid(selector, index, str(e)))
        return findings

    if choice.kind is SelectorKind.PATTERN and _UPPERCASE_RE.search(
        _ESCAPE_RE.sub("", selector)
    ):
        findings.append(ErrorTemplate.pattern_uppercase(selector, index))

    return findings


def validate_choices(
    text: str, *, max_pattern_length: int = DEFAULT_MAX_PATTERN_LENGTH
) -> ValidationResult:
    """Validate a choice template.

    Args:
        text: Template text
        max_pattern_length: Pattern length limit to check against

    Returns:
        ValidationResult; is_valid is False if any choice is malformed or
        has a selector that does not compile.

    Example:
        >>> result = validate_choices("one|1#one|#other")
        >>> result.is_valid
        False
        >>> result.errors[0].code
        'malformed-choice'
    """
    choice_format = parse_choices(text)
    diagnostics = list(choice_format.diagnostics)
    for index, choice in enumerate(choice_format.choices):
        diagnostics.extend(_check_selector(choice, index, max_pattern_length))

    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []
    for diagnostic in sorted(diagnostics, key=lambda d: d.choice_index or 0):
        code = _VALIDATION_CODES[diagnostic.code]
        selector = diagnostic.selector or ""
        if diagnostic.is_error:
            errors.append(
                ValidationError(code, diagnostic.message, selector, diagnostic.choice_index)
            )
        else:
            warnings.append(
                ValidationWarning(
                    code,
                    diagnostic.message,
                    selector,
                    diagnostic.choice_index,
                    diagnostic.hint,
                )
            )

    logger.debug(
        "Validated %d choices: %d error(s), %d warning(s)",
        len(choice_format),
        len(errors),
        len(warnings),
    )
    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
