"""Selector matching for the three reference kinds.

Each matcher scans the choices in source order and returns the index of
the first matching choice, or None; the resolve_* wrappers turn that into
the chosen text, falling back to the default text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from istring.core.numbers import parse_double, parse_integer_as_double, tolerance_equal
from istring.core.text import ascii_lower
from istring.diagnostics import ChoicePatternError, ErrorTemplate
from istring.syntax.ast import ChoiceFormat
from istring.syntax.selectors import classify_boolean

__all__ = [
    "CompiledPattern",
    "compile_patterns",
    "resolve_boolean",
    "resolve_numeric",
    "resolve_string",
    "select_boolean",
    "select_numeric",
    "select_string",
]

logger = logging.getLogger(__name__)

_LOG_TRUNCATE_WARNING: int = 100


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A pattern selector compiled for string references.

    Attributes:
        index: Position of the source choice in ChoiceFormat.choices
        pattern: Compiled selector, in the selector's original case
    """

    index: int
    pattern: re.Pattern[str]


def _chosen_text(fmt: ChoiceFormat, index: int | None) -> str:
    if index is None:
        return fmt.default_text
    return fmt.choices[index].text


# ============================================================================
# BOOLEAN
# ============================================================================


def select_boolean(fmt: ChoiceFormat, reference: bool) -> int | None:
    """Index of the first choice whose boolean keyword equals reference.

    Selectors that are not boolean keywords never match.
    """
    wanted = 1 if reference else 0
    for index, choice in enumerate(fmt.choices):
        if classify_boolean(choice.selector) == wanted:
            return index
    return None


def resolve_boolean(fmt: ChoiceFormat, reference: bool) -> str:
    """Resolve a boolean reference.

    Examples:
        >>> from istring.syntax import parse_choices
        >>> resolve_boolean(parse_choices("true#Yes|false#No"), False)
        'No'
    """
    return _chosen_text(fmt, select_boolean(fmt, reference))


# ============================================================================
# STRING / PATTERN
# ============================================================================


def compile_patterns(
    fmt: ChoiceFormat,
    *,
    max_pattern_length: int,
    strict: bool = False,
) -> tuple[CompiledPattern, ...]:
    """Compile every non-empty selector as a regular expression.

    Selectors are compiled in their original case; references are
    lowercased before matching, so a selector with literal uppercase
    letters cannot match.

    Args:
        fmt: Parsed template
        max_pattern_length: Selectors longer than this are skipped
        strict: Raise instead of skipping a selector that does not compile

    Returns:
        Compiled patterns in source order, each tagged with its choice index

    Raises:
        ChoicePatternError: In strict mode, for a selector that does not compile
    """
    compiled: list[CompiledPattern] = []
    for index, choice in enumerate(fmt.choices):
        selector = choice.selector
        if not selector:
            continue
        if len(selector) > max_pattern_length:
            logger.warning(
                "Selector %d skipped: length %d exceeds pattern limit %d",
                index,
                len(selector),
                max_pattern_length,
            )
            continue
        try:
            pattern = re.compile(selector)
        except (re.error, OverflowError) as e:
            if strict:
                raise ChoicePatternError(
                    ErrorTemplate.pattern_invalid(selector, index, str(e))
                ) from e
            logger.warning(
                "Selector %d is not a valid pattern (%s): %s",
                index,
                e,
                selector[:_LOG_TRUNCATE_WARNING],
            )
            continue
        compiled.append(CompiledPattern(index=index, pattern=pattern))

    logger.debug("Compiled %d selector patterns", len(compiled))
    return tuple(compiled)


def select_string(patterns: tuple[CompiledPattern, ...], reference: str) -> int | None:
    """Index of the first choice whose pattern matches the whole reference.

    The reference is ASCII-lowercased. A pattern counts only if its first
    search hit spans the entire lowercased reference.
    """
    lowered = ascii_lower(reference)
    for compiled in patterns:
        match = compiled.pattern.search(lowered)
        if match is not None and match.group(0) == lowered:
            return compiled.index
    return None


def resolve_string(
    fmt: ChoiceFormat, patterns: tuple[CompiledPattern, ...], reference: str
) -> str:
    """Resolve a string reference against precompiled patterns.

    Examples:
        >>> from istring.syntax import parse_choices
        >>> fmt = parse_choices("abc#A|#other")
        >>> patterns = compile_patterns(fmt, max_pattern_length=1000)
        >>> resolve_string(fmt, patterns, "ABC")
        'A'
        >>> resolve_string(fmt, patterns, "xabcx")
        'other'
    """
    return _chosen_text(fmt, select_string(patterns, reference))


# ============================================================================
# NUMERIC
# ============================================================================


def _numeric_selector_matches(selector: str, reference: float) -> bool:  # noqa: PLR0911
    if len(selector) > 2 and selector.startswith("<="):
        return reference <= parse_double(selector[2:])
    if len(selector) > 2 and selector.startswith(">="):
        return reference >= parse_double(selector[2:])
    if len(selector) > 1 and selector.startswith("<"):
        return reference < parse_double(selector[1:])
    if len(selector) > 1 and selector.startswith(">"):
        return reference > parse_double(selector[1:])
    if not selector:
        return False

    start, dash, end = selector.partition("-")
    if dash:
        return parse_integer_as_double(start) <= reference <= parse_integer_as_double(end)

    boolean = classify_boolean(selector)
    if boolean >= 0:
        return tolerance_equal(reference, float(boolean))

    return tolerance_equal(reference, parse_integer_as_double(selector))


def select_numeric(fmt: ChoiceFormat, reference: float) -> int | None:
    """Index of the first choice whose numeric selector matches reference.

    Selector forms, checked in this order: "<=N", ">=N", "<N", ">N",
    "A-B" (inclusive integer range, split at the first dash), boolean
    keyword (1.0 or 0.0), and exact integer. Empty selectors never match.
    """
    for index, choice in enumerate(fmt.choices):
        if _numeric_selector_matches(choice.selector, reference):
            return index
    return None


def resolve_numeric(fmt: ChoiceFormat, reference: float) -> str:
    """Resolve a numeric reference.

    Examples:
        >>> from istring.syntax import parse_choices
        >>> fmt = parse_choices("<10#small|10-20#medium|>20#large")
        >>> [resolve_numeric(fmt, n) for n in (5, 15, 25)]
        ['small', 'medium', 'large']
    """
    return _chosen_text(fmt, select_numeric(fmt, reference))
