"""Factories for every diagnostic the parser and validator report.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Builds Diagnostic records with fixed wording.

    Message and hint text for each DiagnosticCode lives in exactly one
    method, so tests can assert on it and callers never format their own.
    """

    @staticmethod
    def malformed_choice(
        choice: str, index: int, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Choice has no '#' between selector and text.

        Args:
            choice: The choice text as split from the template
            index: Position of the choice in the template
            span: Location of the choice in the template

        Returns:
            Diagnostic for MALFORMED_CHOICE
        """
        msg = f"Choice '{choice}' has no '#' separator"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_CHOICE,
            message=msg,
            span=span,
            hint="Write choices as selector#text; the whole choice is used as selector",
            selector=choice,
            choice_index=index,
        )

    @staticmethod
    def duplicate_default(index: int, span: SourceSpan | None = None) -> Diagnostic:
        """More than one choice has an empty selector.

        Args:
            index: Position of the later default choice
            span: Location of the choice in the template

        Returns:
            Diagnostic for DUPLICATE_DEFAULT
        """
        msg = f"Choice {index} redefines the default text"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_DEFAULT,
            message=msg,
            span=span,
            hint="The last choice with an empty selector is the default",
            selector="",
            choice_index=index,
            severity="warning",
        )

    @staticmethod
    def pattern_invalid(selector: str, index: int, reason: str) -> Diagnostic:
        """Selector does not compile as a regular expression.

        Args:
            selector: The selector text
            index: Position of the choice in the template
            reason: Compiler error text

        Returns:
            Diagnostic for PATTERN_INVALID
        """
        msg = f"Selector '{selector}' is not a valid pattern: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID,
            message=msg,
            hint="String references never match this choice",
            selector=selector,
            choice_index=index,
        )

    @staticmethod
    def pattern_too_long(selector: str, index: int, limit: int) -> Diagnostic:
        """Selector exceeds the pattern length limit.

        Args:
            selector: The selector text
            index: Position of the choice in the template
            limit: Configured maximum pattern length

        Returns:
            Diagnostic for PATTERN_TOO_LONG
        """
        msg = f"Selector of length {len(selector)} exceeds pattern limit {limit}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=msg,
            hint="String references never match this choice",
            selector=selector[:limit],
            choice_index=index,
            severity="warning",
        )

    @staticmethod
    def number_invalid(selector: str, index: int) -> Diagnostic:
        """Numeric selector bound has no numeric prefix.

        Args:
            selector: The selector text
            index: Position of the choice in the template

        Returns:
            Diagnostic for NUMBER_INVALID
        """
        msg = f"Selector '{selector}' has a bound that is not a number"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_INVALID,
            message=msg,
            hint="Unparseable bounds compare as 0 for numeric references",
            selector=selector,
            choice_index=index,
            severity="warning",
        )

    @staticmethod
    def pattern_uppercase(selector: str, index: int) -> Diagnostic:
        """Pattern selector contains uppercase letters.

        Args:
            selector: The selector text
            index: Position of the choice in the template

        Returns:
            Diagnostic for PATTERN_UPPERCASE
        """
        msg = f"Selector '{selector}' contains uppercase letters"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UPPERCASE,
            message=msg,
            hint="String references are lowercased before matching; write selectors in lowercase",
            selector=selector,
            choice_index=index,
            severity="warning",
        )
