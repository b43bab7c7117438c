"""Exceptions raised by strict-mode parsing and pattern compilation.

Lenient resolution never raises these; it logs the problem and falls back
to the default text. Each exception carries the Diagnostic behind it.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["ChoicePatternError", "ChoiceSyntaxError", "IStringError"]


class IStringError(Exception):
    """Base class for istring exceptions.

    Attributes:
        diagnostic: Finding behind the exception; None for plain messages
    """

    diagnostic: Diagnostic | None

    def __init__(self, detail: str | Diagnostic) -> None:
        match detail:
            case Diagnostic():
                self.diagnostic = detail
                text = detail.format_error()
            case _:
                self.diagnostic = None
                text = detail
        super().__init__(text)


class ChoiceSyntaxError(IStringError):
    """A choice has no '#' between selector and text (strict mode)."""


class ChoicePatternError(IStringError):
    """A selector does not compile as a regular expression.

    Raised in strict mode when the first string reference is resolved.
    """
