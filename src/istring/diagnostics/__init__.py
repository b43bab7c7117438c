"""Diagnostic system for istring.

Provides structured diagnostics with codes, spans and hints, the exception
hierarchy used by strict mode, and validation results.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import ChoicePatternError, ChoiceSyntaxError, IStringError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "ChoicePatternError",
    "ChoiceSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IStringError",
    "OutputFormat",
    "SourceSpan",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
