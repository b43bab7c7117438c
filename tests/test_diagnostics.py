"""Tests for diagnostic codes, templates, formatting and exceptions.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from istring.diagnostics import (
    ChoicePatternError,
    ChoiceSyntaxError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    IStringError,
    OutputFormat,
    SourceSpan,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)


class TestSourceSpan:
    def test_valid(self) -> None:
        span = SourceSpan(start=2, end=5)
        assert (span.start, span.end) == (2, 5)

    def test_empty_span_allowed(self) -> None:
        assert SourceSpan(3, 3).end == 3

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError, match=r"Invalid span -1\.\.2"):
            SourceSpan(-1, 2)

    def test_end_before_start(self) -> None:
        with pytest.raises(ValueError, match="need 0 <= start <= end"):
            SourceSpan(5, 2)


class TestErrorTemplate:
    def test_malformed_choice(self) -> None:
        diagnostic = ErrorTemplate.malformed_choice("one", 0, SourceSpan(0, 3))
        assert diagnostic.code == DiagnosticCode.MALFORMED_CHOICE
        assert diagnostic.message == "Choice 'one' has no '#' separator"
        assert diagnostic.severity == "error"
        assert str(diagnostic) == diagnostic.message

    def test_duplicate_default(self) -> None:
        diagnostic = ErrorTemplate.duplicate_default(2)
        assert diagnostic.message == "Choice 2 redefines the default text"
        assert diagnostic.severity == "warning"

    def test_pattern_invalid(self) -> None:
        diagnostic = ErrorTemplate.pattern_invalid("[a", 1, "unterminated character set")
        assert diagnostic.code == DiagnosticCode.PATTERN_INVALID
        assert "unterminated character set" in diagnostic.message
        assert diagnostic.severity == "error"

    def test_pattern_too_long_truncates_selector(self) -> None:
        diagnostic = ErrorTemplate.pattern_too_long("x" * 50, 0, 10)
        assert diagnostic.selector == "x" * 10
        assert diagnostic.message == "Selector of length 50 exceeds pattern limit 10"

    def test_number_invalid(self) -> None:
        diagnostic = ErrorTemplate.number_invalid("<abc", 3)
        assert diagnostic.code == DiagnosticCode.NUMBER_INVALID
        assert diagnostic.choice_index == 3

    def test_pattern_uppercase(self) -> None:
        diagnostic = ErrorTemplate.pattern_uppercase("Male", 0)
        assert diagnostic.code == DiagnosticCode.PATTERN_UPPERCASE
        assert "lowercase" in (diagnostic.hint or "")

    def test_code_values_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestDiagnosticFormatter:
    def test_rust_format(self) -> None:
        diagnostic = ErrorTemplate.malformed_choice("one", 0, SourceSpan(0, 3))
        assert diagnostic.format_error() == (
            "error[MALFORMED_CHOICE]: Choice 'one' has no '#' separator\n"
            "  --> choice 0, characters 0..3\n"
            "  = help: Write choices as selector#text; "
            "the whole choice is used as selector"
        )

    def test_rust_format_without_span(self) -> None:
        diagnostic = ErrorTemplate.number_invalid("<x", 2)
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[0] == "warning[NUMBER_INVALID]: Selector '<x' has a bound that is not a number"
        assert lines[1] == "  --> choice 2"

    def test_rust_format_minimal(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.PATTERN_INVALID, message="bad")
        assert DiagnosticFormatter().format(diagnostic) == "error[PATTERN_INVALID]: bad"

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostic = ErrorTemplate.malformed_choice("one", 0)
        assert formatter.format(diagnostic) == (
            "MALFORMED_CHOICE: Choice 'one' has no '#' separator"
        )

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        diagnostic = ErrorTemplate.malformed_choice("one", 4, SourceSpan(10, 13))
        data = json.loads(formatter.format(diagnostic))
        assert data["code"] == "MALFORMED_CHOICE"
        assert data["code_value"] == 3001
        assert data["severity"] == "error"
        assert data["start"] == 10
        assert data["end"] == 13
        assert data["choice_index"] == 4
        assert data["selector"] == "one"
        assert "hint" in data

    def test_json_format_omits_missing_fields(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(
            formatter.format(Diagnostic(code=DiagnosticCode.PATTERN_INVALID, message="bad"))
        )
        assert set(data) == {"code", "code_value", "message", "severity"}

    def test_control_characters_escaped(self) -> None:
        diagnostic = ErrorTemplate.malformed_choice("a\nb", 0)
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert "\n" not in output
        assert "a\\nb" in output

    def test_max_text_length_truncates(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, max_text_length=10)
        diagnostic = Diagnostic(code=DiagnosticCode.PATTERN_INVALID, message="x" * 50)
        assert formatter.format(diagnostic) == "PATTERN_INVALID: " + "x" * 10 + "..."

    def test_format_many(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.malformed_choice("a", 0),
            ErrorTemplate.duplicate_default(1),
        ]
        assert formatter.format_many(diagnostics) == (
            "MALFORMED_CHOICE: Choice 'a' has no '#' separator\n\n"
            "DUPLICATE_DEFAULT: Choice 1 redefines the default text"
        )


class TestExceptions:
    def test_plain_message(self) -> None:
        error = IStringError("plain")
        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.malformed_choice("one", 0)
        error = ChoiceSyntaxError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_hierarchy(self) -> None:
        assert issubclass(ChoiceSyntaxError, IStringError)
        assert issubclass(ChoicePatternError, IStringError)
        assert issubclass(IStringError, Exception)


class TestDiagnosticSeverity:
    def test_is_error(self) -> None:
        assert ErrorTemplate.malformed_choice("one", 0).is_error
        assert not ErrorTemplate.duplicate_default(1).is_error


class TestValidationTypes:
    def test_error_describe(self) -> None:
        error = ValidationError("malformed-choice", "msg", "one", 0)
        assert error.describe() == "malformed-choice (choice 0): msg"

    def test_error_describe_without_index(self) -> None:
        error = ValidationError("invalid-pattern", "msg", "[a")
        assert error.describe() == "invalid-pattern: msg"

    def test_describe_clips_message(self) -> None:
        error = ValidationError("malformed-choice", "y" * 150, "one", 0)
        assert error.describe(max_length=5) == "malformed-choice (choice 0): yyyyy..."

    def test_warning_describe_with_hint(self) -> None:
        warning = ValidationWarning("duplicate-default", "msg", "", 3, "last wins")
        assert warning.describe() == "duplicate-default (choice 3): msg (last wins)"

    def test_result_valid(self) -> None:
        result = ValidationResult.valid()
        assert result.is_valid
        assert result.error_count == 0
        assert result.warning_count == 0
        assert result.codes == ()
        assert result.format() == "OK: no findings"

    def test_result_with_warnings_only_is_valid(self) -> None:
        result = ValidationResult(
            warnings=(ValidationWarning("duplicate-default", "msg", "", 1, "hint"),)
        )
        assert result.is_valid
        assert result.warning_count == 1
        assert result.format() == (
            "0 error(s), 1 warning(s)\n  warning: duplicate-default (choice 1): msg (hint)"
        )
        assert result.format(include_warnings=False) == "OK: no findings"

    def test_result_with_errors(self) -> None:
        result = ValidationResult(
            errors=(ValidationError("malformed-choice", "msg", "one", 0),),
            warnings=(ValidationWarning("invalid-number", "bound", "<x", 1),),
        )
        assert not result.is_valid
        assert result.codes == ("malformed-choice", "invalid-number")
        assert result.format() == (
            "1 error(s), 1 warning(s)\n"
            "  error: malformed-choice (choice 0): msg\n"
            "  warning: invalid-number (choice 1): bound"
        )
