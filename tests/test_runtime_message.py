"""Tests for the IString API.

Covers formatting, choice resolution for all reference kinds, the lazy
parse cache and its thread safety, strict/eager configuration, and the
module-level convenience functions.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from istring import (
    ChoicePatternError,
    ChoiceSyntaxError,
    IString,
    JsonValueSource,
    MessageConfig,
    NumberReference,
    format_choice,
    format_message,
)
from istring.constants import INT_MAX, LONG_MAX
from istring.syntax.ast import ChoiceFormat
from istring.syntax.parser import ChoiceParser


@pytest.fixture
def parse_calls(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Count template parses made by IString."""
    calls: list[str] = []

    class CountingParser(ChoiceParser):
        def parse(self, text: str) -> ChoiceFormat:
            calls.append(text)
            return super().parse(text)

    monkeypatch.setattr("istring.runtime.message.ChoiceParser", CountingParser)
    return calls


class _HugeText(str):
    """String that reports a length beyond INT_MAX."""

    __slots__ = ()

    def __len__(self) -> int:
        return INT_MAX + 5


# ============================================================================
# FORMAT
# ============================================================================


class TestFormat:
    def test_format(self) -> None:
        assert IString("Hello {name}").format({"name": "Ann"}) == "Hello Ann"

    def test_format_without_values(self) -> None:
        assert IString("Hello {name}").format() == "Hello {name}"

    def test_format_first_occurrence(self) -> None:
        assert IString("{a} and {a}").format({"a": "X"}) == "X and {a}"

    def test_format_json_source(self) -> None:
        assert IString("{n} new").format(JsonValueSource('{"n": 2}')) == "2 new"

    def test_format_message(self) -> None:
        assert format_message("{count} new", {"count": 3}) == "3 new"
        assert format_message("{count} new") == "{count} new"


# ============================================================================
# CHOICE RESOLUTION
# ============================================================================


class TestGetChoice:
    def test_numeric(self) -> None:
        msg = IString("0#no files|1#one file|#{n} files")
        assert msg.get_choice(0) == IString("no files")
        assert msg.get_choice(1.0) == IString("one file")
        assert msg.get_choice(7) == IString("{n} files")

    def test_boolean(self) -> None:
        msg = IString("true#Yes|false#No")
        assert msg.format_choice(True) == "Yes"
        assert msg.format_choice(False) == "No"

    def test_bool_is_not_number(self) -> None:
        """True resolves as a boolean, not as the number 1."""
        msg = IString("1-5#range|true#yes")
        assert msg.format_choice(True) == "yes"
        assert msg.format_choice(1) == "range"

    def test_string(self) -> None:
        msg = IString("m.*#He|f.*#She|#They")
        assert msg.format_choice("Female") == "She"
        assert msg.format_choice("unknown") == "They"

    def test_decimal_reference(self) -> None:
        assert IString("<1#less|#more").format_choice(Decimal("0.5")) == "less"

    def test_explicit_reference(self) -> None:
        assert IString("2#two|#other").format_choice(NumberReference(2.0)) == "two"

    def test_empty_text_returns_none(self) -> None:
        assert IString("").get_choice(1) is None
        assert IString("").get_choice("x") is None
        assert IString("").format_choice(True) == ""

    def test_no_match_without_default(self) -> None:
        result = IString("1#one").get_choice(2)
        assert result is not None
        assert result.text == ""

    def test_unsupported_reference(self) -> None:
        with pytest.raises(TypeError):
            IString("1#one").get_choice(None)  # type: ignore[arg-type]

    def test_unsupported_reference_on_empty_text(self) -> None:
        with pytest.raises(TypeError):
            IString("").get_choice([1])  # type: ignore[arg-type]

    def test_result_uses_default_config(self) -> None:
        msg = IString("1#one", config=MessageConfig(strict=True))
        result = msg.get_choice(1)
        assert result is not None
        assert result.config == MessageConfig()

    def test_resolution_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="istring.runtime.message"):
            IString("1#one|#other").get_choice(5)
        assert any(
            "Resolved number reference to choice default" in r.getMessage()
            for r in caplog.records
        )


class TestFormatChoice:
    def test_values_substituted(self) -> None:
        msg = IString("1#one file|#{n} files")
        assert msg.format_choice(4, {"n": 4}) == "4 files"

    def test_no_values_returns_raw_choice(self) -> None:
        assert IString("1#one {n}|#x").format_choice(1) == "one {n}"
        assert IString("1#one {n}|#x").format_choice(1, {}) == "one {n}"

    def test_json_values(self) -> None:
        msg = IString("1#one file|#{n} files")
        assert msg.format_choice(3, JsonValueSource('{"n": 3}')) == "3 files"

    def test_null_json_values(self) -> None:
        msg = IString("1#one file|#{n} files")
        assert msg.format_choice(3, JsonValueSource("null")) == "{n} files"

    def test_module_function(self) -> None:
        assert format_choice("1#one item|#{n} items", 1) == "one item"
        assert format_choice("1#one item|#{n} items", 4, {"n": 4}) == "4 items"

    def test_module_function_with_config(self) -> None:
        with pytest.raises(ChoiceSyntaxError):
            format_choice("one|1#x", 1, config=MessageConfig(strict=True))


class TestLargeIntegerReferences:
    """Only the module-level format_choice reads out-of-range ints as 1.0."""

    LIMIT = LONG_MAX // 10000

    def test_instance_uses_large_int_as_given(self) -> None:
        msg = IString("1#one|#many")
        assert msg.format_choice(10**15) == "many"
        assert msg.format_choice(10**15) == msg.format_choice(1e15)
        assert msg.get_choice(-(10**15)) == IString("many")

    def test_instance_int_beyond_float_range(self) -> None:
        msg = IString(">1000#huge|<0#negative|#other")
        assert msg.format_choice(10**400) == "huge"
        assert msg.format_choice(-(10**400)) == "negative"

    @pytest.mark.parametrize("value", [LIMIT + 1, -LIMIT - 1, 10**15, 10**19])
    def test_module_function_reads_out_of_range_int_as_one(self, value: int) -> None:
        assert format_choice("1#one|#many", value) == "one"

    def test_module_function_limit_is_inclusive(self) -> None:
        assert format_choice("1#one|#many", self.LIMIT) == "many"
        assert format_choice("1#one|#many", -self.LIMIT) == "many"

    def test_module_function_floats_and_bools_not_clamped(self) -> None:
        assert format_choice("1#one|#many", 1e15) == "many"
        assert format_choice("true#yes|false#no", True) == "yes"


# ============================================================================
# CACHE, CONFIG, CONCURRENCY
# ============================================================================


class TestParseCache:
    def test_parsed_once(self, parse_calls: list[str]) -> None:
        msg = IString("1#one|#other")
        assert parse_calls == []
        msg.get_choice(1)
        msg.get_choice("one")
        msg.get_choice(True)
        assert parse_calls == ["1#one|#other"]

    def test_format_does_not_parse(self, parse_calls: list[str]) -> None:
        IString("{a}").format({"a": "x"})
        assert parse_calls == []

    def test_choices_property(self) -> None:
        msg = IString("1#one|#other")
        assert msg.choices.selectors == ("1", "")
        assert msg.choices is msg.choices

    def test_parse_choices_replaces_cache(self, parse_calls: list[str]) -> None:
        msg = IString("abc#A|#other")
        first = msg.choices
        assert msg.format_choice("abc") == "A"
        fresh = msg.parse_choices()
        assert fresh == first
        assert msg.choices is fresh
        assert msg.format_choice("abc") == "A"
        assert len(parse_calls) == 2

    def test_eager_parses_at_construction(self, parse_calls: list[str]) -> None:
        IString("1#one", config=MessageConfig(eager=True))
        assert parse_calls == ["1#one"]

    def test_concurrent_first_use_parses_once(self, parse_calls: list[str]) -> None:
        msg = IString("<10#small|10-20#medium|>20#large|m.*#male")
        barrier = threading.Barrier(8)

        def resolve(i: int) -> str:
            barrier.wait()
            reference: float | str = "male" if i % 2 else float(i * 4)
            return msg.format_choice(reference)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(resolve, range(8)))

        assert len(parse_calls) == 1
        assert results == [
            "small", "male", "small", "male", "medium", "male", "large", "male",
        ]


class TestStrictMode:
    def test_lazy_strict_raises_on_resolution(self) -> None:
        msg = IString("one|1#x", config=MessageConfig(strict=True))
        with pytest.raises(ChoiceSyntaxError):
            msg.get_choice(1)

    def test_eager_strict_raises_at_construction(self) -> None:
        with pytest.raises(ChoiceSyntaxError):
            IString("one|1#x", config=MessageConfig(strict=True, eager=True))

    def test_lenient_malformed_choice(self) -> None:
        assert IString("one|1#x|#d").format_choice(1) == "x"

    def test_strict_invalid_pattern(self) -> None:
        msg = IString("[a#x|#d", config=MessageConfig(strict=True))
        with pytest.raises(ChoicePatternError):
            msg.get_choice("a")

    def test_strict_invalid_pattern_numeric_unaffected(self) -> None:
        msg = IString("[a#x|#d", config=MessageConfig(strict=True))
        assert msg.format_choice(1) == "d"

    def test_lenient_invalid_pattern_skipped(self) -> None:
        assert IString("[a#x|a#y|#d").format_choice("a") == "y"

    def test_max_pattern_length(self) -> None:
        msg = IString("abcdef#long|#d", config=MessageConfig(max_pattern_length=3))
        assert msg.format_choice("abcdef") == "d"


class TestMessageConfig:
    def test_defaults(self) -> None:
        config = MessageConfig()
        assert config.strict is False
        assert config.eager is False
        assert config.max_pattern_length == 1000

    @pytest.mark.parametrize("length", [0, -1])
    def test_rejects_non_positive_pattern_length(self, length: int) -> None:
        with pytest.raises(ValueError, match="max_pattern_length must be positive"):
            MessageConfig(max_pattern_length=length)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            MessageConfig().strict = True  # type: ignore[misc]

    def test_config_property(self) -> None:
        config = MessageConfig(strict=True)
        assert IString("x", config=config).config is config


# ============================================================================
# STRING PROTOCOL
# ============================================================================


class TestStringProtocol:
    def test_length(self) -> None:
        assert IString("abc").length() == 3
        assert IString("").length() == 0

    def test_length_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        msg = IString(_HugeText("abc"))
        with caplog.at_level(logging.WARNING, logger="istring.runtime.message"):
            assert msg.length() == INT_MAX
        assert any("clamped" in r.getMessage() for r in caplog.records)

    def test_to_string(self) -> None:
        msg = IString("a#b")
        assert msg.to_string() == "a#b"
        assert str(msg) == "a#b"
        assert msg.text == "a#b"

    def test_repr(self) -> None:
        assert repr(IString("x")) == "IString('x')"

    def test_equality_and_hash(self) -> None:
        assert IString("x") == IString("x")
        assert IString("x") != IString("y")
        assert IString("x") != "x"
        assert hash(IString("x")) == hash(IString("x"))
        assert len({IString("x"), IString("x")}) == 1

    def test_equals_ignore_case(self) -> None:
        assert IString.equals_ignore_case("Yes", "YES")
        assert not IString.equals_ignore_case("Yes", "Yess")

    def test_validate(self) -> None:
        result = IString("one|1#x").validate()
        assert not result.is_valid
        assert result.errors[0].code == "malformed-choice"

    def test_validate_uses_configured_limit(self) -> None:
        msg = IString("abcdef#x", config=MessageConfig(max_pattern_length=3))
        codes = [w.code for w in msg.validate().warnings]
        assert "pattern-too-long" in codes
