#!/usr/bin/env python3
"""Numeric Selector Parsing Fuzzer (Atheris).

Targets: istring.core.numbers
Tests the strtod/strtol emulation on arbitrary text:
- parse_double never raises and returns a float
- parse_integer_as_double stays within the overflow guard
- tolerance_equal is symmetric

Run: python fuzz_atheris/fuzz_numbers.py -max_total_time=60
(requires pip install -e ".[fuzz]")

Built for Python 3.13+.
"""

from __future__ import annotations

import atexit
import json
import logging
import math
import sys
from typing import TypeAlias

# --- PEP 695 Type Aliases ---
FuzzStats: TypeAlias = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("istring").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["istring"]):
    from istring.constants import INTEGER_OVERFLOW_DIVISOR, LONG_MAX
    from istring.core.numbers import (
        has_integer_prefix,
        has_numeric_prefix,
        parse_double,
        parse_integer_as_double,
        tolerance_equal,
    )

_GUARD = LONG_MAX // INTEGER_OVERFLOW_DIVISOR


def test_one_input(data: bytes) -> None:
    """Atheris entry point: check numeric prefix invariants."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    text = fdp.ConsumeUnicodeNoSurrogates(40)
    base = fdp.ConsumeIntInRange(2, 36)

    try:
        value = parse_double(text)
        assert isinstance(value, float)
        if not has_numeric_prefix(text):
            assert value == 0.0

        integer = parse_integer_as_double(text, base)
        assert abs(integer) <= _GUARD
        if not has_integer_prefix(text):
            assert parse_integer_as_double(text) == 0.0

        other = fdp.ConsumeRegularFloat()
        if not math.isnan(value) and not math.isnan(other):
            assert tolerance_equal(value, other) == tolerance_equal(other, value)
    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
