#!/usr/bin/env python3
"""Choice Resolution Fuzzer (Atheris).

Targets: istring.runtime.message.IString, istring.validation.validate_choices
Tests that lenient resolution accepts any template and reference, and that
the result is always one of the parsed choice texts or the default text.

Run: python fuzz_atheris/fuzz_choices.py -max_total_time=60
(requires pip install -e ".[fuzz]")

Built for Python 3.13+.
"""

from __future__ import annotations

import atexit
import json
import logging
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
    from istring import IString, validate_choices
    from istring.syntax import parse_choices

_SEPARATORS = ("|", "#", "<=", ">=", "<", ">", "-", "{n}", '"', ",")


def _consume_template(fdp: atheris.FuzzedDataProvider) -> str:
    """Build a template biased towards grammar characters."""
    parts: list[str] = []
    for _ in range(fdp.ConsumeIntInRange(0, 8)):
        if fdp.ConsumeBool():
            parts.append(fdp.PickValueInList(list(_SEPARATORS)))
        else:
            parts.append(fdp.ConsumeUnicodeNoSurrogates(8))
    return "".join(parts)


def _consume_reference(fdp: atheris.FuzzedDataProvider) -> bool | str | int | float:
    match fdp.ConsumeIntInRange(0, 3):
        case 0:
            return fdp.ConsumeBool()
        case 1:
            return fdp.ConsumeUnicodeNoSurrogates(16)
        case 2:
            return fdp.ConsumeInt(8)
        case _:
            return fdp.ConsumeRegularFloat()


def test_one_input(data: bytes) -> None:
    """Atheris entry point: resolve random references against random templates."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    template = _consume_template(fdp)
    reference = _consume_reference(fdp)

    try:
        result = IString(template).get_choice(reference)
        if template:
            fmt = parse_choices(template)
            assert result is not None
            assert result.text in {*fmt.texts, fmt.default_text}
        else:
            assert result is None

        validation = validate_choices(template)
        _ = validation.format(max_length=80)
    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
