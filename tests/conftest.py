"""Shared pytest setup: Hypothesis profiles and the fuzz marker.

Profiles (max_examples):
    dev      300, local default
    ci       60, derandomized; chosen when CI=true
    verbose  100, prints every example

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked @pytest.mark.fuzz are skipped unless the run selects them
with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Verbosity, settings

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 300},
    "ci": {"max_examples": 60, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, **_options)


def _active_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_active_profile())


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the -m expression names them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test: run with pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)
