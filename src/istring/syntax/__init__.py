"""Choice grammar: splitting, parsing and selector classification.

Python 3.13+. Zero external dependencies.
"""

from .ast import Choice, ChoiceFormat
from .parser import ChoiceParser, parse_choices
from .selectors import classify_boolean, classify_selector
from .splitter import split, split_by_symbol

__all__ = [
    "Choice",
    "ChoiceFormat",
    "ChoiceParser",
    "classify_boolean",
    "classify_selector",
    "parse_choices",
    "split",
    "split_by_symbol",
]
