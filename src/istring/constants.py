"""Grammar characters and numeric limits of the template language.

syntax, core and runtime all import from here; nothing here imports them.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar
    "CHOICE_DELIMITER",
    "SELECTOR_DELIMITER",
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    "TRUE_KEYWORDS",
    "FALSE_KEYWORDS",
    # Numeric limits
    "INT_MAX",
    "LONG_MAX",
    "LONG_MIN",
    "INTEGER_OVERFLOW_DIVISOR",
    "REFERENCE_OVERFLOW_DIVISOR",
    "TOLERANCE_SCALE",
    # Input limits
    "DEFAULT_MAX_PATTERN_LENGTH",
]

# ============================================================================
# GRAMMAR
# ============================================================================

# Separates choices: "1#one|2#two|#other"
CHOICE_DELIMITER: str = "|"

# Separates a selector from its text. Only the first occurrence is significant;
# further '#' characters belong to the text.
SELECTOR_DELIMITER: str = "#"

PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"

# Boolean selector keywords, compared ASCII case-insensitively.
TRUE_KEYWORDS: tuple[str, ...] = ("true", "yes", "on", "1")
FALSE_KEYWORDS: tuple[str, ...] = ("false", "no", "off", "0")

# ============================================================================
# NUMERIC LIMITS
# ============================================================================
#
# Selector bounds are read like C strtol/strtod on an LP64 platform:
# "long" is 64-bit signed.
#
# ============================================================================

# Largest value reported by IString.length().
INT_MAX: int = 2**31 - 1

LONG_MAX: int = 2**63 - 1
LONG_MIN: int = -(2**63)

# Integer selectors whose magnitude exceeds LONG_MAX // 100000 parse as 0.
INTEGER_OVERFLOW_DIVISOR: int = 100000

# The module-level format_choice() reads int references outside
# +-(LONG_MAX // 10000) as 1.0.
REFERENCE_OVERFLOW_DIVISOR: int = 10000

# tolerance_equal(a, b): |a - b| * TOLERANCE_SCALE <= min(|a|, |b|)
TOLERANCE_SCALE: float = 1e12

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Pattern selectors longer than this are not compiled and never match.
# Selectors are template text, so this bounds the cost of hostile templates.
DEFAULT_MAX_PATTERN_LENGTH: int = 1000
