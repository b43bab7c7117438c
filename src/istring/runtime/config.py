"""Configuration for IString choice resolution.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from istring.constants import DEFAULT_MAX_PATTERN_LENGTH

__all__ = ["MessageConfig"]


@dataclass(frozen=True, slots=True)
class MessageConfig:
    """Immutable configuration for IString.

    All fields have sensible defaults; ``MessageConfig()`` reproduces the
    lenient, lazily parsed behaviour templates are written against.

    Attributes:
        strict: Raise ChoiceSyntaxError for a choice without '#' and
            ChoicePatternError for a selector that does not compile
            (default: False, both degrade silently to the default text).
        eager: Parse the template at construction instead of on first
            choice resolution (default: False).
        max_pattern_length: Longest selector compiled as a pattern; longer
            selectors never match string references (default: 1000).

    Example:
        >>> from istring import IString
        >>> config = MessageConfig(strict=True)
        >>> IString("one#1|other", config=config).get_choice(1)
        Traceback (most recent call last):
        ...
        istring.diagnostics.errors.ChoiceSyntaxError: ...
    """

    strict: bool = False
    eager: bool = False
    max_pattern_length: int = DEFAULT_MAX_PATTERN_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_pattern_length is not positive.
        """
        if self.max_pattern_length <= 0:
            msg = "max_pattern_length must be positive"
            raise ValueError(msg)
