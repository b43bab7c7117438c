"""Literal-delimiter splitting for the choice grammar.

Two flavours:
- split(): top-level choice list; cleans each segment (quotes, trailing comma)
- split_by_symbol(): single-character split with no cleanup

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator

__all__ = ["split", "split_by_symbol", "split_with_offsets"]


def _clean_segment(segment: str) -> str:
    """Remove every double quote and one trailing comma."""
    segment = segment.replace('"', "")
    if segment.endswith(","):
        segment = segment[:-1]
    return segment


def split_with_offsets(source: str, delimiter: str) -> Iterator[tuple[int, int, str]]:
    """Split source on a literal delimiter, yielding located, cleaned segments.

    Args:
        source: Text to split
        delimiter: Literal delimiter; empty yields the whole source unchanged

    Yields:
        (start, end, segment) where start/end locate the raw segment in
        source and segment is the cleaned text. Segments empty before or
        after cleanup are skipped.
    """
    if not delimiter:
        yield 0, len(source), source
        return

    start = 0
    while True:
        end = source.find(delimiter, start)
        if end == -1:
            end = len(source)

        if end > start:
            segment = _clean_segment(source[start:end])
            if segment:
                yield start, end, segment

        if end == len(source):
            break
        start = end + len(delimiter)


def split(source: str, delimiter: str) -> list[str]:
    """Split source on a literal delimiter with segment cleanup.

    Each non-empty segment has all '"' characters removed and a single
    trailing ',' stripped. Segments that end up empty are dropped.

    Args:
        source: Text to split
        delimiter: Literal delimiter string

    Returns:
        Cleaned segments in source order; [source] if delimiter is empty.

    Examples:
        >>> split('"1#one",|"#other"', "|")
        ['1#one', '#other']
        >>> split("a||b|", "|")
        ['a', 'b']
    """
    return [segment for _, _, segment in split_with_offsets(source, delimiter)]


def split_by_symbol(source: str, symbol: str) -> list[str]:
    """Split on a single character, keeping empty segments.

    Examples:
        >>> split_by_symbol("a##b", "#")
        ['a', '', 'b']
    """
    if len(symbol) != 1:
        msg = f"split_by_symbol expects a single character, got {symbol!r}"
        raise ValueError(msg)
    return source.split(symbol)
