"""Offset to line/character translation."""

from __future__ import annotations

from bisect import bisect_right

from yamlast.models.errors import Position


def get_line_start_positions(text: str) -> list[int]:
    """Return the offset at which every line of ``text`` starts.

    ``\\n``, ``\\r\\n`` and a lone ``\\r`` all end a line.
    """
    result = [0]
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "\r":
            if i + 1 < length and text[i + 1] == "\n":
                i += 1
            result.append(i + 1)
        elif ch == "\n":
            result.append(i + 1)
        i += 1
    return result


def get_position(offset: int, line_starts: list[int]) -> Position:
    """Translate a character offset into a zero-based line/character pair."""
    offset = max(offset, 0)
    line = bisect_right(line_starts, offset) - 1
    return Position(line=line, character=offset - line_starts[line])
