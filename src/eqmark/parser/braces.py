"""Matching of nested, backslash-escaped delimiters."""

from __future__ import annotations

UNMATCHED = -1


def find_matching_brace(text: str, start: int, open_char: str = "{", close_char: str = "}") -> int:
    """Return the index just past the delimiter closing the span opened before ``start``.

    ``start`` is the index immediately after an opening delimiter, so one level of
    nesting is already open. A delimiter preceded by a single backslash is escaped.
    Returns ``UNMATCHED`` when the text ends first.
    """
    depth = 1
    i = start
    while i < len(text):
        char = text[i]
        escaped = i > 0 and text[i - 1] == "\\"
        if char == open_char and not escaped:
            depth += 1
        elif char == close_char and not escaped:
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return UNMATCHED
