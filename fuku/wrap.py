"""ANSI-aware word wrapping by terminal display width."""

from __future__ import annotations

from typing import List, NamedTuple

from wcwidth import wcwidth

# Largest gap at the end of a line accepted in order to break at whitespace.
MAX_WASTED_SPACE = 20


class _Char(NamedTuple):
    offset: int
    is_space: bool
    cumulative_width: int


def _char_width(ch: str) -> int:
    if "\ud800" <= ch <= "\udfff":
        return 1
    return max(wcwidth(ch), 0)


def _char_table(text: str) -> List[_Char]:
    chars: List[_Char] = []
    pos = 0
    cumulative = 0
    length = len(text)

    while pos < length:
        ch = text[pos]
        if ch == "\x1b":
            end = pos + 1
            while end < length:
                code = text[end]
                end += 1
                if ("A" <= code <= "Z") or ("a" <= code <= "z"):
                    break
            chars.append(_Char(pos, False, cumulative))
            pos = end
            continue

        cumulative += _char_width(ch)
        chars.append(_Char(pos, ch in " \t", cumulative))
        pos += 1

    return chars


def _skip_spaces(chars: List[_Char], start: int) -> int:
    return next((i for i in range(start, len(chars)) if not chars[i].is_space), len(chars))


def _find_break(chars: List[_Char], start: int, max_width: int, start_width: int) -> int:
    last_space = -1
    last_space_width = 0

    for i in range(start, len(chars)):
        width = chars[i].cumulative_width - start_width
        if width > max_width:
            if last_space >= 0 and max_width - last_space_width <= MAX_WASTED_SPACE:
                return last_space + 1
            return i
        if chars[i].is_space:
            last_space = i
            last_space_width = width

    return len(chars)


def wrap_text(text: str, max_width: int) -> List[str]:
    """Split text into lines no wider than max_width, preferring whitespace breaks.

    ANSI escape sequences take no width. Trailing blanks are trimmed from
    every line and blank lines are dropped.
    """
    if max_width <= 0:
        return [text]

    chars = _char_table(text)
    if not chars:
        return [text]

    total_width = chars[-1].cumulative_width
    if total_width <= max_width:
        return [text]

    lines: List[str] = []
    start = 0

    while start < len(chars):
        start_width = chars[start - 1].cumulative_width if start > 0 else 0

        if total_width - start_width <= max_width:
            line = text[chars[start].offset:].rstrip(" \t")
            if line:
                lines.append(line)
            break

        brk = max(_find_break(chars, start, max_width, start_width), start + 1)
        line_end = chars[brk].offset if brk < len(chars) else len(text)
        line = text[chars[start].offset:line_end].rstrip(" \t")
        if line:
            lines.append(line)

        start = _skip_spaces(chars, brk)

    return lines