"""Header, footer and line rendering helpers."""

from __future__ import annotations

from fuku.styles import (
    FOOTER_FIXED_CHARS,
    FOOTER_HELP_STYLE,
    FOOTER_SEPARATOR_MIN_WIDTH,
    FOOTER_STYLE,
    HEADER_FIXED_CHARS,
    HEADER_SEPARATOR_MIN_WIDTH,
    HEADER_STYLE,
    HELP_STYLE,
    SEPARATOR_STYLE,
    display_width,
)

_ELLIPSIS = "…"


def render_line(width: int) -> str:
    """Render a horizontal separator line of the given width."""
    return SEPARATOR_STYLE.render("─" * max(width, 0))


def truncate(s: str, max_width: int) -> str:
    """Shorten text to fit within max_width columns, ending with an ellipsis."""
    if display_width(s) <= max_width:
        return s
    target = max_width - display_width(_ELLIPSIS)
    if target <= 0:
        return _ELLIPSIS
    for end in range(len(s), 0, -1):
        candidate = s[:end]
        if display_width(candidate) <= target:
            return candidate + _ELLIPSIS
    return _ELLIPSIS


def render_header(width: int, title: str, info: str) -> str:
    info_width = display_width(info)
    max_title_width = width - info_width - HEADER_SEPARATOR_MIN_WIDTH - HEADER_FIXED_CHARS
    if display_width(title) > max_title_width > 0:
        title = truncate(title, max_title_width)
    title_width = display_width(title)

    separator_width = max(width - title_width - info_width - HEADER_FIXED_CHARS, HEADER_SEPARATOR_MIN_WIDTH)
    line = " ".join([render_line(3), title, render_line(separator_width), info, render_line(3)])
    return HEADER_STYLE.render(line)


def _join_vertical(*blocks: str) -> str:
    lines = [line for block in blocks for line in block.split("\n")]
    width = max(display_width(line) for line in lines)
    return "\n".join(line + " " * (width - display_width(line)) for line in lines)


def render_footer(width: int, help_text: str, version: str) -> str:
    version_text = f"v{version}"
    separator_width = max(width - display_width(version_text) - FOOTER_FIXED_CHARS, FOOTER_SEPARATOR_MIN_WIDTH)
    version_line = render_line(separator_width) + " " + version_text + " " + render_line(3)
    help_block = FOOTER_HELP_STYLE.render(HELP_STYLE.render(help_text))
    return FOOTER_STYLE.render(_join_vertical(version_line, help_block))