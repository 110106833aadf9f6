"""Terminal colours, styles, display-width helpers and UI constants."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from wcwidth import wcwidth

# Foreground colours
FG_PRIMARY = "#7D56F4"
FG_MUTED = "7"
FG_LIGHT = "15"
FG_BORDER = "8"

# Background colours
BG_SELECTION = "235"

# Service status colours
FG_STATUS_RUNNING = "10"
FG_STATUS_WARNING = "11"
FG_STATUS_ERROR = "9"
FG_STATUS_STOPPED = "8"

# Log level colours
FG_LOG_DEBUG = "8"
FG_LOG_INFO = "12"
FG_LOG_WARN = "11"
FG_LOG_ERROR = "9"

# Timing (seconds)
UI_TICK_INTERVAL = 0.1
UI_TICKS_PER_SECOND = round(1.0 / UI_TICK_INTERVAL)
STATS_POLLING_INTERVAL = 1.0
STATS_CALL_TIMEOUT = 0.5
STATS_BATCH_TIMEOUT = 0.9
STATS_MAX_CONCURRENCY = 50

# Layout
PANEL_HEIGHT_PADDING = 8
PANEL_BORDER_PADDING = 2
MIN_PANEL_HEIGHT = 10

HEADER_SEPARATOR_MIN_WIDTH = 4
HEADER_FIXED_CHARS = 10

FOOTER_SEPARATOR_MIN_WIDTH = 4
FOOTER_FIXED_CHARS = 5

# Services view
FIXED_COLUMNS_WIDTH = 53
SERVICE_NAME_MIN_WIDTH = 20
VIEWPORT_WIDTH_PADDING = 2
ROW_WIDTH_PADDING = 8
CURRENT_MARKER = "› "
EMPTY_CHECKBOX = "[ ]"
SELECTED_CHECKBOX = "[✓]"

COL_WIDTH_INDICATOR = 2
COL_WIDTH_CHECKBOX = 3
COL_WIDTH_STATUS = 10
COL_WIDTH_CPU = 6
COL_WIDTH_MEM = 6
COL_WIDTH_PID = 8
COL_WIDTH_UPTIME = 8

# Logs view
LOG_BUFFER_SIZE = 1000
LOG_SERVICE_NAME_MAX_WIDTH = 15
LOG_MESSAGE_MIN_WIDTH = 20
DEFAULT_VIEWPORT_WIDTH = 80

MB_TO_GB = 1024

_ANSI_RE = re.compile(r"\x1b[^A-Za-z]*[A-Za-z]")
_RESET = "\x1b[0m"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences."""
    return _ANSI_RE.sub("", text)


def _line_width(line: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in line)


def display_width(text: str) -> int:
    """Return the widest line's width in terminal columns, ignoring ANSI codes."""
    return max((_line_width(line) for line in strip_ansi(text).split("\n")), default=0)


def _color_code(color: str, background: bool) -> str:
    if color.startswith("#"):
        red, green, blue = (int(color[i : i + 2], 16) for i in (1, 3, 5))
        return f"{48 if background else 38};2;{red};{green};{blue}"
    index = int(color)
    if index < 8:
        return str((40 if background else 30) + index)
    if index < 16:
        return str((100 if background else 90) + index - 8)
    return f"{48 if background else 38};5;{index}"


@dataclass(frozen=True)
class Style:
    """Text style: colours, bold, padding (vertical, horizontal) and margins."""

    foreground: Optional[str] = None
    background: Optional[str] = None
    bold: bool = False
    padding: Tuple[int, int] = (0, 0)
    margin_top: int = 0
    margin_bottom: int = 0

    def _sgr(self) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.foreground is not None:
            codes.append(_color_code(self.foreground, background=False))
        if self.background is not None:
            codes.append(_color_code(self.background, background=True))
        return ";".join(codes)

    def render(self, text: str) -> str:
        lines = text.split("\n")
        width = max(display_width(line) for line in lines)
        vertical, horizontal = self.padding
        side = " " * horizontal
        body = [side + line + " " * (width - display_width(line)) + side for line in lines]
        full_width = width + 2 * horizontal
        blank = " " * full_width
        body = [blank] * vertical + body + [blank] * vertical

        sgr = self._sgr()
        if sgr:
            body = [f"\x1b[{sgr}m{line}{_RESET}" for line in body]

        return "\n".join([blank] * self.margin_top + body + [blank] * self.margin_bottom)


HELP_STYLE = Style(foreground=FG_BORDER)
TIMESTAMP_STYLE = Style(foreground=FG_MUTED)
ERROR_STYLE = Style(foreground=FG_STATUS_ERROR)
EMPTY_STATE_STYLE = Style(foreground=FG_MUTED, padding=(0, 1))
SPINNER_STYLE = Style(foreground=FG_PRIMARY)
SEPARATOR_STYLE = Style(foreground=FG_PRIMARY)

HEADER_STYLE = Style(margin_top=1, margin_bottom=1)
HEADER_TITLE_STYLE = Style(foreground=FG_PRIMARY, bold=True)

FOOTER_STYLE = Style(margin_top=1)
FOOTER_HELP_STYLE = Style(margin_top=1, padding=(0, 1))

TIER_CONTAINER_STYLE = Style(margin_bottom=1)
TIER_HEADER_STYLE = Style(bold=True, foreground=FG_PRIMARY, padding=(0, 1))

SERVICE_HEADER_STYLE = Style(foreground=FG_MUTED, padding=(0, 2))
SERVICE_ROW_STYLE = Style(padding=(0, 2))
SELECTED_SERVICE_ROW_STYLE = Style(background=BG_SELECTION, padding=(0, 2))

STATUS_RUNNING_STYLE = Style(foreground=FG_STATUS_RUNNING, bold=True)
STATUS_STARTING_STYLE = Style(foreground=FG_STATUS_WARNING, bold=True)
STATUS_FAILED_STYLE = Style(foreground=FG_STATUS_ERROR, bold=True)
STATUS_STOPPED_STYLE = Style(foreground=FG_STATUS_STOPPED, bold=True)

PHASE_STARTING_STYLE = Style(foreground=FG_STATUS_WARNING)
PHASE_RUNNING_STYLE = Style(foreground=FG_STATUS_RUNNING)
PHASE_STOPPING_STYLE = Style(foreground=FG_STATUS_ERROR)
PHASE_MUTED_STYLE = Style(foreground=FG_MUTED)

INDICATOR_ACTIVE_STYLE = Style(foreground=FG_STATUS_WARNING)

SERVICE_NAME_STYLE = Style(foreground=FG_PRIMARY, bold=True)

LOG_LEVEL_DEBUG_STYLE = Style(foreground=FG_LOG_DEBUG)
LOG_LEVEL_INFO_STYLE = Style(foreground=FG_LOG_INFO)
LOG_LEVEL_WARN_STYLE = Style(foreground=FG_LOG_WARN)
LOG_LEVEL_ERROR_STYLE = Style(foreground=FG_LOG_ERROR)

UUID_STYLE = Style(foreground=FG_LIGHT)