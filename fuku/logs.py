"""Buffered, filterable and scrollable log view."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from datetime import datetime
from itertools import islice
from typing import Deque, Iterable, List, Optional, Union

from fuku.filter import LogFilter
from fuku.highlight import highlight_log_level
from fuku.layout import truncate
from fuku.styles import (
    DEFAULT_VIEWPORT_WIDTH,
    EMPTY_STATE_STYLE,
    LOG_BUFFER_SIZE,
    LOG_MESSAGE_MIN_WIDTH,
    LOG_SERVICE_NAME_MAX_WIDTH,
    SERVICE_NAME_STYLE,
    TIMESTAMP_STYLE,
    display_width,
)
from fuku.subscriber import LogMsg
from fuku.viewport import Viewport
from fuku.wrap import wrap_text

EMPTY_MESSAGE = (
    "No logs enabled. Press 'space' to toggle service logs. "
    "Press 'tab' to return to services view."
)
CONTINUATION_PREFIX = " │ "
LAST_LINE_PREFIX = " └ "


@dataclass(frozen=True)
class LogEntry:
    """A single log line from a service."""

    service: str = ""
    message: str = ""
    tier: str = ""
    stream: str = ""
    timestamp: Optional[datetime] = None


@dataclass
class _Record:
    entry: LogEntry
    rendered: str


def _render_entry(entry: LogEntry, viewport_width: int) -> str:
    service = SERVICE_NAME_STYLE.render(truncate(entry.service, LOG_SERVICE_NAME_MAX_WIDTH))
    divider = TIMESTAMP_STYLE.render("·")
    prefix = f"{service} {divider} "

    first_max = max(viewport_width - display_width(prefix), LOG_MESSAGE_MIN_WIDTH)
    continuation_max = max(viewport_width - display_width(CONTINUATION_PREFIX), LOG_MESSAGE_MIN_WIDTH)

    message = highlight_log_level(entry.message.rstrip("\n\r"))

    wrapped: List[str] = []
    for index, line in enumerate(message.split("\n")):
        if index > 0:
            wrapped.extend(wrap_text(line, continuation_max))
            continue
        pieces = wrap_text(line, first_max)
        if not pieces:
            continue
        wrapped.append(pieces[0])
        if len(pieces) > 1:
            wrapped.extend(wrap_text(" ".join(pieces[1:]), continuation_max))

    last = len(wrapped) - 1
    out = []
    for index, line in enumerate(wrapped):
        if index == 0:
            line_prefix = prefix
        elif index == last:
            line_prefix = LAST_LINE_PREFIX
        else:
            line_prefix = CONTINUATION_PREFIX
        out.append(f"{line_prefix}{line}\n")
    return "".join(out)


class LogModel:
    """Keeps the newest ``max_size`` log entries and renders the enabled ones.

    New entries are appended to the shown content without rebuilding it;
    filter changes and width changes rebuild it.
    """

    def __init__(self, max_size: int = LOG_BUFFER_SIZE) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self._max_size = max_size
        self._records: Deque[_Record] = deque()
        self._last_rendered_index = -1
        self._current_content = ""
        self._filter = LogFilter()
        self._viewport = Viewport(0, 0)
        self._autoscroll = False
        self._width = 0
        self._height = 0
        self._last_width = 0
        self._width_dirty = False

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def count(self) -> int:
        return len(self._records)

    @property
    def entries(self) -> List[LogEntry]:
        """Buffered entries, oldest first."""
        return [record.entry for record in self._records]

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def autoscroll(self) -> bool:
        return self._autoscroll

    @property
    def current_content(self) -> str:
        return self._current_content

    @property
    def last_rendered_index(self) -> int:
        return self._last_rendered_index

    def handle_log(self, entry: Union[LogEntry, LogMsg]) -> None:
        """Buffer a log line and refresh the shown content."""
        self._add_entry(
            LogEntry(
                service=entry.service,
                message=entry.message,
                tier=entry.tier,
                stream=entry.stream,
                timestamp=entry.timestamp,
            )
        )
        self._update_content()

    def is_enabled(self, service: str) -> bool:
        return self._filter.is_enabled(service)

    def set_enabled(self, service: str, enabled: bool) -> None:
        self._filter.set(service, enabled)
        self._invalidate_content()
        self._update_content()

    def toggle_all(self, services: Iterable[str]) -> None:
        """Disable all services if all are enabled, otherwise enable all."""
        self._filter.toggle_all(services)
        self._invalidate_content()
        self._update_content()

    def set_size(self, width: int, height: int) -> None:
        if self._last_width != 0 and self._last_width != width:
            self._width_dirty = True
        self._width = width
        self._height = height
        self._last_width = width
        self._viewport.width = width
        self._viewport.height = height
        self._update_content()

    def toggle_autoscroll(self) -> None:
        self._autoscroll = not self._autoscroll
        if self._autoscroll:
            self._viewport.goto_bottom()

    def handle_key(self, key: str) -> bool:
        """Scroll for a key; scrolling away from the bottom turns autoscroll off.

        Returns whether the view moved.
        """
        moved = self._viewport.handle_key(key)
        if moved and self._autoscroll:
            vp = self._viewport
            if vp.y_offset < vp.total_line_count() - vp.height:
                self._autoscroll = False
        return moved

    def clear(self) -> None:
        """Drop all entries; filter and autoscroll settings are kept."""
        self._records.clear()
        self._last_rendered_index = -1
        self._current_content = ""
        self._width_dirty = False
        self._viewport.set_content("")
        self._viewport.y_offset = 0

    def view(self) -> str:
        rendered = self._viewport.view()
        if not rendered.strip():
            return EMPTY_STATE_STYLE.render(EMPTY_MESSAGE)
        return rendered

    def build_content(self) -> str:
        """Build the full content of enabled entries from scratch."""
        return self._visible(self._records)

    def _viewport_width(self) -> int:
        width = self._viewport.width
        return width if width > 0 else DEFAULT_VIEWPORT_WIDTH

    def _visible(self, records: Iterable[_Record]) -> str:
        return "".join(
            record.rendered
            for record in records
            if record.rendered and self._filter.is_enabled(record.entry.service)
        )

    def _add_entry(self, entry: LogEntry) -> None:
        rendered = _render_entry(entry, self._viewport_width())
        evicted = len(self._records) >= self._max_size

        if evicted:
            old = self._records.popleft()
            if old.rendered and self._filter.is_enabled(old.entry.service):
                if len(old.rendered) <= len(self._current_content):
                    self._current_content = self._current_content[len(old.rendered):]
                else:
                    self._current_content = ""
            if self._last_rendered_index >= 0:
                self._last_rendered_index = max(self._last_rendered_index - 1, 0)

        self._records.append(_Record(entry, rendered))

        if evicted and not self._current_content:
            self._last_rendered_index = -1

    def _invalidate_content(self) -> None:
        self._last_rendered_index = -1
        self._current_content = ""

    def _rebuild_content(self) -> None:
        self._current_content = self._visible(self._records)
        self._viewport.set_content(self._current_content)
        self._last_rendered_index = self.count - 1

    def _rerender(self, width: int) -> None:
        for record in self._records:
            record.rendered = _render_entry(record.entry, width)
        self._rebuild_content()

    def _update_content(self) -> None:
        width = self._viewport_width()
        if self._width_dirty:
            self._width_dirty = False
            self._rerender(width)
            return

        vp = self._viewport
        old_offset = vp.y_offset

        if self._last_rendered_index == -1:
            self._rebuild_content()
        else:
            if self._last_rendered_index >= self.count - 1:
                return
            new_lines = self._visible(islice(self._records, self._last_rendered_index + 1, None))
            if new_lines:
                self._current_content += new_lines
                vp.set_content(self._current_content)
            self._last_rendered_index = self.count - 1

        if self._autoscroll:
            vp.goto_bottom()
        else:
            vp.y_offset = min(old_offset, max(vp.total_line_count() - vp.height, 0))