"""A scrollable window over lines of text."""

from __future__ import annotations

from typing import Callable, Dict, List

from fuku.styles import display_width


class Viewport:
    """Shows ``height`` lines of its content starting at ``y_offset``.

    ``y_offset`` may be assigned directly; scrolling methods keep it within
    the valid range.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.y_offset = 0
        self._lines: List[str] = []
        self._keys: Dict[str, Callable[[], None]] = {
            "up": lambda: self.scroll_up(1),
            "k": lambda: self.scroll_up(1),
            "down": lambda: self.scroll_down(1),
            "j": lambda: self.scroll_down(1),
            "pgup": lambda: self.scroll_up(self.height),
            "b": lambda: self.scroll_up(self.height),
            "pgdown": lambda: self.scroll_down(self.height),
            " ": lambda: self.scroll_down(self.height),
            "f": lambda: self.scroll_down(self.height),
            "u": lambda: self.scroll_up(self.height // 2),
            "ctrl+u": lambda: self.scroll_up(self.height // 2),
            "d": lambda: self.scroll_down(self.height // 2),
            "ctrl+d": lambda: self.scroll_down(self.height // 2),
        }

    @property
    def max_y_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    @property
    def at_top(self) -> bool:
        return self.y_offset <= 0

    @property
    def at_bottom(self) -> bool:
        return self.y_offset >= self.max_y_offset

    def set_content(self, content: str) -> None:
        """Replace the content; jump to the bottom if the offset is past the end."""
        self._lines = content.replace("\r\n", "\n").split("\n")
        if self.y_offset > len(self._lines) - 1:
            self.goto_bottom()

    def set_y_offset(self, offset: int) -> None:
        self.y_offset = min(max(offset, 0), self.max_y_offset)

    def goto_top(self) -> None:
        self.set_y_offset(0)

    def goto_bottom(self) -> None:
        self.set_y_offset(self.max_y_offset)

    def total_line_count(self) -> int:
        return len(self._lines)

    def scroll_up(self, lines: int) -> None:
        if self.at_top or lines == 0 or not self._lines:
            return
        self.set_y_offset(self.y_offset - lines)

    def scroll_down(self, lines: int) -> None:
        if self.at_bottom or lines == 0 or not self._lines:
            return
        self.set_y_offset(self.y_offset + lines)

    def visible_lines(self) -> List[str]:
        if not self._lines:
            return []
        top = max(0, self.y_offset)
        bottom = max(top, min(self.y_offset + self.height, len(self._lines)))
        return self._lines[top:bottom]

    def view(self) -> str:
        """Render the visible lines padded to the viewport's width and height."""
        lines = self.visible_lines()
        if self.height > len(lines):
            lines = lines + [""] * (self.height - len(lines))
        return "\n".join(line + " " * max(self.width - display_width(line), 0) for line in lines)

    def handle_key(self, key: str) -> bool:
        """Scroll for a navigation key; return whether the offset changed."""
        action = self._keys.get(key)
        if action is None:
            return False
        before = self.y_offset
        action()
        return self.y_offset != before