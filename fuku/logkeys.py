"""Key bindings of the logs view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from fuku.keys import Binding, KeyMap, default_key_map


@dataclass(frozen=True)
class LogsKeyMap(KeyMap):
    autoscroll: Binding
    clear_logs: Binding

    def short_help(self) -> List[Binding]:
        return [
            self.up,
            self.down,
            self.autoscroll,
            self.clear_logs,
            self.toggle_logs,
            self.quit,
        ]

    def full_help(self) -> List[List[Binding]]:
        return [self.short_help()]


def default_logs_key_map() -> LogsKeyMap:
    base = default_key_map()
    return LogsKeyMap(
        up=base.up.with_help("↑/k", "scroll up"),
        down=base.down.with_help("↓/j", "scroll down"),
        toggle_logs=base.toggle_logs.with_help("tab", "services view"),
        quit=base.quit,
        force_quit=base.force_quit,
        autoscroll=Binding(("a",), "a", "autoscroll"),
        clear_logs=Binding(("ctrl+r",), "ctrl+r", "clear logs"),
    )