"""Key bindings shared by all views."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class Binding:
    """A set of keys with the help text shown for them."""

    keys: Tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""

    def matches(self, key: str) -> bool:
        return key in self.keys

    def with_help(self, key: str, desc: str) -> "Binding":
        """Return a copy of this binding with different help text."""
        return replace(self, help_key=key, help_desc=desc)


@dataclass(frozen=True)
class KeyMap:
    up: Binding
    down: Binding
    toggle_logs: Binding
    quit: Binding
    force_quit: Binding


def default_key_map() -> KeyMap:
    return KeyMap(
        up=Binding(("up", "k"), "↑/k", "up"),
        down=Binding(("down", "j"), "↓/j", "down"),
        toggle_logs=Binding(("tab",), "tab", "toggle view"),
        quit=Binding(("q",), "q", "quit"),
        force_quit=Binding(("ctrl+c",), "ctrl+c", "force quit"),
    )