"""Switching between the services view and the logs view."""

from __future__ import annotations

from enum import Enum


class View(Enum):
    SERVICES = 0
    LOGS = 1

    def __str__(self) -> str:
        return self.name.lower()


class Navigator:
    """Holds the active view; starts on the services view."""

    def __init__(self) -> None:
        self._current = View.SERVICES

    @property
    def current_view(self) -> View:
        return self._current

    def switch_to(self, view: View) -> None:
        self._current = view

    def toggle(self) -> None:
        self._current = View.LOGS if self._current is View.SERVICES else View.SERVICES

    def is_services(self) -> bool:
        return self._current is View.SERVICES

    def is_logs(self) -> bool:
        return self._current is View.LOGS