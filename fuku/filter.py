"""Thread-safe per-service log visibility settings."""

from __future__ import annotations

import threading
from typing import Dict, Iterable


class LogFilter:
    """Tracks which services have their logs shown."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._enabled: Dict[str, bool] = {}

    def set(self, service: str, enabled: bool) -> None:
        with self._lock:
            self._enabled[service] = enabled

    def is_enabled(self, service: str) -> bool:
        with self._lock:
            return self._enabled.get(service, False)

    def all(self) -> Dict[str, bool]:
        """Return a copy of every setting."""
        with self._lock:
            return dict(self._enabled)

    def toggle_all(self, services: Iterable[str]) -> None:
        """Disable all given services if all are enabled, otherwise enable all."""
        names = list(services)
        with self._lock:
            all_selected = all(self._enabled.get(name, False) for name in names)
            for name in names:
                self._enabled[name] = not all_selected