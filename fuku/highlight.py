"""Colouring of log level keywords and UUIDs in log messages."""

from __future__ import annotations

import re
from typing import Callable, Dict

from fuku.styles import (
    LOG_LEVEL_DEBUG_STYLE,
    LOG_LEVEL_ERROR_STYLE,
    LOG_LEVEL_INFO_STYLE,
    LOG_LEVEL_WARN_STYLE,
    UUID_STYLE,
)

_LEVELS = "ERROR|FATAL|ERR|WARNING|WARN|INFO|INF|DEBUG"
_LEVEL_PATTERN = (
    rf"(\b(?:{_LEVELS})\b|\[?(?:{_LEVELS})\]?|level=(?:error|fatal|warning|warn|info|debug))"
)
_UUID_PATTERN = (
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_KEYWORDS = ("error", "err", "warn", "info", "inf", "debug", "fatal", "level=")
_LEVEL_PREFIX = "level="


def _contains_level_keyword(text: str) -> bool:
    lower = text.lower()
    return any(keyword in lower for keyword in _KEYWORDS)


def _normalize_level(match: str) -> str:
    lower = match.lower()
    if lower.startswith(_LEVEL_PREFIX):
        return lower[len(_LEVEL_PREFIX):]
    if lower.startswith("["):
        lower = lower[1:]
    if lower.endswith("]"):
        lower = lower[:-1]
    return lower


class Highlighter:
    """Upper-cases and colours level keywords, and colours UUIDs."""

    def __init__(self) -> None:
        self._level_re = re.compile(_LEVEL_PATTERN, re.IGNORECASE | re.ASCII)
        self._uuid_re = re.compile(_UUID_PATTERN)
        self._styles: Dict[str, Callable[[str], str]] = {
            "error": LOG_LEVEL_ERROR_STYLE.render,
            "err": LOG_LEVEL_ERROR_STYLE.render,
            "fatal": LOG_LEVEL_ERROR_STYLE.render,
            "warning": LOG_LEVEL_WARN_STYLE.render,
            "warn": LOG_LEVEL_WARN_STYLE.render,
            "info": LOG_LEVEL_INFO_STYLE.render,
            "inf": LOG_LEVEL_INFO_STYLE.render,
            "debug": LOG_LEVEL_DEBUG_STYLE.render,
        }

    def _style_level(self, match: "re.Match[str]") -> str:
        text = match.group(0)
        style = self._styles.get(_normalize_level(text))
        if style is None:
            return text
        lower = text.lower()
        if lower.startswith(_LEVEL_PREFIX):
            upper = _LEVEL_PREFIX + lower[len(_LEVEL_PREFIX):].upper()
        else:
            upper = text.upper()
        return style(upper)

    def highlight(self, message: str) -> str:
        has_level = _contains_level_keyword(message)
        if not has_level and "-" not in message:
            return message

        result = message
        if has_level:
            result = self._level_re.sub(self._style_level, result)
        if "-" in result:
            result = self._uuid_re.sub(lambda m: UUID_STYLE.render(m.group(0)), result)
        return result


_DEFAULT_HIGHLIGHTER = Highlighter()


def highlight_log_level(message: str) -> str:
    """Highlight a log message with the shared highlighter."""
    return _DEFAULT_HIGHLIGHTER.highlight(message)