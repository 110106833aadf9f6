import pytest

from fuku.highlight import Highlighter, highlight_log_level
from fuku.styles import (
    LOG_LEVEL_ERROR_STYLE,
    LOG_LEVEL_WARN_STYLE,
    UUID_STYLE,
    strip_ansi,
)

UUID_A = "550e8400-e29b-41d4-a716-446655440000"
UUID_B = "123e4567-e89b-12d3-a456-426614174000"


@pytest.mark.parametrize(
    "text",
    [
        "error occurred",
        "ERROR occurred",
        "fatal error",
        "err: connection failed",
        "warning: deprecated",
        "warn: check this",
        "info message",
        "inf: starting",
        "debug enabled",
        "[ERROR] failed",
        "ERROR failed",
        "[WARN] deprecated",
        "[INFO] started",
        "[DEBUG] trace",
        "level=error msg=failed",
        "level=fatal msg=crash",
        "level=warning msg=deprecated",
        "level=warn msg=check",
        "level=info msg=started",
        "level=debug msg=trace",
        "Error in processing",
        "Warning: deprecated API",
        "Info: service started",
        f"request-id: {UUID_A}",
        f"id1: {UUID_A} id2: {UUID_B}",
        "plain log message",
        "plain message without uuid",
        f"ERROR request {UUID_A} failed",
        "ERROR: info level=debug msg=test",
    ],
)
def test_highlight_not_shorter(text):
    result = highlight_log_level(text)
    assert result != ""
    assert len(result) >= len(text)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("error occurred", "ERROR"),
        ("warning message", "WARNING"),
        ("info message", "INFO"),
        ("debug trace", "DEBUG"),
        ("Error occurred", "ERROR"),
        ("level=error msg=test", "level=ERROR"),
    ],
)
def test_highlight_uppercases(text, expected):
    assert expected in highlight_log_level(text)


@pytest.mark.parametrize(
    "text",
    ["plain log message", "message without identifiers", "123 456 789", "550e8400-e29b"],
)
def test_highlight_no_change(text):
    result = Highlighter().highlight(text)
    assert strip_ansi(result) == strip_ansi(text)
    assert result == text


@pytest.mark.parametrize(
    "text,expected",
    [
        ("error occurred", "ERROR"),
        ("ERROR occurred", "ERROR"),
        ("Error occurred", "ERROR"),
        ("eRRoR occurred", "ERROR"),
        ("warning message", "WARNING"),
        ("WARNING message", "WARNING"),
        ("WaRnInG message", "WARNING"),
    ],
)
def test_case_insensitive(text, expected):
    assert expected in highlight_log_level(text)


@pytest.mark.parametrize(
    "text,plain",
    [
        ("err: connection failed", "ERR: connection failed"),
        ("fatal error", "FATAL ERROR"),
        ("[WARN] deprecated", "[WARN] deprecated"),
        ("Warning: deprecated API", "WARNING: deprecated API"),
        ("inf: starting", "INF: starting"),
        ("ERROR: info level=debug msg=test", "ERROR: INFO level=DEBUG msg=test"),
        ("information", "INFOrmation"),
    ],
)
def test_plain_text_after_highlight(text, plain):
    assert strip_ansi(highlight_log_level(text)) == plain


def test_bracketed_level_is_styled_whole():
    assert highlight_log_level("[ERROR] failed") == LOG_LEVEL_ERROR_STYLE.render("[ERROR]") + " failed"


def test_level_assignment_is_styled():
    result = highlight_log_level("level=warn msg=check")
    assert result == LOG_LEVEL_WARN_STYLE.render("level=WARN") + " msg=check"


def test_uuids_are_styled():
    result = highlight_log_level(f"id1: {UUID_A} id2: {UUID_B}")
    assert UUID_STYLE.render(UUID_A) in result
    assert UUID_STYLE.render(UUID_B) in result
    assert strip_ansi(result) == f"id1: {UUID_A} id2: {UUID_B}"


def test_level_and_uuid_together():
    result = highlight_log_level(f"ERROR request {UUID_A} failed")
    assert result == (
        LOG_LEVEL_ERROR_STYLE.render("ERROR") + " request " + UUID_STYLE.render(UUID_A) + " failed"
    )