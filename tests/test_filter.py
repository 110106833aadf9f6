import threading

import pytest

from fuku.filter import LogFilter


@pytest.mark.parametrize(
    "setup, service, expected",
    [
        ([], "api", False),
        ([("api", True)], "api", True),
        ([("api", False)], "api", False),
        ([("web", True)], "api", False),
    ],
)
def test_is_enabled(setup, service, expected):
    log_filter = LogFilter()
    for name, enabled in setup:
        log_filter.set(name, enabled)
    assert log_filter.is_enabled(service) is expected


@pytest.mark.parametrize(
    "service, enabled",
    [("api", True), ("web", False), ("db", True)],
)
def test_set(service, enabled):
    log_filter = LogFilter()
    log_filter.set(service, enabled)
    assert log_filter.is_enabled(service) is enabled


@pytest.mark.parametrize(
    "enabled_before, services, expected",
    [
        ([], ["api", "web", "db"], {"api": True, "web": True, "db": True}),
        (["api", "web", "db"], ["api", "web", "db"], {"api": False, "web": False, "db": False}),
        (["api"], ["api", "web", "db"], {"api": True, "web": True, "db": True}),
        ([], [], {}),
    ],
)
def test_toggle_all(enabled_before, services, expected):
    log_filter = LogFilter()
    for name in enabled_before:
        log_filter.set(name, True)
    log_filter.toggle_all(services)
    assert {name: log_filter.is_enabled(name) for name in expected} == expected
    if not services:
        assert log_filter.all() == {}


@pytest.mark.parametrize(
    "settings, expected",
    [
        ([], {}),
        (
            [("api", True), ("web", False), ("db", True)],
            {"api": True, "web": False, "db": True},
        ),
    ],
)
def test_all(settings, expected):
    log_filter = LogFilter()
    for name, enabled in settings:
        log_filter.set(name, enabled)
    assert log_filter.all() == expected


def test_all_returns_copy():
    log_filter = LogFilter()
    log_filter.set("api", True)
    result = log_filter.all()
    result["api"] = False
    result["new"] = True
    assert log_filter.is_enabled("api") is True
    assert log_filter.is_enabled("new") is False


def test_thread_safety():
    log_filter = LogFilter()

    def work():
        for _ in range(100):
            log_filter.set("service", True)
            log_filter.is_enabled("service")
            log_filter.all()

    threads = [threading.Thread(target=work) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert log_filter.all() == {"service": True}