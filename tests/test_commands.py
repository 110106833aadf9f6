import pytest

from fuku.bus import SubscriptionClosed
from fuku.commands import (
    Command,
    CommandBus,
    CommandType,
    NoOpCommandBus,
    RestartServiceData,
    StopServiceData,
)


def test_publish_and_subscribe():
    bus = CommandBus(10)
    sub = bus.subscribe()
    bus.publish(Command(type=CommandType.STOP_SERVICE, data=StopServiceData(service="test-service")))
    received = sub.get(timeout=0.1)
    bus.close()
    assert received.type == CommandType.STOP_SERVICE
    assert isinstance(received.data, StopServiceData)
    assert received.data.service == "test-service"


def test_multiple_subscribers():
    bus = CommandBus(10)
    first = bus.subscribe()
    second = bus.subscribe()
    bus.publish(Command(type=CommandType.STOP_ALL))
    assert first.get(timeout=0.1).type == CommandType.STOP_ALL
    assert second.get(timeout=0.1).type == CommandType.STOP_ALL
    bus.close()


def test_unsubscribe_on_cancel():
    bus = CommandBus(10)
    sub = bus.subscribe()
    sub.cancel()
    with pytest.raises(SubscriptionClosed):
        sub.get(timeout=0.1)
    bus.close()


def test_no_commands_after_cancel():
    bus = CommandBus(10)
    sub = bus.subscribe()
    bus.publish(Command(type=CommandType.STOP_SERVICE, data=StopServiceData(service="test1")))
    assert sub.get(timeout=0.1).type == CommandType.STOP_SERVICE
    sub.cancel()
    bus.publish(Command(type=CommandType.STOP_SERVICE, data=StopServiceData(service="test2")))
    with pytest.raises(SubscriptionClosed):
        sub.get(timeout=0.1)
    bus.close()


def test_close_closes_all_subscribers():
    bus = CommandBus(10)
    first = bus.subscribe()
    second = bus.subscribe()
    bus.close()
    with pytest.raises(SubscriptionClosed):
        first.get(timeout=0.1)
    with pytest.raises(SubscriptionClosed):
        second.get(timeout=0.1)


def test_publish_after_close_is_ignored():
    bus = CommandBus(10)
    sub = bus.subscribe()
    bus.close()
    bus.publish(Command(type=CommandType.STOP_ALL))
    assert list(sub) == []


def test_buffer_full_does_not_block():
    bus = CommandBus(1)
    sub = bus.subscribe()
    for _ in range(10):
        bus.publish(Command(type=CommandType.STOP_SERVICE))
    bus.close()
    assert len(list(sub)) == 1


def test_restart_data_carries_service():
    bus = CommandBus(10)
    sub = bus.subscribe()
    bus.publish(Command(type=CommandType.RESTART_SERVICE, data=RestartServiceData(service="api")))
    received = sub.get(timeout=0.1)
    bus.close()
    assert received.data == RestartServiceData(service="api")


def test_noop_bus_subscription_closes_on_cancel():
    bus = NoOpCommandBus()
    sub = bus.subscribe()
    with pytest.raises(TimeoutError):
        sub.get(timeout=0.01)
    sub.cancel()
    with pytest.raises(SubscriptionClosed):
        sub.get(timeout=0.1)


def test_noop_bus_publish_delivers_nothing():
    bus = NoOpCommandBus()
    sub = bus.subscribe()
    bus.publish(Command(type=CommandType.STOP_SERVICE))
    with pytest.raises(TimeoutError):
        sub.get(timeout=0.01)
    bus.close()
    sub.cancel()