"""Forwarding of log-line events from the event bus to the UI."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Union

from fuku.bus import Subscription
from fuku.events import Event, EventBus, EventType, LogLineData, NoOpEventBus


@dataclass(frozen=True)
class LogMsg:
    """A log line delivered to the UI."""

    timestamp: Optional[datetime]
    service: str
    tier: str
    stream: str
    message: str


class Sender:
    """Holds the function that delivers messages to the UI; thread-safe."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._send: Optional[Callable[[Any], None]] = None

    def set(self, send: Optional[Callable[[Any], None]]) -> None:
        with self._lock:
            self._send = send

    def send(self, msg: Any) -> None:
        """Deliver a message if a send function has been set."""
        with self._lock:
            send = self._send
        if send is not None:
            send(msg)


class Subscriber:
    """Listens on an event bus and forwards log lines through a sender."""

    def __init__(self, event_bus: Union[EventBus, NoOpEventBus], sender: Sender) -> None:
        self.event_bus = event_bus
        self.sender = sender

    def start(self) -> Subscription[Event]:
        """Subscribe and forward events on a background thread.

        Cancelling the returned subscription stops the forwarding.
        """
        subscription = self.event_bus.subscribe()
        worker = threading.Thread(
            target=self.process_events,
            args=(subscription,),
            name="log-subscriber",
            daemon=True,
        )
        worker.start()
        return subscription

    def process_events(self, events: Iterable[Event]) -> None:
        """Forward every log-line event with valid data; ignore the rest."""
        for event in events:
            if event.type is not EventType.LOG_LINE:
                continue
            data = event.data
            if not isinstance(data, LogLineData):
                continue
            self.sender.send(
                LogMsg(
                    timestamp=event.timestamp,
                    service=data.service,
                    tier=data.tier,
                    stream=data.stream,
                    message=data.message,
                )
            )