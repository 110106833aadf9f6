"""Runtime commands and the bus that carries them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fuku.bus import Bus, Subscription

DEFAULT_COMMAND_BUFFER_SIZE = 10


class CommandType(str, Enum):
    STOP_SERVICE = "stop_service"
    RESTART_SERVICE = "restart_service"
    STOP_ALL = "stop_all"


@dataclass(frozen=True)
class Command:
    type: CommandType
    data: Any = None


@dataclass(frozen=True)
class StopServiceData:
    service: str


@dataclass(frozen=True)
class RestartServiceData:
    service: str


class CommandBus:
    """Publishes commands to every subscriber, dropping them for full buffers."""

    def __init__(self, buffer_size: int = DEFAULT_COMMAND_BUFFER_SIZE) -> None:
        self._bus: Bus[Command] = Bus(buffer_size)

    def subscribe(self) -> Subscription[Command]:
        return self._bus.subscribe()

    def publish(self, command: Command) -> None:
        self._bus.publish(command)

    def close(self) -> None:
        self._bus.close()


class NoOpCommandBus:
    """Command bus that delivers nothing; subscriptions stay open until cancelled."""

    def __init__(self) -> None:
        self.dropped = 0
        self.closed = False

    def subscribe(self) -> Subscription[Command]:
        return Bus(0).subscribe()

    def publish(self, command: Command) -> None:
        """Discard the command, counting it as dropped."""
        self.dropped += 1

    def close(self) -> None:
        """Mark the bus closed; subscriptions are left to their owners."""
        self.closed = True