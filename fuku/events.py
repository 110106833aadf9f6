"""Runtime events and the bus that carries them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, List, Optional

from fuku.bus import Bus, Subscription

DEFAULT_EVENT_BUFFER_SIZE = 100


class EventType(str, Enum):
    PROFILE_RESOLVED = "profile_resolved"
    PHASE_CHANGED = "phase_changed"
    TIER_STARTING = "tier_starting"
    TIER_READY = "tier_ready"
    SERVICE_STARTING = "service_starting"
    SERVICE_READY = "service_ready"
    SERVICE_FAILED = "service_failed"
    SERVICE_STOPPED = "service_stopped"
    RETRY_SCHEDULED = "retry_scheduled"
    SIGNAL_CAUGHT = "signal_caught"
    LOG_LINE = "log_line"


class Phase(str, Enum):
    STARTUP = "startup"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


@dataclass(frozen=True)
class Event:
    type: EventType
    data: Any = None
    critical: bool = False
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class TierData:
    name: str
    services: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProfileResolvedData:
    profile: str
    tiers: List[TierData] = field(default_factory=list)


@dataclass(frozen=True)
class PhaseChangedData:
    phase: Phase


@dataclass(frozen=True)
class TierStartingData:
    name: str
    index: int
    total: int


@dataclass(frozen=True)
class TierReadyData:
    name: str


@dataclass(frozen=True)
class ServiceStartingData:
    service: str
    tier: str = ""
    attempt: int = 0
    pid: int = 0


@dataclass(frozen=True)
class ServiceReadyData:
    service: str
    tier: str = ""
    duration: timedelta = timedelta()


@dataclass(frozen=True)
class ServiceFailedData:
    service: str
    tier: str = ""
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class ServiceStoppedData:
    service: str
    tier: str = ""


@dataclass(frozen=True)
class RetryScheduledData:
    service: str
    attempt: int
    max_attempts: int


@dataclass(frozen=True)
class SignalCaughtData:
    signal: str


@dataclass(frozen=True)
class LogLineData:
    service: str
    tier: str = ""
    stream: str = ""
    message: str = ""


class EventBus:
    """Publishes events stamped with the time of publication.

    Critical events wait for room in every subscriber's buffer; others are
    dropped for subscribers that are full.
    """

    def __init__(self, buffer_size: int = DEFAULT_EVENT_BUFFER_SIZE) -> None:
        self._bus: Bus[Event] = Bus(buffer_size)

    def subscribe(self) -> Subscription[Event]:
        return self._bus.subscribe()

    def publish(self, event: Event) -> None:
        stamped = replace(event, timestamp=datetime.now())
        self._bus.publish(stamped, critical=event.critical)

    def close(self) -> None:
        self._bus.close()


class NoOpEventBus:
    """Event bus that delivers nothing; its subscriptions are closed at once."""

    def subscribe(self) -> Subscription[Event]:
        bus: Bus[Event] = Bus(0)
        sub = bus.subscribe()
        bus.close()
        return sub

    def publish(self, event: Event) -> None:
        return None

    def close(self) -> None:
        return None