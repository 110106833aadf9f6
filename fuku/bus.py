"""Thread-safe publish/subscribe bus with bounded per-subscriber buffers."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Deque, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class SubscriptionClosed(Exception):
    """Raised when reading from a subscription that is closed and drained."""


class Subscription(Generic[T]):
    """A bounded queue of items delivered by a bus to one subscriber."""

    def __init__(
        self,
        capacity: int,
        on_cancel: Optional[Callable[["Subscription[T]"], None]] = None,
    ) -> None:
        self._capacity = max(capacity, 0)
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._on_cancel = on_cancel

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def get(self, timeout: Optional[float] = None) -> T:
        """Return the next item, waiting up to ``timeout`` seconds.

        Raises SubscriptionClosed once the subscription is closed and empty,
        and TimeoutError if nothing arrived in time.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._items or self._closed, timeout)
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            if self._closed:
                raise SubscriptionClosed("subscription is closed")
            raise TimeoutError("no item received before the timeout")

    def cancel(self) -> None:
        """Detach from the bus and close the subscription."""
        if self._on_cancel is not None:
            self._on_cancel(self)
        self._close()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.get()
            except SubscriptionClosed:
                return

    def __enter__(self) -> "Subscription[T]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()

    def _offer(self, item: T, block: bool) -> bool:
        with self._cond:
            if self._closed:
                return False
            if block:
                limit = max(self._capacity, 1)
                self._cond.wait_for(lambda: len(self._items) < limit or self._closed)
                if self._closed:
                    return False
            elif len(self._items) >= self._capacity:
                return False
            self._items.append(item)
            self._cond.notify_all()
            return True

    def _close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()


class Bus(Generic[T]):
    """Fan-out bus: every published item goes to every live subscription.

    Ordinary items are dropped for subscribers whose buffer is full;
    critical items wait until there is room.
    """

    def __init__(self, buffer_size: int) -> None:
        self._buffer_size = buffer_size
        self._subscribers: List[Subscription[T]] = []
        self._lock = threading.Lock()
        self._closed = False

    def subscribe(self) -> Subscription[T]:
        sub: Subscription[T] = Subscription(self._buffer_size, self._unsubscribe)
        with self._lock:
            if self._closed:
                sub._close()
                return sub
            self._subscribers.append(sub)
        return sub

    def publish(self, item: T, critical: bool = False) -> None:
        with self._lock:
            if self._closed:
                return
            targets = list(self._subscribers)
        for sub in targets:
            sub._offer(item, block=critical)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            subscribers, self._subscribers = self._subscribers, []
        for sub in subscribers:
            sub._close()

    def _unsubscribe(self, sub: Subscription[T]) -> None:
        with self._lock:
            try:
                self._subscribers.remove(sub)
            except ValueError:
                pass
        sub._close()