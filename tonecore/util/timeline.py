"""A time-ordered collection of events with binary-search lookups."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from operator import attrgetter
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Timeline(Generic[T]):
    """Events kept in ascending time order.

    Each event's time is read with ``key``, by default its ``time`` attribute.
    Events with equal times keep their insertion order.
    """

    def __init__(self, key: Callable[[T], float] = attrgetter("time")) -> None:
        self._key = key
        self._events: list[T] = []

    def add(self, event: T) -> None:
        """Insert an event after any events at the same or earlier time."""
        pos = bisect_right(self._events, self._key(event), key=self._key)
        self._events.insert(pos, event)

    def get(self, time: float) -> Optional[T]:
        """The last event at or before ``time``."""
        pos = bisect_right(self._events, time, key=self._key)
        return self._events[pos - 1] if pos > 0 else None

    def get_after(self, time: float) -> Optional[T]:
        """The first event strictly after ``time``."""
        pos = bisect_right(self._events, time, key=self._key)
        return self._events[pos] if pos < len(self._events) else None

    def get_before(self, time: float) -> Optional[T]:
        """The last event strictly before ``time``."""
        pos = bisect_left(self._events, time, key=self._key)
        return self._events[pos - 1] if pos > 0 else None

    def cancel_from(self, time: float) -> None:
        """Remove every event at or after ``time``."""
        pos = bisect_left(self._events, time, key=self._key)
        del self._events[pos:]

    def clear(self) -> None:
        """Remove all events."""
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[T]:
        return iter(self._events)