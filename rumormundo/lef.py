"""A list of future events kept in order of their logical time."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


@dataclass
class Event:
    """Something that happens at a logical ``time``.

    ``kind`` tells events apart; ``data`` carries what the kind needs.
    """

    time: int
    kind: int
    data: Any = None


class EventList:
    """Future events, earliest first."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def __repr__(self) -> str:
        return f"EventList({self._events!r})"

    def add_first(self, event: Event) -> None:
        """Put ``event`` at the front, whatever its time."""
        self._events.insert(0, event)

    def add_ordered(self, event: Event) -> None:
        """Insert ``event`` by time.

        An event no later than the current front goes before it; otherwise
        it goes after every event whose time does not exceed its own.
        """
        events = self._events
        if not events or events[0].time >= event.time:
            events.insert(0, event)
            return
        position = next(
            (
                index
                for index, queued in islice(enumerate(events), 1, None)
                if queued.time > event.time
            ),
            len(events),
        )
        events.insert(position, event)

    def first(self) -> Event | None:
        """Return the front event without removing it, or None when empty."""
        return self._events[0] if self._events else None

    def pop_first(self) -> Event:
        """Remove and return the front event."""
        if not self._events:
            raise IndexError("pop from an empty event list")
        return self._events.pop(0)