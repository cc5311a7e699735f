"""Heap-based scheduling of calendar events.

The EventScheduler keeps its events in a binary min-heap so that the earliest
event is always available in constant time while insertion stays logarithmic.
Key features:

- O(log n) insertion, O(1) access to the next event
- Non-destructive sorted listing: ``list_all_sorted`` drains a disposable copy
  of the heap and never touches the held events
- Strict validation of user-entered text before anything is inserted
"""

from __future__ import annotations

import itertools
from heapq import heappop, heappush, nsmallest
from typing import TYPE_CHECKING

import pandas as pd

from agenda.events import Event, timestamp_key

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime

__all__ = ["EventScheduler"]

_COLUMNS = ["title", "timestamp", "description"]


class EventScheduler:
    """A time-ordered collection of events.

    This is a heap queue of ``(timestamp, sequence, event)`` entries. Entries are
    ordered on the timestamp only; the insertion sequence number keeps the entry
    order total so that events themselves are never compared. Events with equal
    timestamps therefore come out in insertion order, but callers should not
    rely on that.

    The scheduler is not thread safe. Hosts sharing one between threads must
    serialize every call.

    """

    def __init__(self):
        """Initialize an empty scheduler."""
        self._events: list[tuple[datetime, int, Event]] = []
        self._sequence = itertools.count()

    def submit(
        self, title: str, timestamp_text: str, description: str | None = ""
    ) -> Event:
        """Create an event from raw text and schedule it.

        Args:
            title: the event title, must not be blank
            timestamp_text: the timestamp as ``YYYY-MM-DD HH:MM``
            description: optional free text

        Returns:
            Event: the scheduled event

        Raises:
            ValidationError: if the title or timestamp is blank, or the timestamp
                still holds its placeholder
            ParseError: if the timestamp text is malformed

        Notes:
            the scheduler is unchanged if an exception is raised

        """
        return self.add_event(Event.from_text(title, timestamp_text, description))

    def add_event(self, event: Event) -> Event:
        """Add an already constructed event.

        Args:
            event (Event): The event to be added

        Returns:
            Event: the added event

        """
        if not isinstance(event, Event):
            raise TypeError(f"expected an Event, got {type(event).__name__}")
        heappush(self._events, (timestamp_key(event), next(self._sequence), event))
        return event

    def peek_next(self) -> Event | None:
        """Return the earliest event without removing it, or None if empty."""
        if not self._events:
            return None
        return self._events[0][2]

    def peek_ahead(self, n: int = 1) -> list[Event]:
        """Look at the first n events in chronological order.

        Args:
            n (int): The number of events to look ahead

        Returns:
            list[Event]

        Notes:
            the returned list is shorter than n if fewer events are scheduled

        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return [entry[2] for entry in nsmallest(n, self._events)]

    def list_all_sorted(self) -> list[Event]:
        """Return a snapshot of all events in chronological order.

        The heap is copied and the copy is drained, so the held events are never
        removed or reordered.
        """
        working = list(self._events)
        return [heappop(working)[2] for _ in range(len(working))]

    def size(self) -> int:
        """Return the number of scheduled events."""
        return len(self._events)

    def is_empty(self) -> bool:
        """Return whether no events are scheduled."""
        return not self._events

    def to_dataframe(self) -> pd.DataFrame:
        """Return the sorted snapshot as a DataFrame."""
        events = self.list_all_sorted()
        if not events:
            # Empty DataFrame with correct columns
            return pd.DataFrame(columns=_COLUMNS)
        return pd.DataFrame([event.to_dict() for event in events], columns=_COLUMNS)

    def check_heap(self) -> None:
        """Assert that the backing array satisfies the min-heap property."""
        events = self._events
        for child in range(1, len(events)):
            parent = (child - 1) // 2
            if events[child] < events[parent]:
                raise AssertionError(f"heap property violated at index {child}")

    def __len__(self) -> int:  # noqa
        return len(self._events)

    def __contains__(self, event: Event) -> bool:  # noqa
        return any(entry[2] == event for entry in self._events)

    def __iter__(self) -> Iterator[Event]:  # noqa
        return iter(self.list_all_sorted())

    def __repr__(self) -> str:
        """Return a string representation of the scheduler."""
        events_str = ", ".join(str(e) for e in self.list_all_sorted())
        return f"EventScheduler([{events_str}])"
