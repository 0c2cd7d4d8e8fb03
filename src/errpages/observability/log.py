"""Event log: bounded store of build events.

Thread Safety:
    Appends and reads share a ``threading.Lock``.

"""

import threading
from collections import deque

from errpages.observability.events import BuildStackEvent


class EventLog:
    """Ring buffer of build events, oldest first.

    Args:
        max_events: Maximum number of events to retain; the oldest are
            dropped once the buffer is full.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[BuildStackEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: BuildStackEvent) -> None:
        with self._lock:
            self._events.append(event)

    def events(self, event_type: type | None = None) -> list[BuildStackEvent]:
        """Stored events in recording order, optionally of one type only."""
        with self._lock:
            snapshot = list(self._events)
        if event_type is None:
            return snapshot
        return [event for event in snapshot if isinstance(event, event_type)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
