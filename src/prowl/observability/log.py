"""Event log — per-type tallies of route events.

The watcher records from its own thread while ``watch()`` reads the
summary from the main thread, so every method takes the lock.
"""

import threading

from prowl.observability.events import RouteEvent


class EventLog:
    """Keeps the most recent event of each type and a running count.

    Counts never decay: a long watch session reports every rebuild and
    failure it saw, not just the last few.
    """

    __slots__ = ("_counts", "_latest", "_lock")

    def __init__(self) -> None:
        self._latest: dict[type, RouteEvent] = {}
        self._counts: dict[type, int] = {}
        self._lock = threading.Lock()

    def append(self, event: RouteEvent) -> None:
        with self._lock:
            kind = type(event)
            self._latest[kind] = event
            self._counts[kind] = self._counts.get(kind, 0) + 1

    def latest(self, event_type: type) -> RouteEvent | None:
        """Return the newest event of *event_type*, or None if none was recorded."""
        with self._lock:
            return self._latest.get(event_type)

    def count(self, event_type: type) -> int:
        with self._lock:
            return self._counts.get(event_type, 0)
