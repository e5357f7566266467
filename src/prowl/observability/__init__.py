"""Route-loading observability.

Every route table build records a frozen event into an ``EventLog``:

- ``RoutesLoaded``: a table was produced (pages directory or config file)
- ``RoutesChanged``: the watcher rebuilt the table after a file change
- ``RouteLoadFailed``: a build raised a prowl error

Quick Start:
    >>> from prowl.observability import EventLog, RoutesLoaded
    >>> log = EventLog()
    >>> routes = load_routes(config, log=log)
    >>> log.latest(RoutesLoaded).route_count

"""

from prowl.observability.events import (
    RouteEvent,
    RouteLoadFailed,
    RoutesChanged,
    RoutesLoaded,
    now_ns,
)
from prowl.observability.log import EventLog

__all__ = [
    "EventLog",
    "RouteEvent",
    "RouteLoadFailed",
    "RoutesChanged",
    "RoutesLoaded",
    "now_ns",
]
