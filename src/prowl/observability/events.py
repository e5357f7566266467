"""Event model for route loading.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal, TypeAlias


@dataclass(frozen=True, slots=True)
class RoutesLoaded:
    """A route table was produced.

    Attributes:
        source: Which producer built the table.
        path: Pages directory or route config file that was read.
        route_count: Number of route nodes, nested children included.
        duration_ms: Time spent producing and patching the table.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    source: Literal["pages", "config_file"]
    path: str
    route_count: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RoutesChanged:
    """A watched change caused the route table to be rebuilt.

    Attributes:
        trigger_path: File whose change triggered the rebuild.
        route_count: Number of route nodes after the rebuild.
        added: Route paths present after the rebuild but not before.
        removed: Route paths present before the rebuild but not after.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    trigger_path: str
    route_count: int
    added: tuple[str, ...]
    removed: tuple[str, ...]
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RouteLoadFailed:
    """Building the route table raised a prowl error.

    Attributes:
        error_type: Exception class name (e.g. ``RouteConflictError``).
        message: Exception message.
        trigger_path: File whose change triggered the failed rebuild, or an
            empty string for the initial load.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    error_type: str
    message: str
    trigger_path: str
    timestamp_ns: int


RouteEvent: TypeAlias = RoutesLoaded | RoutesChanged | RouteLoadFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
