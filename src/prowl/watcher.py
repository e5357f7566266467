"""Route watcher — rebuilds the route table when routing inputs change.

Monitors the pages directory, explicit route config files, and prowl's own
config file. Each debounced batch of relevant changes triggers at most one
rebuild:

- Page or layout added/removed/renamed -> re-derive routes
- Route config file changed -> reload it
- prowl.yaml / prowl.toml changed -> reload config, then re-derive
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from watchfiles import Change, watch

from prowl._errors import ProwlError
from prowl.config_loader import CONFIG_FILE_NAMES, load_config
from prowl.observability.events import RouteLoadFailed, RoutesChanged, now_ns
from prowl.routes.node import count_routes
from prowl.routes.table import load_routes

if TYPE_CHECKING:
    from prowl.config import ProwlConfig
    from prowl.observability.log import EventLog
    from prowl.routes.node import RouteNode

ChangeCategory: TypeAlias = Literal["pages", "routes_config", "config"]


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A file change relevant to routing.

    Attributes:
        path: Absolute path to the changed file.
        kind: Type of filesystem change.
        category: Which routing input changed.

    """

    path: Path
    kind: Literal["created", "modified", "deleted"]
    category: ChangeCategory


# Mapping from watchfiles Change enum to our kind literals.
_CHANGE_KIND_MAP: dict[Change, Literal["created", "modified", "deleted"]] = {
    Change.added: "created",
    Change.modified: "modified",
    Change.deleted: "deleted",
}


def categorize_change(path: Path, config: ProwlConfig) -> ChangeCategory | None:
    """Determine which routing input a changed file belongs to.

    Returns None if the file doesn't affect the route table.

    """
    if path.parent == config.root:
        if path.name in CONFIG_FILE_NAMES:
            return "config"
        if path.name in config.route_config_files:
            return "routes_config"

    # The pages directory may live outside the root (``pages_dir: ../pages``)
    if path.is_relative_to(config.pages_path):
        return "pages"
    return None


def watch_targets(config: ProwlConfig) -> tuple[Path, ...]:
    """Directories to watch: the root, plus the pages directory when outside it."""
    pages = config.pages_path
    if pages.is_dir() and not pages.is_relative_to(config.root):
        return (config.root, pages)
    return (config.root,)


def collect_events(
    raw_changes: Iterable[tuple[Change, str]],
    config: ProwlConfig,
) -> list[ChangeEvent]:
    """Convert a raw watchfiles batch into routing change events."""
    events: list[ChangeEvent] = []
    for change_type, path_str in raw_changes:
        path = Path(path_str)
        category = categorize_change(path, config)
        if category is None:
            continue
        kind = _CHANGE_KIND_MAP.get(change_type, "modified")
        events.append(ChangeEvent(path=path, kind=kind, category=category))
    return events


def _route_paths(routes: Iterable[RouteNode]) -> set[str]:
    return {
        node.path
        for route in routes
        for node in route.walk()
        if node.path is not None
    }


class RouteWatcher:
    """Keeps a route table current while routing inputs change.

    Uses watchfiles for filesystem monitoring. ``run()`` blocks the calling
    thread; pass a ``threading.Event`` to stop it from elsewhere.

    Args:
        config: Initial project configuration.
        overrides: Values that take precedence over the config file when
            it is reloaded (usually the CLI flags).
        log: Event log receiving load, change, and failure events.
        on_update: Called with the new route table after each successful
            rebuild.

    """

    def __init__(
        self,
        config: ProwlConfig,
        *,
        overrides: dict[str, object] | None = None,
        log: EventLog | None = None,
        on_update: Callable[[list[RouteNode]], None] | None = None,
    ) -> None:
        self._config = config
        self._overrides = dict(overrides or {})
        self._log = log
        self._on_update = on_update
        self._routes: list[RouteNode] = []

    @property
    def config(self) -> ProwlConfig:
        return self._config

    @property
    def routes(self) -> list[RouteNode]:
        """The last successfully built route table."""
        return self._routes

    def load(self) -> list[RouteNode]:
        """Build the initial route table. Errors propagate to the caller."""
        self._routes = load_routes(self._config, log=self._log)
        return self._routes

    def handle(self, events: list[ChangeEvent]) -> bool:
        """Rebuild once for a batch of change events.

        A prowl error during the rebuild is reported on stderr and recorded;
        the previous table stays current so watching can continue.

        Returns:
            True if the route table was rebuilt.

        """
        if not events:
            return False

        trigger = str(events[0].path)
        if any(event.category == "config" for event in events):
            try:
                self._config = load_config(self._config.root, **self._overrides)
            except ProwlError as exc:
                self._report(exc)
                if self._log is not None:
                    self._log.append(RouteLoadFailed(
                        error_type=type(exc).__name__,
                        message=str(exc),
                        trigger_path=trigger,
                        timestamp_ns=now_ns(),
                    ))
                return False

        try:
            # load_routes records its own failure event
            routes = load_routes(self._config, log=self._log, trigger_path=trigger)
        except ProwlError as exc:
            self._report(exc)
            return False

        before = _route_paths(self._routes)
        after = _route_paths(routes)
        self._routes = routes

        if self._log is not None:
            self._log.append(RoutesChanged(
                trigger_path=trigger,
                route_count=count_routes(routes),
                added=tuple(sorted(after - before)),
                removed=tuple(sorted(before - after)),
                timestamp_ns=now_ns(),
            ))
        if self._on_update is not None:
            self._on_update(routes)
        return True

    def run(self, stop_event: threading.Event | None = None) -> None:
        """Watch routing inputs until *stop_event* is set.

        When a config reload moves the pages directory, watching restarts
        on the new set of directories.
        """
        while True:
            targets = watch_targets(self._config)
            for raw_changes in watch(
                *targets,
                stop_event=stop_event,
                debounce=300,
                step=100,
            ):
                self.handle(collect_events(raw_changes, self._config))
                if watch_targets(self._config) != targets:
                    break
            else:
                return

    def _report(self, exc: ProwlError) -> None:
        print(f"  Route error: {exc}", file=sys.stderr)
