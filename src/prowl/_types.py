"""Shared type definitions for prowl."""

from collections.abc import Mapping
from typing import Any, Literal, TypeAlias

# Mode of operation
ProwlMode: TypeAlias = Literal["routes", "watch"]

# Route URL pattern (e.g., "/users/:id", "/posts/:slug?")
RoutePath: TypeAlias = str

# "./"-prefixed, forward-slash reference to a component source file
ComponentRef: TypeAlias = str

# Per-page options keyed by route path, e.g. {"/admin": {"Route": "./Auth.js"}}
PageOptions: TypeAlias = Mapping[str, Mapping[str, Any]]
