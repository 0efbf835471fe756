"""Shared type aliases used across wren modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Author-supplied property bag
Props: TypeAlias = Mapping[str, Any]

# Component render function; signature varies per component
RenderFunc: TypeAlias = Callable[..., Any]

# Style producer: instance props in, CSS text out
StyleFunc: TypeAlias = Callable[..., str]

# Client-side behavior callback
ScriptFunc: TypeAlias = Callable[[], Any]
