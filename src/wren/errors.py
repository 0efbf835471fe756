"""Wren exception hierarchy.

Shared across the builder, resolver, loader, and site build so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when site configuration is invalid.

    Typically raised before any page is rendered: unknown scope policy,
    missing pages directory, or two pages claiming the same route.
    """


class InvalidElement(WrenError):  # noqa: N818
    """A reference or child that cannot be turned into a node.

    Raised by ``construct()`` when the reference is neither a tag name
    nor callable, and by the resolver when a child value has no text
    or node rendering.
    """


class ReservedPropError(WrenError):
    """An author-supplied prop uses a key reserved by the engine."""


@dataclass(frozen=True, slots=True)
class StyleResolutionError(WrenError):
    """A component's style function failed or returned a non-string.

    Always raised ``from`` the underlying exception (when there is one)
    so the traceback still points into the style function.
    """

    component: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"Style for {self.component!r} could not be resolved: {self.reason}"
        return f"Style for {self.component!r} could not be resolved"


@dataclass(frozen=True, slots=True)
class PageLoadError(WrenError):
    """A page module could not be loaded or does not follow the page contract."""

    path: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.path}: {self.detail}"
        return self.path


class HydrationError(WrenError):
    """Hydration was attempted outside a browser runtime."""
