"""Data models for page loading and rendering.

Immutable frozen dataclasses: the route properties handed to a page,
a discovered page source, and a fully rendered page ready to write.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wren.hydration.scripts import ScriptEntry
from wren.tree.resolved import ResolvedNode


@dataclass(frozen=True, slots=True)
class PageProps:
    """Route properties passed to every page component.

    Attributes:
        path: The page's public route (e.g. ``/blog/first-post``).
        generator: For multi-page modules, the suffix that produced this
            route (e.g. ``/first-post``); empty for single-page modules.
    """

    path: str
    generator: str = ""

    def as_props(self) -> dict[str, Any]:
        return {"path": self.path, "generator": self.generator}


@dataclass(frozen=True, slots=True)
class PageSource:
    """A page module discovered in the pages directory.

    Attributes:
        path: Filesystem path of the ``.py`` module.
        route: Base route computed from the path.
        module_name: Import name used when loading (and when the browser
            re-imports the module for hydration).
    """

    path: Path
    route: str
    module_name: str


@dataclass(frozen=True, slots=True)
class RenderedPage:
    """One output route, resolved and ready for serialization.

    Attributes:
        route: Final public route.
        tree: Resolved tree (``None`` if the page rendered nothing).
        styles: Aggregated CSS for the page.
        scripts: Behaviors collected in pre-order, for hydration.
        generator: Suffix for generated routes, empty otherwise.
        source: Where the page came from, if discovered on disk.
    """

    route: str
    tree: ResolvedNode | None
    styles: str = ""
    scripts: tuple[ScriptEntry, ...] = ()
    generator: str = ""
    source: PageSource | None = field(default=None, compare=False)

    @property
    def needs_hydration(self) -> bool:
        return bool(self.scripts)
