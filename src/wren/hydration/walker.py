"""Client-side hydration walker.

Runs in the browser (PyScript / Pyodide). The page module is imported
again, its tree is rebuilt through the same loader and resolver used at
build time, and every captured behavior is invoked in depth-first
pre-order: a component's script runs before any of its descendants'
and before later siblings', so it may rely on the markup before it.

A script that raises is logged and skipped; traversal continues with
the next node.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from types import ModuleType
from typing import TYPE_CHECKING, Any

from wren.errors import HydrationError
from wren.tree.resolved import ResolvedNode, VirtualNode, walk
from wren.tree.resolver import Resolver
from wren.tree.scope import ScopePolicy

if TYPE_CHECKING:
    from wren.pages.types import PageProps

logger = logging.getLogger("wren.hydration")

# sys.platform under Pyodide, which PyScript runs on
_BROWSER_PLATFORM = "emscripten"


def is_browser() -> bool:
    """Return ``True`` when running inside a browser Python runtime."""
    return sys.platform == _BROWSER_PLATFORM


def run_scripts(tree: ResolvedNode | None) -> int:
    """Invoke every behavior in *tree* in pre-order.

    Does not check the execution context; :func:`hydrate` does.

    Returns:
        Number of scripts invoked (including ones that raised).
    """
    count = 0
    for node in walk(tree):
        if not isinstance(node, VirtualNode) or node.script is None:
            continue
        count += 1
        try:
            node.script()
        except Exception:
            logger.exception("Script for %r (scope %s) raised", node.name, node.scope)
    return count


def hydrate(
    module: ModuleType,
    *,
    path: str,
    generator: str = "",
    scope_policy: ScopePolicy | None = None,
) -> int:
    """Re-resolve a page in the browser and run its behaviors.

    The module-level ``script`` (if any) runs first, then component
    scripts in tree order.

    Args:
        module: The page module, imported in the browser.
        path: Route the page was built for.
        generator: Suffix for generated routes, empty otherwise.
        scope_policy: Must match the policy used at build time.

    Returns:
        Number of scripts invoked.

    Raises:
        HydrationError: Outside a browser runtime.
    """
    if not is_browser():
        msg = "hydrate() only runs in a browser runtime (PyScript/Pyodide)"
        raise HydrationError(msg)

    from wren.pages.loader import page_entries, render_page
    from wren.pages.types import PageProps

    resolver = Resolver(scope_policy)
    page = _select_page(page_entries(module, _base_route(path, generator)), path)
    tree = render_page(page, PageProps(path=path, generator=generator), resolver=resolver)

    count = 0
    module_script = getattr(module, "script", None)
    if callable(module_script):
        count += 1
        try:
            module_script()
        except Exception:
            logger.exception("Page script for %s raised", path)

    return count + run_scripts(tree)


def _base_route(path: str, generator: str) -> str:
    """Strip the generator suffix back off a generated route."""
    suffix = "/" + generator.strip("/") if generator.strip("/") else ""
    if suffix and path.endswith(suffix):
        return path[: -len(suffix)] or "/"
    return path


def _select_page(
    entries: list[tuple[PageProps, Callable[..., Any]]], path: str
) -> Callable[..., Any]:
    for props, page in entries:
        if props.path == path:
            return page
    msg = f"Page module has no entry for route {path!r}"
    raise HydrationError(msg)
