"""Page module loading and rendering.

A page module is an ordinary Python file. It exposes either:

- ``page``: a component (or plain function) rendered once at the
  module's base route, or
- ``pages``: a mapping of route suffix to component, each rendered
  independently at ``join_route(base, suffix)``.

Optionally it also exposes ``styles`` (page-level global CSS) and
``script`` (page-level behavior, run first during hydration)::

    # pages/blog.py
    from wren import h

    def Post(path, generator):
        return h("article", None, h("h1", None, generator.strip("/")))

    pages = {"/first": Post, "/second": Post}
"""

from __future__ import annotations

import importlib.util
import logging
import posixpath
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from types import ModuleType, TracebackType
from typing import Any, Self

from wren.errors import PageLoadError
from wren.pages.types import PageProps
from wren.tree.builder import construct
from wren.tree.resolved import ResolvedNode
from wren.tree.resolver import Resolver

logger = logging.getLogger("wren.pages")


def load_module(path: str | Path, module_name: str) -> ModuleType:
    """Execute a page source file and return the module.

    Raises:
        PageLoadError: If the file cannot be imported; the original
            exception is chained.
    """
    path = Path(path)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise PageLoadError(str(path), "not an importable Python module")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise PageLoadError(str(path), f"{type(exc).__name__}: {exc}") from exc
    return module


def page_entries(module: ModuleType, base: str) -> list[tuple[PageProps, Callable[..., Any]]]:
    """List ``(props, page component)`` pairs a module produces under *base*.

    Raises:
        PageLoadError: If the module exports neither ``page`` nor
            ``pages``, or ``pages`` is not a mapping.
    """
    name = getattr(module, "__file__", None) or module.__name__
    generated = getattr(module, "pages", None)

    if generated is not None:
        if not isinstance(generated, Mapping):
            raise PageLoadError(name, f"'pages' must be a mapping, got {type(generated).__name__}")
        return [
            (PageProps(path=join_route(base, suffix), generator=suffix), func)
            for suffix, func in generated.items()
        ]

    page = getattr(module, "page", None)
    if page is None:
        raise PageLoadError(name, "module exports neither 'page' nor 'pages'")
    return [(PageProps(path=base), page)]


def render_module(
    module: ModuleType,
    path: str,
    *,
    resolver: Resolver | None = None,
) -> dict[str, ResolvedNode | None]:
    """Render every route a page module produces.

    Each entry is resolved independently through the same resolver.

    Returns:
        Mapping of final route to resolved tree, in export order.
    """
    resolver = resolver or Resolver()
    rendered: dict[str, ResolvedNode | None] = {}
    for props, page in page_entries(module, path):
        logger.debug("Resolving %s (generator=%r)", props.path, props.generator)
        rendered[props.path] = render_page(page, props, resolver=resolver)
    return rendered


def render_page(
    page: Callable[..., Any],
    props: PageProps,
    *,
    resolver: Resolver | None = None,
) -> ResolvedNode | None:
    """Invoke one page component with its route props and resolve it."""
    resolver = resolver or Resolver()
    return resolver.resolve(construct(page, props.as_props()))


def join_route(base: str, suffix: str) -> str:
    """Join a route suffix onto a base route.

    ``join_route("/blog", "/a") == "/blog/a"``; an empty or ``"/"``
    suffix yields the base itself. The result always starts with ``/``
    and never ends with one (except the root).
    """
    joined = posixpath.join("/" + base.strip("/"), suffix.strip("/"))
    return posixpath.normpath(joined)


class PagesPath:
    """Makes a pages root importable while pages are loaded.

    Pages import their partials (``_layout.py``) by plain module name, so
    the root goes on ``sys.path`` on entry. On exit it is removed again
    and every module imported from under the root is dropped from
    ``sys.modules``, so the next load sees the partials as they are on
    disk then::

        with PagesPath(pages_dir):
            module = load_module(source.path, source.module_name)
    """

    __slots__ = ("_added", "_before", "root")

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()
        self._added = False
        self._before: frozenset[str] = frozenset()

    def __enter__(self) -> Self:
        entry = str(self.root)
        self._before = frozenset(sys.modules)
        if entry not in sys.path:
            sys.path.insert(0, entry)
            self._added = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._added and str(self.root) in sys.path:
            sys.path.remove(str(self.root))
        self._added = False
        for name in set(sys.modules) - self._before:
            file = getattr(sys.modules.get(name), "__file__", None)
            if file and Path(file).resolve().is_relative_to(self.root):
                del sys.modules[name]
                logger.debug("Unloaded partial %s", name)
