"""Filesystem page discovery for the pages/ directory.

Walks the pages directory tree and discovers:
- ``.py`` page modules (files starting with ``_`` are partials, not pages)
- every other file as a static asset copied verbatim into the output

``index.py`` maps to its directory's route; any other module appends its
stem::

    pages/
      index.py           # /
      about.py           # /about
      _components.py     # partial, imported by pages
      blog/
        index.py         # /blog
        feed.py          # /blog/feed (may export ``pages`` for /blog/feed/...)
      assets/
        logo.svg         # copied to <out>/assets/logo.svg
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from wren.errors import ConfigurationError
from wren.pages.types import PageSource

_PAGE_SUFFIX = ".py"

# Characters not allowed in a generated module name
_MODULE_UNSAFE_RE = re.compile(r"\W")


def discover_pages(pages_dir: str | Path, *, ignore: Iterable[str] = ()) -> list[PageSource]:
    """Walk a pages directory and discover all page modules.

    Args:
        pages_dir: Path to the ``pages/`` directory.
        ignore: File or directory names to skip anywhere in the tree.

    Returns:
        Discovered pages sorted by path.

    Raises:
        ConfigurationError: If *pages_dir* is not a directory.
    """
    root = _require_root(pages_dir)
    ignored = frozenset(ignore)
    pages: list[PageSource] = []
    for file in _walk(root, ignored):
        if file.suffix != _PAGE_SUFFIX or file.name.startswith("_"):
            continue
        relative = file.relative_to(root)
        pages.append(
            PageSource(path=file, route=page_route(relative), module_name=module_name_for(relative))
        )
    return pages


def discover_assets(pages_dir: str | Path, *, ignore: Iterable[str] = ()) -> list[Path]:
    """List non-Python files under *pages_dir*, relative to it."""
    root = _require_root(pages_dir)
    ignored = frozenset(ignore)
    return [file.relative_to(root) for file in _walk(root, ignored) if file.suffix != _PAGE_SUFFIX]


def page_route(relative: str | Path) -> str:
    """Compute a page's public route from its path relative to the pages root.

    ``index.py`` -> ``/``, ``blog/index.py`` -> ``/blog``,
    ``blog/post.py`` -> ``/blog/post``.
    """
    path = PurePosixPath(Path(relative).as_posix()).with_suffix("")
    parts = list(path.parts)
    if parts and parts[-1] == "index":
        parts.pop()
    return "/" + "/".join(parts)


def module_name_for(relative: str | Path) -> str:
    """Build a unique, importable module name for a page source."""
    stem = PurePosixPath(Path(relative).as_posix()).with_suffix("").as_posix()
    return "wren_page_" + _MODULE_UNSAFE_RE.sub("_", stem)


def _require_root(pages_dir: str | Path) -> Path:
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        msg = f"Pages directory not found: {root}"
        raise ConfigurationError(msg)
    return root


def _walk(directory: Path, ignored: frozenset[str]) -> list[Path]:
    """Recursively list files, skipping hidden and ignored entries."""
    files: list[Path] = []
    for item in sorted(directory.iterdir()):
        if item.name in ignored or item.name.startswith(".") or item.name == "__pycache__":
            continue
        if item.is_dir():
            files.extend(_walk(item, ignored))
        elif item.is_file():
            files.append(item)
    return files
