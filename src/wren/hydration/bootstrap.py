"""Hydration bootstrap for built pages.

Injects the PyScript runtime plus a small Python entry script that
fetches the page module's source, imports it, and hands it to
:func:`wren.hydration.hydrate`. Only pages that captured at least one
behavior get the bootstrap.

The browser gets wren's own sources through the same ``files`` config as
the page: only the modules needed to rebuild a tree and run its scripts
(see :func:`engine_sources`). Nothing is installed from a package index.
"""

import html
import json
from collections.abc import Mapping
from pathlib import Path

# Package root, i.e. the directory holding wren/__init__.py
_PACKAGE_DIR = Path(__file__).resolve().parent.parent

# What the browser imports. render/, site.py, and cli/ need kida and anyio
# and never run client side.
BROWSER_MODULES = ("__init__.py", "config.py", "errors.py")
BROWSER_PACKAGES = ("_internal", "hydration", "pages", "tree")


def engine_sources() -> list[tuple[str, Path]]:
    """List the wren source files the browser needs.

    Returns:
        ``(relative, absolute)`` pairs, where *relative* is a POSIX path
        starting at the package directory (``wren/tree/resolver.py``).
    """
    files = [_PACKAGE_DIR / name for name in BROWSER_MODULES]
    for package in BROWSER_PACKAGES:
        files.extend(sorted((_PACKAGE_DIR / package).glob("*.py")))
    return [(file.relative_to(_PACKAGE_DIR.parent).as_posix(), file) for file in files]


def hydration_snippet(
    module_name: str,
    *,
    path: str,
    generator: str = "",
    files: Mapping[str, str],
    runtime_url: str,
    scope_policy: str = "hash",
    scope_length: int = 8,
) -> str:
    """Return the ``<script>`` markup that hydrates one page.

    Args:
        module_name: Import name of the page module in the browser.
        path: Route the page was built for.
        generator: Suffix for generated routes, empty otherwise.
        files: URL to browser-local filename for the page source, the
            partial modules it imports, and the wren engine sources
            (PyScript ``files`` config).
        runtime_url: PyScript ``core.js`` module URL.
        scope_policy: Name of the build's scope policy (``"hash"`` or
            ``"random"``); the browser must allocate scopes the same way.
        scope_length: Token length used at build time.
    """
    config = json.dumps({"files": dict(files)}, sort_keys=True)
    policy_cls = "RandomScope" if scope_policy == "random" else "ContentHashScope"
    entry = f"""
import {module_name}
from wren.hydration import hydrate
from wren.tree.scope import {policy_cls}

hydrate(
    {module_name},
    path={_py_literal(path)},
    generator={_py_literal(generator)},
    scope_policy={policy_cls}(length={scope_length}),
)
"""
    runtime = f"""
<script type="module" src="{html.escape(runtime_url, quote=True)}" data-wren="runtime"></script>
<script type="py" data-wren="hydrate" config="{html.escape(config, quote=True)}">{entry}</script>"""
    return runtime.strip()


def _py_literal(value: str) -> str:
    # "<" as \x3c so no "</script>" can end the element early
    return repr(value).replace("<", "\\x3c")
