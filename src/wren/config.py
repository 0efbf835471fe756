"""Site configuration.

One frozen dataclass holds every build setting. The CLI layers its flags
on top with ``dataclasses.replace``; nothing mutates a config in place.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site build configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(pages_dir="site", out_dir="public", workers=8)
    """

    # Sources
    pages_dir: str | Path = "pages"
    ignore: tuple[str, ...] = (".git", "__pycache__", ".venv", "node_modules")

    # Output
    out_dir: str | Path = "dist"

    # Scoping: "hash" (content-derived) or "random"
    scope_policy: str = "hash"
    scope_length: int = 8

    # Document shell
    lang: str = "en"
    title: str = ""

    # Hydration (PyScript bootstrap injected into pages that carry scripts)
    hydrate: bool = True
    runtime_url: str = "https://pyscript.net/releases/2024.11.1/core.js"
    sources_url: str = "/_wren"

    # Build
    workers: int = 4
    log_level: str = "info"
