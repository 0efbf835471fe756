"""Site build — discover, render, and write every page.

Each page module is rendered as an independent task: modules are loaded
and resolved in worker threads (``anyio.to_thread``) under a capacity
limit, and nothing is shared between pages except the resolver, which
holds no per-render state. If any page fails, the task group cancels the
rest and the error propagates; no files are written for that build.

Usage::

    from wren import Site, SiteConfig

    site = Site(SiteConfig(pages_dir="pages", out_dir="dist"))
    pages = site.build()
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import anyio
import anyio.to_thread

from wren.config import SiteConfig
from wren.errors import ConfigurationError, WrenError
from wren.hydration.bootstrap import engine_sources, hydration_snippet
from wren.hydration.scripts import ScriptEntry, collect_scripts
from wren.pages.discovery import discover_assets, discover_pages
from wren.pages.loader import PagesPath, load_module, page_entries, render_page
from wren.pages.styles import collect_styles
from wren.pages.types import PageSource, RenderedPage
from wren.render.document import render_page_document
from wren.tree.resolver import Resolver
from wren.tree.scope import policy_from_config

logger = logging.getLogger("wren.site")


class Site:
    """A pages directory and the configuration to build it."""

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config = config or SiteConfig()
        self.resolver = Resolver(policy_from_config(self.config))

    @property
    def pages_dir(self) -> Path:
        return Path(self.config.pages_dir).resolve()

    @property
    def out_dir(self) -> Path:
        return Path(self.config.out_dir).resolve()

    def discover(self) -> list[PageSource]:
        """Discover page modules under the configured pages directory."""
        return discover_pages(self.pages_dir, ignore=self.config.ignore)

    # -- rendering -------------------------------------------------------------

    def render_source(self, source: PageSource) -> list[RenderedPage]:
        """Load one page module and render every route it produces."""
        module = load_module(source.path, source.module_name)
        page_script = getattr(module, "script", None)
        prelude = getattr(module, "styles", None) or ""

        rendered: list[RenderedPage] = []
        for props, page in page_entries(module, source.route):
            tree = render_page(page, props, resolver=self.resolver)
            scripts = collect_scripts(tree)
            if callable(page_script):
                scripts.insert(0, ScriptEntry(name=source.module_name, scope="", script=page_script))
            rendered.append(
                RenderedPage(
                    route=props.path,
                    tree=tree,
                    styles=collect_styles(tree).render(prelude=prelude),
                    scripts=tuple(scripts),
                    generator=props.generator,
                    source=source,
                )
            )
            logger.debug("Rendered %s from %s", props.path, source.path)
        return rendered

    async def render(self) -> dict[str, RenderedPage]:
        """Render all discovered pages concurrently.

        Returns:
            Mapping of route to rendered page, in discovery order.

        Raises:
            ConfigurationError: If two pages produce the same route.
        """
        sources = self.discover()
        results: dict[str, list[RenderedPage]] = {}
        limiter = anyio.CapacityLimiter(max(1, self.config.workers))

        async def _render(source: PageSource) -> None:
            results[source.module_name] = await anyio.to_thread.run_sync(
                self.render_source, source, limiter=limiter
            )

        # Pages import their partials (``_layout.py``) by plain module name
        with PagesPath(self.pages_dir):
            try:
                async with anyio.create_task_group() as tg:
                    for source in sources:
                        tg.start_soon(_render, source)
            except ExceptionGroup as group:
                # Surface the first page failure as itself, not wrapped
                first = _first_error(group)
                if isinstance(first, WrenError):
                    raise first from first.__cause__
                raise

        pages: dict[str, RenderedPage] = {}
        for source in sources:
            for page in results[source.module_name]:
                if page.route in pages:
                    other = pages[page.route].source
                    msg = f"Route {page.route!r} produced by both {other.path if other else '?'} and {source.path}"
                    raise ConfigurationError(msg)
                pages[page.route] = page
        return pages

    # -- writing ---------------------------------------------------------------

    def build(self) -> dict[str, RenderedPage]:
        """Render every page and write the site to the output directory.

        Writes ``<out>/<route>/index.html`` per page, copies static
        assets, and, for pages with behaviors, the Python sources the
        browser needs to hydrate them.
        """
        pages = anyio.run(self.render)
        out = self.out_dir
        out.mkdir(parents=True, exist_ok=True)

        hydrated = False
        for page in pages.values():
            body_extra = ""
            if self.config.hydrate and page.needs_hydration and page.source is not None:
                body_extra = self._bootstrap_for(page, page.source)
                hydrated = True
            target = output_path(out, page.route)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(
                render_page_document(
                    page,
                    title=self.config.title,
                    lang=self.config.lang,
                    body_extra=body_extra,
                ),
                encoding="utf-8",
            )

        assets = discover_assets(self.pages_dir, ignore=self.config.ignore)
        for relative in assets:
            dest = out / relative
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(self.pages_dir / relative, dest)

        if hydrated:
            self._write_sources(pages)

        logger.info(
            "Built %d page(s) and %d asset(s) into %s", len(pages), len(assets), out
        )
        return pages

    def _sources_dir(self) -> Path:
        return self.out_dir / self.config.sources_url.strip("/")

    def _partials(self) -> list[Path]:
        return sorted(p for p in self.pages_dir.glob("_*.py") if p.is_file())

    def _bootstrap_for(self, page: RenderedPage, source: PageSource) -> str:
        base = "/" + self.config.sources_url.strip("/")
        files = {f"{base}/{source.module_name}.py": f"./{source.module_name}.py"}
        for partial in self._partials():
            files[f"{base}/{partial.name}"] = f"./{partial.name}"
        for relative, _ in engine_sources():
            files[f"{base}/{relative}"] = f"./{relative}"
        return hydration_snippet(
            source.module_name,
            path=page.route,
            generator=page.generator,
            files=files,
            runtime_url=self.config.runtime_url,
            scope_policy=self.config.scope_policy,
            scope_length=self.config.scope_length,
        )

    def _write_sources(self, pages: dict[str, RenderedPage]) -> None:
        dest = self._sources_dir()
        dest.mkdir(parents=True, exist_ok=True)
        for page in pages.values():
            if page.source is not None and page.needs_hydration:
                shutil.copy2(page.source.path, dest / f"{page.source.module_name}.py")
        for partial in self._partials():
            shutil.copy2(partial, dest / partial.name)
        for relative, path in engine_sources():
            target = dest / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(path, target)


def output_path(out_dir: Path, route: str) -> Path:
    """File a route is written to: ``/blog/a`` -> ``<out>/blog/a/index.html``."""
    relative = route.strip("/")
    return out_dir / relative / "index.html" if relative else out_dir / "index.html"


def _first_error(group: BaseExceptionGroup) -> BaseException:
    exc: BaseException = group
    while isinstance(exc, BaseExceptionGroup):
        exc = exc.exceptions[0]
    return exc
