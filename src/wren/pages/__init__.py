"""Page modules: discovery, loading, and style aggregation.

The ``pages/`` directory structure defines public routes::

    site = Site(SiteConfig(pages_dir="pages", out_dir="dist"))
    site.build()

Conventions:

    pages/
      index.py           # /            exports ``page``
      about.py           # /about       exports ``page``
      blog.py            # /blog/...    exports ``pages = {"/a": A, "/b": B}``
      _layout.py         # partial, not a page
"""

from wren.pages.discovery import discover_assets, discover_pages, module_name_for, page_route
from wren.pages.loader import (
    PagesPath,
    join_route,
    load_module,
    page_entries,
    render_module,
    render_page,
)
from wren.pages.styles import CASCADE_KEY, StyleCollector, collect_styles, scope_selector
from wren.pages.types import PageProps, PageSource, RenderedPage

__all__ = [
    "CASCADE_KEY",
    "PagesPath",
    "PageProps",
    "PageSource",
    "RenderedPage",
    "StyleCollector",
    "collect_styles",
    "discover_assets",
    "discover_pages",
    "join_route",
    "load_module",
    "module_name_for",
    "page_entries",
    "page_route",
    "render_module",
    "render_page",
    "scope_selector",
]
