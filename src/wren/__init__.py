"""Wren — the page-rendering core of a Python static-site generator.

Pages are trees of component invocations. Wren resolves them into
scoped node trees, aggregates per-component styles, captures per-component
behavior for in-browser hydration, and writes the site.

Basic usage::

    from wren import component, h, resolve

    @component(style=".g { color: red; }")
    def Greeting(children=None):
        return h("span", {"class": "g"}, children)

    tree = resolve(h(Greeting, None, "hi"))

Building a site::

    from wren import Site, SiteConfig

    Site(SiteConfig(pages_dir="pages", out_dir="dist")).build()
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "BuilderNode",
    "Component",
    "ConfigurationError",
    "Fragment",
    "HydrationError",
    "Intrinsic",
    "IntrinsicNode",
    "InvalidElement",
    "PageLoadError",
    "Resolver",
    "Site",
    "SiteConfig",
    "StyleResolutionError",
    "VirtualNode",
    "WrenError",
    "component",
    "construct",
    "h",
    "hydrate",
    "render_html",
    "resolve",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "BuilderNode": "wren.tree.builder",
    "construct": "wren.tree.builder",
    "h": "wren.tree.builder",
    "Component": "wren.tree.reference",
    "Fragment": "wren.tree.reference",
    "Intrinsic": "wren.tree.reference",
    "component": "wren.tree.reference",
    "IntrinsicNode": "wren.tree.resolved",
    "VirtualNode": "wren.tree.resolved",
    "Resolver": "wren.tree.resolver",
    "resolve": "wren.tree.resolver",
    "hydrate": "wren.hydration.walker",
    "render_html": "wren.render.html",
    "Site": "wren.site",
    "SiteConfig": "wren.config",
    "ConfigurationError": "wren.errors",
    "HydrationError": "wren.errors",
    "InvalidElement": "wren.errors",
    "PageLoadError": "wren.errors",
    "StyleResolutionError": "wren.errors",
    "WrenError": "wren.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast (the site build pulls in kida and anyio)
    while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
