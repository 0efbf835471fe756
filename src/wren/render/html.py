"""HTML serialization of resolved trees.

Intrinsic nodes become elements. Virtual nodes (component instances and
fragments) are transparent: only their children are written. Every
element whose scope is non-empty gets a ``data-scope`` attribute, which
the page stylesheet's ``@scope`` rules key on.
"""

import html
from collections.abc import Iterable, Mapping
from typing import Any

from wren.pages.styles import CASCADE_KEY
from wren.tree.builder import SCOPE_KEY
from wren.tree.resolved import IntrinsicNode, ResolvedNode, VirtualNode, iter_children

SCOPE_ATTR = "data-scope"

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

# Elements whose text content is written without escaping
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

# Props that never become attributes
_RESERVED = frozenset({SCOPE_KEY, CASCADE_KEY})


def render_html(tree: ResolvedNode | str | None) -> str:
    """Serialize a resolved tree to an HTML string."""
    parts: list[str] = []
    _write(tree, parts, raw=False)
    return "".join(parts)


def render_attrs(props: Mapping[str, Any], scope: str = "") -> str:
    """Render props as an attribute string with a leading space.

    ``True`` renders a bare attribute; ``None`` and ``False`` are
    omitted; sequences are space-joined (``class`` lists).
    """
    attrs: list[str] = []
    for name, value in props.items():
        if name in _RESERVED or value is None or value is False or callable(value):
            continue
        if value is True:
            attrs.append(f" {name}")
            continue
        attrs.append(f' {name}="{html.escape(_attr_text(value), quote=True)}"')
    if scope:
        attrs.append(f' {SCOPE_ATTR}="{html.escape(scope, quote=True)}"')
    return "".join(attrs)


def _attr_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        return " ".join(str(v) for v in value if v)
    return str(value)


def _write(node: Any, parts: list[str], *, raw: bool) -> None:
    match node:
        case None:
            return
        case str():
            if raw or hasattr(node, "__html__"):
                parts.append(str(node))
            else:
                parts.append(html.escape(node, quote=False))
        case IntrinsicNode(tag=tag):
            parts.append(f"<{tag}{render_attrs(node.props, node.scope)}>")
            if tag in VOID_ELEMENTS:
                return
            for child in iter_children(node.children):
                _write(child, parts, raw=tag in RAW_TEXT_ELEMENTS)
            parts.append(f"</{tag}>")
        case VirtualNode():
            for child in iter_children(node.children):
                _write(child, parts, raw=raw)
        case tuple():
            for child in iter_children(node):
                _write(child, parts, raw=raw)
