"""Recursive expansion of builder nodes into a resolved tree.

For every component instance the resolver:

1. evaluates the component's style against the instance props
2. allocates a scope token from its ``ScopePolicy``
3. stamps that scope onto the children passed in (pre-invocation)
4. calls the render function with ``{**props, "children": ...}``
5. stamps the scope onto whatever the function returned (post-invocation)
6. resolves the returned subtree into the instance's children

Stamping never touches a node that already carries a scope, but always
continues beneath it. Nodes are immutable, so stamping builds copies;
the caller's tree is never modified.

Fragments resolve their children under the inherited scope and allocate
nothing. Intrinsic elements resolve their children and keep their tag.
"""

from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from wren._internal.invoke import call_component
from wren.errors import InvalidElement, StyleResolutionError
from wren.tree.builder import SCOPE_KEY, BuilderNode
from wren.tree.reference import Component, Fragment, Intrinsic
from wren.tree.resolved import IntrinsicNode, ResolvedNode, VirtualNode
from wren.tree.scope import ContentHashScope, ScopePolicy


class Resolver:
    """Expands builder trees using one fixed scope policy.

    Holds no per-render state, so one resolver may serve many pages,
    including from several threads at once, as long as its policy is
    pure (``ContentHashScope`` is).
    """

    __slots__ = ("_policy",)

    def __init__(self, scope_policy: ScopePolicy | None = None) -> None:
        self._policy: ScopePolicy = scope_policy or ContentHashScope()

    @property
    def scope_policy(self) -> ScopePolicy:
        return self._policy

    def resolve(self, node: Any) -> ResolvedNode | None:
        """Resolve a builder node (or sequence of them) into a resolved tree.

        ``None`` and empty sequences resolve to ``None``. A non-empty
        sequence resolves as an implicit Fragment.

        Raises:
            StyleResolutionError: If a style function fails.
            InvalidElement: If a child value cannot be rendered.
        """
        if node is None:
            return None
        if isinstance(node, BuilderNode):
            return self._resolve_node(node, "")
        if isinstance(node, list | tuple):
            if not node:
                return None
            return self._resolve_node(BuilderNode(reference=Fragment, children=tuple(node)), "")
        msg = f"Cannot resolve {type(node).__name__!r}; expected a node built by construct()"
        raise InvalidElement(msg)

    # -- nodes ---------------------------------------------------------------

    def _resolve_node(self, node: BuilderNode, inherited: str) -> ResolvedNode | None:
        scope = node.scope if node.scope is not None else inherited
        ref = node.reference

        match ref:
            case Intrinsic(tag=tag):
                return IntrinsicNode(
                    tag=tag,
                    props=_with_scope(node.props, scope),
                    children=self._resolve_children(node.children, scope),
                    scope=scope,
                )
            case Component() if ref is Fragment:
                children = self._resolve_children(node.children, scope)
                if children is None or children == ():
                    return None
                return VirtualNode(
                    props=_with_scope(node.props, scope),
                    children=children,
                    scope=scope,
                    name=Fragment.name,
                    fragment=True,
                )
            case Component():
                return self._expand(ref, node)
        msg = f"Unsupported reference {ref!r}"
        raise InvalidElement(msg)

    def _expand(self, comp: Component, node: BuilderNode) -> VirtualNode:
        style = _evaluate_style(comp, node.props)
        scope = self._policy.allocate(style)

        children = stamp(node.children, scope)
        inner = call_component(comp.render, {**node.props, "children": children})
        inner = stamp(inner, scope)

        return VirtualNode(
            props=_with_scope(node.props, scope),
            children=self._resolve_children(inner, scope),
            scope=scope,
            style=style,
            script=comp.script,
            name=comp.name,
        )

    # -- children ------------------------------------------------------------

    def _resolve_children(self, children: Any, scope: str) -> Any:
        """Resolve a children value, dropping empty entries.

        Returns ``None``, a string, a node, or a tuple of those.
        """
        match children:
            case None | bool():
                return None
            case str():
                return children or None
            case int() | float():
                return str(children)
            case BuilderNode():
                return self._resolve_node(children, scope)
            case list() | tuple():
                resolved = (self._resolve_children(child, scope) for child in children)
                return tuple(r for r in resolved if r is not None and r != ())
        msg = f"Cannot render child of type {type(children).__name__!r}"
        raise InvalidElement(msg)


def resolve(node: Any, *, scope_policy: ScopePolicy | None = None) -> ResolvedNode | None:
    """Resolve *node* with a one-off :class:`Resolver`."""
    return Resolver(scope_policy).resolve(node)


def stamp(children: Any, scope: str) -> Any:
    """Return *children* with *scope* assigned to every unscoped node.

    Nodes that already carry a scope keep it; their descendants are
    still visited. Non-node values are returned unchanged.
    """
    match children:
        case BuilderNode():
            return replace(
                children,
                scope=children.scope if children.scope is not None else scope,
                children=stamp(children.children, scope),
            )
        case list() | tuple():
            return tuple(stamp(child, scope) for child in children)
    return children


def _evaluate_style(comp: Component, props: Mapping[str, Any]) -> str | None:
    style = comp.style
    if not callable(style):
        return style
    name = comp.name or repr(comp)
    try:
        value = call_component(style, props)
    except Exception as exc:
        raise StyleResolutionError(name, f"{type(exc).__name__}: {exc}") from exc
    if value is not None and not isinstance(value, str):
        raise StyleResolutionError(name, f"expected str, got {type(value).__name__}")
    return value


def _with_scope(props: Mapping[str, Any], scope: str) -> Mapping[str, Any]:
    return MappingProxyType({**props, SCOPE_KEY: scope})
