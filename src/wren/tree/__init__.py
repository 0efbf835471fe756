"""Component trees: building, scoping, and resolution.

Authors build trees with ``construct()`` / ``h()`` and ``@component``;
the resolver expands them into ``IntrinsicNode`` / ``VirtualNode``
trees with scope tokens assigned::

    from wren.tree import component, h, resolve

    @component(style=".g { color: red; }")
    def Greeting(children=None):
        return h("span", {"class": "g"}, children)

    tree = resolve(h(Greeting, None, "hi"))
"""

from wren.tree.builder import SCOPE_KEY, BuilderNode, construct, h
from wren.tree.reference import Component, Fragment, Intrinsic, Reference, as_reference, component
from wren.tree.resolved import IntrinsicNode, ResolvedNode, VirtualNode, iter_children, walk
from wren.tree.resolver import Resolver, resolve, stamp
from wren.tree.scope import ContentHashScope, RandomScope, ScopePolicy, policy_from_config

__all__ = [
    "SCOPE_KEY",
    "BuilderNode",
    "Component",
    "ContentHashScope",
    "Fragment",
    "Intrinsic",
    "IntrinsicNode",
    "RandomScope",
    "Reference",
    "ResolvedNode",
    "Resolver",
    "ScopePolicy",
    "VirtualNode",
    "as_reference",
    "component",
    "construct",
    "h",
    "iter_children",
    "policy_from_config",
    "resolve",
    "stamp",
    "walk",
]
