"""Tree builder — one unresolved node per invocation.

``construct()`` is the only way nodes are made. It does not recurse into
nested components; the resolver expands them later.

Usage::

    from wren.tree import Fragment, construct, h

    node = construct("div", {"class_": "card", "children": ["Hello"]})
    same = h("div", {"class_": "card"}, "Hello")
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wren.errors import ReservedPropError
from wren.tree.reference import Reference, as_reference

# Engine-internal prop carrying an instance's scope token on resolved nodes
SCOPE_KEY = "__scope__"

# Aliases merged into "class", in concatenation order
_CLASS_ALIASES = ("class_", "className")

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class BuilderNode:
    """Pre-resolution description of one invocation.

    Attributes:
        reference: What to invoke (tag or component).
        props: Read-only author props, ``children`` excluded.
        children: Frozen children (lists become tuples).
        scope: Scope token stamped by propagation, ``None`` until then.
    """

    reference: Reference
    props: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    children: Any = None
    scope: str | None = None


def construct(reference: object, props: Mapping[str, Any] | None = None) -> BuilderNode:
    """Build one unresolved node.

    ``children`` is pulled out of *props*; ``class_`` and ``className``
    are folded into ``class`` (space separated); everything else passes
    through unchanged.

    Raises:
        InvalidElement: If *reference* is neither a tag name nor callable.
        ReservedPropError: If *props* uses the engine scope key.
    """
    ref = as_reference(reference)
    rest = dict(props or {})

    if SCOPE_KEY in rest:
        msg = f"{SCOPE_KEY!r} is reserved for scope tokens and cannot be set as a prop"
        raise ReservedPropError(msg)

    children = rest.pop("children", None)

    for alias in _CLASS_ALIASES:
        if alias not in rest:
            continue
        value = rest.pop(alias)
        if value is None:
            continue
        existing = rest.get("class")
        rest["class"] = f"{_class_text(existing)} {_class_text(value)}" if existing else value

    return BuilderNode(
        reference=ref,
        props=MappingProxyType(rest),
        children=freeze_children(children),
    )


def _class_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list | tuple):
        return " ".join(str(item) for item in value if item)
    return str(value)


def h(reference: object, props: Mapping[str, Any] | None = None, *children: Any) -> BuilderNode:
    """Variadic form of :func:`construct` taking children positionally.

    ``h(ref, props, a, b)`` is ``construct(ref, {**props, "children": (a, b)})``;
    a single child is passed as-is.
    """
    if not children:
        return construct(reference, props)
    merged = dict(props or {})
    merged["children"] = children[0] if len(children) == 1 else children
    return construct(reference, merged)


def freeze_children(children: Any) -> Any:
    """Recursively turn list children into tuples."""
    if isinstance(children, list | tuple):
        return tuple(freeze_children(child) for child in children)
    return children
