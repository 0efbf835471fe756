"""Resolved node types.

The resolver's output. Both variants are frozen and carry exactly one
scope token. Children are ``None``, a string, a node, or a tuple of
those, with empty entries already dropped.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from wren._internal.types import ScriptFunc


@dataclass(frozen=True, slots=True)
class IntrinsicNode:
    """A markup element."""

    tag: str
    props: Mapping[str, Any]
    children: Any
    scope: str


@dataclass(frozen=True, slots=True)
class VirtualNode:
    """An expanded component instance.

    A Fragment is a ``VirtualNode`` with ``fragment=True``: no tag, no
    scope of its own, no style or script. Serializers emit only its
    children.
    """

    props: Mapping[str, Any]
    children: Any
    scope: str
    style: str | None = None
    script: ScriptFunc | None = None
    name: str = ""
    fragment: bool = False


ResolvedNode: TypeAlias = IntrinsicNode | VirtualNode


def iter_children(children: Any) -> Iterator[ResolvedNode | str]:
    """Flatten resolved children into nodes and text, in order."""
    if children is None:
        return
    if isinstance(children, tuple):
        for child in children:
            yield from iter_children(child)
    else:
        yield children


def walk(node: ResolvedNode | None) -> Iterator[ResolvedNode]:
    """Depth-first, pre-order traversal of resolved nodes.

    A node is yielded before any of its descendants, siblings in order.
    Text children are skipped.
    """
    if node is None:
        return
    stack: list[ResolvedNode] = [node]
    while stack:
        current = stack.pop()
        yield current
        kids = [c for c in iter_children(current.children) if not isinstance(c, str)]
        stack.extend(reversed(kids))
