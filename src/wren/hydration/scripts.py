"""Server-side script collection.

Walks a resolved tree in the same pre-order the hydration walker uses
and records every component instance that carries a behavior. The
build uses the result to decide whether a page needs the hydration
bootstrap at all.
"""

from dataclasses import dataclass

from wren._internal.types import ScriptFunc
from wren.tree.resolved import ResolvedNode, VirtualNode, walk


@dataclass(frozen=True, slots=True)
class ScriptEntry:
    """One captured behavior, in traversal order."""

    name: str
    scope: str
    script: ScriptFunc


def collect_scripts(tree: ResolvedNode | None) -> list[ScriptEntry]:
    """Collect behaviors from *tree* in depth-first pre-order."""
    return [
        ScriptEntry(name=node.name, scope=node.scope, script=node.script)
        for node in walk(tree)
        if isinstance(node, VirtualNode) and node.script is not None
    ]
