"""Page style aggregation.

Each component instance with a style contributes it once per distinct
scope token, in the order instances appear in the tree. Scoped styles
are wrapped in a CSS ``@scope`` rule keyed on the ``data-scope``
attribute the serializer writes, so they only reach elements of that
component instance. An instance invoked with ``cascade=True`` opts out:
its style is emitted as-is and applies page-wide.

Styles of nested components are never merged into their ancestors'.
"""

from dataclasses import dataclass, field

from wren.tree.resolved import ResolvedNode, VirtualNode, walk

# Prop read by aggregation only; the resolver passes it through untouched
CASCADE_KEY = "cascade"


def scope_selector(scope: str) -> str:
    """Attribute selector matching elements stamped with *scope*."""
    return f'[data-scope="{scope}"]'


@dataclass(slots=True)
class StyleCollector:
    """Collects and deduplicates styles for one page render."""

    _global: dict[str, str] = field(default_factory=dict)
    _scoped: dict[str, str] = field(default_factory=dict)

    def add(self, scope: str, css: str, *, cascade: bool = False) -> bool:
        """Add *css* for *scope*. Returns ``True`` on first occurrence.

        Scoped styles are keyed by scope token, global ones by their text.
        """
        if cascade or not scope:
            key, target = css, self._global
        else:
            key, target = scope, self._scoped
        if key in target:
            return False
        target[key] = css
        return True

    def __len__(self) -> int:
        return len(self._global) + len(self._scoped)

    def render(self, *, prelude: str = "") -> str:
        """Join collected styles into one stylesheet.

        Order: *prelude* (page-level styles), global (cascading) styles,
        then scoped styles, each group in insertion order.
        """
        parts: list[str] = []
        if prelude.strip():
            parts.append(prelude.strip())
        parts.extend(css.strip() for css in self._global.values())
        parts.extend(
            f"@scope ({scope_selector(scope)}) {{\n{css.strip()}\n}}"
            for scope, css in self._scoped.items()
        )
        return "\n".join(parts)


def collect_styles(tree: ResolvedNode | None) -> StyleCollector:
    """Gather component styles from a resolved tree in pre-order."""
    collector = StyleCollector()
    for node in walk(tree):
        if not isinstance(node, VirtualNode) or not node.style:
            continue
        collector.add(node.scope, node.style, cascade=bool(node.props.get(CASCADE_KEY)))
    return collector
