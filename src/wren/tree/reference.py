"""Element references — what a node invokes.

A reference is a tagged union: either an ``Intrinsic`` markup tag or a
``Component`` wrapping a render function with optional style and script.
The resolver dispatches on these classes directly, so every value an
author passes as a reference is normalized exactly once, here.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias, overload

from wren._internal.types import RenderFunc, ScriptFunc, StyleFunc
from wren.errors import InvalidElement


@dataclass(frozen=True, slots=True)
class Intrinsic:
    """A raw markup element such as ``div`` or ``span``."""

    tag: str

    def __post_init__(self) -> None:
        if not self.tag:
            msg = "Intrinsic tag name must be a non-empty string"
            raise InvalidElement(msg)


@dataclass(frozen=True, slots=True, eq=False)
class Component:
    """A reusable function that synthesizes a subtree.

    Attributes:
        render: Called with the instance props (and ``children``);
            returns a node, a string, a sequence of those, or ``None``.
        style: CSS text, or a function of the instance props returning
            CSS text. Evaluated once per instance.
        script: Behavior run in the browser during hydration.
        name: Display name used in errors and collected script entries.
    """

    render: RenderFunc
    style: str | StyleFunc | None = None
    script: ScriptFunc | None = None
    name: str = ""

    def __repr__(self) -> str:
        return f"Component({self.name or self.render!r})"


Reference: TypeAlias = Intrinsic | Component


def _fragment(children: Any = None) -> Any:
    return children


Fragment = Component(render=_fragment, name="Fragment")


@overload
def component(func: RenderFunc) -> Component: ...


@overload
def component(
    *,
    style: str | StyleFunc | None = None,
    script: ScriptFunc | None = None,
    name: str | None = None,
) -> Callable[[RenderFunc], Component]: ...


def component(
    func: RenderFunc | None = None,
    *,
    style: str | StyleFunc | None = None,
    script: ScriptFunc | None = None,
    name: str | None = None,
) -> Component | Callable[[RenderFunc], Component]:
    """Declare a render function as a component.

    Usable bare or with arguments::

        @component
        def Layout(children=None):
            return h("main", None, children)

        @component(style=".g { color: red; }")
        def Greeting(children=None):
            return h("span", {"class": "g"}, children)
    """

    def decorator(fn: RenderFunc) -> Component:
        return Component(
            render=fn,
            style=style,
            script=script,
            name=name or getattr(fn, "__name__", ""),
        )

    if func is not None:
        return decorator(func)
    return decorator


def as_reference(value: object) -> Reference:
    """Normalize an author-supplied reference into the tagged union.

    - ``str`` becomes ``Intrinsic``
    - ``Intrinsic`` and ``Component`` pass through
    - any other callable is wrapped as a ``Component``, picking up
      ``style`` and ``script`` attributes attached to the function

    Raises:
        InvalidElement: If *value* is none of the above.
    """
    match value:
        case Intrinsic() | Component():
            return value
        case str():
            return Intrinsic(value)
        case _ if callable(value):
            return Component(
                render=value,
                style=getattr(value, "style", None),
                script=getattr(value, "script", None),
                name=getattr(value, "__name__", type(value).__name__),
            )
    msg = f"{value!r} is neither a tag name nor callable"
    raise InvalidElement(msg)
