"""Invoke helpers — call author functions with the props they ask for.

Components, style functions, and page functions declare the props they
use as keyword parameters. Any code that calls one of them must filter
the property bag against the signature. This module keeps that check in
exactly one place.

Usage::

    from wren._internal.invoke import call_component

    subtree = call_component(render, {"title": "Hi", "children": kids})
"""

import inspect
from collections.abc import Callable, Mapping
from typing import Any


def call_component(func: Callable[..., Any], props: Mapping[str, Any]) -> Any:
    """Call *func* with the entries of *props* its signature accepts.

    Works with any of these shapes::

        def Card(title, children=None): ...     # named props
        def Layout(**props): ...                 # everything
        def Divider(): ...                       # nothing

    Props the function does not name are dropped unless it takes
    ``**kwargs``. Missing required parameters surface as the usual
    ``TypeError`` from the call itself.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins and some C callables have no introspectable signature
        return func(**props)

    params = sig.parameters.values()
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params):
        return func(**props)

    kwargs: dict[str, Any] = {}
    for name, param in sig.parameters.items():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.POSITIONAL_ONLY):
            continue
        if name in props:
            kwargs[name] = props[name]
    return func(**kwargs)
