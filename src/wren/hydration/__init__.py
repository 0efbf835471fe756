"""Script collection and client-side hydration.

Server side, :func:`collect_scripts` records each component instance's
behavior in pre-order. In the browser, :func:`hydrate` rebuilds the same
tree and runs those behaviors in the same order.
"""

from wren.hydration.bootstrap import engine_sources, hydration_snippet
from wren.hydration.scripts import ScriptEntry, collect_scripts
from wren.hydration.walker import hydrate, is_browser, run_scripts

__all__ = [
    "ScriptEntry",
    "collect_scripts",
    "engine_sources",
    "hydrate",
    "hydration_snippet",
    "is_browser",
    "run_scripts",
]
