"""``wren routes`` — list the routes a pages directory produces.

Loads every page module (without resolving trees) and prints a table
of ROUTE, GENERATOR, and SOURCE.
"""

import argparse
import sys

from wren.cli._config import config_from_args
from wren.errors import WrenError


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table for ``args.pages``."""
    from wren.pages.discovery import discover_pages
    from wren.pages.loader import PagesPath, load_module, page_entries

    config = config_from_args(args)

    rows: list[tuple[str, str, str]] = []
    try:
        sources = discover_pages(config.pages_dir, ignore=config.ignore)
        with PagesPath(config.pages_dir):
            for source in sources:
                module = load_module(source.path, source.module_name)
                for props, _page in page_entries(module, source.route):
                    rows.append((props.path, props.generator, source.path.name))
    except WrenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not rows:
        print("No pages found.")
        return

    # Column widths
    max_route = max(max(len(r[0]) for r in rows), 5)  # "ROUTE" header
    max_gen = max(max(len(r[1]) for r in rows), 9)  # "GENERATOR" header

    fmt = f"{{:<{max_route}}}  {{:<{max_gen}}}  {{}}"
    print(fmt.format("ROUTE", "GENERATOR", "SOURCE"))
    sep_len = max_route + max_gen + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for route, generator, source_name in rows:
        print(fmt.format(route, generator, source_name))
