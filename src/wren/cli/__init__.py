"""Wren CLI — build a site and inspect its routes.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — component-based static site builder.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: from config, 'info')",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren build -------------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Render all pages into the output directory")
    build_parser.add_argument("pages", nargs="?", default=None, help="Pages directory (default: pages)")
    build_parser.add_argument("-o", "--out", default=None, help="Output directory (default: dist)")
    build_parser.add_argument(
        "--scope-policy",
        choices=["hash", "random"],
        default=None,
        help="How scope tokens are allocated (default: hash)",
    )
    build_parser.add_argument("--workers", type=int, default=None, help="Pages rendered in parallel")
    build_parser.add_argument("--title", default=None, help="Document <title> for every page")
    build_parser.add_argument(
        "--no-hydrate",
        action="store_true",
        help="Do not inject the hydration bootstrap",
    )

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes the pages directory produces")
    routes_parser.add_argument("pages", nargs="?", default=None, help="Pages directory (default: pages)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "build":
        from wren.cli._build import run_build

        run_build(args)
    elif args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
