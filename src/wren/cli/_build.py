"""``wren build`` — render the pages directory into static files.

Prints a one-line summary to stdout. Exits with code 1 on any wren
error (bad config, broken page module, failing style function).
"""

import argparse
import sys

from wren.cli._config import config_from_args, configure_logging
from wren.errors import WrenError


def run_build(args: argparse.Namespace) -> None:
    """Build the site described by ``args``."""
    from wren.site import Site

    config = config_from_args(args)
    configure_logging(config)

    try:
        site = Site(config)
        pages = site.build()
    except WrenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    hydrated = sum(1 for page in pages.values() if page.needs_hydration)
    print(f"Built {len(pages)} page(s) into {site.out_dir} ({hydrated} with scripts)")
