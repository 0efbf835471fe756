"""Shared CLI helpers — config overrides and logging setup."""

import argparse
import dataclasses
import logging
from typing import Any

from wren.config import SiteConfig


def config_from_args(args: argparse.Namespace, base: SiteConfig | None = None) -> SiteConfig:
    """Apply CLI flags on top of *base* (or the defaults).

    Only flags the user actually passed override config fields.
    """
    config = base or SiteConfig()
    overrides: dict[str, Any] = {}

    if getattr(args, "pages", None):
        overrides["pages_dir"] = args.pages
    if getattr(args, "out", None):
        overrides["out_dir"] = args.out
    if getattr(args, "scope_policy", None):
        overrides["scope_policy"] = args.scope_policy
    if getattr(args, "workers", None) is not None:
        overrides["workers"] = args.workers
    if getattr(args, "title", None) is not None:
        overrides["title"] = args.title
    if getattr(args, "no_hydrate", False):
        overrides["hydrate"] = False
    if getattr(args, "log_level", None):
        overrides["log_level"] = args.log_level

    return dataclasses.replace(config, **overrides) if overrides else config


def configure_logging(config: SiteConfig) -> None:
    """Send ``wren.*`` log records to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )
