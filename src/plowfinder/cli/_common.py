"""Shared helpers for CLI commands."""

import argparse
import sys

from plowfinder.config import SiteConfig
from plowfinder.errors import PlowFinderError
from plowfinder.registry.registry import Registry


def fail(exc: PlowFinderError) -> SystemExit:
    """Print *exc* to stderr and return the ``SystemExit`` to raise."""
    print(f"Error: {exc}", file=sys.stderr)
    return SystemExit(1)


def site_config(args: argparse.Namespace) -> SiteConfig:
    """Build the SiteConfig from CLI overrides."""
    try:
        if args.base_url:
            return SiteConfig(base_url=args.base_url)
        return SiteConfig()
    except PlowFinderError as exc:
        raise fail(exc) from exc


def load_registry(args: argparse.Namespace) -> Registry:
    try:
        return Registry.load(args.providers)
    except PlowFinderError as exc:
        raise fail(exc) from exc
