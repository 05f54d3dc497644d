"""``plowfinder sitemap`` - write sitemap.xml without exporting the tree."""

import argparse

from plowfinder.cli._common import load_registry, site_config
from plowfinder.export.sitemap import write_sitemap


def run_sitemap(args: argparse.Namespace) -> None:
    config = site_config(args)
    registry = load_registry(args)
    urls = write_sitemap(registry, args.out, config=config)
    print(f"Sitemap written to {args.out} ({len(urls)} URLs)")
