"""``plowfinder export`` - full static build.

Loads the registry, writes the shell document at every exportable path,
then the sitemap and robots.txt. Exits with code 1 on fatal errors, and
with ``--strict`` also when any provider short URL was skipped.
"""

import argparse
import sys

from plowfinder.cli._common import fail, site_config
from plowfinder.errors import PlowFinderError
from plowfinder.export.build import build_site
from plowfinder.routing.route import ResourceKind


def run_export(args: argparse.Namespace) -> None:
    config = site_config(args)
    try:
        result = build_site(
            args.providers,
            args.shell,
            args.out,
            config=config,
            clean=not args.no_clean,
            sitemap=not args.no_sitemap,
        )
    except PlowFinderError as exc:
        raise fail(exc) from exc

    report = result.report
    print(f"Exported {len(report.written)} paths to {report.output_dir}")
    print(f"  static pages:   {report.count(ResourceKind.STATIC)}")
    print(f"  city pages:     {report.count(ResourceKind.CITY)}")
    print(f"  provider pages: {report.count(ResourceKind.PROVIDER)} ({len(report.short_forms)} short URLs)")
    if result.sitemap:
        print(f"  sitemap URLs:   {len(result.sitemap)}")

    if report.skipped:
        print(f"Skipped {len(report.skipped)} short URLs:", file=sys.stderr)
        for skip in report.skipped:
            provider = skip.entry.ref
            print(f"  {skip.reason}; canonical path {provider.canonical_path}", file=sys.stderr)
        if args.strict:
            raise SystemExit(1)
