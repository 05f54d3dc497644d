"""Plowfinder CLI - static export, sitemap, and path inspection.

Entry point registered as ``plowfinder`` in ``pyproject.toml``::

    [project.scripts]
    plowfinder = "plowfinder.cli:main"
"""

import argparse
import logging
import sys

DEFAULT_PROVIDERS = "data/providers.json"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--providers",
        default=DEFAULT_PROVIDERS,
        help=f"Provider data file (default: {DEFAULT_PROVIDERS})",
    )
    parser.add_argument("--base-url", default=None, help="Absolute site origin for sitemap URLs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every written file")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``plowfinder`` command."""
    parser = argparse.ArgumentParser(
        prog="plowfinder",
        description="MN Plow Finder - static export and route resolution.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- plowfinder export ------------------------------------------------
    export_parser = subparsers.add_parser("export", help="Write the static path tree, sitemap and robots.txt")
    _add_common(export_parser)
    export_parser.add_argument("--shell", required=True, help="Prerendered app shell document (index.html)")
    export_parser.add_argument("--out", required=True, help="Output directory")
    export_parser.add_argument(
        "--no-clean",
        action="store_true",
        help="Do not clear the output directory first (stale files may block short URLs)",
    )
    export_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any provider short URL was skipped",
    )
    export_parser.add_argument("--no-sitemap", action="store_true", help="Skip sitemap.xml and robots.txt")

    # -- plowfinder sitemap -----------------------------------------------
    sitemap_parser = subparsers.add_parser("sitemap", help="Write sitemap.xml only")
    _add_common(sitemap_parser)
    sitemap_parser.add_argument("--out", required=True, help="Sitemap file path")

    # -- plowfinder resolve -----------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Classify a path")
    _add_common(resolve_parser)
    resolve_parser.add_argument("path", help="Path to classify (e.g. /lake-city)")
    resolve_parser.add_argument("--json", action="store_true", help="Print the resolved record as JSON")

    # -- plowfinder routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List exportable paths in write order")
    _add_common(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "export":
        from plowfinder.cli._export import run_export

        run_export(args)
    elif args.command == "sitemap":
        from plowfinder.cli._sitemap import run_sitemap

        run_sitemap(args)
    elif args.command == "resolve":
        from plowfinder.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "routes":
        from plowfinder.cli._routes import run_routes

        run_routes(args)
