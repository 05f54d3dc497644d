"""Static export - path enumeration, shell tree writer, sitemap and robots.txt."""

from plowfinder.export.build import BuildResult, build_site
from plowfinder.export.paths import enumerate_routes
from plowfinder.export.sitemap import SitemapURL, render_sitemap, sitemap_urls, write_sitemap
from plowfinder.export.writer import ExportReport, SkippedRoute, StaticExporter

__all__ = [
    "BuildResult",
    "ExportReport",
    "SitemapURL",
    "SkippedRoute",
    "StaticExporter",
    "build_site",
    "enumerate_routes",
    "render_sitemap",
    "sitemap_urls",
    "write_sitemap",
]
