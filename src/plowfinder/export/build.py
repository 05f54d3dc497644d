"""Full site build: static path tree, sitemap and robots.txt.

Mirrors the deploy pipeline: load the registry (fatal on bad data, before any
output exists), clear and rewrite the export tree, then write the sitemap and
robots.txt into its root.
"""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from plowfinder.config import SiteConfig
from plowfinder.export.sitemap import SitemapURL, render_robots, write_sitemap
from plowfinder.export.writer import ExportReport, StaticExporter
from plowfinder.registry.registry import Registry
from plowfinder.templating.integration import create_environment

logger = logging.getLogger("plowfinder.export")


@dataclass(frozen=True, slots=True)
class BuildResult:
    report: ExportReport
    sitemap: tuple[SitemapURL, ...] = ()


def build_site(
    providers_path: str | Path,
    shell_path: str | Path,
    output_dir: str | Path,
    *,
    config: SiteConfig | None = None,
    clean: bool = True,
    sitemap: bool = True,
    today: date | None = None,
) -> BuildResult:
    """Run the complete export for the provider file at *providers_path*."""
    config = config or SiteConfig()
    registry = Registry.load(providers_path)

    report = StaticExporter(registry, config=config).export(shell_path, output_dir, clean=clean)
    if not sitemap:
        return BuildResult(report=report)

    out = Path(output_dir)
    env = create_environment(config)
    urls = write_sitemap(registry, out / config.sitemap_name, config=config, env=env, today=today)
    (out / config.robots_name).write_text(render_robots(env, config), encoding="utf-8")
    logger.debug("Wrote %s", out / config.robots_name)
    return BuildResult(report=report, sitemap=tuple(urls))
