"""Sitemap and robots.txt generation.

One absolute URL per static page, city and provider. Providers are listed by
their canonical ``/provider/<id>/<slug>`` path only; short URLs are never
listed because they are not guaranteed unique. Cities are listed by their
long (SEO) slug.
"""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from kida import Environment

from plowfinder.config import SiteConfig
from plowfinder.registry.registry import Registry
from plowfinder.routing.route import ResourceKind, StaticPage
from plowfinder.templating.integration import create_environment, render_template

logger = logging.getLogger("plowfinder.export")


@dataclass(frozen=True, slots=True)
class SitemapURL:
    loc: str
    lastmod: str
    changefreq: str
    priority: str


# (changefreq, priority)
HOME_WEIGHT = ("daily", "1.0")
STATIC_WEIGHT = ("monthly", "0.6")
KIND_WEIGHTS: dict[ResourceKind, tuple[str, str]] = {
    ResourceKind.CITY: ("weekly", "0.7"),
    ResourceKind.PROVIDER: ("weekly", "0.8"),
}


def sitemap_urls(
    registry: Registry,
    config: SiteConfig,
    *,
    today: date | None = None,
) -> list[SitemapURL]:
    """Build the sitemap entries: static pages, then cities, then providers."""
    lastmod = (today or date.today()).isoformat()
    urls: list[SitemapURL] = []

    for page in StaticPage:
        changefreq, priority = HOME_WEIGHT if page is StaticPage.HOME else STATIC_WEIGHT
        urls.append(SitemapURL(config.absolute_url(page.path), lastmod, changefreq, priority))

    changefreq, priority = KIND_WEIGHTS[ResourceKind.CITY]
    for city in registry.list_cities():
        urls.append(SitemapURL(config.absolute_url(f"/{city.long_slug}"), lastmod, changefreq, priority))

    changefreq, priority = KIND_WEIGHTS[ResourceKind.PROVIDER]
    for provider in registry.list_providers():
        urls.append(SitemapURL(config.absolute_url(provider.canonical_path), lastmod, changefreq, priority))

    return urls


def render_sitemap(env: Environment, urls: list[SitemapURL]) -> str:
    return render_template(env, "sitemap.xml", urls=urls)


def render_robots(env: Environment, config: SiteConfig) -> str:
    return render_template(env, "robots.txt", sitemap_url=config.absolute_url(f"/{config.sitemap_name}"))


def write_sitemap(
    registry: Registry,
    path: str | Path,
    *,
    config: SiteConfig | None = None,
    env: Environment | None = None,
    today: date | None = None,
) -> list[SitemapURL]:
    """Render the sitemap for *registry* and write it to *path*."""
    config = config or SiteConfig()
    env = env or create_environment(config)
    urls = sitemap_urls(registry, config, today=today)

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_sitemap(env, urls), encoding="utf-8")
    logger.info(
        "Sitemap written to %s (%d URLs: %d static, %d cities, %d providers)",
        target,
        len(urls),
        len(StaticPage),
        len(registry.list_cities()),
        len(registry.list_providers()),
    )
    return urls
