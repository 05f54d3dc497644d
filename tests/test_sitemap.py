"""Tests for plowfinder.export.sitemap - sitemap entries and rendering."""

import re
from datetime import date
from pathlib import Path
from xml.etree import ElementTree

from plowfinder.config import SiteConfig
from plowfinder.export.sitemap import render_robots, sitemap_urls, write_sitemap
from plowfinder.registry import Registry
from plowfinder.routing import StaticPage
from plowfinder.templating import create_environment

NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}
TODAY = date(2026, 10, 19)


class TestSitemapURLs:
    def test_completeness(self, registry: Registry) -> None:
        urls = sitemap_urls(registry, SiteConfig(), today=TODAY)
        expected = len(StaticPage) + len(registry.list_cities()) + len(registry.list_providers())
        assert len(urls) == expected

    def test_absolute_urls_under_domain(self, registry: Registry) -> None:
        pattern = re.compile(r"^https://mnplowfinder\.com/[a-z0-9/-]*$")
        for url in sitemap_urls(registry, SiteConfig(), today=TODAY):
            assert pattern.match(url.loc), url.loc

    def test_unique_locations(self, registry: Registry) -> None:
        locs = [url.loc for url in sitemap_urls(registry, SiteConfig(), today=TODAY)]
        assert len(locs) == len(set(locs))

    def test_static_weights(self, registry: Registry) -> None:
        urls = sitemap_urls(registry, SiteConfig(), today=TODAY)
        home, about = urls[0], urls[1]
        assert (home.loc, home.changefreq, home.priority) == ("https://mnplowfinder.com/", "daily", "1.0")
        assert (about.loc, about.changefreq, about.priority) == ("https://mnplowfinder.com/about", "monthly", "0.6")

    def test_cities_use_long_slug(self, registry: Registry) -> None:
        urls = sitemap_urls(registry, SiteConfig(), today=TODAY)
        city = urls[len(StaticPage)]
        assert city.loc == "https://mnplowfinder.com/lake-city-mn-snow-removal"
        assert (city.changefreq, city.priority) == ("weekly", "0.7")

    def test_providers_use_canonical_path(self, registry: Registry) -> None:
        urls = sitemap_urls(registry, SiteConfig(), today=TODAY)
        provider_locs = [u.loc for u in urls if "/provider/" in u.loc]
        assert provider_locs == [
            "https://mnplowfinder.com/provider/13/glander-excavating",
            "https://mnplowfinder.com/provider/2/red-wing-plow-and-haul",
            "https://mnplowfinder.com/provider/5/glander-excavating",
            "https://mnplowfinder.com/provider/8/lake-city",
            "https://mnplowfinder.com/provider/9/about",
        ]
        assert "https://mnplowfinder.com/glander-excavating" not in {u.loc for u in urls}

    def test_lastmod(self, registry: Registry) -> None:
        assert {u.lastmod for u in sitemap_urls(registry, SiteConfig(), today=TODAY)} == {"2026-10-19"}

    def test_base_url_override(self, registry: Registry) -> None:
        config = SiteConfig(base_url="https://staging.example.com/")
        assert sitemap_urls(registry, config, today=TODAY)[1].loc == "https://staging.example.com/about"


class TestRenderedSitemap:
    def test_well_formed_xml(self, registry: Registry, tmp_path: Path) -> None:
        path = tmp_path / "public" / "sitemap.xml"
        urls = write_sitemap(registry, path, today=TODAY)

        root = ElementTree.fromstring(path.read_bytes())
        entries = root.findall("sm:url", NS)
        assert len(entries) == len(urls)
        first = entries[0]
        assert first.findtext("sm:loc", namespaces=NS) == "https://mnplowfinder.com/"
        assert first.findtext("sm:lastmod", namespaces=NS) == "2026-10-19"
        assert first.findtext("sm:changefreq", namespaces=NS) == "daily"
        assert first.findtext("sm:priority", namespaces=NS) == "1.0"

    def test_robots(self) -> None:
        config = SiteConfig()
        text = render_robots(create_environment(config), config)
        assert "User-agent: *" in text
        assert "Sitemap: https://mnplowfinder.com/sitemap.xml" in text
