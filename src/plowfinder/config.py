"""Site configuration.

SiteConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from plowfinder.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(base_url="https://staging.mnplowfinder.com")
    """

    # Site identity
    base_url: str = "https://mnplowfinder.com"
    site_name: str = "MN Plow Finder"
    domain: str = "mnplowfinder.com"
    info_email: str = "info@mnplowfinder.com"  # Residents / general
    providers_email: str = "providers@mnplowfinder.com"  # Providers / partners

    # Slugs
    city_slug_suffix: str = "mn-snow-removal"

    # Export tree
    index_name: str = "index.html"
    sitemap_name: str = "sitemap.xml"
    robots_name: str = "robots.txt"

    # Templates
    template_dir: str | Path | None = None  # Searched before the packaged templates
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            msg = f"base_url must be an absolute http(s) URL, got {self.base_url!r}"
            raise ConfigurationError(msg)
        if parts.path not in ("", "/"):
            msg = f"base_url must not carry a path, got {self.base_url!r}"
            raise ConfigurationError(msg)

    @property
    def origin(self) -> str:
        """``base_url`` without a trailing slash."""
        return self.base_url.rstrip("/")

    def absolute_url(self, path: str) -> str:
        """Join a site-relative *path* onto the origin.

        ``"/"`` maps to ``"https://host/"``; every other path is joined as-is.
        """
        if not path.startswith("/"):
            path = "/" + path
        return self.origin + path
