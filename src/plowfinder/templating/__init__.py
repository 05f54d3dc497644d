"""Kida environment setup for the sitemap, robots.txt and fallback pages."""

from plowfinder.templating.integration import create_environment, render_template

__all__ = ["create_environment", "render_template"]
