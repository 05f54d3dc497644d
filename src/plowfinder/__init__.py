"""Plowfinder - slug resolution and static export for MN Plow Finder.

Maps the site's flat URL namespace (fixed pages, cities, providers) to
resources, and materializes a prerendered file for every resolvable path.

Basic usage::

    from plowfinder import Classifier, Registry, StaticExporter

    registry = Registry.load("data/providers.json")
    Classifier(registry).classify("/lake-city")
    StaticExporter(registry).export("build/index.html", "dist")
"""

__version__ = "0.1.0"
__all__ = [
    "City",
    "Classifier",
    "ConfigurationError",
    "ExportError",
    "FallbackApp",
    "PageResolver",
    "PlowFinderError",
    "Provider",
    "Registry",
    "RegistryError",
    "ResourceKind",
    "Resolution",
    "SiteConfig",
    "StaticExporter",
    "StaticPage",
    "build_site",
    "normalize",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import plowfinder`` fast (kida is only imported when a page or
    sitemap is rendered).
    """
    if name == "normalize":
        from plowfinder.slugs import normalize

        return normalize

    if name == "SiteConfig":
        from plowfinder.config import SiteConfig

        return SiteConfig

    if name in ("City", "Provider", "Registry"):
        import plowfinder.registry as registry_pkg

        return getattr(registry_pkg, name)

    if name in ("Classifier", "ResourceKind", "Resolution", "StaticPage"):
        import plowfinder.routing as routing_pkg

        return getattr(routing_pkg, name)

    if name in ("StaticExporter", "build_site"):
        import plowfinder.export as export_pkg

        return getattr(export_pkg, name)

    if name in ("FallbackApp", "PageResolver"):
        import plowfinder.fallback as fallback_mod

        return getattr(fallback_mod, name)

    if name in ("PlowFinderError", "ConfigurationError", "RegistryError", "ExportError"):
        import plowfinder.errors as errors_mod

        return getattr(errors_mod, name)

    msg = f"module 'plowfinder' has no attribute {name!r}"
    raise AttributeError(msg)
