"""Static path enumeration.

Derives every path the exporter materializes from a registry snapshot, in
``EXPORT_PRIORITY`` order: static pages, then cities (short and long slug),
then providers in registry order (canonical path, then short form).
"""

from collections.abc import Callable, Iterator

from plowfinder.registry.registry import Registry
from plowfinder.routing.route import EXPORT_PRIORITY, ResourceKind, RouteEntry, StaticPage


def _static_entries(registry: Registry) -> Iterator[RouteEntry]:
    for page in StaticPage:
        yield RouteEntry(page.path, ResourceKind.STATIC, page)


def _city_entries(registry: Registry) -> Iterator[RouteEntry]:
    for city in registry.list_cities():
        yield RouteEntry(f"/{city.short_slug}", ResourceKind.CITY, city)
        yield RouteEntry(f"/{city.long_slug}", ResourceKind.CITY, city)


def _provider_entries(registry: Registry) -> Iterator[RouteEntry]:
    for provider in registry.list_providers():
        yield RouteEntry(provider.canonical_path, ResourceKind.PROVIDER, provider)
        if provider.slug:
            yield RouteEntry(f"/{provider.slug}", ResourceKind.PROVIDER, provider, short_form=True)


_PASSES: dict[ResourceKind, Callable[[Registry], Iterator[RouteEntry]]] = {
    ResourceKind.STATIC: _static_entries,
    ResourceKind.CITY: _city_entries,
    ResourceKind.PROVIDER: _provider_entries,
}


def enumerate_routes(registry: Registry) -> list[RouteEntry]:
    """Every exportable path, in the order the exporter must write them.

    Order is the collision-resolution mechanism: an entry that may not
    overwrite (a provider short form) loses to anything listed before it.
    """
    entries: list[RouteEntry] = []
    for kind in EXPORT_PRIORITY:
        entries.extend(_PASSES[kind](registry))
    return entries
