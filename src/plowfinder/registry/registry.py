"""Immutable registry of cities and providers.

Built once per process (a build run or an app session) from the ordered
source lists, then only read. All lookup indices are computed in the
constructor so a lookup is a single dict access:

- ``city_by_slug``: short and long slug -> City
- ``provider_by_id``: id -> Provider
- ``provider_by_slug``: derived slug -> Provider, first writer wins in
  source order (a later provider with the same slug never replaces it)
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from plowfinder.errors import RegistryError
from plowfinder.registry.cities import default_cities
from plowfinder.registry.loader import iter_service_areas, load_providers
from plowfinder.registry.models import City, Provider
from plowfinder.slugs import is_slug

logger = logging.getLogger("plowfinder.registry")


class Registry:
    """Read-only snapshot of the known cities and providers.

    Usage::

        registry = Registry.load("data/providers.json")
        registry.city_by_slug["lake-city"]
        registry.provider_by_id[13]
    """

    __slots__ = (
        "_cities",
        "_providers",
        "city_by_slug",
        "provider_by_id",
        "provider_by_slug",
        "_providers_by_city",
    )

    def __init__(self, cities: Iterable[City], providers: Iterable[Provider]) -> None:
        self._cities: tuple[City, ...] = tuple(cities)
        self._providers: tuple[Provider, ...] = tuple(providers)

        city_index: dict[str, City] = {}
        for city in self._cities:
            for slug in city.slugs:
                if not is_slug(slug):
                    msg = f"City {city.name!r} has malformed slug {slug!r}"
                    raise RegistryError(msg)
                owner = city_index.get(slug)
                if owner is not None and owner is not city:
                    msg = f"City slug {slug!r} is shared by {owner.name!r} and {city.name!r}"
                    raise RegistryError(msg)
                city_index[slug] = city

        by_id: dict[int, Provider] = {}
        by_slug: dict[str, Provider] = {}
        for provider in self._providers:
            if provider.id in by_id:
                msg = f"Duplicate provider id {provider.id}"
                raise RegistryError(msg)
            by_id[provider.id] = provider
            slug = provider.slug
            if not slug:
                continue
            if slug in by_slug:
                logger.debug(
                    "Provider %d (%s) shares slug %r with provider %d",
                    provider.id,
                    provider.name,
                    slug,
                    by_slug[slug].id,
                )
                continue
            by_slug[slug] = provider

        by_city: dict[str, tuple[Provider, ...]] = {
            city.name: tuple(p for p in self._providers if p.serves(city.name))
            for city in self._cities
        }

        unknown = iter_service_areas(self._providers) - set(by_city)
        if unknown:
            logger.debug("Service areas without a city page: %s", ", ".join(sorted(unknown)))

        self.city_by_slug: Mapping[str, City] = MappingProxyType(city_index)
        self.provider_by_id: Mapping[int, Provider] = MappingProxyType(by_id)
        self.provider_by_slug: Mapping[str, Provider] = MappingProxyType(by_slug)
        self._providers_by_city: Mapping[str, tuple[Provider, ...]] = MappingProxyType(by_city)

    @classmethod
    def load(
        cls,
        providers_path: str | Path,
        *,
        cities: Iterable[City] | None = None,
    ) -> "Registry":
        """Load providers from *providers_path* and pair them with the city list.

        Raises ``RegistryError`` if the provider file is missing or malformed.
        """
        providers = load_providers(providers_path)
        return cls(default_cities() if cities is None else cities, providers)

    def list_cities(self) -> tuple[City, ...]:
        """Cities in source order."""
        return self._cities

    def list_providers(self) -> tuple[Provider, ...]:
        """Providers in source order."""
        return self._providers

    def providers_serving(self, city: City) -> tuple[Provider, ...]:
        """Providers based in or serving *city*, in source order."""
        return self._providers_by_city.get(city.name, ())

    def slug_collisions(self) -> dict[str, tuple[Provider, ...]]:
        """Slugs derived from more than one provider name, in source order.

        The first provider of each group owns the slug.
        """
        groups: dict[str, list[Provider]] = {}
        for provider in self._providers:
            if provider.slug:
                groups.setdefault(provider.slug, []).append(provider)
        return {slug: tuple(group) for slug, group in groups.items() if len(group) > 1}

    def __repr__(self) -> str:
        return f"Registry(cities={len(self._cities)}, providers={len(self._providers)})"
