"""Resource registries - cities and providers, loaded once and read-only."""

from plowfinder.registry.cities import CITY_DATA, default_cities
from plowfinder.registry.loader import load_providers, parse_providers
from plowfinder.registry.models import City, Provider
from plowfinder.registry.registry import Registry

__all__ = [
    "CITY_DATA",
    "City",
    "Provider",
    "Registry",
    "default_cities",
    "load_providers",
    "parse_providers",
]
