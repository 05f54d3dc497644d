"""The served cities.

Fixed, in-source list with the coordinates the map component consumes.
Order is significant: it is the order cities are listed, exported and
written to the sitemap.
"""

from plowfinder.registry.models import City

# (display name, latitude, longitude)
CITY_DATA: tuple[tuple[str, float, float], ...] = (
    ("Lake City", 44.4430, -92.2668),
    ("Red Wing", 44.5661, -92.5370),
    ("Wabasha", 44.3710, -92.0510),
    ("Frontenac", 44.5110, -92.3568),
    ("Cottage Grove", 44.8277, -92.9438),
    ("Hastings", 44.7443, -92.8605),
    ("Lakeville", 44.6497, -93.2427),
)


def default_cities(suffix: str = "mn-snow-removal") -> tuple[City, ...]:
    """Build the City records for :data:`CITY_DATA`."""
    return tuple(City.from_name(name, suffix=suffix, lat=lat, lng=lng) for name, lat, lng in CITY_DATA)
