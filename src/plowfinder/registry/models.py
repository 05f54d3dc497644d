"""City and Provider frozen dataclasses."""

from dataclasses import dataclass, field

from plowfinder.slugs import normalize


@dataclass(frozen=True, slots=True)
class City:
    """A served city.

    ``short_slug`` is ``normalize(name)``; ``long_slug`` appends the SEO
    suffix (``lake-city`` -> ``lake-city-mn-snow-removal``). Both resolve to
    the same city.
    """

    name: str
    short_slug: str
    long_slug: str
    lat: float | None = None
    lng: float | None = None

    @classmethod
    def from_name(
        cls,
        name: str,
        *,
        suffix: str = "mn-snow-removal",
        lat: float | None = None,
        lng: float | None = None,
    ) -> "City":
        short_slug = normalize(name)
        return cls(
            name=name,
            short_slug=short_slug,
            long_slug=normalize(f"{short_slug}-{suffix}"),
            lat=lat,
            lng=lng,
        )

    @property
    def slugs(self) -> tuple[str, str]:
        return (self.short_slug, self.long_slug)


@dataclass(frozen=True, slots=True)
class Provider:
    """A listed snow-removal provider.

    Identity is ``id``. The slug is derived from ``name`` on demand and is
    not unique across providers.
    """

    id: int
    name: str
    service_areas: tuple[str, ...] = ()
    city: str = ""
    services: tuple[str, ...] = ()
    residential: bool = False
    commercial: bool = False
    rural_driveways: bool = False
    twenty_four_seven: bool = False
    phone: str = ""
    website: str = ""
    description: str = ""
    extra: dict[str, object] = field(default_factory=dict, compare=False, hash=False)

    @property
    def slug(self) -> str:
        return normalize(self.name)

    @property
    def canonical_path(self) -> str:
        """``/provider/<id>/<slug>`` - only ``<id>`` takes part in resolution."""
        return f"/provider/{self.id}/{self.slug}"

    def serves(self, city_name: str) -> bool:
        return self.city == city_name or city_name in self.service_areas
