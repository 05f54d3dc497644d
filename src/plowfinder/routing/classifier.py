"""Route classifier - maps a raw path to the resource it denotes.

The URL namespace is flat and ambiguous: ``/lake-city`` is a city,
``/about`` is a fixed page, ``/glander-excavating`` is a provider. The
classifier settles every path with one fixed precedence, evaluated top to
bottom, first match wins:

1. Canonical provider path ``/provider/<id>[/<anything>]``. Only ``<id>``
   takes part; the trailing segment is cosmetic. An ``<id>`` that is not an
   integer or not registered is NOT_FOUND, with no fall-through to slugs.
2. Fixed static pages (``/`` and the reserved slugs).
3. Cities, by short or long slug.
4. Providers, by derived slug (first provider in registry order).
5. NOT_FOUND.

Static pages and cities sit above provider slugs so that no provider name,
however it normalizes, can shadow them. The exporter relies on the same order
(see ``EXPORT_PRIORITY``) so prerendered files never contradict a runtime
classification.

Classification is pure and never raises for any input string.
"""

from urllib.parse import unquote, urlsplit

from plowfinder.registry.registry import Registry
from plowfinder.routing.params import convert_param
from plowfinder.routing.route import (
    NOT_FOUND,
    RESERVED_SLUGS,
    ResourceKind,
    Resolution,
    StaticPage,
)
from plowfinder.slugs import normalize

CANONICAL_PREFIX = "provider"


def split_path(raw_path: str) -> list[str] | None:
    """Split a raw path into decoded segments.

    Query strings and fragments are dropped, one trailing slash is stripped,
    and the leading slash is optional. Returns ``[]`` for the root path and
    ``None`` for input that is not a path at all (the empty string).

    Examples::

        "/"                    -> []
        "/about/"              -> ["about"]
        "lake-city"            -> ["lake-city"]
        "/provider/13/x?a=1"   -> ["provider", "13", "x"]
        ""                     -> None
    """
    path = urlsplit(raw_path).path if ("?" in raw_path or "#" in raw_path) else raw_path
    if path == "/":
        return []
    if path.endswith("/"):
        path = path[:-1]
    if path.startswith("/"):
        path = path[1:]
    if not path:
        return None
    return [unquote(part) for part in path.split("/")]


class Classifier:
    """Classifies raw paths against a registry snapshot.

    Usage::

        classifier = Classifier(registry)
        classifier.classify("/lake-city-mn-snow-removal")
        # Resolution(kind=ResourceKind.CITY, ref=City(name="Lake City", ...))
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry

    def classify(self, raw_path: str) -> Resolution:
        """Return the resolution for *raw_path* (NOT_FOUND when nothing matches)."""
        segments = split_path(raw_path)
        if segments is None:
            return NOT_FOUND
        if not segments:
            return Resolution(ResourceKind.STATIC, StaticPage.HOME)

        # 1. Canonical provider path
        if len(segments) > 1:
            if segments[0].lower() == CANONICAL_PREFIX:
                return self._classify_canonical(segments[1])
            # The namespace is flat; nothing else lives below the root.
            return NOT_FOUND

        return self.classify_slug(normalize(segments[0]))

    def classify_slug(self, slug: str) -> Resolution:
        """Resolve an already-normalized single-segment slug (steps 2-5)."""
        if not slug:
            return NOT_FOUND

        # 2. Fixed static pages
        page = RESERVED_SLUGS.get(slug)
        if page is not None:
            return Resolution(ResourceKind.STATIC, page)

        # 3. Cities (short and long slugs share one index)
        city = self._registry.city_by_slug.get(slug)
        if city is not None:
            return Resolution(ResourceKind.CITY, city)

        # 4. Providers by derived slug (first in registry order)
        provider = self._registry.provider_by_slug.get(slug)
        if provider is not None:
            return Resolution(ResourceKind.PROVIDER, provider)

        return NOT_FOUND

    def _classify_canonical(self, raw_id: str) -> Resolution:
        try:
            provider_id = convert_param(raw_id, "int")
        except ValueError:
            return NOT_FOUND
        provider = self._registry.provider_by_id.get(provider_id)
        if provider is None:
            return NOT_FOUND
        return Resolution(ResourceKind.PROVIDER, provider)
