"""Resolution and RouteEntry frozen dataclasses, plus the resource kinds."""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

from plowfinder.registry.models import City, Provider


class ResourceKind(Enum):
    STATIC = "static"
    CITY = "city"
    PROVIDER = "provider"
    NOT_FOUND = "not_found"


class StaticPage(Enum):
    """Fixed pages. The value is the page's reserved slug ("" for home)."""

    HOME = ""
    ABOUT = "about"
    PARTNER = "partner"
    CLAIM_LISTING = "claim-listing"

    @property
    def slug(self) -> str:
        return self.value

    @property
    def path(self) -> str:
        return f"/{self.value}"

    @property
    def title(self) -> str:
        return self.name.replace("_", " ").title()


# Reserved slug -> page. Home has no slug; it is only reachable as "/".
RESERVED_SLUGS: dict[str, StaticPage] = {page.slug: page for page in StaticPage if page.slug}

# Collision priority shared by the exporter and the classifier: resources of an
# earlier kind always own a contested path over resources of a later kind.
EXPORT_PRIORITY: tuple[ResourceKind, ...] = (
    ResourceKind.STATIC,
    ResourceKind.CITY,
    ResourceKind.PROVIDER,
)

Resource = StaticPage | City | Provider


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of classifying a path. ``ref`` is ``None`` only for NOT_FOUND."""

    kind: ResourceKind
    ref: Resource | None = None

    @property
    def found(self) -> bool:
        return self.kind is not ResourceKind.NOT_FOUND

    @property
    def canonical_path(self) -> str | None:
        """The preferred public path for the resolved resource.

        Cities prefer the long slug; providers their id-based path.
        """
        ref = self.ref
        if isinstance(ref, StaticPage):
            return ref.path
        if isinstance(ref, City):
            return f"/{ref.long_slug}"
        if isinstance(ref, Provider):
            return ref.canonical_path
        return None

    @property
    def label(self) -> str:
        ref = self.ref
        if isinstance(ref, StaticPage):
            return ref.title
        if isinstance(ref, (City, Provider)):
            return ref.name
        return "Not Found"


NOT_FOUND = Resolution(ResourceKind.NOT_FOUND)


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One path the exporter materializes.

    ``short_form`` entries are the bare-slug provider paths: they are written
    only when nothing already occupies the path. Every other entry overwrites.
    """

    path: str
    kind: ResourceKind
    ref: Resource
    short_form: bool = False

    @property
    def output_dir(self) -> PurePosixPath:
        """Directory, relative to the export root, holding this path's file."""
        return PurePosixPath(self.path.strip("/"))
