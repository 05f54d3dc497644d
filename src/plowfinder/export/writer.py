"""Static exporter - writes the prerendered shell for every resolvable path.

Two ordered passes over ``enumerate_routes()``:

1. Priority pass: static pages and cities (both slug forms). Always written,
   overwriting whatever is there.
2. Provider pass, in registry order: the canonical ``provider/<id>/<slug>``
   directory is always written (ids are unique, so it cannot collide). The
   bare-slug short form is written only when no directory exists at its
   path yet *and* the classifier resolves it to the same provider; otherwise it is skipped and
   recorded in the report. A skipped provider stays reachable through its
   canonical path.

The skip rule looks at files already on disk, so a run against a stale tree
could be influenced by an earlier registry state. ``export()`` therefore
clears the output directory first unless told otherwise.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from plowfinder.config import SiteConfig
from plowfinder.errors import ConfigurationError, ExportError
from plowfinder.export.paths import enumerate_routes
from plowfinder.registry.registry import Registry
from plowfinder.routing.classifier import Classifier
from plowfinder.routing.route import ResourceKind, Resolution, RouteEntry

logger = logging.getLogger("plowfinder.export")


@dataclass(frozen=True, slots=True)
class SkippedRoute:
    """A provider short form that was not written.

    ``owner`` is what the path resolves to instead.
    """

    entry: RouteEntry
    owner: Resolution

    @property
    def reason(self) -> str:
        if self.owner.ref == self.entry.ref:
            return f"{self.entry.path} is already an exported directory"
        return f"{self.entry.path} already belongs to {self.owner.kind.value} {self.owner.label!r}"


@dataclass(slots=True)
class ExportReport:
    """What an export run wrote and skipped, in write order."""

    output_dir: Path
    written: list[RouteEntry] = field(default_factory=list)
    skipped: list[SkippedRoute] = field(default_factory=list)

    def count(self, kind: ResourceKind) -> int:
        return sum(1 for entry in self.written if entry.kind is kind)

    @property
    def short_forms(self) -> list[RouteEntry]:
        return [entry for entry in self.written if entry.short_form]


class StaticExporter:
    """Materializes the static path tree for a registry snapshot.

    Usage::

        exporter = StaticExporter(registry)
        report = exporter.export("build/index.html", "dist")
        for skip in report.skipped:
            print(skip.reason)
    """

    __slots__ = ("_classifier", "_config", "_registry")

    def __init__(
        self,
        registry: Registry,
        *,
        config: SiteConfig | None = None,
        classifier: Classifier | None = None,
    ) -> None:
        self._registry = registry
        self._config = config or SiteConfig()
        self._classifier = classifier or Classifier(registry)

    def routes(self) -> list[RouteEntry]:
        return enumerate_routes(self._registry)

    def plan(self) -> list[tuple[RouteEntry, SkippedRoute | None]]:
        """Dry run of a clean export: every route paired with its skip, if any.

        Occupancy is tracked in memory from the directories earlier entries
        would create, so nothing is read from or written to disk.
        """
        directories: set[PurePosixPath] = set()
        planned: list[tuple[RouteEntry, SkippedRoute | None]] = []
        for entry in self.routes():
            skip = None
            if entry.short_form:
                skip = self.check_short_form(entry, occupied=entry.output_dir in directories)
            if skip is None:
                directories.add(entry.output_dir)
                directories.update(entry.output_dir.parents)
            planned.append((entry, skip))
        return planned

    def export(
        self,
        shell_path: str | Path,
        output_dir: str | Path,
        *,
        clean: bool = True,
    ) -> ExportReport:
        """Write the shell document at every exportable path under *output_dir*.

        Raises ``ExportError`` before touching the filesystem if the shell
        document is missing, and ``ConfigurationError`` if a clean run would
        delete the shell itself.
        """
        shell_file = Path(shell_path)
        out = Path(output_dir)
        shell = self._read_shell(shell_file)

        if clean:
            self._reset(out, shell_file)
        else:
            logger.warning("Exporting into %s without cleaning; stale files may block short URLs", out)
        out.mkdir(parents=True, exist_ok=True)

        report = ExportReport(output_dir=out)
        for entry in self.routes():
            target = out / entry.output_dir / self._config.index_name
            if entry.short_form:
                skip = self.check_short_form(entry, occupied=target.parent.exists())
                if skip is not None:
                    logger.warning("Skipping short URL: %s", skip.reason)
                    report.skipped.append(skip)
                    continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(shell)
            logger.debug("Wrote %s", target)
            report.written.append(entry)

        logger.info(
            "Exported %d paths to %s (%d static, %d city, %d provider; %d short URLs skipped)",
            len(report.written),
            out,
            report.count(ResourceKind.STATIC),
            report.count(ResourceKind.CITY),
            report.count(ResourceKind.PROVIDER),
            len(report.skipped),
        )
        return report

    def check_short_form(self, entry: RouteEntry, *, occupied: bool) -> SkippedRoute | None:
        """Return a skip record when the short form *entry* must not be written.

        *occupied* tells whether a directory already exists at the entry's path.
        """
        owner = self._classifier.classify(entry.path)
        if occupied or owner.ref != entry.ref:
            return SkippedRoute(entry=entry, owner=owner)
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read_shell(shell_file: Path) -> bytes:
        if not shell_file.is_file():
            msg = f"Prerendered shell document not found: {shell_file}"
            raise ExportError(msg)
        return shell_file.read_bytes()

    @staticmethod
    def _reset(out: Path, shell_file: Path) -> None:
        resolved = out.resolve()
        if shell_file.resolve().is_relative_to(resolved):
            msg = f"Shell document {shell_file} lives inside the output directory {out}; cleaning would delete it"
            raise ConfigurationError(msg)
        if out.exists():
            logger.debug("Removing previous export at %s", out)
            shutil.rmtree(out)
