"""Plowfinder exception hierarchy.

Shared across the registry, exporter, CLI and fallback app so every module
raises and catches the same types.

Classification never raises: an unresolvable path is a Not-Found
*resolution*, rendered by the fallback app as a 404 page.
"""

from dataclasses import dataclass


class PlowFinderError(Exception):
    """Base for all plowfinder-specific errors."""


class ConfigurationError(PlowFinderError):
    """Raised when site configuration or export arguments are invalid."""


class RegistryError(PlowFinderError):
    """Raised when provider data is missing, unparsable, or inconsistent.

    Always raised while the registry is being built, so a build run halts
    before any output is written.
    """


class ExportError(PlowFinderError):
    """Raised when the static export cannot start (e.g. missing shell document)."""


@dataclass(frozen=True, slots=True)
class HTTPError(PlowFinderError):
    """An error that maps directly to an HTTP status code.

    Raised inside the fallback app and converted to a response there.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class MethodNotAllowed(HTTPError):  # noqa: N818 - conventional name in web frameworks
    """405 - the fallback app only serves GET and HEAD."""

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
