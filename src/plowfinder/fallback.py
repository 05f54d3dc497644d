"""Runtime resolution fallback.

The runtime counterpart of the static export: any path, exported or not, is
classified with the same :class:`Classifier` the exporter uses and rendered
as the matching page, or as the Not-Found page. A provider added after the
last export therefore resolves correctly from the live registry, and can
never shadow a city or a fixed page.

``FallbackApp`` wraps the resolver as an ASGI application. When given an
export directory it serves prerendered files first and only classifies paths
the export does not cover.
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kida import Environment

from plowfinder._internal.asgi import HTTPScope, Receive, Scope, Send, send_response
from plowfinder.config import SiteConfig
from plowfinder.errors import ConfigurationError, HTTPError, MethodNotAllowed
from plowfinder.registry.models import City, Provider
from plowfinder.registry.registry import Registry
from plowfinder.routing.classifier import Classifier
from plowfinder.routing.route import Resolution, StaticPage
from plowfinder.templating.integration import create_environment, render_template

logger = logging.getLogger("plowfinder.fallback")

_HTML = "text/html; charset=utf-8"
_ALLOWED_METHODS = frozenset({"GET", "HEAD"})

STATIC_TEMPLATES: dict[StaticPage, str] = {
    StaticPage.HOME: "pages/home.html",
    StaticPage.ABOUT: "pages/about.html",
    StaticPage.PARTNER: "pages/partner.html",
    StaticPage.CLAIM_LISTING: "pages/claim_listing.html",
}
CITY_TEMPLATE = "pages/city.html"
PROVIDER_TEMPLATE = "pages/provider.html"
NOT_FOUND_TEMPLATE = "pages/not_found.html"


@dataclass(frozen=True, slots=True)
class RenderedPage:
    resolution: Resolution
    status: int
    body: str


class PageResolver:
    """Classifies a path and renders the page it denotes.

    Usage::

        resolver = PageResolver(registry)
        page = resolver.resolve("/provider/13/whatever")
        page.status   # 200
    """

    __slots__ = ("_classifier", "_config", "_env", "_registry")

    def __init__(
        self,
        registry: Registry,
        *,
        config: SiteConfig | None = None,
        env: Environment | None = None,
        classifier: Classifier | None = None,
    ) -> None:
        self._registry = registry
        self._config = config or SiteConfig()
        self._env = env or create_environment(self._config)
        self._classifier = classifier or Classifier(registry)

    @property
    def classifier(self) -> Classifier:
        return self._classifier

    def resolve(self, path: str) -> RenderedPage:
        """Classify and render *path*, an undecoded URL path as sent by the client."""
        resolution = self._classifier.classify(path)
        if not resolution.found:
            logger.debug("No resource for %r", path)
        return self.render(resolution)

    def render(self, resolution: Resolution) -> RenderedPage:
        template, context = self._page_context(resolution)
        canonical = resolution.canonical_path
        context["canonical_url"] = self._config.absolute_url(canonical) if canonical else None
        body = render_template(self._env, template, **context)
        return RenderedPage(resolution=resolution, status=200 if resolution.found else 404, body=body)

    def _page_context(self, resolution: Resolution) -> tuple[str, dict[str, Any]]:
        ref = resolution.ref
        if isinstance(ref, StaticPage):
            context: dict[str, Any] = {}
            if ref is StaticPage.HOME:
                context["cities"] = self._registry.list_cities()
            return STATIC_TEMPLATES[ref], context
        if isinstance(ref, City):
            return CITY_TEMPLATE, {"city": ref, "providers": self._registry.providers_serving(ref)}
        if isinstance(ref, Provider):
            return PROVIDER_TEMPLATE, {"provider": ref}
        return NOT_FOUND_TEMPLATE, {}


class FallbackApp:
    """ASGI app: prerendered files first, classifier-rendered pages otherwise.

    Security: resolves symlinks and verifies the final path is within the
    export directory to prevent path traversal.
    """

    __slots__ = ("_directory", "_index", "_resolver")

    def __init__(
        self,
        resolver: PageResolver,
        *,
        directory: str | Path | None = None,
        index: str = "index.html",
    ) -> None:
        self._resolver = resolver
        self._directory = Path(directory).resolve() if directory is not None else None
        self._index = index

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return
        if scope["type"] != "http":
            msg = f"FallbackApp only serves HTTP, got scope type {scope['type']!r}"
            raise ConfigurationError(msg)

        request = HTTPScope.from_scope(scope)
        try:
            status, body, headers = self._dispatch(request)
        except HTTPError as exc:
            logger.debug("%d %s %s - %s", exc.status, request.method, request.path, exc.detail)
            status = exc.status
            body = exc.detail.encode("utf-8")
            headers = (("Content-Type", "text/plain; charset=utf-8"), *exc.headers)

        await send_response(
            send,
            status=status,
            body=body,
            headers=(*headers, ("Content-Length", str(len(body)))),
            head_only=request.method == "HEAD",
        )

    def _dispatch(self, request: HTTPScope) -> tuple[int, bytes, tuple[tuple[str, str], ...]]:
        if request.method not in _ALLOWED_METHODS:
            raise MethodNotAllowed(_ALLOWED_METHODS)

        file_path = self._find_file(request.path)
        if file_path is not None:
            content_type, _ = mimetypes.guess_type(str(file_path))
            if content_type is None:
                content_type = "application/octet-stream"
            elif content_type.startswith("text/"):
                content_type += "; charset=utf-8"
            return 200, file_path.read_bytes(), (("Content-Type", content_type),)

        page = self._resolver.resolve(request.raw_path)
        return page.status, page.body.encode("utf-8"), (("Content-Type", _HTML),)

    def _find_file(self, path: str) -> Path | None:
        if self._directory is None:
            return None
        relative = path.lstrip("/")
        file_path = (self._directory / relative).resolve() if relative else self._directory
        if not file_path.is_relative_to(self._directory):
            raise HTTPError(status=403, detail="Forbidden")
        if file_path.is_dir():
            file_path = file_path / self._index
        return file_path if file_path.is_file() else None

    @staticmethod
    async def _lifespan(receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return


def create_app(
    providers_path: str | Path,
    *,
    directory: str | Path | None = None,
    config: SiteConfig | None = None,
) -> FallbackApp:
    """Load the registry once and build an ASGI app over it.

    For ASGI servers that take a factory, e.g.
    ``create_app("data/providers.json", directory="dist")``.
    """
    config = config or SiteConfig()
    registry = Registry.load(providers_path)
    return FallbackApp(PageResolver(registry, config=config), directory=directory, index=config.index_name)
