"""Typed ASGI definitions used by the fallback app."""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias
from urllib.parse import quote

# Raw ASGI types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """The parts of a raw ASGI HTTP scope the fallback app reads."""

    method: str
    path: str
    raw_path: str

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object.

        ``path`` is already percent-decoded by the server. ``raw_path`` keeps
        the undecoded form; servers that omit it get ``path`` re-encoded.
        """
        path = scope["path"]
        raw = scope.get("raw_path")
        return cls(
            method=scope["method"],
            path=path,
            raw_path=raw.decode("latin-1") if raw else quote(path),
        )


async def send_response(
    send: Send,
    *,
    status: int,
    body: bytes,
    headers: tuple[tuple[str, str], ...] = (),
    head_only: bool = False,
) -> None:
    """Send a complete, non-streaming response."""
    raw_headers = [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in headers]
    await send({"type": "http.response.start", "status": status, "headers": raw_headers})
    await send({"type": "http.response.body", "body": b"" if head_only else body})
