"""Immutable HTTP request metadata.

The query extractor reads parameters from ``Request.query``. Only the
metadata an ASGI scope carries is modelled; the body is not read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from http_helpers import headers as h
from http_helpers.config import QueryConfig
from http_helpers.http.headers import Headers
from http_helpers.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation.

    Build one per ASGI call with ``Request.from_asgi(scope)`` and pass it
    straight to the ``http_helpers.query`` functions.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get(h.CONTENT_TYPE)

    @property
    def user_agent(self) -> str | None:
        """The User-Agent header value."""
        return self.headers.get(h.USER_AGENT)

    @property
    def url(self) -> str:
        """Request path plus the raw query string, if any."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], config: QueryConfig | None = None) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b""), config),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )
