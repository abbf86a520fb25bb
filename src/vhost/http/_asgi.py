"""ASGI adapter: route requests to a sub-application by Host header.

Example::

    api = VhostMiddleware(site_app, "*.api.example.com", api_app)

Requests whose Host matches go to ``api_app`` with the match result in
``scope["vhost"]``; everything else goes to ``site_app`` unchanged.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, MutableMapping
from typing import TYPE_CHECKING, Any, TypeAlias

from vhost._hostname import strip_port
from vhost._match import VHOST_KEY, match_host
from vhost._middleware import check_setup
from vhost._pattern import compile_host_pattern

if TYPE_CHECKING:
    from vhost._types import HostSpec

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]

_ROUTED_SCOPES = frozenset({"http", "websocket"})


def _host_header(scope: Scope) -> str | None:
    for name, value in scope.get("headers", ()):
        if name.lower() == b"host":
            return value.decode("latin-1")
    return None


class VhostMiddleware:
    """ASGI middleware dispatching on the request's Host header.

    ASGI servers pass no pre-parsed hostname, so the Host header is the
    only source.
    """

    def __init__(self, app: ASGIApp, hostname: HostSpec, handle: ASGIApp) -> None:
        check_setup(hostname, handle)
        self.app = app
        self.handle = handle
        self.pattern = compile_host_pattern(hostname)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in _ROUTED_SCOPES:
            await self.app(scope, receive, send)
            return

        host = _host_header(scope)
        data = match_host(self.pattern, host, strip_port(host) if host else None)
        if data is None:
            await self.app(scope, receive, send)
            return

        await self.handle({**scope, VHOST_KEY: data}, receive, send)
