"""Tests for the VhostMiddleware ASGI adapter."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from vhost import ArgumentError, VhostMatch
from vhost.http import VhostMiddleware


@dataclass
class App:
    """ASGI app recording the scopes it was called with."""

    scopes: list[dict[str, Any]] = field(default_factory=list)

    async def __call__(self, scope: Any, receive: Any, send: Any) -> None:
        self.scopes.append(scope)


async def _receive() -> dict[str, Any]:
    return {"type": "http.request"}


async def _send(message: Any) -> None:
    return None


def _scope(host: bytes | None, type_: str = "http") -> dict[str, Any]:
    headers = [(b"accept", b"*/*")]
    if host is not None:
        headers.append((b"host", host))
    return {"type": type_, "path": "/", "headers": headers}


def _run(mw: VhostMiddleware, scope: dict[str, Any]) -> None:
    asyncio.run(mw(scope, _receive, _send))


class TestVhostMiddleware:
    def test_match_routes_to_handle(self) -> None:
        app, api = App(), App()
        mw = VhostMiddleware(app, "*.example.com", api)
        scope = _scope(b"api.example.com:8000")
        _run(mw, scope)

        assert app.scopes == []
        assert len(api.scopes) == 1
        assert api.scopes[0]["vhost"] == VhostMatch(
            "api.example.com:8000", "api.example.com", ("api",)
        )
        assert "vhost" not in scope

    def test_no_match_routes_to_app(self) -> None:
        app, api = App(), App()
        scope = _scope(b"other.org")
        _run(VhostMiddleware(app, "*.example.com", api), scope)
        assert api.scopes == []
        assert app.scopes == [scope]

    def test_missing_host_routes_to_app(self) -> None:
        app, api = App(), App()
        _run(VhostMiddleware(app, "example.com", api), _scope(None))
        assert api.scopes == []
        assert len(app.scopes) == 1

    def test_websocket_routed(self) -> None:
        app, api = App(), App()
        _run(VhostMiddleware(app, "example.com", api), _scope(b"EXAMPLE.com", "websocket"))
        assert len(api.scopes) == 1

    def test_lifespan_passed_through(self) -> None:
        app, api = App(), App()
        scope = {"type": "lifespan"}
        _run(VhostMiddleware(app, "example.com", api), scope)
        assert app.scopes == [scope]
        assert api.scopes == []

    def test_ipv6_host(self) -> None:
        app, api = App(), App()
        _run(VhostMiddleware(app, "[::1]", api), _scope(b"[::1]:8080"))
        assert api.scopes[0]["vhost"].hostname == "[::1]"

    def test_setup_validation(self) -> None:
        with pytest.raises(ArgumentError, match="hostname is required"):
            VhostMiddleware(App(), "", App())
        with pytest.raises(ArgumentError, match="must be a function"):
            VhostMiddleware(App(), "example.com", 42)  # type: ignore[arg-type]
