"""Hostname extraction from a request's host sources."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vhost._types import VhostRequest


def strip_port(host: str) -> str:
    """Remove a ``:port`` suffix from a raw host value.

    For bracketed IPv6 literals the colon search starts after the
    closing ``]``. The brackets themselves are kept:
    ``"[::1]:8080"`` becomes ``"[::1]"``.
    """
    offset = host.find("]") + 1 if host.startswith("[") else 0
    index = host.find(":", offset)
    return host[:index] if index != -1 else host


def hostname_of(request: VhostRequest) -> str | None:
    """Get the canonical hostname of a request, or None if it has none.

    Sources in priority order: the framework-parsed hostname, the
    framework raw host, then the ``Host`` header.
    """
    host = request.hostname or request.host or request.header("host")
    if not host:
        return None
    return strip_port(host)
