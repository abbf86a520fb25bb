"""HttpRequest — Simple HTTP request context for vhost matching.

Holds method, path, headers (case-insensitive), the host values a
framework may already have parsed, and a per-request context map that
receives the vhost match result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from vhost._match import VHOST_KEY

if TYPE_CHECKING:
    from vhost._match import VhostMatch


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """HTTP request context.

    Headers are stored with lowercased keys for case-insensitive lookup.

    ``hostname`` and ``host`` stand in for values an upstream framework
    has already derived; leave them None to fall back to the Host header.
    ``context`` is the only mutable part and lives as long as the request.
    """

    method: str = "GET"
    path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    hostname: str | None = None
    host: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    _lower_headers: dict[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_lower_headers",
            {k.lower(): v for k, v in self.headers.items()},
        )

    @property
    def vhost(self) -> VhostMatch | None:
        """Match result attached by a vhost stage, if any."""
        return self.context.get(VHOST_KEY)

    def header(self, name: str) -> str | None:
        """Get a header value by name (case-insensitive)."""
        return self._lower_headers.get(name.lower())
