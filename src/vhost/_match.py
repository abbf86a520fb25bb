"""Match result and per-request matching.

``vhost_of`` is the request-facing entry point; ``match_host`` is the
request-independent core shared with the ASGI adapter.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from vhost._hostname import hostname_of

if TYPE_CHECKING:
    from vhost._pattern import HostPattern
    from vhost._types import VhostRequest

# Key under which the match result is stored in a request's context map.
VHOST_KEY = "vhost"


@dataclass(frozen=True, slots=True)
class VhostMatch:
    """Result of a successful hostname match.

    ``host`` is the raw Host header (port included), ``hostname`` the
    value the pattern ran against. Captured groups are addressed by
    position, ``match[0]`` through ``match[length - 1]``; a group that
    did not participate is ``None``.
    """

    host: str
    hostname: str
    captures: tuple[str | None, ...] = ()

    @property
    def length(self) -> int:
        """Number of captured groups."""
        return len(self.captures)

    def __len__(self) -> int:
        return len(self.captures)

    @overload
    def __getitem__(self, index: int) -> str | None: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[str | None, ...]: ...
    def __getitem__(self, index: int | slice) -> str | None | tuple[str | None, ...]:
        return self.captures[index]

    def __iter__(self) -> Iterator[str | None]:
        return iter(self.captures)


def match_host(
    pattern: HostPattern, host: str | None, hostname: str | None
) -> VhostMatch | None:
    """Match a hostname and build the result, or None.

    Missing host data is a non-match, not an error.
    """
    if not host or not hostname:
        return None
    captures = pattern.match(hostname)
    if captures is None:
        return None
    return VhostMatch(host=host, hostname=hostname, captures=captures)


def vhost_of(request: VhostRequest, pattern: HostPattern) -> VhostMatch | None:
    """Get the vhost match data of a request for a pattern.

    The ``host`` field always comes straight from the Host header so the
    original value (port included) is preserved.
    """
    return match_host(pattern, request.header("host"), hostname_of(request))
