"""Core protocols and type aliases for vhost.

- HostSpec is what a caller hands to the pattern compiler
- VhostRequest is the request-side port (host sources + context map)
- Stage/Next are the (request, response, next) middleware shapes
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any, Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class PatternLike(Protocol):
    """A pre-built pattern: anything exposing its expression source.

    ``re.Pattern``, RE2 patterns and ``HostPattern`` all qualify.
    """

    @property
    def pattern(self) -> str: ...


HostSpec: TypeAlias = str | PatternLike

# Continuation into the next stage of the chain.
Next: TypeAlias = Callable[[], Any]

# A middleware stage: (request, response, next).
Stage: TypeAlias = Callable[[Any, Any, Next], Any]


@runtime_checkable
class VhostRequest(Protocol):
    """Request context consumed by the hostname extractor and dispatcher.

    ``hostname`` and ``host`` are values a framework may already have
    parsed; ``header("host")`` is the raw protocol header. The match
    result is written into ``context``.
    """

    @property
    def hostname(self) -> str | None: ...

    @property
    def host(self) -> str | None: ...

    @property
    def context(self) -> MutableMapping[str, Any]: ...

    def header(self, name: str) -> str | None: ...
