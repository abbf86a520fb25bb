"""Vhost stage: dispatch a request to a handler when its hostname matches.

Usage::

    from vhost import vhost

    api = vhost("*.example.com", api_handler)
    api(request, response, next_)

On match the ``VhostMatch`` is stored in ``request.context["vhost"]``
and ``api_handler(request, response, next_)`` is called. Otherwise
``next_()`` is called and the request is left untouched. Exactly one of
the two runs per request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from vhost._errors import ArgumentError
from vhost._match import VHOST_KEY, vhost_of
from vhost._pattern import compile_host_pattern

if TYPE_CHECKING:
    from vhost._pattern import HostPattern
    from vhost._types import HostSpec, Next, Stage, VhostRequest


def check_setup(hostname: Any, handle: Any) -> None:
    """Validate factory arguments.

    Raises:
        ArgumentError: If hostname is missing or handle is missing or
            not callable.
    """
    if hostname is None or (isinstance(hostname, str) and not hostname):
        msg = "argument hostname is required"
        raise ArgumentError(msg)
    if handle is None:
        msg = "argument handle is required"
        raise ArgumentError(msg)
    if not callable(handle):
        msg = "argument handle must be a function"
        raise ArgumentError(msg)


@dataclass(frozen=True, slots=True)
class Vhost:
    """A (request, response, next) stage bound to one hostname pattern."""

    pattern: HostPattern
    handle: Stage

    def __call__(self, request: VhostRequest, response: Any, next_: Next) -> Any:
        data = vhost_of(request, self.pattern)
        if data is None:
            return next_()

        request.context[VHOST_KEY] = data
        # The handler owns the rest of the chain from here.
        return self.handle(request, response, next_)


def vhost(hostname: HostSpec, handle: Stage) -> Vhost:
    """Create a vhost stage.

    Args:
        hostname: Literal hostname, possibly with ``*`` wildcards, or a
            pre-built pattern such as ``re.compile(...)``.
        handle: Called as ``handle(request, response, next_)`` on match.

    Raises:
        ArgumentError: On a missing hostname or an unusable handler.
    """
    check_setup(hostname, handle)
    return Vhost(pattern=compile_host_pattern(hostname), handle=handle)
