"""Test utilities for vhost.

Call recorders standing in for handlers and next-stage continuations,
so tests can assert which of the two a stage invoked.

>>> from vhost import vhost
>>> from vhost.testing import Recorder, host_request
>>> handle, next_ = Recorder(), Recorder()
>>> vhost("example.com", handle)(host_request("example.com"), None, next_)
>>> handle.count, next_.count
(1, 0)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vhost.http import HttpRequest


def host_request(host: str | None, **kwargs: Any) -> HttpRequest:
    """Build an HttpRequest whose only header is Host (or no headers)."""
    headers = {"Host": host} if host is not None else {}
    return HttpRequest(headers=headers, **kwargs)


@dataclass(slots=True)
class Recorder:
    """Callable that records the positional arguments of every call.

    Usable as a handler ``(request, response, next_)`` or as a bare
    ``next_()`` continuation. Returns ``result`` from each call.
    """

    result: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.result

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def called(self) -> bool:
        return bool(self.calls)


@dataclass(slots=True)
class Forwarder:
    """Handler that records its call and then continues the chain."""

    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, request: Any, response: Any, next_: Any) -> Any:
        self.calls.append((request, response, next_))
        return next_()

    @property
    def count(self) -> int:
        return len(self.calls)
