"""Tests for the HttpRequest context."""

from __future__ import annotations

from vhost import VHOST_KEY, VhostMatch, VhostRequest
from vhost.http import HttpRequest


class TestHttpRequest:
    def test_defaults(self) -> None:
        req = HttpRequest()
        assert req.method == "GET"
        assert req.path == "/"
        assert req.hostname is None
        assert req.host is None
        assert req.context == {}

    def test_path_kept_verbatim(self) -> None:
        assert HttpRequest(path="/search?q=vhost").path == "/search?q=vhost"

    def test_header_case_insensitive(self) -> None:
        req = HttpRequest(headers={"Host": "example.com"})
        assert req.header("host") == "example.com"
        assert req.header("HOST") == "example.com"
        assert req.header("x-missing") is None

    def test_vhost_reads_context(self) -> None:
        req = HttpRequest()
        data = VhostMatch("example.com", "example.com")
        req.context[VHOST_KEY] = data
        assert req.vhost is data

    def test_contexts_not_shared(self) -> None:
        a, b = HttpRequest(), HttpRequest()
        a.context["x"] = 1
        assert b.context == {}

    def test_satisfies_request_protocol(self) -> None:
        assert isinstance(HttpRequest(), VhostRequest)
