"""vhost.http — HTTP request context and ASGI adapter.

Provides the HttpRequest context consumed by vhost stages and the
VhostMiddleware ASGI adapter.
"""

from vhost.http._asgi import VhostMiddleware
from vhost.http._request import HttpRequest

__all__ = [
    # Context
    "HttpRequest",
    # ASGI
    "VhostMiddleware",
]
