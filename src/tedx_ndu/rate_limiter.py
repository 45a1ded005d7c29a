"""
Rate limiting for the public API.

One fixed-window counter per client IP, shared by every /api route and kept
in process memory. Everything outside /api (health checks, docs) is exempt.
The limiter is built per application so tests can disable it or use a tiny
window.
"""

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.util import get_remote_address

API_PREFIX = "/api"


def create_limiter(limit: str, enabled: bool = True) -> Limiter:
    """
    Create the application's limiter.

    Args:
        limit: limits-style string, e.g. "100/15 minutes"
        enabled: False turns every check into a no-op
    """
    # Application limits share one counter across routes, unlike default_limits
    return Limiter(
        key_func=get_remote_address,
        application_limits=[limit],
        storage_uri="memory://",
        strategy="fixed-window",
        enabled=enabled,
    )


def exempt_non_api_routes(limiter: Limiter, app: FastAPI) -> None:
    """Exempt every registered route whose path lies outside /api"""
    for route in app.routes:
        endpoint = getattr(route, "endpoint", None)
        path = getattr(route, "path", "")
        if endpoint is not None and not path.startswith(API_PREFIX):
            limiter.exempt(endpoint)
