"""HTTP middleware: request logging, security headers and body size limit"""

import logging
import time
from typing import Callable

from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from tedx_ndu.handlers import error_response

logger = logging.getLogger(__name__)

BODY_TOO_LARGE = "Request body too large"

CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'self'",
        "connect-src 'self' ws: wss:",
        "script-src 'self' 'unsafe-inline' 'unsafe-eval'",
        "style-src 'self' 'unsafe-inline' https://fonts.googleapis.com",
        "font-src 'self' https://fonts.gstatic.com",
        "img-src 'self' data: https: http:",
        "frame-src 'self'",
    ]
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration for every /api request"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        path = request.url.path
        if path.startswith("/api"):
            logger.info(
                f"{request.method} {path} {response.status_code} in {duration_ms:.0f}ms"
            )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add security headers to all responses
    """

    def __init__(self, app: ASGIApp, hsts: bool = False):
        super().__init__(app)
        self.hsts = hsts

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["Content-Security-Policy"] = CONTENT_SECURITY_POLICY
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Cross-Origin-Opener-Policy"] = "same-origin"
        if self.hsts:
            response.headers["Strict-Transport-Security"] = (
                "max-age=15552000; includeSubDomains"
            )

        return response


class RequestSizeLimitMiddleware:
    """
    Reject request bodies larger than ``max_size`` bytes with 413.

    A declared Content-Length is checked up front. Bodies without one
    (chunked uploads) are counted as they are received; the read that
    crosses the limit raises an HTTPException(413) inside the handler.
    """

    def __init__(self, app: ASGIApp, max_size: int = 10 * 1024):
        self.app = app
        self.max_size = max_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit():
            if int(content_length) > self.max_size:
                logger.warning(
                    f"Request body too large: {content_length} bytes "
                    f"(max: {self.max_size}) on {request.url.path}"
                )
                response = error_response(request, 413, BODY_TOO_LARGE)
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_size:
                    logger.warning(
                        f"Streamed request body exceeded {self.max_size} bytes "
                        f"on {request.url.path}"
                    )
                    raise HTTPException(status_code=413, detail=BODY_TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)
