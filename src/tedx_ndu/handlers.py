"""Exception handlers producing the ``{message, timestamp, path}`` envelope"""

import logging
import traceback
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from tedx_ndu.config import is_production
from tedx_ndu.errors import SiteError

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later"


def error_response(
    request: Request,
    status_code: int,
    message: str,
    exc: BaseException | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    """Build the JSON error envelope; outside production it carries exc's traceback"""
    body = {
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
    }
    settings = getattr(request.app.state, "settings", {})
    if exc is not None and not is_production(settings):
        body["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def site_error_handler(request: Request, exc: SiteError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}", exc_info=exc)
    return error_response(request, exc.status_code, exc.message, exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected body for {request.url.path}: {exc.errors()}")
    return error_response(request, 400, "Invalid request body", exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(
        request,
        exc.status_code,
        str(exc.detail),
        exc,
        headers=getattr(exc, "headers", None),
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    # Sync on purpose: SlowAPIMiddleware calls the handler without awaiting it
    logger.warning(f"[RateLimit] Exceeded for {request.client.host if request.client else '?'}: {exc.detail}")
    return error_response(request, 429, RATE_LIMIT_MESSAGE, exc)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return error_response(request, 500, "Internal Server Error", exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SiteError, site_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
