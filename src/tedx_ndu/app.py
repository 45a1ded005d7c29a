"""Application factory for the TEDx NDU backend"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.engine import Engine
from starlette.middleware.sessions import SessionMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from tedx_ndu.auth.session_store import SESSION_MAX_AGE
from tedx_ndu.config import config, is_production
from tedx_ndu.handlers import register_exception_handlers
from tedx_ndu.middleware import (
    RequestLoggingMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from tedx_ndu.models.database import create_db_engine
from tedx_ndu.rate_limiter import create_limiter, exempt_non_api_routes
from tedx_ndu.routers import admin, auth, contact, content, registration
from tedx_ndu.routers.health import health
from tedx_ndu.services.content_service import ContentService

logger = logging.getLogger(__name__)

MAX_BODY_SIZE = 10 * 1024
SESSION_COOKIE = "tedx_session"
ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]


def _check_session_secret(settings: dict) -> str:
    secret = settings.get("session_secret")
    if is_production(settings) and (not secret or len(secret) < 32):
        raise RuntimeError(
            "SESSION_SECRET must be set to a secure random string (>=32 characters)."
        )
    return secret


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"TEDx NDU backend starting ({app.state.settings.get('environment')})"
    )
    yield
    app.state.engine.dispose()
    logger.info("Database pool disposed")


def create_app(
    settings: Optional[dict] = None,
    engine: Optional[Engine] = None,
    session_max_age: timedelta = SESSION_MAX_AGE,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Overrides merged on top of the environment config
        engine: Pre-built engine (tests pass an in-memory SQLite one)
        session_max_age: Lifetime of the session cookie

    Returns:
        Configured FastAPI app with engine, content and limiter on app.state
    """
    settings = {**config, **(settings or {})}
    production = is_production(settings)
    session_secret = _check_session_secret(settings)

    app = FastAPI(
        title="TEDx NDU",
        description="Registration, contact and admin API for the TEDx Nakhchivan State University event",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.engine = engine or create_db_engine(settings["database_url"])
    app.state.content = ContentService(settings["content_dir"])

    limiter = create_limiter(settings["rate_limit"], settings["rate_limit_enabled"])
    app.state.limiter = limiter

    register_exception_handlers(app)

    # Middleware: last added runs first
    app.add_middleware(
        SessionMiddleware,
        secret_key=session_secret,
        session_cookie=SESSION_COOKIE,
        max_age=int(session_max_age.total_seconds()),
        same_site="lax",
        https_only=production,
    )
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(RequestSizeLimitMiddleware, max_size=MAX_BODY_SIZE)
    if production:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings["cors_origins"],
            allow_credentials=True,
            allow_methods=ALLOWED_METHODS,
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=".*",
            allow_credentials=True,
            allow_methods=ALLOWED_METHODS,
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, hsts=production)
    app.add_middleware(RequestLoggingMiddleware)
    # X-Forwarded-For is honoured only from the configured proxies
    app.add_middleware(
        ProxyHeadersMiddleware, trusted_hosts=settings["forwarded_allow_ips"]
    )

    app.include_router(health)
    app.include_router(content.router)
    app.include_router(registration.router)
    app.include_router(contact.router)
    app.include_router(auth.router)
    app.include_router(admin.router)

    exempt_non_api_routes(limiter, app)

    return app
