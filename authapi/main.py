"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, hello, auth) under /api/v1
- Error handlers (centralized reporting boundary)
- Request lifecycle middleware (request id, single response, normalization)
- Security middleware (headers, CORS, rate limiting) and compression
- Logging configuration
- The application context and its startup/shutdown lifecycle

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from authapi.api.v1.router import API_V1_PREFIX
from authapi.api.v1.router import router as v1_router
from authapi.core.config import Settings
from authapi.core.config import settings as default_settings
from authapi.core.context import AppContext, build_context
from authapi.shared.errors.handlers import register_error_handlers
from authapi.shared.logging import configure_logging
from authapi.shared.request_lifecycle import RequestLifecycleMiddleware
from authapi.shared.security.cors import add_cors
from authapi.shared.security.headers import SecurityHeadersMiddleware
from authapi.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)

# only compress responses larger than 1 KiB
GZIP_MINIMUM_SIZE = 1024


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: connect the datastore, then release it on shutdown."""
    context: AppContext = app.state.context
    settings = context.settings
    logger.info(
        "Starting %s %s in %s mode", settings.app_name, settings.version, settings.environment
    )
    await context.startup()
    logger.info("Server running: http://localhost:%d%s", settings.port, API_V1_PREFIX)
    try:
        yield
    finally:
        logger.warning("Server SHUTDOWN")
        await context.shutdown()


def create_app(
    settings: Optional[Settings] = None, context: Optional[AppContext] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Configuration to use. Defaults to the environment.
        context: Prebuilt collaborators. Defaults to ones built from settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    if settings is None:
        settings = context.settings if context is not None else default_settings
    configure_logging(level=settings.log_level)
    if context is None:
        context = build_context(settings)

    docs_url = f"{API_V1_PREFIX}/docs" if settings.is_development else None
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url=f"{API_V1_PREFIX}/openapi.json" if docs_url else None,
        lifespan=lifespan,
    )
    app.state.context = context

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware (each one added wraps the previous ones) ---
    app.add_middleware(RequestLifecycleMiddleware)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        SecurityHeadersMiddleware,
        csp_exempt_prefixes=(docs_url,) if docs_url else (),
    )
    add_cors(app, settings)
    app.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(v1_router)

    return app


app = create_app()
