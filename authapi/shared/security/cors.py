"""
CORS configuration.

In development every origin is allowed. Otherwise only whitelisted
origins (plus PROD_URL) get CORS headers; requests without an Origin
header, such as server-to-server calls, are unaffected.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authapi.core.config import Settings

logger = logging.getLogger(__name__)


def allowed_origins(settings: Settings) -> list[str]:
    """Return the origin whitelist for the current configuration."""
    if settings.is_development:
        return ["*"]
    origins = list(settings.whitelist_origins)
    prod_url = (settings.prod_url or "").rstrip("/")
    if prod_url and prod_url not in origins:
        origins.append(prod_url)
    return origins


def add_cors(app: FastAPI, settings: Settings) -> None:
    """Install the CORS middleware on ``app``."""
    origins = allowed_origins(settings)
    logger.debug("CORS origins: %s", origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
