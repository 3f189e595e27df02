"""
Version 1 of the HTTP API.

Aggregates the routers of every bounded context under one prefix.
The health check answers at the prefix itself.
"""

from fastapi import APIRouter

from authapi.interfaces.auth.router import router as auth_router
from authapi.interfaces.health import router as health_router
from authapi.interfaces.hello import router as hello_router

API_V1_PREFIX = "/api/v1"

router = APIRouter()
router.include_router(health_router, prefix=API_V1_PREFIX)
router.include_router(hello_router, prefix=API_V1_PREFIX)
router.include_router(auth_router, prefix=API_V1_PREFIX)
