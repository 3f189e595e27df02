"""
Rate limiting configuration and setup.

Uses slowapi to enforce a global per-client limit on every route.
Protects against denial-of-service and resource abuse.
Rejections go through the reporting boundary like every other error.
The taxonomy has no throttling kind, so the body says BadRequest while
the status stays 429.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from authapi.core.config import Settings
from authapi.domain.errors import DomainError
from authapi.shared.errors.handlers import error_sink, report

HTTP_429 = 429
RATE_LIMITED_MESSAGE = "Too many requests, please try again later."


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Each instance keeps its own in-memory counters.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
        storage_uri="memory://",
    )


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer rate-limited requests with the uniform error body.

    Synchronous, since slowapi's middleware does not await its handler.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    return report(
        DomainError.bad_request(RATE_LIMITED_MESSAGE),
        error_sink(request),
        request=request,
        cause=exc,
        status=HTTP_429,
    )
