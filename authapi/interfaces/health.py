"""
Health check router.

Answers liveness probes at the API root. No business logic.
Returns application status, version and a non-decreasing timestamp.
"""

from fastapi import APIRouter, Depends

from authapi.core.context import AppContext, get_context
from authapi.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(context: AppContext = Depends(get_context)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        message="API is live",
        status="ok",
        version=context.settings.version,
        time_stamp=context.clock.now().isoformat(timespec="milliseconds"),
    )
