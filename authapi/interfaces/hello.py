"""
Hello router.

Demonstrates query validation and a handler-raised domain error:
``GET /hello?error=<anything>`` fails with BadRequest.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from authapi.domain.errors import DomainError
from authapi.interfaces.schemas import ErrorResponse, HelloResponse
from authapi.shared.validation import ValidationSource, validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hello", tags=["hello"])


class HelloQuery(BaseModel):
    error: Optional[str] = None


@router.get(
    "",
    response_model=HelloResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Say hello",
)
async def say_hello(
    query: HelloQuery = Depends(validate(HelloQuery, ValidationSource.QUERY)),
) -> HelloResponse:
    """Greet the caller, or fail on purpose when ``error`` is given."""
    if query.error:
        logger.info("Hello asked to fail with error=%r", query.error)
        raise DomainError.bad_request("Hello")
    return HelloResponse(message="Hello User")
