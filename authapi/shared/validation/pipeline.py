"""
Validation step for FastAPI routes.

``validate(schema, source)`` builds a dependency that reads one section of
the inbound request, parses it with the schema and hands the normalized
payload to the route. Schema violations become a single ValidationError
DomainError; any other failure propagates untouched to the error boundary.

Usage:
    @router.post("/login")
    async def login(payload: dict = Depends(validate(LoginSchema))):
        ...
"""

import json
import logging
from enum import Enum
from typing import Any, Awaitable, Callable
from urllib.parse import parse_qsl

from fastapi import Request

from authapi.domain.errors import DomainError
from authapi.shared.validation.schema import SchemaViolation, as_schema

logger = logging.getLogger(__name__)

MALFORMED_BODY = "Malformed JSON body"
MALFORMED_FORM = "Malformed form body"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ValidationSource(str, Enum):
    """Which part of the inbound request a schema applies to."""

    BODY = "body"
    QUERY = "query"
    HEADER = "header"
    PARAMS = "params"

    @property
    def coerces(self) -> bool:
        """Sections that only carry text get numbers/booleans coerced."""
        return self is not ValidationSource.BODY


async def _read_body(request: Request) -> tuple[Any, bool]:
    """Return the decoded body and whether it arrived as text-only form data."""
    raw = await request.body()
    if not raw.strip():
        return {}, False
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPE):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DomainError.bad_request(MALFORMED_FORM) from exc
        return dict(parse_qsl(text, keep_blank_values=True)), True
    try:
        return json.loads(raw), False
    except ValueError as exc:
        raise DomainError.bad_request(MALFORMED_BODY) from exc


async def read_section(request: Request, source: ValidationSource) -> tuple[Any, bool]:
    """Extract the raw data of one request section.

    Returns:
        The section data and whether string coercion applies to it.
    """
    if source is ValidationSource.BODY:
        return await _read_body(request)
    if source is ValidationSource.QUERY:
        return dict(request.query_params), True
    if source is ValidationSource.HEADER:
        return dict(request.headers), True
    return dict(request.path_params), True


def validated_view(request: Request) -> dict[str, Any]:
    """Return the per-request mapping of source name to validated payload."""
    view = getattr(request.state, "validated", None)
    if view is None:
        view = {}
        request.state.validated = view
    return view


def validate(
    schema, source: ValidationSource = ValidationSource.BODY
) -> Callable[[Request], Awaitable[Any]]:
    """Build a dependency validating ``source`` of the request with ``schema``.

    Args:
        schema: A Schema, or a pydantic model class.
        source: The request section to validate.

    Returns:
        An async dependency returning the normalized payload. The payload
        also replaces the section in ``request.state.validated``, so later
        dependencies and the handler see the parsed data.

    Raises:
        DomainError: ValidationError listing every violation, comma-joined.
    """
    parser = as_schema(schema)
    source = ValidationSource(source)

    async def validation_step(request: Request) -> Any:
        data, coerce = await read_section(request, source)
        try:
            payload = parser.parse(data, coerce=coerce)
        except SchemaViolation as exc:
            logger.debug(
                "Validation of %s failed with %d issue(s)", source.value, len(exc.issues)
            )
            raise DomainError.validation(exc.messages) from exc
        validated_view(request)[source.value] = payload
        return payload

    validation_step.__name__ = f"validate_{source.value}"
    return validation_step
