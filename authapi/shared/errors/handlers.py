"""
Centralized error reporting for FastAPI.

Every failure converges here and leaves as one JSON body:
    {"success": false, "type": <ErrorKind>, "message": <str>}
Domain errors keep their kind and status. Framework HTTP errors are folded
into the taxonomy. Anything else becomes InternalServerError; its message and
stack reach the client only in the development configuration.
Each error is logged exactly once per request.
"""

import logging
import traceback
from contextlib import suppress
from typing import Any, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from authapi.domain.errors import (
    DEFAULT_MESSAGE,
    DomainError,
    ErrorKind,
    kind_for_status,
)
from authapi.shared.validation.schema import pydantic_issue_message

logger = logging.getLogger(__name__)

REPORTED_KEY = "reported_errors"


def error_body(kind: ErrorKind, message: str) -> dict[str, Any]:
    """Build the uniform error payload."""
    return {
        "success": False,
        "type": ErrorKind(kind).value,
        "message": message or DEFAULT_MESSAGE,
    }


def _mark_reported(request: Optional[Request], *errors: BaseException) -> bool:
    """Record the errors as reported. Returns False if one already was."""
    if request is None:
        return True
    seen = getattr(request.state, REPORTED_KEY, None)
    if seen is None:
        seen = set()
        setattr(request.state, REPORTED_KEY, seen)
    ids = {id(e) for e in errors}
    if seen & ids:
        return False
    seen.update(ids)
    return True


def _log(
    sink: Any,
    error: DomainError,
    status: int,
    request: Optional[Request],
    cause: Optional[BaseException],
) -> None:
    method = request.method if request is not None else "-"
    path = request.url.path if request is not None else "-"
    context = {
        "error_type": error.kind.value,
        "status_code": status,
        "error_message": error.message,
        "method": method,
        "path": path,
    }
    # A broken sink must never prevent the response from being sent.
    with suppress(Exception):
        if status >= 500:
            sink.error(
                "%s %s failed: %s (%d) %s",
                method,
                path,
                error.kind.value,
                status,
                error.message,
                exc_info=cause or error,
                extra=context,
            )
        else:
            sink.warning(
                "%s %s rejected: %s (%d) %s",
                method,
                path,
                error.kind.value,
                status,
                error.message,
                extra=context,
            )


def report(
    error: DomainError,
    sink: Any = logger,
    *,
    request: Optional[Request] = None,
    extra: Optional[dict[str, Any]] = None,
    cause: Optional[BaseException] = None,
    status: Optional[int] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Log ``error`` once and build its HTTP response.

    Args:
        error: The domain error to report.
        sink: Logger-like object receiving one entry per error.
        request: The request being served, used for context and de-duplication.
        extra: Additional body fields (development-only details).
        cause: The original exception when ``error`` was derived from one.
        status: Transport status replacing the kind's own, as for 429.
        headers: Response headers to carry over, such as ``Allow`` on a 405.

    Returns:
        A JSON response with ``status``, else the error's own status
        (500 when unrecognized).
    """
    status = status or error.http_status
    related = (error, cause) if cause is not None else (error,)
    if _mark_reported(request, *related):
        _log(sink, error, status, request, cause)

    body = error_body(error.kind, error.message)
    if extra:
        body.update(extra)
    return JSONResponse(status_code=status, content=body, headers=headers)


def normalize(exc: BaseException, debug: bool = False) -> tuple[DomainError, dict[str, Any]]:
    """Translate any exception into a DomainError plus extra body fields."""
    if isinstance(exc, DomainError):
        return exc, {}

    if isinstance(exc, RequestValidationError):
        messages = [pydantic_issue_message(err) for err in exc.errors()]
        return DomainError.validation(messages), {}

    if isinstance(exc, StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else DEFAULT_MESSAGE
        return DomainError(kind_for_status(exc.status_code), message), {}

    if debug:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return DomainError.internal(str(exc) or type(exc).__name__), {"stack": stack}
    return DomainError.internal(), {}


def error_sink(request: Request) -> Any:
    """Return the sink of the application serving ``request``."""
    context = getattr(request.app.state, "context", None)
    return context.error_sink if context is not None else logger


def report_exception(request: Request, exc: BaseException) -> JSONResponse:
    """Report any exception raised while serving ``request``.

    Reads the sink and the development flag from the application context.
    Headers set on an HTTP exception are kept on the response.
    """
    context = getattr(request.app.state, "context", None)
    debug = bool(context and context.settings.is_development)
    error, extra = normalize(exc, debug=debug)
    headers = exc.headers if isinstance(exc, StarletteHTTPException) else None
    return report(
        error,
        error_sink(request),
        request=request,
        extra=extra,
        cause=None if error is exc else exc,
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the reporting boundary on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        """Handle errors raised by validation and by route handlers."""
        return report_exception(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle framework-level parameter validation failures."""
        return report_exception(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle unknown routes, wrong methods and explicit HTTPExceptions."""
        return report_exception(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Last resort for failures raised outside the request lifecycle middleware."""
        return report_exception(request, exc)
