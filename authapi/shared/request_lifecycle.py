"""
Request lifecycle middleware.

Pure ASGI middleware wrapping route handling:
- binds a request id to the logging context for the whole request,
- turns any exception escaping the handler into one reported error response,
- guarantees a single response: once headers are sent, a late failure is
  logged as a handler bug and nothing else is written,
- writes nothing when the client goes away or the task is cancelled.
"""

import logging
import re
from uuid import uuid4

from starlette.datastructures import Headers, MutableHeaders
from starlette.requests import ClientDisconnect, Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from authapi.shared.errors.handlers import report_exception
from authapi.shared.logging import request_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _request_id(scope: Scope) -> str:
    incoming = Headers(scope=scope).get(REQUEST_ID_HEADER)
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return uuid4().hex


class RequestLifecycleMiddleware:
    """Single convergence point for failures that escape route handling."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = _request_id(scope)
        response_started = False

        async def send_once(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                if response_started:
                    logger.error("Handler attempted a second response; ignored")
                    return
                response_started = True
                MutableHeaders(scope=message).append(REQUEST_ID_HEADER, request_id)
            await send(message)

        with request_context(request_id):
            try:
                await self.app(scope, receive, send_once)
            except ClientDisconnect:
                logger.info("Client disconnected before a response was sent")
            except Exception as exc:
                if response_started:
                    logger.error(
                        "Handler raised after its response was sent: %s",
                        type(exc).__name__,
                        exc_info=exc,
                    )
                    return
                response = report_exception(Request(scope), exc)
                await response(scope, receive, send_once)
