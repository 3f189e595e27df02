"""
Secure HTTP headers middleware.

Adds the hardening headers every response should carry (the same set
helmet applies by default): content sniffing, framing, referrer,
cross-origin isolation and transport security.

The interactive docs load their assets from a CDN, so the
Content-Security-Policy is left off the docs pages.
"""

from typing import Iterable, Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

CONTENT_SECURITY_POLICY = "Content-Security-Policy"

SECURE_HEADERS = {
    CONTENT_SECURITY_POLICY: (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';style-src 'self' https: 'unsafe-inline'"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    Args:
        app: The wrapped ASGI application.
        headers: Header name to value mapping. Defaults to SECURE_HEADERS.
        csp_exempt_prefixes: Paths served without a Content-Security-Policy.
    """

    def __init__(
        self,
        app: ASGIApp,
        headers: Optional[Mapping[str, str]] = None,
        csp_exempt_prefixes: Iterable[str] = (),
    ) -> None:
        super().__init__(app)
        self.headers = dict(SECURE_HEADERS if headers is None else headers)
        self.csp_exempt_prefixes = tuple(csp_exempt_prefixes)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        exempt = request.url.path.startswith(self.csp_exempt_prefixes)
        for header_name, header_value in self.headers.items():
            if exempt and header_name == CONTENT_SECURITY_POLICY:
                continue
            response.headers[header_name] = header_value
        return response
