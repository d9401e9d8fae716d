"""
Secure HTTP headers middleware.

Adds security-related headers to every response:
- X-Content-Type-Options
- X-Frame-Options
- Referrer-Policy
- Content-Security-Policy
- Cache-Control

No business logic. Pure cross-cutting concern.
"""

from collections.abc import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
}

# Interactive docs load their own scripts and styles.
DOCS_PATH_PREFIXES = ("/docs", "/redoc", "/openapi.json")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    Headers already set by a route are left untouched. The
    Content-Security-Policy header is skipped on the docs pages.
    """

    def __init__(
        self, app: ASGIApp, headers: Mapping[str, str] | None = None
    ) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        is_docs = request.url.path.startswith(DOCS_PATH_PREFIXES)
        for header_name, header_value in self._headers.items():
            if is_docs and header_name == "Content-Security-Policy":
                continue
            response.headers.setdefault(header_name, header_value)
        return response
