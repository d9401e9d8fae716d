"""
CORS policy enforcement.

Starlette's CORSMiddleware answers a rejected preflight with a plain
400 and lets simple requests from unknown origins through without
CORS headers. This subclass rejects both as forbidden, rendered by the
shared error mapper, so clients get a 403 JSON error naming the reason.
"""

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import Receive, Scope, Send

from qa_service.shared.errors.handlers import error_response
from qa_service.shared.errors.transport import CorsForbiddenError

DISALLOWED_PREFIX = "Disallowed CORS "


class ForbiddingCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that answers disallowed requests with 403."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers=request_headers)
        if response.status_code < 400:
            return response

        failures = bytes(response.body).decode("utf-8").removeprefix(DISALLOWED_PREFIX)
        reason = (
            f"disallowed {failures} "
            f"(origin={request_headers.get('origin')!r}, "
            f"method={request_headers.get('access-control-request-method')!r})"
        )
        return error_response(CorsForbiddenError(reason))

    async def simple_response(
        self, scope: Scope, receive: Receive, send: Send, request_headers: Headers
    ) -> None:
        # Requests without an Origin header are not cross-origin
        origin = request_headers.get("origin")
        if origin is not None and not self.is_allowed_origin(origin=origin):
            response = error_response(
                CorsForbiddenError(f"disallowed origin {origin!r}")
            )
            await response(scope, receive, send)
            return
        await super().simple_response(scope, receive, send, request_headers=request_headers)
