"""
Centralized error mapping for FastAPI.

Maps domain and transport errors to HTTP responses. This is the only
place where failure kinds become status codes. Routes hand ``Err``
values to ``error_response``; errors raised during request handling
reach the same mapping through the registered exception handlers.

Errors with no mapping are re-raised unchanged so Starlette's default
handling applies. No stack traces are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from typing import NamedTuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from qa_service.domain.qa.errors import (
    InvalidIdentifierError,
    MissingParametersError,
    ParseError,
    QADomainError,
    QuestionNotFoundError,
    RangeError,
)
from qa_service.shared.errors.transport import CorsForbiddenError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_403 = 403
HTTP_404 = 404
HTTP_422 = 422
HTTP_429 = 429

_DOMAIN_ERRORS: dict[type[QADomainError], tuple[int, str]] = {
    ParseError: (HTTP_400, "Cannot parse parameter"),
    MissingParametersError: (HTTP_400, "Missing parameters"),
    RangeError: (HTTP_400, "Range out of bounds"),
    InvalidIdentifierError: (HTTP_400, "Invalid identifier"),
    QuestionNotFoundError: (HTTP_404, "Question not found"),
}


class MappedError(NamedTuple):
    """Externally visible form of an error."""

    status_code: int
    error: str
    detail: str


def _validation_detail(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Request body could not be parsed"


def map_error(exc: BaseException) -> MappedError | None:
    """Translate an error into its status code and messages.

    Args:
        exc: A domain or transport error.

    Returns:
        The mapped error, or None if this kind is not recognized.
    """
    if isinstance(exc, QADomainError):
        for kind in type(exc).__mro__:
            if kind in _DOMAIN_ERRORS:
                status_code, error = _DOMAIN_ERRORS[kind]
                return MappedError(status_code, error, exc.message)
        return None
    if isinstance(exc, RequestValidationError):
        return MappedError(HTTP_422, "Invalid request body", _validation_detail(exc))
    if isinstance(exc, CorsForbiddenError):
        return MappedError(HTTP_403, "CORS request forbidden", exc.reason)
    if isinstance(exc, RateLimitExceeded):
        return MappedError(HTTP_429, "Rate limit exceeded", str(exc.detail))
    return None


def error_response(exc: BaseException) -> JSONResponse:
    """Build a consistent JSON error response for a recognized error.

    Raises:
        The original error, unchanged, when it has no mapping.
    """
    mapped = map_error(exc)
    if mapped is None:
        raise exc
    logger.warning(
        "%s -> %d: %s", type(exc).__name__, mapped.status_code, mapped.detail
    )
    return JSONResponse(
        status_code=mapped.status_code,
        content={"error": mapped.error, "detail": mapped.detail},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(QADomainError)
    async def handle_domain_error(
        _request: Request, exc: QADomainError
    ) -> JSONResponse:
        """Handle domain errors raised during validation."""
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request bodies that fail to decode or validate."""
        return error_response(exc)

    @app.exception_handler(CorsForbiddenError)
    async def handle_cors_forbidden(
        _request: Request, exc: CorsForbiddenError
    ) -> JSONResponse:
        """Handle cross-origin requests rejected by the CORS policy."""
        return error_response(exc)

    # Sync on purpose: slowapi's middleware calls this handler without awaiting.
    @app.exception_handler(RateLimitExceeded)
    def handle_rate_limited(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
        """Handle clients over their rate limit."""
        return error_response(exc)
