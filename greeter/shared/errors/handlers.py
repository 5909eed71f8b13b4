"""
Centralized error handlers for FastAPI.

Maps domain and transport errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from greeter.domain.greeting.errors import GreetingDomainError, InvalidArgumentError
from greeter.shared.errors.transport import (
    DecodeError,
    PayloadTooLargeError,
    TransportError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_413 = 413
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(DecodeError)
    async def handle_decode(_request: Request, exc: DecodeError) -> JSONResponse:
        """Handle request bodies that do not decode into a request."""
        logger.warning("Decode error: %s", exc.reason)
        return _error_response(HTTP_400, "Malformed request body")

    @app.exception_handler(PayloadTooLargeError)
    async def handle_payload_too_large(
        _request: Request, exc: PayloadTooLargeError
    ) -> JSONResponse:
        """Handle oversized request bodies."""
        logger.warning("Payload too large: %d bytes (limit %d)", exc.size, exc.limit)
        return _error_response(HTTP_413, "Request body too large")

    @app.exception_handler(TransportError)
    async def handle_transport(_request: Request, exc: TransportError) -> JSONResponse:
        """Catch-all for unhandled transport errors."""
        logger.error("Unhandled transport error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        """Handle invalid arguments surfaced in strict mode."""
        logger.warning("Invalid argument: %s", exc.reason)
        return _error_response(HTTP_400, "Invalid argument", exc.reason)

    @app.exception_handler(GreetingDomainError)
    async def handle_greeting_domain(
        _request: Request, exc: GreetingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled greeting domain errors."""
        logger.error("Unhandled greeting domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
