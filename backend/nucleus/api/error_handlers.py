"""Error Handlers — global exception handlers for the Nucleus API.

Invariants:
    - NucleusError → structured JSON with error code, message, severity
    - RequestValidationError (binding) → 400 with field-level error details
    - RateLimitExceeded → 429 with a fixed plain-text message
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Rule violations do not pass through here: the validation filter returns
      its own 400 response without raising
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded

from nucleus.api.rate_limit import REJECTION_MESSAGE, client_key
from nucleus.core.errors import NucleusError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_nucleus_error_handler(app)
    _register_validation_error_handler(app)
    _register_rate_limit_handler(app)
    _register_generic_error_handler(app)


def _register_nucleus_error_handler(app: FastAPI) -> None:

    @app.exception_handler(NucleusError)
    async def nucleus_error_handler(request: Request, exc: NucleusError):
        """Handle all Nucleus domain errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"NucleusError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request binding error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Binding error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_binding_error_response(exc),
        )


def _register_rate_limit_handler(app: FastAPI) -> None:

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        """Reject with 429; client should retry after the window elapses."""
        logger.warning(
            f"Rate limit exceeded on {request.url.path} ({exc.detail})",
            extra={
                "error_code": "RATE_LIMIT_EXCEEDED",
                "path": request.url.path,
                "client_ip": client_key(request),
            },
        )
        return PlainTextResponse(
            REJECTION_MESSAGE, status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_binding_error_response(exc: RequestValidationError) -> dict:
    """Build structured binding error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
