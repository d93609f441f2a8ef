"""Error Handlers: global exception handlers for the UniBridge API.

Invariants:
    - UniBridgeError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (UniBridgeError), validation (Pydantic), catch-all (Exception)
    - Operation failures never reach these handlers: services/operations.py turns them
      into outcomes first; these cover everything outside an operation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from unibridge.core.errors import UniBridgeError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UniBridgeError)
    async def unibridge_error_handler(request: Request, exc: UniBridgeError):
        """Handle UniBridge domain/infrastructure errors raised outside operations."""
        logger.error(
            f"UniBridgeError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "status_code": 400},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "status_code": 500},
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


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
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
