"""Error Handlers — global exception handlers for the store proxy API.

Invariants:
    - GameStoreError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details
    - Pass-through store statuses never reach these handlers (routes return them)

Design Decisions:
    - Two-layer handler: store (GameStoreError), catch-all (Exception)
    - Extracted from main.py: main only wires the app together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import GameStoreError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_store_error_handler(app)
    _register_generic_error_handler(app)


def _register_store_error_handler(app: FastAPI) -> None:
    """Register store API error handler."""

    @app.exception_handler(GameStoreError)
    async def store_error_handler(request: Request, exc: GameStoreError):
        """Handle store calls that produced no status to pass through."""
        logger.error(
            f"GameStoreError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "upstream_url": exc.context.upstream_url,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
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
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
