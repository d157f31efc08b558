"""Error Handlers — global exception handlers for the Tareas API.

Invariants:
    - TareasError → exc.http_status with exc.to_response() body
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (TareasError), catch-all (Exception)
    - Domain errors log at their own severity; unhandled errors at ERROR with traceback
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tareas_api.core.errors import ErrorCategory, ErrorSeverity, TareasError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tareas_error_handler(app)
    _register_generic_error_handler(app)


def _register_tareas_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TareasError)
    async def tareas_error_handler(request: Request, exc: TareasError):
        """Handle all Tareas domain errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"TareasError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
