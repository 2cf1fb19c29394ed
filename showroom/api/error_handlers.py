"""Error Handlers — global exception handlers rendering the failure envelope.

Invariants:
    - ShowroomError → envelope with its code and http_status
    - RequestValidationError → 400 VALIDATION_ERROR with field-level details
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from showroom.core.envelope import error_response
from showroom.core.errors import (
    ErrorCode, ErrorSeverity, RequestValidationFailed, ShowroomError,
)
from showroom.schemas.validation import format_validation_errors

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_showroom_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_showroom_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ShowroomError)
    async def showroom_error_handler(request: Request, exc: ShowroomError):
        """Handle all classified errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{exc.code.value}: {exc.message}",
            extra={
                "error_code": exc.code.value,
                "error_category": exc.category.value,
                "severity": exc.severity.value,
                "path": request.url.path,
                "vehicle_id": exc.context.vehicle_id,
                "procedure": exc.context.procedure,
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
        """Handle framework-level validation errors (e.g. malformed JSON)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = RequestValidationFailed(
            "Validation failed", format_validation_errors(exc.errors()),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(
                "An unexpected error occurred", ErrorCode.INTERNAL_ERROR.value,
            ),
        )
