"""Error Handlers — global exception handlers for the exercise tracker API.

Invariants:
    - ExerciseTrackerError → status from STATUS_BY_CATEGORY, body from to_response()
    - STATUS_BY_CATEGORY covers every ErrorCategory member
    - RequestValidationError and any unhandled exception → 400 "Unknown cause",
      never echoing internal details

Design Decisions:
    - Status codes live here, the transport boundary; core errors only carry a category
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from exercise_tracker.core.errors import (
    ErrorCategory, ExerciseTrackerError, UNKNOWN_CAUSE_MESSAGE,
)

logger = logging.getLogger(__name__)

STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.RESOURCE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCategory.UNKNOWN: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: ExerciseTrackerError) -> int:
    return STATUS_BY_CATEGORY[exc.category]


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ExerciseTrackerError)
    async def domain_error_handler(request: Request, exc: ExerciseTrackerError):
        """Handle all exercise tracker domain/infrastructure errors."""
        log = logger.error if exc.category == ErrorCategory.UNKNOWN else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
                "username": exc.context.username,
            },
        )
        return JSONResponse(
            status_code=status_for(exc), content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Framework-level request parsing failures."""
        logger.warning(
            f"Request validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_unknown_error_body(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_unknown_error_body(),
        )


def _unknown_error_body() -> dict:
    return {
        "message": UNKNOWN_CAUSE_MESSAGE,
        "code": "UNKNOWN_ERROR",
        "category": ErrorCategory.UNKNOWN.value,
    }
