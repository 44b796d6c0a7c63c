"""Error Handlers — global exception handlers for the task-board API.

Invariants:
    - TaskBoardError → its own http_status with {"message": ...}
    - RequestValidationError (body not a JSON object, malformed JSON) → 400
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TaskBoardError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from taskboard.core.errors import TaskBoardError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Request body must be a JSON object."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_taskboard_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_taskboard_error_handler(app: FastAPI) -> None:
    """Register task-board domain error handler."""

    @app.exception_handler(TaskBoardError)
    async def taskboard_error_handler(request: Request, exc: TaskBoardError):
        """Handle all task-board domain errors."""
        logger.warning(
            f"TaskBoardError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle unparseable or non-object request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "INVALID_BODY", "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_BODY_MESSAGE},
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
            content={"message": INTERNAL_ERROR_MESSAGE},
        )
