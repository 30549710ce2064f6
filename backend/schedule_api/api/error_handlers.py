"""Error Handlers — global exception handlers rendering the response envelope.

Invariants:
    - ScheduleApiError → its own status and to_response() envelope
    - RequestValidationError → 400 "All fields are required!" (body not a JSON object)
    - Exception (catch-all) → 500 "Internal Server Error", never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ScheduleApiError), validation (Pydantic), catch-all
    - Client errors logged at WARNING, store failures at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schedule_api.core.errors import (
    ScheduleApiError, INTERNAL_ERROR_MESSAGE, MISSING_FIELDS_MESSAGE,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_schedule_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_schedule_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ScheduleApiError)
    async def schedule_error_handler(request: Request, exc: ScheduleApiError):
        """Handle all schedule domain/store errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"ScheduleApiError: {exc.message}"
            + (f" ({exc.detail})" if exc.detail else ""),
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle unparseable request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": MISSING_FIELDS_MESSAGE},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": INTERNAL_ERROR_MESSAGE},
        )
