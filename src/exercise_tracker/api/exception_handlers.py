"""
Exception handlers for the FastAPI application.

This module registers exception handlers that convert application
exceptions to ``{"error": message}`` responses with the matching status.
"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..exceptions import ExerciseTrackerError

logger = logging.getLogger(__name__)


def create_error_response(status_code: int, message: str) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def exercise_tracker_error_handler(
    request: Request,
    exc: ExerciseTrackerError,
) -> JSONResponse:
    """Handle all ExerciseTrackerError exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r} {exc.details}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc!r}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle request parameter validation errors."""
    messages = []
    for error in exc.errors():
        loc = ".".join(str(x) for x in error["loc"])
        messages.append(f"{loc}: {error['msg']}")
    return create_error_response(400, "; ".join(messages) or "invalid request")


async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        f"Unhandled exception: {exc}\n{traceback.format_exc()}"
    )
    return create_error_response(500, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ExerciseTrackerError, exercise_tracker_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Note: This should be last as it catches all Exception types
    app.add_exception_handler(Exception, generic_exception_handler)
