"""Exception handlers mapping failures to plain-text HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from exercise_tracker.exceptions import ExerciseTrackerError, ValidationError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "not found"
ROUTING_MISS_STATUSES = frozenset(
    {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}
)
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def error_response(status_code: int, message: str | None) -> PlainTextResponse:
    """Build the plain-text error body used for every failure."""
    return PlainTextResponse(message or INTERNAL_ERROR_MESSAGE, status_code=status_code)


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> PlainTextResponse:
    """Report the first field error of a validation failure."""
    first_message = next(iter(exc.errors.values()), exc.message)
    return error_response(status.HTTP_400_BAD_REQUEST, first_message)


async def application_error_handler(
    request: Request, exc: ExerciseTrackerError
) -> PlainTextResponse:
    """Report an application error with its declared status."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Report routing and framework HTTP errors.

    Routes match on method and path, so a known path requested with another
    method is a miss like any unknown path.
    """
    if exc.status_code in ROUTING_MISS_STATUSES:
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> PlainTextResponse:
    """Report any other failure as a generic server error."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ExerciseTrackerError, application_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
