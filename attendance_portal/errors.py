"""Error taxonomy and its mapping onto HTTP responses.

Every failure reaches the client as ``{"error": "<message>"}``.
"""
import logging

from bson.errors import BSONError
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """A natural key (email, class name) is already taken."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreError(AppError):
    def __init__(self, message: str = "Server Error"):
        super().__init__(message)


def error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # Drop the leading "body"/"path" marker so the message names the field.
    loc = [str(part) for part in first.get("loc", ())[1:]]
    if loc:
        return f"{'.'.join(loc)}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "Invalid request")


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return error_response(ValidationError(message))

    @app.exception_handler(PyMongoError)
    @app.exception_handler(BSONError)
    async def store_error_handler(request: Request, exc: Exception):
        logger.exception("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(StoreError())
