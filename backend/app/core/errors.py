import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_DATA = "invalid data"


class TodoError(Exception):
    """Base class for failures of a todo operation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TodoNotFound(TodoError):
    pass


class StorageError(TodoError):
    pass


class ApiError(Exception):
    """Raised by route handlers; rendered as {"error": message}."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: ApiError):
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
    return error_response(400, INVALID_DATA)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
