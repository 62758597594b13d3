# app/core/errors.py
"""Contact form error types and their JSON handlers.

The ``ValidationError`` here is the request presence check, not pydantic's;
modules that need both import pydantic's as ``PydanticValidationError``.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = logging.getLogger("uvicorn.error")

REQUIRED_FIELDS_MESSAGE = "All fields are required"
INVALID_BODY_MESSAGE = "Invalid request body"


class ContactFormError(Exception):
    """Base error; ``detail`` is the only text a client ever sees."""

    status_code = 500
    detail = "Server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.detail)


class ValidationError(ContactFormError):
    status_code = 400
    detail = REQUIRED_FIELDS_MESSAGE


class StorageError(ContactFormError):
    status_code = 500
    detail = "Server error"


class StartupError(ContactFormError):
    """Missing or unusable configuration; the process must not serve."""


async def _missing_fields_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    log.error(
        "[storage] %s %s failed: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _request_body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": INVALID_BODY_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _missing_fields_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(RequestValidationError, _request_body_error_handler)
