"""
Error types raised by the persistence and service layers.

Services raise these exceptions and the endpoints translate them into
HTTP responses.  ``register_exception_handlers`` also installs the
app‑wide handler that reports request validation failures as
``400 Bad Request`` with a plain message instead of FastAPI's default
``422`` payload.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class UserApiError(Exception):
    """Base class for all errors raised by the User API."""


class InvalidArgumentError(UserApiError):
    """A required argument (usually the user payload) is missing."""


class NotFoundError(UserApiError):
    """No record exists with the requested identifier."""


class DuplicateKeyError(UserApiError):
    """The store rejected a write because the primary key already exists."""


def format_validation_errors(exc: RequestValidationError) -> str:
    """Collapse pydantic validation errors into a single readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 Bad Request."""
    message = format_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
