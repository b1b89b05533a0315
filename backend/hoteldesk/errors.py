"""API error types and the exception handlers that render them.

Every error leaves the service as ``{"error": <message>, "code": <CODE>}``.
"""

import logging
import re

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_snake
from sqlalchemy.exc import IntegrityError

from hoteldesk.config import settings

logger = logging.getLogger(__name__)

_CODE_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class BadRequestError(ApiError):
    """Input failed validation."""

    def __init__(self, message: str, code: str):
        super().__init__(message, code, status.HTTP_400_BAD_REQUEST)


class NotFoundError(ApiError):
    """The target entity, or an entity it references, does not exist."""

    def __init__(self, message: str, code: str):
        super().__init__(message, code, status.HTTP_404_NOT_FOUND)


class UnauthorizedError(ApiError):
    """Missing or insufficiently privileged session."""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(message, code, status.HTTP_401_UNAUTHORIZED)


def error_body(message: str, code: str) -> dict[str, str]:
    return {"error": message, "code": code}


def _validation_code(error: dict) -> str:
    """Derive a machine-readable code from a single Pydantic error entry.

    Validators raise ``PydanticCustomError`` with the code as the error type;
    anything else (type coercion of query params, broken JSON) gets a code
    built from the offending location.
    """
    error_type = error.get("type", "")
    if _CODE_PATTERN.match(error_type):
        return error_type
    if error_type == "json_invalid":
        return "INVALID_JSON"

    loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part not in ("body", "query")]
    if loc:
        return "INVALID_" + to_snake(loc[-1]).upper()
    return "INVALID_REQUEST"


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.code))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid request", "INVALID_REQUEST"),
        )

    first = errors[0]
    code = _validation_code(first)
    message = first.get("msg", "Invalid request")
    # Custom errors already carry a human-readable message; strip pydantic's prefix.
    message = message.removeprefix("Value error, ")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message, code))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Integrity violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Operation violates a data integrity constraint", "CONSTRAINT_VIOLATION"),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = "Internal server error"
    if settings.debug:
        message = f"{message}: {exc}"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(message, "INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
