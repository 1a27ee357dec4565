"""
Error taxonomy and FastAPI exception handlers.

Every failure leaves the API as JSON {"message": "..."}.
Status codes:
- 400: ValidationError, ConflictError, NotFoundError, InvalidCredentialsError
- 401: Unauthorized
- 403: Forbidden
- 500: anything else
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class SmartClassError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SmartClassError):
    default_message = "Missing or invalid fields"


class ConflictError(SmartClassError):
    default_message = "Already exists"


class NotFoundError(SmartClassError):
    default_message = "Not found"


class InvalidCredentialsError(SmartClassError):
    default_message = "Invalid credentials"


class Unauthorized(SmartClassError):
    status_code = 401
    default_message = "Invalid token"


class Forbidden(SmartClassError):
    status_code = 403
    default_message = "Forbidden"


def _message_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turn pydantic's error list into one readable line."""
    parts = []
    for err in exc.errors():
        # loc looks like ("body", "email"); drop the "body" part
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else err.get("msg", "invalid"))
    return "; ".join(parts) or ValidationError.default_message


async def smartclass_error_handler(request: Request, exc: SmartClassError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _message_response(exc.status_code, exc.message, headers)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _message_response(400, _describe_validation_error(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _message_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _message_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the app."""
    app.add_exception_handler(SmartClassError, smartclass_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
