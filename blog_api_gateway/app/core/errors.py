"""
Application error taxonomy and its mapping onto HTTP responses.

Repositories and services raise subclasses of :class:`AppError`; they
never deal with status codes.  The HTTP boundary is the only layer
that translates an error into a response, which it does through the
handlers installed by :func:`register_exception_handlers`.  Every
error body has the shape ``{"code": ..., "description": ...}``.
"""

import logging
from typing import Iterable, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api_gateway.app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

CODE_BAD_REQUEST = "BadRequest"
CODE_NOT_FOUND = "NotFound"
CODE_UNAUTHORIZED = "Unauthorized"
CODE_METHOD_NOT_ALLOWED = "Method Not Allowed"
CODE_CONFLICT = "Conflict"
CODE_INTERNAL = "InternalServerError"

INTERNAL_ERROR_DESCRIPTION = "Internal server error"
INVALID_ID_DESCRIPTION = "id should be uint"


class AppError(Exception):
    """Base class for errors that carry their own HTTP rendering."""

    code: str = CODE_INTERNAL
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_description: str = INTERNAL_ERROR_DESCRIPTION

    def __init__(self, description: Optional[str] = None) -> None:
        self.description = description or self.default_description
        super().__init__(self.description)


class NotFoundError(AppError):
    """The addressed identifier does not exist in the store."""

    code = CODE_NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_description = "not found"


class BadRequestError(AppError):
    """Malformed transport input such as a non‑integer path id."""

    code = CODE_BAD_REQUEST
    status_code = status.HTTP_400_BAD_REQUEST
    default_description = "bad request"


class ValidationFailedError(BadRequestError):
    """Payload violated one or more declared field rules.

    ``violations`` holds ``(field, rule)`` pairs in the order they were
    reported, e.g. ``("body.title", "string_too_long")``.
    """

    def __init__(self, violations: Iterable[tuple]) -> None:
        self.violations: List[tuple] = list(violations)
        description = ", ".join(f"{field}({rule})" for field, rule in self.violations)
        super().__init__(description or "validation failed")


class ConflictError(AppError):
    """Operation conflicts with the current state of a record."""

    code = CODE_CONFLICT
    status_code = status.HTTP_409_CONFLICT
    default_description = "conflict"


class InternalError(AppError):
    """Unexpected failure; details stay in the server log."""


class SeedError(Exception):
    """Raised when the startup seed document cannot be loaded or applied."""


class ConfigError(Exception):
    """Raised when settings fail validation."""


# Status codes produced by Starlette itself (unknown route, wrong verb,
# explicit HTTPException) and the body rendered for each.
_HTTP_STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: (CODE_BAD_REQUEST, None),
    status.HTTP_401_UNAUTHORIZED: (CODE_UNAUTHORIZED, "Invalid authentication token"),
    status.HTTP_404_NOT_FOUND: (CODE_NOT_FOUND, None),
    status.HTTP_405_METHOD_NOT_ALLOWED: (CODE_METHOD_NOT_ALLOWED, "Method not supported"),
    status.HTTP_409_CONFLICT: (CODE_CONFLICT, None),
}


def error_response(status_code: int, code: str, description: str) -> JSONResponse:
    body = ErrorResponse(code=code, description=description)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def validation_error_from(exc: RequestValidationError) -> BadRequestError:
    """Translate FastAPI's validation error into the application taxonomy.

    A bad path parameter is a transport problem and is reported with a
    fixed message; everything else lists each offending field with the
    pydantic rule tag that rejected it.
    """
    errors = exc.errors()
    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        return BadRequestError(INVALID_ID_DESCRIPTION)
    violations = []
    for err in errors:
        field = ".".join(str(part) for part in err.get("loc", ()))
        violations.append((field, err.get("type", "invalid")))
    return ValidationFailedError(violations)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.description)
        return error_response(exc.status_code, exc.code, INTERNAL_ERROR_DESCRIPTION)
    logger.debug(
        "%s %s -> %s %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.code,
        exc.description,
    )
    return error_response(exc.status_code, exc.code, exc.description)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await app_error_handler(request, validation_error_from(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code not in _HTTP_STATUS_CODES:
        logger.error("%s %s -> unmapped HTTP %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, CODE_INTERNAL, str(exc.detail))
    code, fixed_description = _HTTP_STATUS_CODES[exc.status_code]
    description = fixed_description or str(exc.detail)
    logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, code)
    return error_response(exc.status_code, code, description)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, CODE_INTERNAL, INTERNAL_ERROR_DESCRIPTION)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
