"""Exception handlers that turn errors into ``{"error": message}`` bodies.

Services raise domain exceptions; the HTTP status is decided here so that
endpoints stay free of try/except boilerplate.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from cattery.domain.exceptions import (
    AuthenticationError,
    ConcurrentModificationError,
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def _http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, _first_validation_message(exc))


async def _validation_failed(request: Request, exc: ValidationFailedError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


async def _authentication(request: Request, exc: AuthenticationError) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, exc.message)


async def _permission_denied(request: Request, exc: PermissionDeniedError) -> JSONResponse:
    logger.info("Denied %s %s: %s", request.method, request.url.path, exc)
    return _error(
        status.HTTP_403_FORBIDDEN,
        f"You do not have permission to modify this {exc.entity_type.lower()}.",
    )


async def _not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, f"{exc.entity_type} not found.")


async def _duplicate(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    if exc.entity_type == "User":
        message = "Username already exists."
    elif exc.entity_type == "Adoption":
        message = "You have already adopted this cat."
    else:
        message = str(exc)
    return _error(status.HTTP_409_CONFLICT, message)


async def _concurrent_modification(request: Request, exc: ConcurrentModificationError) -> JSONResponse:
    return _error(
        status.HTTP_409_CONFLICT,
        f"This {exc.entity_type.lower()} was changed by someone else. Please try again.",
    )


async def _database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Query failed.")


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error.")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(ValidationFailedError, _validation_failed)
    app.add_exception_handler(AuthenticationError, _authentication)
    app.add_exception_handler(PermissionDeniedError, _permission_denied)
    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(DuplicateEntityError, _duplicate)
    app.add_exception_handler(ConcurrentModificationError, _concurrent_modification)
    app.add_exception_handler(SQLAlchemyError, _database_error)
    app.add_exception_handler(Exception, _unhandled)
