"""
Custom exception handlers for FastAPI.

Maps the core error taxonomy onto HTTP:
- ValidationError -> 400
- NotFoundError -> 404
- DuplicateRecordError -> 409
- StoreUnavailableError and anything unexpected -> 500 with a generic message

Request IDs are logged server-side for tracing but not exposed in bodies.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
import structlog

from core.errors import (
    DuplicateRecordError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from core.logging import get_logger

logger = get_logger("backend.errors")


def _get_request_id() -> str:
    """Get the current request ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("request_id", "-")


def _response_payload(detail: str, status_code: int) -> dict:
    return {
        "detail": detail,
        "status_code": status_code,
    }


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(str(exc.detail), exc.status_code),
        )

    @app.exception_handler(ValidationError)
    async def record_validation_handler(request: Request, exc: ValidationError):
        logger.info("invalid_record", errors=exc.errors, path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                **_response_payload("Invalid data", status.HTTP_400_BAD_REQUEST),
                "errors": exc.errors,
            },
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_response_payload(f"{exc.kind.capitalize()} not found", status.HTTP_404_NOT_FOUND),
        )

    @app.exception_handler(DuplicateRecordError)
    async def duplicate_handler(request: Request, exc: DuplicateRecordError):
        logger.info("duplicate_record", kind=exc.kind, student_id=exc.identifier)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=_response_payload(
                f"{exc.kind.capitalize()} already exists for {exc.identifier}",
                status.HTTP_409_CONFLICT,
            ),
        )

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
        logger.error(
            "store_unavailable",
            error=str(exc),
            cause=repr(exc.__cause__),
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_response_payload("Internal server error", 500),
        )

    @app.exception_handler(PydanticValidationError)
    async def pydantic_validation_handler(request: Request, exc: PydanticValidationError):
        logger.warning("validation_error", errors=exc.errors(), request_id=_get_request_id())
        return JSONResponse(
            status_code=422,
            content={
                **_response_payload("Validation error", 422),
                "errors": exc.errors(),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        # Full details stay server-side
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=500,
            content=_response_payload("Internal server error", 500),
        )
