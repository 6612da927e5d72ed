"""Error Handlers — global exception handlers for the book records API.

Invariants:
    - BookRecordError → structured JSON with code, message, category, severity
    - RequestValidationError on the body → 400 VALIDATION_ERROR with field details
    - RequestValidationError on path/query parameters → 400 BAD_ARGUMENT
    - Exception (catch-all) → 500 with the fixed generic message, never internal details
    - Every handled failure is logged with its exception and traceback before responding

Design Decisions:
    - Three-layer handler: domain (BookRecordError), validation (Pydantic), catch-all (Exception)
    - Error kind read from exc.category: one handler serves every BookRecordError subclass
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    BookRecordError, ErrorCategory, ErrorSeverity, GENERIC_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)

_PARAMETER_LOCATIONS = ("path", "query", "header", "cookie")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_book_record_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_book_record_error_handler(app: FastAPI) -> None:
    """Register book record domain/infrastructure error handler."""

    @app.exception_handler(BookRecordError)
    async def book_record_error_handler(request: Request, exc: BookRecordError):
        """Handle all book record errors."""
        logger.error(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "book_id": exc.context.book_id,
            },
            exc_info=exc,
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.error(
            f"Validation error on {request.method} {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
            exc_info=exc,
        )
        if _is_parameter_error(exc):
            content = _build_bad_argument_response(exc)
        else:
            content = _build_validation_error_response(exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=content,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": GENERIC_ERROR_MESSAGE,
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _is_parameter_error(exc: RequestValidationError) -> bool:
    """True when every error points at a path/query/header/cookie parameter."""
    errors = exc.errors()
    return bool(errors) and all(
        e["loc"] and e["loc"][0] in _PARAMETER_LOCATIONS for e in errors
    )


def _build_bad_argument_response(exc: RequestValidationError) -> dict:
    """Build bad argument response naming the first offending parameter."""
    first = exc.errors()[0]
    location = first["loc"][0]
    name = ".".join(str(loc) for loc in first["loc"][1:])
    return {
        "error": {
            "code": "BAD_ARGUMENT",
            "message": f"Invalid {location} parameter '{name}': {first['msg']}",
            "category": ErrorCategory.BAD_ARGUMENT.value,
            "severity": ErrorSeverity.ERROR.value,
        },
    }


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
