"""Error Hierarchy — typed, categorized exceptions for every book record failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry a user-facing message; internal errors (500-level) never do
    - to_response() produces the REST envelope consumed by api/error_handlers.py

Design Decisions:
    - Single hierarchy with BookRecordError base: one global handler matches every kind
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

GENERIC_ERROR_MESSAGE = "Something went wrong."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error kinds — each maps to exactly one HTTP status at the boundary."""
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    BAD_ARGUMENT = "bad_argument"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    book_id: int | None = None
    debug_info: dict[str, Any] | None = None


class BookRecordError(Exception):
    """Base exception for all book record errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        """Message safe to return to the caller."""
        if self.category == ErrorCategory.INTERNAL:
            return GENERIC_ERROR_MESSAGE
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.public_message,
                "category": self.category.value,
                "severity": self.severity.value,
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class BookRecordNotFoundError(BookRecordError):
    """Referenced book id is absent from storage."""
    def __init__(self, message: str, book_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.book_id = book_id
        super().__init__(
            message, "BOOK_NOT_FOUND", ErrorCategory.NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.book_id = book_id


class BookValidationError(BookRecordError):
    """Book payload failed a field constraint."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class BadArgumentError(BookRecordError):
    """Request argument is malformed (missing or mismatched id)."""
    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_ARGUMENT", ErrorCategory.BAD_ARGUMENT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


# ─── Internal Errors (500-level) ────────────────────────────────

class DatabaseError(BookRecordError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
