"""Error Hierarchy — typed, categorized exceptions for every schedule API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404) are recoverable; store errors (500) are critical
    - to_response() always produces the {success, message, data?, error?} envelope
    - `error` carries the underlying driver message only for 500-level failures

Design Decisions:
    - Single hierarchy with ScheduleApiError base: one global handler renders all of them
    - InvalidScheduleIdError subclasses StoreError: a malformed id stays on the 500 path
      clients already handle, but can still be told apart in logs and tests
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EMPTY_RESULT = "empty_result"
    DATABASE = "database"
    INTERNAL = "internal"


MISSING_FIELDS_MESSAGE = "All fields are required!"
SCHEDULE_NOT_FOUND_MESSAGE = "Schedule not found"
NO_SCHEDULES_MESSAGE = "No schedules found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ScheduleApiError(Exception):
    """Base exception for all schedule API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.detail = detail

    def to_response(self) -> dict:
        """Convert to the standard response envelope."""
        body = {"success": False, "message": self.message}
        if self.detail is not None:
            body["error"] = self.detail
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingFieldsError(ScheduleApiError):
    """One or more of title/day/date/time is absent or falsy."""
    def __init__(self, fields: list[str]):
        super().__init__(
            MISSING_FIELDS_MESSAGE, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.fields = fields


class ScheduleNotFoundError(ScheduleApiError):
    """Identifier is well-formed but matches no record."""
    def __init__(self, schedule_id: str):
        super().__init__(
            SCHEDULE_NOT_FOUND_MESSAGE, "SCHEDULE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )
        self.schedule_id = schedule_id


class NoSchedulesFoundError(ScheduleApiError):
    """Listing succeeded but the collection is empty."""
    def __init__(self):
        super().__init__(
            NO_SCHEDULES_MESSAGE, "NO_SCHEDULES", ErrorCategory.EMPTY_RESULT,
            ErrorSeverity.INFO, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(ScheduleApiError):
    """Document store operation failed."""
    def __init__(self, detail: str, operation: str, code: str = "STORE_ERROR"):
        super().__init__(
            f"Store {operation} failed", code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500, detail,
        )
        self.operation = operation


class InvalidScheduleIdError(StoreError):
    """Path identifier could not be converted to a store identifier."""
    def __init__(self, raw_id: str, detail: str):
        super().__init__(detail, "parse_id", "INVALID_SCHEDULE_ID")
        self.raw_id = raw_id


class ScheduleOperationError(ScheduleApiError):
    """A store failure re-labelled with the failing operation's public message."""
    def __init__(self, message: str, cause: StoreError):
        super().__init__(
            message, "OPERATION_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500, cause.detail,
        )
        self.cause = cause
