"""Error Hierarchy — typed, categorized exceptions for every exercise tracker failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The category is the tag the transport boundary matches on (api/error_handlers.py)
    - to_response() always carries a human-readable "message"
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: one FastAPI handler catches all
    - HTTP status lives in the API layer, not here: core stays transport-agnostic
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error kinds surfaced to the transport layer."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Structured context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    username: str | None = None
    debug_info: dict[str, Any] | None = None


class ExerciseTrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the JSON error body returned to clients."""
        return {
            "message": self.message,
            "code": self.code,
            "category": self.category.value,
        }


# ─── Validation Errors ──────────────────────────────────────────

LOG_PARAMS_MESSAGE = (
    "Bad Request. 'userId' is mandatory and must be long 24 characters. "
    "'from' and 'to' are optional: must have the yyyy-mm-dd format. "
    "'limit' is optional: must be an number."
)
EXERCISE_PARAMS_MESSAGE = (
    "Bad Request. 'description', 'duration' and 'userId' are mandatory "
    "and cannot be empty strings. 'userId' must be long 24 characters."
)
USERNAME_MESSAGE = (
    "Bad Request. The 'username' can contain only letters, digits, ., -, _ "
    "and must be long at least 8 characters."
)


class ParamsValidationError(ExerciseTrackerError):
    """Request fields failed shape validation (before any store access)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )


class InvalidDateError(ExerciseTrackerError):
    """A yyyy-mm-dd string that is not a real calendar date (e.g. 2021-13-99)."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        super().__init__(
            f"Bad Request. '{value}' is not a valid calendar date.",
            "INVALID_DATE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.value = value


# ─── Domain Errors ──────────────────────────────────────────────

class UserNotFoundError(ExerciseTrackerError):
    """Referenced user does not exist or its id cannot be resolved."""
    def __init__(self, user_id: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            "User not found", "USER_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx,
        )
        self.user_id = user_id


class DuplicateUsernameError(ExerciseTrackerError):
    """Username already taken; the store's unique constraint rejected it."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.username = username
        super().__init__(
            f"Conflict. The username {username} already exists.",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx,
        )
        self.username = username


# ─── Infrastructure Errors ──────────────────────────────────────

UNKNOWN_CAUSE_MESSAGE = "Unknown cause"


class DatabaseError(ExerciseTrackerError):
    """Store operation failed. The driver message is kept for logs only."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"operation": operation, "detail": message}
        super().__init__(
            UNKNOWN_CAUSE_MESSAGE, "DATABASE_ERROR", ErrorCategory.UNKNOWN,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation
