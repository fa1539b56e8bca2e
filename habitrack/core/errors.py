"""Error Hierarchy — typed, categorized exceptions for Habitrack failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope shared with the validation handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with HabitrackError base: one global handler catches all
    - Request validation is not modeled here: Pydantic raises RequestValidationError
      before handlers run, and api/error_handlers.py renders it in the same envelope
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone
from uuid import UUID


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    habit_id: UUID | None = None
    day: datetime | None = None


class HabitrackError(Exception):
    """Base exception for all Habitrack errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "habit_id": (
                        str(self.context.habit_id) if self.context.habit_id else None
                    ),
                    "day": self.context.day.isoformat() if self.context.day else None,
                },
            }
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(HabitrackError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
