"""Error Hierarchy — typed, categorized exceptions for Fina failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Infrastructure errors (500-level) are critical; computation errors are not
    - to_response() produces the same {data, code, message} envelope handlers return
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FinaError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


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
    COMPUTATION = "computation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_message: str | None = None


class FinaError(Exception):
    """Base exception for all Fina errors."""

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
        """Convert to the standard response envelope."""
        return {
            "data": None,
            "code": self.http_status,
            "message": self.context.user_message or self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(FinaError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class PeriodResolutionError(FinaError):
    """Default start/end date could not be computed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Could not resolve query period: {message}",
            "PERIOD_RESOLUTION_ERROR", ErrorCategory.COMPUTATION,
            ErrorSeverity.ERROR, context, 500,
        )
