"""Error Hierarchy — typed, categorized exceptions for all Workout API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Missing workouts surface as 404 on reads but 400 on delete/update
    - Create failures surface as 400 with the underlying store message
    - to_response() produces the REST error envelope

Design Decisions:
    - Single hierarchy with WorkoutApiError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    PERSISTENCE = "persistence"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class WorkoutApiError(Exception):
    """Base exception for all Workout API errors."""

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
                    "resource_id": self.context.resource_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(WorkoutApiError):
    """Requested resource does not exist or its id is malformed (reads)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"No such {resource_type.lower()}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


class NoSuchResourceError(WorkoutApiError):
    """Target of a delete/update does not exist or its id is malformed.

    Same condition as ResourceNotFoundError but reported as 400: mutating
    endpoints have always answered a bad target with Bad Request.
    """
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"No such {resource_type.lower()}",
            "NO_SUCH_RESOURCE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.resource_type = resource_type


class PersistenceError(WorkoutApiError):
    """Store rejected a write; the underlying message is passed through."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "PERSISTENCE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.operation = operation


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WorkoutApiError):
    """Database operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        cause: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
        self.cause = cause
