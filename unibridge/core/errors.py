"""Error Hierarchy: typed, categorized exceptions for every UniBridge failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by the global error handlers
    - No driver or SQL details leak into user-facing messages

Design Decisions:
    - Single hierarchy with UniBridgeError base: one global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to the logging setup
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None


class UniBridgeError(Exception):
    """Base exception for all UniBridge errors."""

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
                "context": {"operation": self.context.operation},
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(UniBridgeError):
    """Targeted row does not exist (zero rows matched)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UniBridgeError):
    """Statement execution against the store failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class StoreUnavailableError(UniBridgeError):
    """Request arrived before the connection pool was created."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Database not initialized",
            "STORE_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
