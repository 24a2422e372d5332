"""Error Hierarchy — typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; persistence errors (500-level) are critical
    - to_response() produces a problem-details body (RFC 9457 field names)
    - PersistenceError detail always starts with "Something went wrong: "

Design Decisions:
    - Single hierarchy with ApiError base: FastAPI global handler catches all (uniform error shape)
    - Route handlers raise, never build error responses themselves
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

PERSISTENCE_FAILURE_PREFIX = "Something went wrong: "


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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None


class ApiError(Exception):
    """Base exception for all API errors."""

    title = "An error occurred while processing your request."

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
        """Convert to a problem-details response body."""
        return {
            "type": "about:blank",
            "title": self.title,
            "status": self.http_status,
            "detail": self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestRejectedError(ApiError):
    """A registered validator rejected the request body."""

    title = "One or more validation errors occurred."

    def __init__(self, messages: list[str], context: ErrorContext | None = None):
        super().__init__(
            "; ".join(messages), "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.messages = messages

    def to_response(self) -> dict:
        body = super().to_response()
        body["errors"] = list(self.messages)
        return body


class ResourceNotFoundError(ApiError):
    """Requested row does not exist, or the collection is empty."""

    title = "Not Found"

    def __init__(
        self,
        resource_type: str,
        resource_id: int | None = None,
        context: ErrorContext | None = None,
    ):
        if resource_id is None:
            message = f"No {resource_type} items found"
        else:
            message = f"{resource_type} '{resource_id}' not found"
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Persistence Errors (500-level) ─────────────────────────────

class PersistenceError(ApiError):
    """Saving changes to the store failed."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            PERSISTENCE_FAILURE_PREFIX + message,
            "PERSISTENCE_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
