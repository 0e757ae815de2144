"""Error Hierarchy — typed, categorized exceptions for every states-service failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client-input errors are 400/404; infrastructure errors are 5xx
    - to_response() keeps a top-level "message" so existing clients keep working
    - Messages are deterministic: same input, same text

Design Decisions:
    - Single hierarchy with StatesError base: one FastAPI handler catches all
    - NoFactsFoundError status varies by endpoint (404 on read, 400 on mutation)
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
    DATABASE = "database"
    INTERNAL = "internal"


class StatesError(Exception):
    """Base exception for all states-service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
            },
        }


# ─── Client-input Errors (400-level) ────────────────────────────

class MissingParameterError(StatesError):
    """State code parameter absent or blank."""
    def __init__(self, message: str = "State code required."):
        super().__init__(
            message, "MISSING_PARAMETER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class InvalidCodeError(StatesError):
    """State code does not match any catalog entry."""
    def __init__(self, code: str, message: str):
        super().__init__(
            message, "INVALID_STATE_CODE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.state_code = code


class InvalidPayloadError(StatesError):
    """Mutation body missing a field or carrying the wrong type."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "INVALID_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class NoFactsFoundError(StatesError):
    """Effective or stored fun-fact list is empty."""
    def __init__(self, state_name: str, http_status: int = 404):
        super().__init__(
            f"No Fun Facts found for {state_name}",
            "NO_FUNFACTS", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, http_status,
        )
        self.state_name = state_name


class IndexOutOfRangeError(StatesError):
    """1-based fun-fact index outside [1, length]."""
    def __init__(self, state_name: str, index: int):
        super().__init__(
            f"No Fun Fact found at that index for {state_name}",
            "FUNFACT_INDEX_OUT_OF_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.state_name = state_name
        self.index = index


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(StatesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
