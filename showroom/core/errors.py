"""Error Hierarchy — typed, categorized exceptions for every classified failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Classified errors are 400/404; anything unclassified becomes a generic 500
    - to_response() produces the failure envelope (core/envelope.py)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ShowroomError base: one FastAPI handler renders all of them
    - ErrorContext as dataclass: request facts for logging, never serialized
    - Severity picks the log level; category and context travel as log extras
"""

from dataclasses import dataclass
from enum import Enum

from showroom.core.envelope import error_response


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Public error codes carried in the failure envelope."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BUSINESS_RULE_ERROR = "BUSINESS_RULE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ErrorContext:
    """Request facts attached to an error and surfaced in its log record."""
    vehicle_id: int | None = None
    procedure: str | None = None


class ShowroomError(Exception):
    """Base exception for all classified showroom errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: list[dict] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        return error_response(self.message, self.code.value, self.details)


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(ShowroomError):
    """Input rejected at the boundary; the store was never called."""
    def __init__(
        self,
        message: str,
        details: list[dict],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, ErrorCode.VALIDATION_ERROR, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, details,
        )


class VehicleNotFoundError(ShowroomError):
    """Vehicle does not exist or is not available."""
    def __init__(
        self, message: str = "vehicleNotFound", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, ErrorCode.NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class BusinessRuleError(ShowroomError):
    """Domain rule violated inside the store."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, ErrorCode.BUSINESS_RULE_ERROR, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )
