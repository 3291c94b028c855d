"""Error Hierarchy — typed, categorized exceptions for all Nucleus failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; programming defects (500-level) are critical
    - to_response() produces the REST envelope used by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with NucleusError base: one global handler covers all raised errors
    - PayloadValidationError is built and returned by the validation filter, never raised
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
    VERSIONING = "versioning"
    RATE_LIMIT = "rate_limit"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    api_version: str | None = None
    debug_info: dict[str, Any] | None = None


class NucleusError(Exception):
    """Base exception for all Nucleus errors."""

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
                    "path": self.context.path,
                    "api_version": self.context.api_version,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(NucleusError):
    """One or more declarative rules rejected a bound payload."""
    def __init__(
        self, errors: dict[str, list[str]], context: ErrorContext | None = None,
    ):
        super().__init__(
            "One or more validation errors occurred.",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["errors"] = {
            name: list(messages) for name, messages in self.errors.items()
        }
        return response


class UnsupportedApiVersionError(NucleusError):
    """Requested API version is not served by this deployment."""
    def __init__(
        self, requested: str, supported: list[str],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"The HTTP resource does not support the API version '{requested}'. "
            f"Supported versions: {', '.join(supported)}",
            "UNSUPPORTED_API_VERSION", ErrorCategory.VERSIONING,
            ErrorSeverity.WARNING, context, 400,
        )
        self.requested = requested
        self.supported = supported


# ─── Programming Defects (500-level) ────────────────────────────

class ValidatorNotRegisteredError(NucleusError):
    """A route asked for a validator of a payload type nobody registered."""
    def __init__(self, payload_type: type, context: ErrorContext | None = None):
        super().__init__(
            f"No validator registered for payload type {payload_type.__name__}",
            "VALIDATOR_NOT_REGISTERED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.payload_type = payload_type
