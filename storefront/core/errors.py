"""Error Hierarchy — typed, categorized exceptions for all Storefront failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps 1:1 to an HTTP status (http_status); handlers never re-decide it
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ValidationError carries a ValidationReason enum, not a free-form string:
      callers and tests match on the reason, the message is for humans
    - ConfigurationError is raised at startup only, never mapped to a response
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
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    TOKEN = "token"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class ValidationReason(str, Enum):
    """Which entity invariant a caller's input violated."""
    NAME_REQUIRED = "name_required"
    PRICE_REQUIRED = "price_required"
    INVALID_PRICE = "invalid_price"
    EMAIL_REQUIRED = "email_required"
    PASSWORD_REQUIRED = "password_required"
    PASSWORD_TOO_LONG = "password_too_long"
    INVALID_PASSWORD_ENCODING = "invalid_password_encoding"


_REASON_MESSAGES = {
    ValidationReason.NAME_REQUIRED: "name is required",
    ValidationReason.PRICE_REQUIRED: "price is required",
    ValidationReason.INVALID_PRICE: "invalid price",
    ValidationReason.EMAIL_REQUIRED: "email is required",
    ValidationReason.PASSWORD_REQUIRED: "password is required",
    ValidationReason.PASSWORD_TOO_LONG: "password exceeds 72 bytes",
    ValidationReason.INVALID_PASSWORD_ENCODING: "password is not valid UTF-8 text",
}


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontError(Exception):
    """Base exception for all Storefront errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(StorefrontError):
    """Caller input violates an entity invariant."""
    def __init__(self, reason: ValidationReason, context: ErrorContext | None = None):
        super().__init__(
            _REASON_MESSAGES[reason], "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["reason"] = self.reason.value
        return response


class InvalidIdentifierError(StorefrontError):
    """Supplied text is not a canonical identifier."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{raw}' is not a valid identifier",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.raw = raw


class ResourceNotFoundError(StorefrontError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class InvalidCredentialsError(StorefrontError):
    """Login password does not match the stored credential."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "email or password is wrong",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthenticationRequiredError(StorefrontError):
    """Bearer token missing, malformed, or expired."""
    def __init__(self, message: str = "authentication required", context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class TokenError(StorefrontError):
    """Token issuer could not sign the requested claims."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Token issuance failed: {message}",
            "TOKEN_ERROR", ErrorCategory.TOKEN,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(StorefrontError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class PasswordHashError(StorefrontError):
    """Stored password hash is malformed and cannot be checked."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Stored password hash is malformed",
            "PASSWORD_HASH_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class ConfigurationError(StorefrontError):
    """Startup configuration is unusable."""
    def __init__(self, message: str, setting: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid configuration for '{setting}': {message}",
            "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.setting = setting
