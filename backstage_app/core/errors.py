"""Error Hierarchy — typed, categorized exceptions for every client-visible failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat REST envelope: {"error": <message>, ...}
    - No stack traces, internal fields, or debug info in to_response() output
    - Client errors are 4xx; faults outside this hierarchy become 500 in the API layer

Design Decisions:
    - Single hierarchy with BackstageAppError base: one global handler catches all
    - Flat envelope keeps the payloads existing clients parse ({"error": "..."})
"""

from enum import Enum
from typing import Any


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
    INTERNAL = "internal"


class BackstageAppError(Exception):
    """Base exception for all Backstage App errors."""

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

    def to_response(self) -> dict[str, Any]:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class RequiredFieldsError(BackstageAppError):
    """One or more required request fields absent or empty."""
    def __init__(self, fields: list[str], message: str | None = None):
        super().__init__(
            message or f"{' and '.join(fields).capitalize()} are required",
            "REQUIRED_FIELDS_MISSING", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.fields = fields


class InvalidRequestBodyError(BackstageAppError):
    """Request body could not be decoded into the endpoint's input record."""
    def __init__(self, details: list[dict[str, str]]):
        super().__init__(
            "Invalid request body",
            "INVALID_REQUEST_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.details = details

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}


class EndpointNotFoundError(BackstageAppError):
    """No route matches the requested method + path."""
    def __init__(self, path: str, method: str):
        super().__init__(
            "Endpoint not found",
            "ENDPOINT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.path = path
        self.method = method

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, "path": self.path, "method": self.method}
