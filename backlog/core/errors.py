"""Error Hierarchy — typed, categorized exceptions for all backlog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope returned to tool callers
    - Messages name the failed operation and entity kind, never raw driver output

Design Decisions:
    - Single hierarchy with BacklogError base: FastAPI global handler catches all
    - ErrorContext as dataclass: tool_name is stamped by the dispatcher, not by raisers
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
    STORE = "store"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    agent: str | None = None
    debug_info: dict[str, Any] | None = None


class BacklogError(Exception):
    """Base exception for all backlog errors."""

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
                    "tool_name": self.context.tool_name,
                    "agent": self.context.agent,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ToolValidationError(BacklogError):
    """Tool input was malformed or missing a required argument."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class NotFoundError(BacklogError):
    """A single-row lookup matched nothing."""
    def __init__(
        self, entity_kind: str, filter: dict[str, Any], context: ErrorContext | None = None,
    ):
        described = ", ".join(f"{k}={v}" for k, v in filter.items())
        super().__init__(
            f"{entity_kind} not found ({described})",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.entity_kind = entity_kind
        self.filter = filter


class UnknownToolError(BacklogError):
    """Caller named a tool that is not registered."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Tool '{tool_name}' does not exist.",
            "UNKNOWN_TOOL", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.tool_name = tool_name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(BacklogError):
    """The underlying store rejected or failed a query/command."""
    def __init__(
        self, operation: str, entity_kind: str, message: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Store {operation} on {entity_kind} failed: {message}",
            "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
        self.entity_kind = entity_kind
        self.detail = message


class ConfigurationError(BacklogError):
    """Startup credentials or settings are missing or invalid. Fatal."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid configuration: {message}",
            "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
