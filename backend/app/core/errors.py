"""Error Hierarchy — typed, categorized exceptions for store proxy failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only failures with no upstream status to forward are raised as errors;
      non-2xx upstream answers are passed through by the routes, not raised
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with GameStoreError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: request details for logs without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    upstream_url: str | None = None
    genre: str | None = None
    app_id: str | None = None


class GameStoreError(Exception):
    """Base exception for all store proxy errors."""

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
                    "upstream_url": self.context.upstream_url,
                    "genre": self.context.genre,
                    "app_id": self.context.app_id,
                },
            }
        }


# ─── Upstream Errors (500-level) ────────────────────────────────

class StoreUnavailableError(GameStoreError):
    """Store API could not be reached (DNS, connect, protocol failure)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store API unreachable: {message}",
            "STORE_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )


class StoreTimeoutError(GameStoreError):
    """Store API did not answer within the configured timeout."""
    def __init__(self, timeout_seconds: float | None, context: ErrorContext | None = None):
        super().__init__(
            f"Store API timed out after {timeout_seconds}s",
            "STORE_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, context, 504,
        )
        self.timeout_seconds = timeout_seconds
