"""Custom exceptions and error response schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Standardized error response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class AppError(Exception):
    """Base exception for all app-level errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorDetail:
        """Convert to response schema for external collaborators."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            details=self.details if self.details else None,
        )


class InvalidArgumentError(AppError):
    """Raised on malformed input such as a non-positive TTL."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="INVALID_ARGUMENT",
            message=message,
            status_code=422,
            details=details,
        )


class InvalidTransitionError(AppError):
    """Raised when a transition is not legal from the current status."""

    def __init__(self, current_status: str, target_status: str | None, event: str):
        self.current_status = current_status
        self.target_status = target_status
        self.event = event
        target = target_status or "?"
        super().__init__(
            code="INVALID_TRANSITION",
            message=f"Cannot {event} session: {current_status} -> {target} is not allowed",
            status_code=409,
            details={
                "current_status": current_status,
                "target_status": target_status,
                "event": event,
            },
        )


class ExpiredError(AppError):
    """Raised when the session token has already expired."""

    def __init__(self, token_expires_at: datetime, now: datetime):
        self.token_expires_at = token_expires_at
        self.now = now
        super().__init__(
            code="TOKEN_EXPIRED",
            message=f"Session token expired at {token_expires_at.isoformat()}",
            status_code=410,
            details={
                "token_expires_at": token_expires_at.isoformat(),
                "now": now.isoformat(),
            },
        )
