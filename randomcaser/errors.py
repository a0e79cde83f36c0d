"""Error codes and error handling utilities for RandomCaser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for RandomCaser operations."""

    # User action errors
    NO_CONTENT = auto()

    # Conversation / clipboard sink errors
    SINK_FAILED = auto()
    SINK_UNAVAILABLE = auto()

    # Billing errors
    BILLING_FAILED = auto()
    BILLING_UNKNOWN_OUTCOME = auto()

    # Persisted state errors
    THEME_UNKNOWN = auto()
    STORAGE_MISSING = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NO_CONTENT: "Type something first, then tap a button to use the randomized text.",
    ErrorCode.SINK_FAILED: "The message could not be delivered to the conversation.",
    ErrorCode.SINK_UNAVAILABLE: "No conversation is open. Copy the text to the clipboard instead.",
    ErrorCode.BILLING_FAILED: "The purchase could not be completed.",
    ErrorCode.BILLING_UNKNOWN_OUTCOME: "The store reported an unexpected transaction state.",
    ErrorCode.THEME_UNKNOWN: "The saved theme is not available. Using the default theme.",
    ErrorCode.STORAGE_MISSING: "No saved value was found. Using defaults.",
}

NO_CONTENT_TITLE = "No Text Entered"


@dataclass
class RandomCaserError(Exception):
    """Base exception for RandomCaser with error code and context."""

    code: ErrorCode
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "details": self.details,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class SinkOutcome:
    """Result of handing text to a conversation sink."""

    ok: bool
    error: RandomCaserError | None = None

    @classmethod
    def success(cls) -> SinkOutcome:
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> SinkOutcome:
        return cls(
            ok=False,
            error=RandomCaserError(ErrorCode.SINK_FAILED, details={"reason": reason}),
        )


def format_error_for_user(error: RandomCaserError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, RandomCaserError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        reason = error.details.get("reason")
        if reason:
            parts.append(f"\n\nReason: {reason}")
        return "".join(parts)
    return f"{type(error).__name__}: {error}"
