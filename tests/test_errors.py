"""Tests for error codes and user-facing formatting."""

from __future__ import annotations

from randomcaser.errors import (
    ERROR_MESSAGES,
    ErrorCode,
    RandomCaserError,
    SinkOutcome,
    format_error_for_user,
)


def test_every_code_has_a_message() -> None:
    assert set(ERROR_MESSAGES) == set(ErrorCode)


def test_error_fills_default_message() -> None:
    error = RandomCaserError(ErrorCode.THEME_UNKNOWN, details={"theme_id": "neon"})
    assert error.message == ERROR_MESSAGES[ErrorCode.THEME_UNKNOWN]
    assert "theme_id=neon" in str(error)
    assert error.to_dict()["code"] == "THEME_UNKNOWN"


def test_sink_outcome_failure_carries_reason() -> None:
    outcome = SinkOutcome.failure("conversation closed")
    assert outcome.ok is False
    assert outcome.error is not None
    assert outcome.error.code is ErrorCode.SINK_FAILED
    assert "conversation closed" in format_error_for_user(outcome.error)
    assert SinkOutcome.success().error is None


def test_format_generic_exception() -> None:
    assert format_error_for_user(ValueError("boom")) == "ValueError: boom"
