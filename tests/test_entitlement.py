"""Tests for PRO entitlement state and transaction handling."""

from __future__ import annotations

from randomcaser.config.settings import IS_PRO_KEY, AppSettings, QSettingsStore
from randomcaser.core.entitlement import (
    PRO_PRODUCT_ID,
    EntitlementState,
    TransactionEvent,
    TransactionOutcome,
)
from randomcaser.errors import ErrorCode


def test_defaults_to_locked(settings: AppSettings) -> None:
    assert EntitlementState(settings).is_unlocked() is False


def test_reads_persisted_flag(settings: AppSettings) -> None:
    settings.is_pro = True
    assert EntitlementState(settings).is_unlocked() is True


def test_unlock_is_idempotent_and_persisted(settings: AppSettings, store: QSettingsStore) -> None:
    state = EntitlementState(settings)
    emitted: list[bool] = []
    state.unlocked_changed.connect(emitted.append)

    state.unlock()
    state.unlock()

    assert state.is_unlocked() is True
    assert store.get_bool(IS_PRO_KEY) is True
    assert emitted == [True]


def test_purchase_and_restore_unlock(settings: AppSettings) -> None:
    state = EntitlementState(settings)
    assert state.apply_transaction(TransactionEvent(TransactionOutcome.RESTORED)) is True
    assert state.is_unlocked() is True


def test_failed_transaction_leaves_state_and_reports_reason(settings: AppSettings) -> None:
    state = EntitlementState(settings)
    reasons: list[str] = []
    state.transaction_failed.connect(reasons.append)

    event = TransactionEvent(TransactionOutcome.FAILED, reason="Payment declined.")
    assert state.apply_transaction(event) is False
    assert state.is_unlocked() is False
    assert settings.is_pro is False
    assert reasons == ["Payment declined."]
    assert event.to_error().code is ErrorCode.BILLING_FAILED


def test_other_outcome_is_non_mutating(settings: AppSettings) -> None:
    state = EntitlementState(settings)
    event = TransactionEvent(TransactionOutcome.OTHER, reason="deferred")
    assert state.apply_transaction(event) is False
    assert state.is_unlocked() is False
    assert event.to_error().code is ErrorCode.BILLING_UNKNOWN_OUTCOME


def test_success_for_other_product_is_ignored(settings: AppSettings) -> None:
    state = EntitlementState(settings)
    event = TransactionEvent(TransactionOutcome.PURCHASED, product_id="com.example.other")
    assert state.apply_transaction(event) is False
    assert state.is_unlocked() is False
    assert TransactionEvent(TransactionOutcome.PURCHASED).product_id == PRO_PRODUCT_ID


def test_no_downgrade_path(settings: AppSettings) -> None:
    state = EntitlementState(settings)
    state.unlock()
    state.apply_transaction(TransactionEvent(TransactionOutcome.FAILED, reason="later failure"))
    assert state.is_unlocked() is True
