"""PRO entitlement state driven by billing transaction outcomes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QObject, Signal

from randomcaser.config.settings import AppSettings
from randomcaser.errors import ErrorCode, RandomCaserError

logger = logging.getLogger("randomcaser.entitlement")

PRO_PRODUCT_ID = "com.randomcaser.pro"


class TransactionOutcome(Enum):
    """Transaction states reported by the billing collaborator."""

    PURCHASED = "purchased"
    RESTORED = "restored"
    FAILED = "failed"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class TransactionEvent:
    """One transaction update from the billing collaborator."""

    outcome: TransactionOutcome
    product_id: str = PRO_PRODUCT_ID
    reason: str = ""

    @property
    def is_success(self) -> bool:
        return self.outcome in (TransactionOutcome.PURCHASED, TransactionOutcome.RESTORED)

    def to_error(self) -> RandomCaserError | None:
        if self.outcome is TransactionOutcome.FAILED:
            return RandomCaserError(
                ErrorCode.BILLING_FAILED,
                details={"product": self.product_id, "reason": self.reason or "unknown"},
            )
        if self.outcome is TransactionOutcome.OTHER:
            return RandomCaserError(
                ErrorCode.BILLING_UNKNOWN_OUTCOME,
                details={"product": self.product_id, "reason": self.reason or "unspecified"},
            )
        return None


class EntitlementState(QObject):
    """Tracks whether the PRO feature set is unlocked.

    The flag only ever moves from locked to unlocked; there is no downgrade.
    """

    unlocked_changed = Signal(bool)
    transaction_failed = Signal(str)  # human-readable reason

    def __init__(self, settings: AppSettings, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._settings = settings
        self._unlocked = settings.is_pro

    def is_unlocked(self) -> bool:
        return self._unlocked

    def unlock(self) -> None:
        already = self._unlocked
        self._unlocked = True
        self._settings.is_pro = True
        if not already:
            logger.info("PRO entitlement unlocked")
            self.unlocked_changed.emit(True)

    def persist(self) -> None:
        if self._unlocked:
            self._settings.is_pro = True

    def apply_transaction(self, event: TransactionEvent) -> bool:
        """Apply a billing outcome; returns True when it unlocked PRO."""
        if event.is_success:
            if event.product_id != PRO_PRODUCT_ID:
                logger.warning("ignoring %s for unknown product %s", event.outcome.value, event.product_id)
                return False
            self.unlock()
            return True

        error = event.to_error()
        if event.outcome is TransactionOutcome.FAILED:
            logger.warning("transaction failed: %s", error.to_dict() if error else event.reason)
            self.transaction_failed.emit(event.reason or (error.message if error else ""))
        else:
            logger.warning("unhandled transaction state: %s", error.to_dict() if error else event)
        return False
