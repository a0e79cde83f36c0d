"""Worker that plays the store side of a sandbox transaction."""

from __future__ import annotations

from enum import Enum
from time import sleep

from randomcaser.core.entitlement import TransactionEvent, TransactionOutcome
from randomcaser.workers.base_worker import BaseWorker


class TransactionKind(Enum):
    PURCHASE = "purchase"
    RESTORE = "restore"


class TransactionWorker(BaseWorker):
    """Resolves one purchase or restore request off the UI thread.

    The worker only reads the snapshot it was constructed with; it never
    touches settings or session state.
    """

    def __init__(
        self,
        kind: TransactionKind,
        product_id: str,
        *,
        known_products: frozenset[str],
        owned_products: frozenset[str],
        decline: bool = False,
        latency_s: float = 0.0,
    ) -> None:
        super().__init__()
        self._kind = kind
        self._product_id = product_id
        self._known_products = known_products
        self._owned_products = owned_products
        self._decline = decline
        self._latency_s = latency_s

    def run(self) -> None:
        self.started.emit()
        try:
            if self._latency_s > 0:
                sleep(self._latency_s)
            if self._is_cancelled:
                self.cancelled.emit()
                return
            self.finished.emit(self._resolve())
        except Exception as e:
            self.error.emit(str(e))

    def _resolve(self) -> TransactionEvent:
        if self._product_id not in self._known_products:
            return TransactionEvent(
                TransactionOutcome.FAILED,
                product_id=self._product_id,
                reason=f"Unknown product: {self._product_id}",
            )
        if self._kind is TransactionKind.RESTORE:
            if self._product_id in self._owned_products:
                return TransactionEvent(TransactionOutcome.RESTORED, product_id=self._product_id)
            return TransactionEvent(
                TransactionOutcome.FAILED,
                product_id=self._product_id,
                reason="No previous purchases to restore.",
            )
        if self._decline:
            return TransactionEvent(
                TransactionOutcome.FAILED,
                product_id=self._product_id,
                reason="Payment declined.",
            )
        return TransactionEvent(TransactionOutcome.PURCHASED, product_id=self._product_id)
