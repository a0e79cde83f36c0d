"""Desktop stand-in for the platform store."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QThread

from randomcaser.billing.bridge import BillingBridge
from randomcaser.config.settings import AppSettings
from randomcaser.core.entitlement import PRO_PRODUCT_ID, TransactionEvent, TransactionOutcome
from randomcaser.workers.transaction_worker import TransactionKind, TransactionWorker

logger = logging.getLogger("randomcaser.billing")


class SandboxBilling(QObject):
    """Resolves purchases against a local ledger on a worker thread.

    Outcomes are posted to the bridge; purchases are recorded in the ledger
    once the bridge delivers them on the owning thread.
    """

    def __init__(
        self,
        settings: AppSettings,
        bridge: BillingBridge,
        *,
        products: frozenset[str] = frozenset({PRO_PRODUCT_ID}),
        latency_s: float = 0.0,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings
        self._bridge = bridge
        self._products = products
        self._latency_s = latency_s
        self._active: list[tuple[QThread, TransactionWorker]] = []
        self._bridge.transaction.connect(self._record)

    @property
    def bridge(self) -> BillingBridge:
        return self._bridge

    def request_purchase(self, product_id: str = PRO_PRODUCT_ID) -> None:
        logger.info("purchase requested for %s", product_id)
        self._start(TransactionKind.PURCHASE, product_id)

    def request_restore(self, product_id: str = PRO_PRODUCT_ID) -> None:
        logger.info("restore requested for %s", product_id)
        self._start(TransactionKind.RESTORE, product_id)

    def is_busy(self) -> bool:
        return bool(self._active)

    def shutdown(self) -> None:
        for thread, worker in list(self._active):
            worker.cancel()
            if thread.isRunning():
                thread.quit()
                thread.wait()
        self._active.clear()

    def _start(self, kind: TransactionKind, product_id: str) -> None:
        worker = TransactionWorker(
            kind,
            product_id,
            known_products=self._products,
            owned_products=frozenset(self._settings.sandbox_purchases),
            decline=self._settings.sandbox_decline,
            latency_s=self._latency_s,
        )
        thread = QThread()
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.finished.connect(self._bridge.post)
        worker.error.connect(
            lambda message: self._bridge.post(
                TransactionEvent(TransactionOutcome.OTHER, product_id=product_id, reason=message)
            )
        )
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        worker.cancelled.connect(thread.quit)
        thread.finished.connect(self._prune_finished)
        self._active.append((thread, worker))
        thread.start()

    def _prune_finished(self) -> None:
        finished = self.sender()
        if isinstance(finished, QThread):
            # finished is emitted just before the thread exits.
            finished.wait()
        self._active = [(t, w) for t, w in self._active if not t.isFinished()]

    def _record(self, event: TransactionEvent) -> None:
        if event.outcome is not TransactionOutcome.PURCHASED:
            return
        purchases = self._settings.sandbox_purchases
        if event.product_id not in purchases:
            self._settings.sandbox_purchases = [*purchases, event.product_id]
