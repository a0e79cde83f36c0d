"""Single ingress that moves billing events onto the session thread."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Qt, Signal

from randomcaser.core.entitlement import TransactionEvent

logger = logging.getLogger("randomcaser.billing")


class BillingBridge(QObject):
    """Re-emits transaction events on the thread that owns the bridge.

    ``post`` is safe to call from any thread. Delivery always goes through
    the owning thread's event queue, so ``transaction`` listeners run on the
    session timeline and only once control returns to the event loop.
    """

    transaction = Signal(object)  # TransactionEvent
    _posted = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._posted.connect(self._deliver, Qt.ConnectionType.QueuedConnection)

    def post(self, event: TransactionEvent) -> None:
        self._posted.emit(event)

    def _deliver(self, event: object) -> None:
        if not isinstance(event, TransactionEvent):
            logger.warning("dropping unexpected billing payload: %r", event)
            return
        logger.debug("transaction %s for %s", event.outcome.value, event.product_id)
        self.transaction.emit(event)
