"""Transient "flash, then revert" button captions."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
import time

from PySide6.QtCore import QObject, QTimer, Signal

from randomcaser.config.settings import DEFAULT_FEEDBACK_DELAY_MS


@dataclass(frozen=True, slots=True)
class PendingFeedback:
    """A scheduled revert for one control."""

    control_id: str
    temporary_label: str
    original_label: str
    delay_ms: int
    token: int
    fire_at: float  # time.monotonic() deadline

    def remaining_ms(self) -> int:
        return max(0, round((self.fire_at - time.monotonic()) * 1000))


class FeedbackScheduler(QObject):
    """Shows a temporary caption on a control and reverts it after a delay.

    At most one revert is pending per control. Timers are created with this
    object as parent, so they fire on the thread that owns the scheduler.
    """

    label_changed = Signal(str, str, bool)  # control_id, text, animated

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pending: dict[str, PendingFeedback] = {}
        self._timers: dict[str, QTimer] = {}
        self._tokens = count(1)

    def flash(
        self,
        control_id: str,
        temporary_label: str,
        original_label: str,
        delay_ms: int = DEFAULT_FEEDBACK_DELAY_MS,
    ) -> PendingFeedback:
        self.cancel(control_id)
        delay_ms = max(0, int(delay_ms))
        record = PendingFeedback(
            control_id=control_id,
            temporary_label=temporary_label,
            original_label=original_label,
            delay_ms=delay_ms,
            token=next(self._tokens),
            fire_at=time.monotonic() + delay_ms / 1000,
        )
        self._pending[control_id] = record
        self.label_changed.emit(control_id, temporary_label, False)

        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._revert(control_id, record.token))
        self._timers[control_id] = timer
        timer.start(record.delay_ms)
        return record

    def cancel(self, control_id: str) -> None:
        self._pending.pop(control_id, None)
        timer = self._timers.pop(control_id, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def cancel_all(self) -> None:
        for control_id in list(self._timers):
            self.cancel(control_id)
        self._pending.clear()

    def pending(self, control_id: str) -> PendingFeedback | None:
        return self._pending.get(control_id)

    def has_pending(self) -> bool:
        return bool(self._pending)

    def _revert(self, control_id: str, token: int) -> None:
        record = self._pending.get(control_id)
        # A stale timeout that was already queued when the record was replaced.
        if record is None or record.token != token:
            return
        del self._pending[control_id]
        timer = self._timers.pop(control_id, None)
        if timer is not None:
            timer.deleteLater()
        self.label_changed.emit(control_id, record.original_label, True)
