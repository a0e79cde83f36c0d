"""Local conversation transcript used as the desktop conversation sink."""

from __future__ import annotations

from collections import deque

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QLineEdit, QPlainTextEdit, QVBoxLayout, QWidget

from randomcaser.errors import SinkOutcome


class TranscriptPanel(QWidget):
    """A read-only message log with a compose line beneath it."""

    message_sent = Signal(str)

    def __init__(self, parent: QWidget | None = None, *, max_messages: int = 500) -> None:
        super().__init__(parent)
        self.setObjectName("TranscriptPanel")
        self._sent: deque[str] = deque(maxlen=max_messages)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self._log = QPlainTextEdit()
        self._log.setObjectName("TranscriptLog")
        self._log.setReadOnly(True)
        self._log.setMaximumBlockCount(max_messages)
        layout.addWidget(self._log, 1)

        self._compose = QLineEdit()
        self._compose.setObjectName("ComposeField")
        self._compose.setPlaceholderText("iMessage")
        self._compose.returnPressed.connect(self._send_compose)
        layout.addWidget(self._compose)

    def send_text(self, text: str) -> SinkOutcome:
        if not text.strip():
            return SinkOutcome.failure("Message is empty")
        self._sent.append(text)
        self._log.appendPlainText(text)
        self.message_sent.emit(text)
        return SinkOutcome.success()

    def insert_text(self, text: str) -> SinkOutcome:
        current = self._compose.text()
        self._compose.setText(f"{current} {text}".strip() if current else text)
        return SinkOutcome.success()

    def messages(self) -> list[str]:
        return list(self._sent)

    def compose_text(self) -> str:
        return self._compose.text()

    def _send_compose(self) -> None:
        text = self._compose.text()
        if self.send_text(text).ok:
            self._compose.clear()
