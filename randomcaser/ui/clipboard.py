"""System clipboard sink."""

from __future__ import annotations

from PySide6.QtGui import QGuiApplication


class QtClipboardSink:
    """Writes text to the application clipboard."""

    def set_text(self, text: str) -> None:
        clipboard = QGuiApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(text)
