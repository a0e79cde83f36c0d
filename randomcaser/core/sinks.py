"""Contracts for the places randomized text is delivered to."""

from __future__ import annotations

from typing import Protocol

from randomcaser.errors import SinkOutcome


class ConversationSink(Protocol):
    """An open conversation that can receive text."""

    def send_text(self, text: str) -> SinkOutcome: ...

    def insert_text(self, text: str) -> SinkOutcome: ...


class ClipboardSink(Protocol):
    """Fire-and-forget clipboard."""

    def set_text(self, text: str) -> None: ...
