"""Custom widgets for RandomCaser."""

from randomcaser.ui.widgets.transcript import TranscriptPanel

__all__ = ["TranscriptPanel"]
