"""Tests for FeedbackScheduler flash/revert timing and cancellation."""

from __future__ import annotations

import time

from PySide6.QtTest import QTest

from randomcaser.ui.feedback import FeedbackScheduler

DELAY_MS = 60


def _recorder(scheduler: FeedbackScheduler) -> list[tuple[str, str, bool]]:
    events: list[tuple[str, str, bool]] = []
    scheduler.label_changed.connect(lambda cid, text, animated: events.append((cid, text, animated)))
    return events


def test_flash_sets_label_then_reverts_with_transition() -> None:
    scheduler = FeedbackScheduler()
    events = _recorder(scheduler)

    scheduler.flash("send", "Sent!", "Send Message", DELAY_MS)
    assert events == [("send", "Sent!", False)]
    assert scheduler.pending("send") is not None

    QTest.qWait(DELAY_MS * 4)
    assert events == [("send", "Sent!", False), ("send", "Send Message", True)]
    assert scheduler.pending("send") is None
    assert not scheduler.has_pending()


def test_second_flash_supersedes_first_revert() -> None:
    scheduler = FeedbackScheduler()
    events = _recorder(scheduler)

    scheduler.flash("btn", "A", "orig", DELAY_MS)
    QTest.qWait(DELAY_MS // 3)
    scheduler.flash("btn", "B", "orig", DELAY_MS)
    QTest.qWait(DELAY_MS * 4)

    reverts = [event for event in events if event[1] == "orig"]
    assert reverts == [("btn", "orig", True)]
    assert events[:2] == [("btn", "A", False), ("btn", "B", False)]


def test_cancel_all_prevents_every_revert() -> None:
    scheduler = FeedbackScheduler()
    events = _recorder(scheduler)

    scheduler.flash("send", "Sent!", "Send Message", DELAY_MS)
    scheduler.flash("copy", "Copied!", "Copy to Clipboard", DELAY_MS)
    scheduler.cancel_all()
    QTest.qWait(DELAY_MS * 4)

    assert events == [("send", "Sent!", False), ("copy", "Copied!", False)]
    assert not scheduler.has_pending()


def test_cancel_only_affects_one_control() -> None:
    scheduler = FeedbackScheduler()
    events = _recorder(scheduler)

    scheduler.flash("send", "Sent!", "Send Message", DELAY_MS)
    scheduler.flash("copy", "Copied!", "Copy to Clipboard", DELAY_MS)
    scheduler.cancel("send")
    QTest.qWait(DELAY_MS * 4)

    assert ("copy", "Copy to Clipboard", True) in events
    assert ("send", "Send Message", True) not in events


def test_stale_token_is_ignored_even_when_already_due() -> None:
    scheduler = FeedbackScheduler()
    events = _recorder(scheduler)

    first = scheduler.flash("insert", "Added!", "Add to Message Box", DELAY_MS)
    second = scheduler.flash("insert", "Added!", "Add to Message Box", DELAY_MS)
    assert second.token != first.token

    # Simulate the superseded timeout being delivered late.
    scheduler._revert("insert", first.token)
    assert scheduler.pending("insert") == second
    assert len(events) == 2


def test_cancel_unknown_control_is_noop() -> None:
    scheduler = FeedbackScheduler()
    scheduler.cancel("missing")
    scheduler.cancel_all()
    assert not scheduler.has_pending()


def test_pending_record_carries_monotonic_deadline() -> None:
    scheduler = FeedbackScheduler()
    before = time.monotonic()
    record = scheduler.flash("copy", "Copied!", "Copy to Clipboard", 500)
    after = time.monotonic()

    assert before + 0.5 <= record.fire_at <= after + 0.5
    assert 0 < record.remaining_ms() <= 500
    scheduler.cancel_all()
