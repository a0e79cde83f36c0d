"""Shared fixtures: a QApplication and isolated settings per test."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QDeadlineTimer
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from randomcaser.config.settings import AppSettings, QSettingsStore


@pytest.fixture(scope="session", autouse=True)
def qapp() -> QApplication:
    app = QApplication.instance() or QApplication([])
    return app


@pytest.fixture
def store(tmp_path: Path) -> QSettingsStore:
    return QSettingsStore.from_ini(tmp_path / "settings.ini")


@pytest.fixture
def settings(store: QSettingsStore) -> AppSettings:
    return AppSettings(store)


@pytest.fixture
def wait_until() -> Callable[..., bool]:
    def _wait(predicate: Callable[[], bool], timeout_ms: int = 2000) -> bool:
        deadline = QDeadlineTimer(timeout_ms)
        while not predicate():
            if deadline.hasExpired():
                return False
            QTest.qWait(10)
        return True

    return _wait
