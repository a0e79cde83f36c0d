"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from PySide6.QtCore import QSettings

DRAFT_TEXT_KEY = "Initial Text"
IS_PRO_KEY = "Is Pro User"
SELECTED_THEME_KEY = "SelectedTheme"

DEFAULT_FEEDBACK_DELAY_MS = 3000
_MIN_FEEDBACK_DELAY_MS = 250
_MAX_FEEDBACK_DELAY_MS = 10_000


class KeyValueStore(Protocol):
    """Durable string/bool storage that survives process restarts."""

    def get_string(self, key: str) -> str | None: ...

    def set_string(self, key: str, value: str | None) -> None: ...

    def get_bool(self, key: str, default: bool = False) -> bool: ...

    def set_bool(self, key: str, value: bool) -> None: ...

    def get_int(self, key: str, default: int = 0) -> int: ...

    def set_int(self, key: str, value: int) -> None: ...

    def remove(self, key: str) -> None: ...

    def contains(self, key: str) -> bool: ...


class QSettingsStore:
    """KeyValueStore backed by QSettings."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("RandomCaser", "RandomCaser")

    @classmethod
    def from_ini(cls, path: Path) -> QSettingsStore:
        return cls(QSettings(str(path), QSettings.Format.IniFormat))

    def get_string(self, key: str) -> str | None:
        if not self._qs.contains(key):
            return None
        return self._qs.value(key, "", type=str)

    def set_string(self, key: str, value: str | None) -> None:
        if value is None:
            self._qs.remove(key)
        else:
            self._qs.setValue(key, value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        return bool(self._qs.value(key, default, type=bool))

    def set_bool(self, key: str, value: bool) -> None:
        self._qs.setValue(key, bool(value))

    def get_int(self, key: str, default: int = 0) -> int:
        try:
            return int(self._qs.value(key, default, type=int))
        except (TypeError, ValueError):
            return default

    def set_int(self, key: str, value: int) -> None:
        self._qs.setValue(key, int(value))

    def remove(self, key: str) -> None:
        self._qs.remove(key)

    def contains(self, key: str) -> bool:
        return self._qs.contains(key)

    def sync(self) -> None:
        self._qs.sync()


class AppSettings:
    """Typed accessors over the persisted RandomCaser values."""

    def __init__(self, store: KeyValueStore | None = None) -> None:
        self._store: KeyValueStore = store if store is not None else QSettingsStore()

    @property
    def store(self) -> KeyValueStore:
        return self._store

    # -- draft text --

    @property
    def draft_text(self) -> str | None:
        value = self._store.get_string(DRAFT_TEXT_KEY)
        return value or None

    @draft_text.setter
    def draft_text(self, value: str | None) -> None:
        self._store.set_string(DRAFT_TEXT_KEY, value or None)

    # -- entitlement --

    @property
    def is_pro(self) -> bool:
        return self._store.get_bool(IS_PRO_KEY, False)

    @is_pro.setter
    def is_pro(self, value: bool) -> None:
        self._store.set_bool(IS_PRO_KEY, value)

    # -- theme --

    @property
    def theme_id(self) -> str:
        raw = self._store.get_string(SELECTED_THEME_KEY)
        return (raw or "").strip()

    @theme_id.setter
    def theme_id(self, value: str) -> None:
        self._store.set_string(SELECTED_THEME_KEY, (value or "").strip() or None)

    # -- feedback --

    @property
    def feedback_delay_ms(self) -> int:
        value = self._store.get_int("feedback/delay_ms", DEFAULT_FEEDBACK_DELAY_MS)
        return max(_MIN_FEEDBACK_DELAY_MS, min(_MAX_FEEDBACK_DELAY_MS, value))

    @feedback_delay_ms.setter
    def feedback_delay_ms(self, value: int) -> None:
        self._store.set_int("feedback/delay_ms", value)

    @property
    def show_failure_feedback(self) -> bool:
        return self._store.get_bool("ui/show_failure_feedback", False)

    @show_failure_feedback.setter
    def show_failure_feedback(self, value: bool) -> None:
        self._store.set_bool("ui/show_failure_feedback", value)

    # -- sandbox billing --

    @property
    def sandbox_decline(self) -> bool:
        return self._store.get_bool("billing/sandbox_decline", False)

    @sandbox_decline.setter
    def sandbox_decline(self, value: bool) -> None:
        self._store.set_bool("billing/sandbox_decline", value)

    @property
    def sandbox_purchases(self) -> list[str]:
        raw = self._store.get_string("sandbox/purchases") or ""
        return [item for item in raw.split(",") if item]

    @sandbox_purchases.setter
    def sandbox_purchases(self, value: list[str]) -> None:
        cleaned = sorted({item.strip() for item in value if item and item.strip()})
        self._store.set_string("sandbox/purchases", ",".join(cleaned) or None)

    # -- window geometry --

    @property
    def window_geometry(self) -> str | None:
        return self._store.get_string("ui/window_geometry")

    @window_geometry.setter
    def window_geometry(self, value: str) -> None:
        self._store.set_string("ui/window_geometry", value)

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "randomcaser"
