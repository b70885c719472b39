"""Persistent key/value preference storage."""

from __future__ import annotations

from typing import Protocol

from PySide6.QtCore import QSettings

from fb_common.errors import PreferenceError


class PreferenceStore(Protocol):
    """Minimal get/set contract used for persisted UI preferences."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class SettingsPreferenceStore:
    """PreferenceStore backed by QSettings.

    With no explicit settings object, QSettings resolves its location from
    the application's organization and application names.
    """

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings

    @property
    def settings(self) -> QSettings:
        if self._settings is None:
            self._settings = QSettings()
        return self._settings

    def get(self, key: str) -> str | None:
        value = self.settings.value(key)
        self._check_status("read", key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    def set(self, key: str, value: str) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()
        self._check_status("write", key)

    def _check_status(self, action: str, key: str) -> None:
        status = self.settings.status()
        if status != QSettings.Status.NoError:
            raise PreferenceError(
                f"Failed to {action} preference '{key}'",
                context={"key": key, "status": status.name},
            )
