"""QSettings-backed key-value store."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtCore import QSettings

from matchie.game.interfaces import IKeyValueStore

ORGANIZATION = "Matchie"
APPLICATION = "Matchie"


class QSettingsStore(IKeyValueStore):
    """Persists values through :class:`QSettings`.

    Args:
        path: Explicit ini file to use instead of the platform default
            location (handy for tests and portable installs).
    """

    __slots__ = ("_settings",)

    def __init__(self, path: Path | None = None) -> None:
        if path is None:
            self._settings = QSettings(ORGANIZATION, APPLICATION)
        else:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)

    def get(self, key: str) -> Any | None:
        self._check_status()
        if not self._settings.contains(key):
            return None
        return self._settings.value(key)

    def set(self, key: str, value: Any) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
        self._check_status()

    def _check_status(self) -> None:
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise OSError(f"Settings storage unavailable: {status.name}")
