from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from mdedit.domain.interfaces import ISettingsService
from mdedit.utils.constants import SETTINGS_GEOMETRY, SETTINGS_SPLITTER


class SettingsService(ISettingsService):
    """Persist small UI bits like window geometry and splitter position."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_splitter(self) -> bytes | None:
        v = self._s.value(SETTINGS_SPLITTER)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_splitter(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_SPLITTER, QByteArray(blob))
