from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from mdedit.domain.interfaces import IFileService


class FileService(IFileService):
    """Atomic reads/writes for UTF-8 text files. All failures surface as OSError."""

    def read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise OSError(f"Cannot decode {path} as UTF-8: {e}") from e

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open {path} for writing: {sf.errorString()}")
        if sf.write(text.encode("utf-8")) == -1:
            reason = sf.errorString()
            sf.cancelWriting()
            raise OSError(f"Cannot write {path}: {reason}")
        if not sf.commit():
            raise OSError(f"Commit failed for {path}: {sf.errorString()}")
