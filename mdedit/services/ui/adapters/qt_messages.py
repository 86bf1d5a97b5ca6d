from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from mdedit.services.ui.ports.messages import IMessageService, SaveChoice


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def ask_save_changes(self, parent: Any | None, title: str, text: str) -> SaveChoice:
        resp = QMessageBox.warning(
            parent,
            title,
            text,
            QMessageBox.StandardButton.Yes
            | QMessageBox.StandardButton.No
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Cancel,
        )
        if resp == QMessageBox.StandardButton.Yes:
            return SaveChoice.SAVE
        if resp == QMessageBox.StandardButton.No:
            return SaveChoice.DISCARD
        return SaveChoice.CANCEL
