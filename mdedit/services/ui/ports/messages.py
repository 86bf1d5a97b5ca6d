from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class SaveChoice(Enum):
    """Answer to "save your changes?" before unsaved edits would be lost."""

    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask_save_changes(self, parent: Any | None, title: str, text: str) -> SaveChoice:
        """Three-way Save / Discard / Cancel prompt. Closing the box counts as Cancel."""
        ...
