from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from mdedit.utils.constants import APP_NAME, UNTITLED


@dataclass
class Document:
    path: Path | None = None
    text: str = ""
    dirty: bool = False

    @property
    def display_name(self) -> str:
        return self.path.name if self.path else UNTITLED

    @property
    def title(self) -> str:
        star = "*" if self.dirty else ""
        return f"{APP_NAME} - {self.display_name}{star}"


class SaveResult(Enum):
    """Outcome of a save attempt; only SAVED leaves the document clean."""

    SAVED = auto()
    CANCELLED = auto()
    FAILED = auto()


class DiscardDecision(Enum):
    """Whether an operation that would drop unsaved edits may go ahead."""

    PROCEED = auto()
    ABORT = auto()
