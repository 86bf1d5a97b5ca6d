from __future__ import annotations

from pathlib import Path
from typing import Any

from mdedit.domain.interfaces import IFileGateway, IFileService
from mdedit.services.ui.ports.dialogs import IFileDialogService
from mdedit.utils.constants import DEFAULT_SUFFIX, MARKDOWN_FILTER, SAVE_FILTER


class FileGateway(IFileGateway):
    """
    Single entry point for document file access: the two pickers plus
    read/write. Holds no document state; `parent` is the window the dialogs
    are attached to and may be set after construction.
    """

    def __init__(
        self,
        files: IFileService,
        dialogs: IFileDialogService,
        parent: Any | None = None,
    ) -> None:
        self._files = files
        self._dialogs = dialogs
        self.parent = parent

    def prompt_open_path(self, start_dir: Path | None = None) -> Path | None:
        return self._dialogs.get_open_file(
            self.parent,
            "Open Markdown File",
            str(start_dir) if start_dir else None,
            MARKDOWN_FILTER,
        )

    def prompt_save_path(self, start_path: Path | None = None) -> Path | None:
        path = self._dialogs.get_save_file(
            self.parent,
            "Save Markdown File",
            str(start_path) if start_path else None,
            SAVE_FILTER,
        )
        if path is not None and not path.suffix:
            path = path.with_suffix(DEFAULT_SUFFIX)
        return path

    def read_text(self, path: Path) -> str:
        return self._files.read_text(path)

    def write_text(self, path: Path, text: str) -> None:
        self._files.write_text_atomic(path, text)
