from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """Native open/save pickers used by the file gateway. Both return None on cancel."""

    def get_open_file(
        self, parent: Any | None, caption: str, start_dir: str | None, filter_str: str
    ) -> Path | None: ...

    def get_save_file(
        self, parent: Any | None, caption: str, start_path: str | None, filter_str: str
    ) -> Path | None: ...
