from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to full HTML string (including CSS)."""

    def to_html(self, markdown_text: str) -> str: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IFileGateway(Protocol):
    """
    Everything the editor needs to pick, read and write documents.
    Prompts return None when the user cancels; I/O failures raise OSError.
    """

    def prompt_open_path(self, start_dir: Path | None = None) -> Path | None: ...
    def prompt_save_path(self, start_path: Path | None = None) -> Path | None: ...
    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> None: ...


class IRecentFilesStore(Protocol):
    """Bounded most-recently-used list of document paths, persisted best-effort."""

    def load(self) -> list[str]: ...
    def items(self) -> list[str]: ...
    def add(self, path: str) -> None: ...
    def clear(self) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_splitter(self) -> bytes | None: ...
    def set_splitter(self, blob: bytes) -> None: ...


class IConfigService(Protocol):
    """Read-only access to user configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...
