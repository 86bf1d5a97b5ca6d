from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from mdedit.services.file_service import FileService  # noqa: E402
from mdedit.services.markdown_renderer import MarkdownRenderer  # noqa: E402
from mdedit.services.recent_files import RecentFilesStore  # noqa: E402
from mdedit.services.settings_service import SettingsService  # noqa: E402
from mdedit.services.ui.ports.messages import SaveChoice  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fakes for the presenter's ports ---


class FakeView:
    """Records everything the presenter pushes to the view."""

    def __init__(self) -> None:
        self.editor_text = ""
        self.preview_html: str | None = None
        self.title = ""
        self.modified = False
        self.recents: list[str] = []
        self.statuses: list[str] = []
        self.quit_requested = False
        self.preview_updates = 0

    def set_editor_text(self, text: str) -> None:
        self.editor_text = text

    def set_preview_html(self, html: str) -> None:
        self.preview_html = html
        self.preview_updates += 1

    def set_modified(self, modified: bool) -> None:
        self.modified = modified

    def set_title(self, title: str) -> None:
        self.title = title

    def set_recents(self, items: list[str]) -> None:
        self.recents = list(items)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statuses.append(text)

    def request_quit(self) -> None:
        self.quit_requested = True


class FakeMessages:
    """Scripted answers for the save-changes prompt; records errors."""

    def __init__(self, *answers: SaveChoice) -> None:
        self.answers = list(answers)
        self.asked = 0
        self.errors: list[tuple[str, str]] = []

    def error(self, parent, title: str, text: str) -> None:
        self.errors.append((title, text))

    def ask_save_changes(self, parent, title: str, text: str) -> SaveChoice:
        self.asked += 1
        return self.answers.pop(0) if self.answers else SaveChoice.CANCEL


class FakeGateway:
    """In-memory file gateway with scripted picker results."""

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.open_choices: list[Path | None] = []
        self.save_choices: list[Path | None] = []
        self.fail_read: set[Path] = set()
        self.fail_write: set[Path] = set()
        self.writes: list[tuple[Path, str]] = []
        self.save_prompts = 0
        self.open_prompts = 0

    def prompt_open_path(self, start_dir: Path | None = None) -> Path | None:
        self.open_prompts += 1
        return self.open_choices.pop(0) if self.open_choices else None

    def prompt_save_path(self, start_path: Path | None = None) -> Path | None:
        self.save_prompts += 1
        return self.save_choices.pop(0) if self.save_choices else None

    def read_text(self, path: Path) -> str:
        if path in self.fail_read or path not in self.files:
            raise OSError(f"Cannot read {path}")
        return self.files[path]

    def write_text(self, path: Path, text: str) -> None:
        if path in self.fail_write:
            raise OSError(f"Disk full: {path}")
        self.files[path] = text
        self.writes.append((path, text))


class FakeDialogs:
    """IFileDialogService stand-in returning scripted paths."""

    def __init__(self, open_path: Path | None = None, save_path: Path | None = None) -> None:
        self.open_path = open_path
        self.save_path = save_path
        self.calls: list[tuple[str, str | None, str]] = []

    def get_open_file(self, parent, caption, start_dir, filter_str):
        self.calls.append(("open", start_dir, filter_str))
        return self.open_path

    def get_save_file(self, parent, caption, start_path, filter_str):
        self.calls.append(("save", start_path, filter_str))
        return self.save_path


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def recents(tmp_path: Path) -> RecentFilesStore:
    return RecentFilesStore(tmp_path / "config" / "recent-files.json")


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()
