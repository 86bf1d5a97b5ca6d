from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QTextBrowser

from conftest import FakeDialogs, FakeMessages
from mdedit.di.container import Container
from mdedit.services.config.ini_config_service import IniConfigService
from mdedit.services.recent_files import RecentFilesStore
from mdedit.services.settings_service import SettingsService
from mdedit.services.ui.main_window import MainWindow
from mdedit.services.ui.ports.messages import SaveChoice

# ------------------------------
# Fakes & helpers
# ------------------------------


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def container(tmp_path, messages, dialogs) -> Container:
    qs = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return Container(
        recents=RecentFilesStore(tmp_path / "recent-files.json"),
        settings=SettingsService(qs),
        dialogs=dialogs,
        messages=messages,
        config=IniConfigService(explicit_path=tmp_path / "missing.ini"),
    )


@pytest.fixture()
def window(qapp, container: Container) -> MainWindow:
    """
    Build a fully-wired MainWindow with file-based QSettings (isolated per test),
    fake dialogs/messages, and a QTextBrowser preview.
    """
    w = container.build_main_window(app_title="Test", prefer_web_engine=False)
    w.show()
    qapp.processEvents()
    yield w
    w._quit_confirmed = True
    w.close()


# ------------------------------
# Core window behavior tests
# ------------------------------


def test_window_initial_state(window: MainWindow):
    assert isinstance(window.preview, QTextBrowser)
    assert window.presenter is not None
    assert window.presenter.doc.path is None
    assert window.windowTitle() == "MDEdit - Untitled"
    assert window.act_save.isEnabled() is False


def test_typing_marks_dirty_and_updates_preview(window: MainWindow):
    window.editor.setPlainText("# Hello")
    presenter = window.presenter
    assert presenter.doc.text == "# Hello"
    assert presenter.doc.dirty is True
    assert window.windowTitle() == "MDEdit - Untitled*"
    assert window.act_save.isEnabled() is True
    assert "Hello" in window.preview.toPlainText()


def test_dirty_marker_is_in_title_not_window_flag(window: MainWindow):
    window.editor.setPlainText("draft")
    assert window.windowTitle().endswith("*")
    assert window.isWindowModified() is False
    assert window.act_save.isEnabled() is True


def test_open_path_fills_editor_without_marking_dirty(tmp_path: Path, window: MainWindow):
    src = tmp_path / "a.md"
    src.write_text("# Hello", encoding="utf-8")

    assert window.presenter.open_path(src) is True
    assert window.editor.toPlainText() == "# Hello"
    assert window.presenter.doc.dirty is False
    assert window.windowTitle() == "MDEdit - a.md"


def test_open_save_cycle_through_actions(tmp_path: Path, window: MainWindow, dialogs: FakeDialogs):
    src = tmp_path / "a.md"
    src.write_text("# Hello", encoding="utf-8")
    dialogs.open_path = src

    window.act_open.trigger()
    assert window.presenter.doc.path == src

    window.editor.setPlainText("# Hello\nWorld")
    window.act_save.trigger()
    assert src.read_text(encoding="utf-8") == "# Hello\nWorld"
    assert window.presenter.doc.dirty is False
    assert window.act_save.isEnabled() is False


def test_save_as_action_uses_dialog(tmp_path: Path, window: MainWindow, dialogs: FakeDialogs):
    dialogs.save_path = tmp_path / "fresh"
    window.editor.setPlainText("new text")
    window.act_save_as.trigger()

    dest = tmp_path / "fresh.md"
    assert dest.read_text(encoding="utf-8") == "new text"
    assert window.windowTitle() == "MDEdit - fresh.md"


def test_recent_menu_lists_opened_files(tmp_path: Path, window: MainWindow):
    labels = [a.text() for a in window.recent_menu.actions() if not a.isSeparator()]
    assert labels == ["(empty)", "Clear Recent Files"]

    src = tmp_path / "a.md"
    src.write_text("x", encoding="utf-8")
    window.presenter.open_path(src)

    labels = [a.text() for a in window.recent_menu.actions() if not a.isSeparator()]
    assert labels == [str(src), "Clear Recent Files"]

    window.act_clear_recent.trigger()
    labels = [a.text() for a in window.recent_menu.actions() if not a.isSeparator()]
    assert labels[0] == "(empty)"


def test_recent_menu_entry_opens_file(tmp_path: Path, window: MainWindow):
    a = tmp_path / "a.md"
    b = tmp_path / "b.md"
    a.write_text("A", encoding="utf-8")
    b.write_text("B", encoding="utf-8")
    window.presenter.open_path(a)
    window.presenter.open_path(b)

    entry = next(act for act in window.recent_menu.actions() if act.text() == str(a))
    entry.trigger()
    assert window.presenter.doc.path == a
    assert window.editor.toPlainText() == "A"


def test_close_action_clears_editor(tmp_path: Path, window: MainWindow):
    src = tmp_path / "a.md"
    src.write_text("content", encoding="utf-8")
    window.presenter.open_path(src)

    window.act_close.trigger()
    assert window.editor.toPlainText() == ""
    assert window.windowTitle() == "MDEdit - Untitled"


def test_close_event_cancelled_keeps_window_open(window: MainWindow, messages: FakeMessages):
    window.editor.setPlainText("unsaved")
    messages.answers = [SaveChoice.CANCEL]

    assert window.close() is False
    assert window.isVisible() is True
    assert messages.asked == 1


def test_close_event_discard_closes(window: MainWindow, messages: FakeMessages):
    window.editor.setPlainText("unsaved")
    messages.answers = [SaveChoice.DISCARD]
    assert window.close() is True


def test_exit_action_asks_only_once(window: MainWindow, messages: FakeMessages):
    window.editor.setPlainText("unsaved")
    messages.answers = [SaveChoice.DISCARD]

    window.act_exit.trigger()
    assert messages.asked == 1
    assert window.isVisible() is False


def test_preview_is_deferred_until_first_show(qapp, container: Container):
    w = container.build_main_window(prefer_web_engine=False)
    w.presenter.set_text("# Pending")
    assert w.preview.toPlainText() == ""

    w.show()
    qapp.processEvents()
    assert "Pending" in w.preview.toPlainText()
    w._quit_confirmed = True
    w.close()


def test_geometry_saved_on_close(window: MainWindow, container: Container):
    window.close()
    assert container.settings_service.get_geometry() is not None
    assert container.settings_service.get_splitter() is not None


def test_start_path_is_opened(qapp, tmp_path: Path, container: Container):
    src = tmp_path / "start.md"
    src.write_text("# Start", encoding="utf-8")
    w = container.build_main_window(start_path=src, prefer_web_engine=False)
    assert w.presenter.doc.path == src
    assert w.editor.toPlainText() == "# Start"
    w._quit_confirmed = True
    w.close()
