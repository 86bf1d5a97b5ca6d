from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from mdedit.domain.interfaces import IFileGateway, IMarkdownRenderer, IRecentFilesStore
from mdedit.domain.models import DiscardDecision, Document, SaveResult
from mdedit.services.ui.ports.messages import IMessageService, SaveChoice

logger = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor/preview
    def set_editor_text(self, text: str) -> None: ...
    def set_preview_html(self, html: str) -> None: ...

    # window chrome
    def set_modified(self, modified: bool) -> None: ...
    def set_title(self, title: str) -> None: ...

    # recents
    def set_recents(self, items: list[str]) -> None: ...

    # status + lifecycle
    def show_status(self, text: str, msec: int = 3000) -> None: ...
    def request_quit(self) -> None: ...


class MainPresenter:
    """
    Owns the single open document and drives every file transition.

    The view only forwards edits (set_text) and commands; after each change the
    presenter pushes the derived state back: preview HTML whenever the text
    changes, title and save-enabled whenever path or dirty changes, and the
    recent list whenever it is updated.

    Anything that would drop unsaved edits goes through confirm_discard() first.
    """

    def __init__(
        self,
        view: IMainView,
        renderer: IMarkdownRenderer,
        files: IFileGateway,
        recents: IRecentFilesStore,
        messages: IMessageService,
    ) -> None:
        self.view = view
        self.renderer = renderer
        self.files = files
        self.recents = recents
        self.messages = messages

        self.doc = Document()
        self._html = self.renderer.to_html(self.doc.text)

    # ---------- derived state ----------

    @property
    def rendered_html(self) -> str:
        return self._html

    @property
    def title(self) -> str:
        return self.doc.title

    @property
    def can_save(self) -> bool:
        return self.doc.dirty

    @property
    def recent_files(self) -> list[str]:
        return self.recents.items()

    def start(self) -> None:
        """Push the initial state to the view."""
        self.view.set_preview_html(self._html)
        self._sync_chrome()
        self.view.set_recents(self.recents.items())

    # ---------- editing ----------

    def set_text(self, text: str) -> None:
        if text == self.doc.text:
            return
        self.doc.text = text
        self.doc.dirty = True
        self._render()
        self._sync_chrome()

    # ---------- commands ----------

    def open(self) -> bool:
        if self.confirm_discard() is DiscardDecision.ABORT:
            return False
        start_dir = self.doc.path.parent if self.doc.path else None
        path = self.files.prompt_open_path(start_dir)
        if path is None:
            return False
        return self._load(path)

    def open_path(self, path: Path) -> bool:
        """Open a known path (command line, drag target); still guards unsaved edits."""
        if self.confirm_discard() is DiscardDecision.ABORT:
            return False
        return self._load(path)

    def open_recent(self, path: Path) -> bool:
        if not path.exists():
            logger.warning("Recent file no longer exists: %s", path)
            self.messages.error(self.view, "Open Error", f"File not found:\n{path}")
            return False
        return self.open_path(path)

    def save(self) -> SaveResult:
        if self.doc.path is None:
            return self.save_as()
        if not self.doc.dirty:
            return SaveResult.SAVED
        return self._write(self.doc.path)

    def save_as(self) -> SaveResult:
        path = self.files.prompt_save_path(self.doc.path)
        if path is None:
            return SaveResult.CANCELLED
        return self._write(path)

    def close(self) -> bool:
        if self.confirm_discard() is DiscardDecision.ABORT:
            return False
        self.doc = Document()
        self.view.set_editor_text("")
        self._render()
        self._sync_chrome()
        return True

    def exit(self) -> bool:
        if self.confirm_discard() is DiscardDecision.ABORT:
            return False
        logger.info("Exiting")
        self.view.request_quit()
        return True

    def clear_recent(self) -> None:
        self.recents.clear()
        self.view.set_recents([])

    def confirm_discard(self) -> DiscardDecision:
        if not self.doc.dirty:
            return DiscardDecision.PROCEED

        choice = self.messages.ask_save_changes(
            self.view,
            "Unsaved Changes",
            "You have unsaved changes. Do you want to save them?",
        )
        if choice is SaveChoice.DISCARD:
            return DiscardDecision.PROCEED
        if choice is SaveChoice.SAVE:
            # Only a completed save may proceed; a cancelled Save As or a write
            # error keeps the edits and aborts the pending operation.
            result = self.save()
            return DiscardDecision.PROCEED if result is SaveResult.SAVED else DiscardDecision.ABORT
        return DiscardDecision.ABORT

    # ---------- helpers ----------

    def _load(self, path: Path) -> bool:
        # Stored paths are absolute so recents survive a different working directory.
        path = path.expanduser().resolve()
        try:
            text = self.files.read_text(path)
        except OSError as e:
            logger.error("Failed to open %s: %s", path, e)
            self.messages.error(self.view, "Open Error", f"Failed to open file:\n{path}\n\n{e}")
            return False

        self.doc = Document(path=path, text=text, dirty=False)
        self.view.set_editor_text(text)
        self._render()
        self._sync_chrome()
        self._remember(path)
        logger.info("Opened %s", path)
        return True

    def _write(self, path: Path) -> SaveResult:
        path = path.expanduser().resolve()
        try:
            self.files.write_text(path, self.doc.text)
        except OSError as e:
            logger.error("Failed to save %s: %s", path, e)
            self.messages.error(self.view, "Save Error", f"Failed to save file:\n{path}\n\n{e}")
            return SaveResult.FAILED

        self.doc.path = path
        self.doc.dirty = False
        self._sync_chrome()
        self._remember(path)
        self.view.show_status(f"Saved: {path}", 3000)
        logger.info("Saved %s", path)
        return SaveResult.SAVED

    def _remember(self, path: Path) -> None:
        self.recents.add(str(path))
        self.view.set_recents(self.recents.items())

    def _render(self) -> None:
        self._html = self.renderer.to_html(self.doc.text)
        self.view.set_preview_html(self._html)

    def _sync_chrome(self) -> None:
        self.view.set_title(self.doc.title)
        self.view.set_modified(self.doc.dirty)
