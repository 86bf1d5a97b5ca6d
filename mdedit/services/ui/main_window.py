from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QByteArray, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow,
    QMenu,
    QSplitter,
    QStatusBar,
    QTextBrowser,
    QTextEdit,
)

from mdedit.domain.interfaces import ISettingsService
from mdedit.domain.models import DiscardDecision
from mdedit.services.ui.presenters.main_presenter import MainPresenter

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Thin PyQt window implementing IMainView: forwards edits and commands to the
    presenter and renders whatever state it pushes back.
    """

    def __init__(
        self,
        settings: ISettingsService,
        *,
        app_title: str = "MDEdit",
        prefer_web_engine: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1100, 700)

        self.settings = settings
        self.presenter: MainPresenter | None = None

        # Programmatic editor updates must not be reported back as user edits.
        self._syncing = False
        # Preview HTML is held until the window is first shown.
        self._preview_ready = False
        self._pending_html: str | None = None
        self._quit_confirmed = False

        # Widgets
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))

        # --- Preview: prefer QWebEngineView, fallback to QTextBrowser ---
        self.preview = self._create_preview_widget(prefer_web_engine)

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)

        # UI
        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, bytes | bytearray):
            self.restoreGeometry(QByteArray(geo))
        split = self.settings.get_splitter()
        if isinstance(split, bytes | bytearray):
            self.splitter.restoreState(QByteArray(split))

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self.presenter = presenter

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=lambda: self._call("open"),
        )
        self.act_save = QAction(
            "Save",
            self,
            shortcut=QKeySequence.StandardKey.Save,
            triggered=lambda: self._call("save"),
        )
        self.act_save.setEnabled(False)
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence("Ctrl+Shift+S"),
            triggered=lambda: self._call("save_as"),
        )
        self.act_close = QAction(
            "Close",
            self,
            shortcut=QKeySequence.StandardKey.Close,
            triggered=lambda: self._call("close"),
        )
        self.act_exit = QAction(
            "E&xit",
            self,
            shortcut=QKeySequence("Ctrl+Q"),
            triggered=lambda: self._call("exit"),
        )
        self.act_exit.setStatusTip("Exit application")

        self.act_clear_recent = QAction(
            "Clear Recent Files", self, triggered=lambda: self._call("clear_recent")
        )
        self.recent_menu = QMenu("Open Recent", self)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_close)
        filem.addAction(self.act_exit)
        self.set_recents([])

    def _call(self, command: str) -> None:
        if self.presenter is not None:
            getattr(self.presenter, command)()

    # ---------- IMainView ----------
    def set_editor_text(self, text: str) -> None:
        self._syncing = True
        try:
            self.editor.setPlainText(text)
        finally:
            self._syncing = False

    def set_preview_html(self, html: str) -> None:
        if not self._preview_ready:
            self._pending_html = html
            return
        # Both QWebEngineView and QTextBrowser implement setHtml(html).
        self.preview.setHtml(html)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_modified(self, modified: bool) -> None:
        # dirty marker lives in the title text
        self.act_save.setEnabled(modified)

    def set_recents(self, items: list[str]) -> None:
        self.recent_menu.clear()
        if not items:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
        for p in items:
            self.recent_menu.addAction(
                QAction(p, self, triggered=lambda chk=False, x=p: self._open_recent(Path(x)))
            )
        self.recent_menu.addSeparator()
        self.recent_menu.addAction(self.act_clear_recent)
        self.act_clear_recent.setEnabled(bool(items))

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    def request_quit(self) -> None:
        self._quit_confirmed = True
        self.close()

    # ---------- Helpers ----------
    def _open_recent(self, path: Path) -> None:
        if self.presenter is not None:
            self.presenter.open_recent(path)

    def _on_text_changed(self):
        if self._syncing or self.presenter is None:
            return
        self.presenter.set_text(self.editor.toPlainText())

    # ---------- Show / Close ----------
    def showEvent(self, event):
        super().showEvent(event)
        if not self._preview_ready:
            self._preview_ready = True
            if self._pending_html is not None:
                html, self._pending_html = self._pending_html, None
                self.preview.setHtml(html)

    def closeEvent(self, event):
        if not self._quit_confirmed and self.presenter is not None:
            if self.presenter.confirm_discard() is DiscardDecision.ABORT:
                event.ignore()
                return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_splitter(bytes(self.splitter.saveState()))
        super().closeEvent(event)

    # ---------- Internal: preview creation ----------
    def _create_preview_widget(self, prefer_web_engine: bool):
        """
        Prefer QWebEngineView (JS-capable: MathJax/KaTeX, better CSS), fall back to QTextBrowser.
        We guard the import so the app runs even if Qt WebEngine isn't installed.
        """
        if prefer_web_engine:
            try:
                from PyQt6.QtWebEngineWidgets import QWebEngineView  # type: ignore

                logger.info("Preview uses QWebEngineView")
                return QWebEngineView(self)
            except ImportError as e:
                logger.warning("QWebEngineView unavailable (%s); using QTextBrowser", e)
        w = QTextBrowser(self)
        w.setOpenExternalLinks(True)
        return w
