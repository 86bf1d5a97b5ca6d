from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from mdedit.domain.interfaces import (
    IConfigService,
    IFileService,
    IMarkdownRenderer,
    IRecentFilesStore,
    ISettingsService,
)
from mdedit.services.config.ini_config_service import IniConfigService
from mdedit.services.file_gateway import FileGateway
from mdedit.services.file_service import FileService
from mdedit.services.markdown_renderer import MarkdownRenderer, parse_math_engine
from mdedit.services.recent_files import RecentFilesStore
from mdedit.services.settings_service import SettingsService
from mdedit.services.ui.adapters import QtFileDialogService, QtMessageService
from mdedit.services.ui.main_window import MainWindow
from mdedit.services.ui.ports.dialogs import IFileDialogService
from mdedit.services.ui.ports.messages import IMessageService
from mdedit.services.ui.presenters.main_presenter import MainPresenter
from mdedit.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the window and binds the document presenter to it
    """

    def __init__(
        self,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        recents: IRecentFilesStore | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        config: IConfigService | None = None,
    ) -> None:
        self.config: IConfigService = config or IniConfigService()

        # Core services (defaults if not supplied)
        math_engine = parse_math_engine(self.config.get("preview", "math_engine", "none"))
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(math_engine=math_engine)
        self.file_service: IFileService = files or FileService()
        self.recent_files: IRecentFilesStore = recents or RecentFilesStore()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )

        # UI service ports (Qt-backed adapters)
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.file_gateway = FileGateway(self.file_service, self.dialogs)

    # ---------- Class helpers ----------

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IConfigService | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        """Build a container with QSettings scoped to the application identity."""
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- UI factories ----------

    def build_main_presenter(self, view) -> MainPresenter:
        return MainPresenter(
            view=view,
            renderer=self.renderer,
            files=self.file_gateway,
            recents=self.recent_files,
            messages=self.messages,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
        prefer_web_engine: bool = True,
    ) -> MainWindow:
        """
        Create the Qt MainWindow, attach its presenter, push the initial state
        and open `start_path` when given.
        """
        window = MainWindow(
            settings=self.settings_service,
            app_title=app_title,
            prefer_web_engine=prefer_web_engine,
        )
        self.file_gateway.parent = window

        presenter = self.build_main_presenter(view=window)
        window.attach_presenter(presenter)
        presenter.start()

        if start_path is not None:
            presenter.open_path(start_path)

        return window


# --- Convenience top-level function ------------------


def build_main_window(
    qsettings: QSettings | None = None,
    *,
    start_path: Path | None = None,
    app_title: str = APP_NAME,
    organization: str = APP_ORG,
    application: str = APP_NAME,
) -> MainWindow:
    """
    One-call convenience for a ready-to-use window.
    """
    container = Container.default(
        qsettings=qsettings,
        organization=organization,
        application=application,
    )
    return container.build_main_window(start_path=start_path, app_title=app_title)
