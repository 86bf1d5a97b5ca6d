from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from platformdirs import user_log_dir
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QApplication

from mdedit.di.container import Container
from mdedit.domain.interfaces import IConfigService
from mdedit.services.config.ini_config_service import IniConfigService
from mdedit.utils.constants import APP_DIR, APP_NAME, APP_ORG, LOG_FILE
from mdedit.utils.log import configure_logging

logger = logging.getLogger(__name__)


def setup_logging(config: IConfigService) -> None:
    level = config.get("logging", "level", "INFO") or "INFO"
    log_file = None
    if config.get_bool("logging", "file", False):
        log_file = Path(user_log_dir(APP_DIR)) / LOG_FILE
    configure_logging(level, log_file)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = IniConfigService()
    setup_logging(config)
    logger.info(
        "Starting %s %s (config: %s)",
        APP_NAME,
        config.app_version(),
        config.loaded_from or "defaults",
    )

    # QtWebEngine needs shared GL contexts before the application object exists.
    QGuiApplication.setAttribute(Qt.ApplicationAttribute.AA_ShareOpenGLContexts, True)
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]).expanduser().resolve() if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
