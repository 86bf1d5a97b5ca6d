from __future__ import annotations

import logging
from pathlib import Path

from mdedit.utils.constants import LOG_FORMAT

# Handlers installed by configure_logging(); replaced on reconfiguration.
_installed: list[logging.Handler] = []


def configure_logging(level: str | int = "INFO", log_file: Path | None = None) -> logging.Logger:
    """
    Set up the root logger with a console handler and, optionally, an
    append-mode file handler. Safe to call more than once.
    """
    root = logging.getLogger()
    for h in _installed:
        root.removeHandler(h)
        h.close()
    _installed.clear()

    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    root.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    _installed.append(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, "a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        _installed.append(file_handler)

    for h in _installed:
        root.addHandler(h)
    return root
