"""App constants and utilities."""

from .constants import (
    APP_DIR,
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    HTML_TEMPLATE,
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_SPLITTER,
)
from .log import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "APP_DIR",
    "CSS_PREVIEW",
    "HTML_TEMPLATE",
    "SETTINGS_GEOMETRY",
    "SETTINGS_SPLITTER",
    "MAX_RECENTS",
    "configure_logging",
]
