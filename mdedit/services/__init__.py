"""Concrete service implementations."""

from .file_gateway import FileGateway
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .recent_files import RecentFilesStore
from .settings_service import SettingsService

__all__ = ["FileGateway", "FileService", "MarkdownRenderer", "RecentFilesStore", "SettingsService"]
