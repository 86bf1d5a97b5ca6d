"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import (
    IConfigService,
    IFileGateway,
    IFileService,
    IMarkdownRenderer,
    IRecentFilesStore,
    ISettingsService,
)
from .models import DiscardDecision, Document, SaveResult

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "IFileGateway",
    "IRecentFilesStore",
    "ISettingsService",
    "IConfigService",
    "Document",
    "DiscardDecision",
    "SaveResult",
]
