from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path

from platformdirs import user_config_dir

from mdedit.domain.interfaces import IRecentFilesStore
from mdedit.utils.constants import APP_DIR, MAX_RECENTS, RECENTS_FILE

logger = logging.getLogger(__name__)


def default_recents_path() -> Path:
    return Path(user_config_dir(APP_DIR)) / RECENTS_FILE


class RecentFilesStore(IRecentFilesStore):
    """
    Most-recently-used list of document paths, kept in a small JSON file.

    Persistence is advisory: a missing or corrupt file loads as an empty list
    and write failures are logged, never raised. Paths that no longer exist
    are dropped when the file is loaded.
    """

    def __init__(
        self,
        path: Path | None = None,
        *,
        max_entries: int = MAX_RECENTS,
        exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        self._path = path or default_recents_path()
        self._max = max_entries
        self._exists = exists
        self._items: list[str] = self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[str]:
        try:
            if not self._path.exists():
                return []
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable recent files list %s: %s", self._path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Ignoring recent files list %s: expected a JSON array", self._path)
            return []

        loaded: list[str] = []
        for entry in data:
            if not isinstance(entry, str) or not entry.strip() or entry in loaded:
                continue
            if self._exists(entry):
                loaded.append(entry)
        return loaded[: self._max]

    def items(self) -> list[str]:
        return list(self._items)

    def add(self, path: str) -> None:
        if not path or not path.strip():
            return
        if path in self._items:
            self._items.remove(path)
        self._items.insert(0, path)
        del self._items[self._max :]
        self._save()

    def clear(self) -> None:
        self._items.clear()
        self._save()

    def _save(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(self._items, indent=2), encoding="utf-8")
        except OSError as e:
            # Never interrupt editing because the MRU list could not be written.
            logger.warning("Could not save recent files to %s: %s", self._path, e)
