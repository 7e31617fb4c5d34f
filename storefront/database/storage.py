"""
Key-value storage for storefront state

String keys mapped to string values, the same contract as browser
localStorage. Stores serialize their own values; storage never interprets
them.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.config import Settings

logger = logging.getLogger(__name__)


class KeyValueStorage:
    """Base interface for storage backends"""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    """In-memory storage"""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)

    def clear(self) -> None:
        self.items.clear()


class FileStorage(KeyValueStorage):
    """
    Storage persisted as a single JSON object on disk.

    The whole file is rewritten on every change. A missing or unreadable
    file starts out empty.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self.items: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read storage file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} is not a JSON object, ignoring it")
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".storage-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self.items, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        if key in self.items:
            del self.items[key]
            self._flush()

    def clear(self) -> None:
        self.items = {}
        self._flush()


def create_storage(settings: Settings) -> KeyValueStorage:
    """Pick a storage backend from settings"""
    if settings.storage_path:
        logger.info(f"Using file storage at {settings.storage_path}")
        return FileStorage(settings.storage_path)

    logger.info("Using in-memory storage - state will not survive a restart")
    return MemoryStorage()
