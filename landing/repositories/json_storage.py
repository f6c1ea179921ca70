"""
JSON file persistence adapter.

All keys live in a single JSON document on disk. Writes go to a temporary
file next to the target and are moved into place with os.replace, so a
reader never sees a half-written document.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from landing.repositories.base import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.warning("Ignoring unreadable store file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store file %s: top-level value is not an object", self.path)
            return {}
        return data

    def _write(self, db: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(db, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def load(self, key: str) -> Any | None:
        return copy.deepcopy(self._read().get(key))

    def save(self, key: str, value: Any) -> None:
        self._check_value(key, value)
        db = self._read()
        db[key] = value
        self._write(db)
        logger.debug("Saved %s to %s", key, self.path)

    def remove(self, key: str) -> None:
        db = self._read()
        if key not in db:
            return
        del db[key]
        self._write(db)
        logger.debug("Removed %s from %s", key, self.path)

    def keys(self) -> list[str]:
        return list(self._read().keys())
