"""Generic CRUD over a list of records held under one store key."""

from __future__ import annotations

import logging
from typing import Any, Optional

from landing.core.errors import RecordNotFoundError
from landing.repositories.base import KeyValueStore

logger = logging.getLogger(__name__)


class CollectionStore:
    """
    Each collection is a JSON array under a single key. Every mutation reads
    the whole array, changes it and writes the whole array back.
    """

    def __init__(self, store: KeyValueStore, id_field: str = "id") -> None:
        self.store = store
        self.id_field = id_field

    def _index_of(self, items: list[dict], item_id: Any) -> int:
        for idx, item in enumerate(items):
            if isinstance(item, dict) and item.get(self.id_field) == item_id:
                return idx
        return -1

    def query(self, key: str) -> list[dict]:
        items = self.store.load(key)
        if items is None:
            return []
        if not isinstance(items, list):
            logger.warning("Collection %s holds %s instead of a list", key, type(items).__name__)
            return []
        return items

    def get(self, key: str, item_id: Any) -> Optional[dict]:
        items = self.query(key)
        idx = self._index_of(items, item_id)
        return items[idx] if idx >= 0 else None

    def post(self, key: str, record: dict) -> dict:
        items = self.query(key)
        items.append(record)
        self.store.save(key, items)
        return record

    def put(self, key: str, record: dict) -> dict:
        items = self.query(key)
        record_id = record.get(self.id_field)
        idx = self._index_of(items, record_id)
        if idx < 0:
            raise RecordNotFoundError(key, record_id)
        items[idx] = record
        self.store.save(key, items)
        return record

    def remove(self, key: str, item_id: Any) -> bool:
        """Delete the first record with ``item_id``; False when there was none."""
        items = self.query(key)
        idx = self._index_of(items, item_id)
        if idx < 0:
            logger.info("Nothing to remove: %s not in %s", item_id, key)
            return False
        del items[idx]
        self.store.save(key, items)
        return True
