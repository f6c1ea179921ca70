"""
Persistence adapters.

Every adapter implements the KeyValueStore contract (JSON file, SQL table or
in-process dict). Services depend on that contract rather than on a concrete
backend, and build_store() picks one from Settings.
"""

from __future__ import annotations

from landing.core.config import Settings
from landing.repositories.base import KeyValueStore
from landing.repositories.collection_store import CollectionStore
from landing.repositories.json_storage import JsonFileStore
from landing.repositories.memory_storage import MemoryStore


def build_store(settings: Settings) -> KeyValueStore:
    backend = settings.storage_backend
    if backend == "json":
        return JsonFileStore(settings.data_file)
    if backend == "memory":
        return MemoryStore()
    if backend == "sql":
        from landing.repositories.sql_repository import SQLKeyValueStore

        return SQLKeyValueStore(create_schema=True)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


__all__ = ["KeyValueStore", "CollectionStore", "JsonFileStore", "MemoryStore", "build_store"]
