"""
In-memory KeyValueStore for tests and throwaway runs.

Nothing survives the process; values are deep-copied on the way in and out
so callers cannot mutate stored state by accident.
"""

from __future__ import annotations

import copy
from typing import Any, Dict

from landing.repositories.base import KeyValueStore


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def load(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    def save(self, key: str, value: Any) -> None:
        self._check_value(key, value)
        self._data[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data.keys())
