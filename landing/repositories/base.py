"""Base key-value store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """Durable string-keyed store of JSON-serializable values.

    ``load`` returns ``None`` for a key that was never written or has been
    removed, so ``None`` itself cannot be stored.
    """

    @abstractmethod
    def load(self, key: str) -> Any | None:
        """
        Read the value stored under ``key``.

        Returns:
            The stored value, or None when the key is absent
        """
        ...

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """
        Replace the whole value stored under ``key``.

        Raises:
            ValueError: If value is None
        """
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``; removing a missing key does nothing."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """List the keys currently stored."""
        ...

    def exists(self, key: str) -> bool:
        return self.load(key) is not None

    @staticmethod
    def _check_value(key: str, value: Any) -> None:
        if value is None:
            raise ValueError(f"Cannot store None under {key!r}; use remove() instead")
