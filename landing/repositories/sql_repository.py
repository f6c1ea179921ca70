"""KeyValueStore backed by a SQLAlchemy table."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select

from landing.db.models import ContentEntry
from landing.db.session import get_session
from landing.repositories.base import KeyValueStore

logger = logging.getLogger(__name__)


class SQLKeyValueStore(KeyValueStore):
    """Each key is a row in content_entries; save() upserts the row."""

    def __init__(self, *, create_schema: bool = False) -> None:
        if create_schema:
            from landing.db.create_tables import create_all

            create_all()

    def load(self, key: str) -> Any | None:
        with get_session() as session:
            entry = session.get(ContentEntry, key)
            return entry.value if entry else None

    def save(self, key: str, value: Any) -> None:
        self._check_value(key, value)
        now = datetime.now(timezone.utc)
        with get_session() as session:
            entry = session.get(ContentEntry, key)
            if not entry:
                session.add(ContentEntry(key=key, value=value, updated_at=now))
            else:
                entry.value = value
                entry.updated_at = now
            session.commit()
        logger.debug("Saved %s to SQL store", key)

    def remove(self, key: str) -> None:
        with get_session() as session:
            session.execute(delete(ContentEntry).where(ContentEntry.key == key))
            session.commit()

    def keys(self) -> list[str]:
        with get_session() as session:
            return list(session.execute(select(ContentEntry.key)).scalars().all())
