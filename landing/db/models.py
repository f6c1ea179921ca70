"""SQLAlchemy models for the SQL key-value backend."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, JSON, String, func

from .session import Base


class ContentEntry(Base):
    """One row per storage key; the whole JSON value is the unit of persistence."""

    __tablename__ = "content_entries"

    key = Column(String(128), primary_key=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
