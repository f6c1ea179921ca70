"""Exceptions raised by the content layer."""

from __future__ import annotations


class ContentError(Exception):
    """Base class for content store errors."""


class RecordNotFoundError(ContentError):
    """Raised when a mutation targets an id that is not in the collection."""

    def __init__(self, collection: str, record_id: str | None):
        super().__init__(f"Record {record_id!r} not found in {collection}")
        self.collection = collection
        self.record_id = record_id


class ContentValidationError(ContentError):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


class SeedUnavailableError(ContentError):
    """The seed document could not be fetched or has the wrong shape."""
