"""
Seed document sources.

A seed is a static document ``{"user": {...}, "products": [...],
"testimonials": [...]}`` used once to populate an empty store. Every failure
to read or parse it surfaces as SeedUnavailableError.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

import httpx

from landing.core.errors import SeedUnavailableError

logger = logging.getLogger(__name__)


def check_seed_shape(data: Any) -> dict:
    if not isinstance(data, dict):
        raise SeedUnavailableError("Seed document must be a JSON object")
    if not isinstance(data.get("user"), dict):
        raise SeedUnavailableError("Seed document is missing the 'user' object")
    for key in ("products", "testimonials"):
        if not isinstance(data.get(key), list):
            raise SeedUnavailableError(f"Seed document is missing the '{key}' array")
    return data


class SeedSource(ABC):
    @abstractmethod
    def fetch(self) -> dict:
        """Return the seed document or raise SeedUnavailableError."""
        ...


class FileSeedSource(SeedSource):
    """Seed bundled with the site as a JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch(self) -> dict:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise SeedUnavailableError(f"Cannot read seed file {self.path}: {exc}") from exc
        return check_seed_shape(data)

    def __repr__(self) -> str:
        return f"FileSeedSource({str(self.path)!r})"


class HttpSeedSource(SeedSource):
    """Seed served over HTTP (e.g. the static data.json next to the site)."""

    def __init__(self, url: str, timeout: float = 5.0):
        self.url = url
        self.timeout = timeout

    def fetch(self) -> dict:
        try:
            response = httpx.get(self.url, timeout=self.timeout, follow_redirects=True)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise SeedUnavailableError(f"Cannot fetch seed from {self.url}: {exc}") from exc
        return check_seed_shape(data)

    def __repr__(self) -> str:
        return f"HttpSeedSource({self.url!r})"


def build_seed_source(location: str | None, timeout: float = 5.0) -> Optional[SeedSource]:
    """Pick a source for ``location``: URL, file path, or None when empty."""
    value = (location or "").strip()
    if not value:
        return None
    if value.startswith("http://") or value.startswith("https://"):
        return HttpSeedSource(value, timeout=timeout)
    return FileSeedSource(value)
