"""
Configuration helpers for the landing site.

Settings are read from environment variables once and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PACKAGE_DIR = Path(__file__).resolve().parents[1]
ROOT_DIR = PACKAGE_DIR.parent
DEFAULT_SEED_FILE = PACKAGE_DIR / "data" / "data.json"
DEFAULT_DATA_FILE = ROOT_DIR / "var" / "content.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: str
    database_url: str
    seed_source: str
    seed_timeout_seconds: float
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _float(value: str | None, default: float) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        data_file=os.getenv("DATA_FILE", str(DEFAULT_DATA_FILE)),
        database_url=os.getenv("DATABASE_URL", ""),
        seed_source=os.getenv("SEED_SOURCE", str(DEFAULT_SEED_FILE)).strip(),
        seed_timeout_seconds=_float(os.getenv("SEED_TIMEOUT_SECONDS"), 5.0),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
