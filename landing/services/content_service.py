"""
Content use cases: owner profile, products and testimonials.

The service is built around an explicit KeyValueStore handle. On startup
``init_data`` fills whichever of the three keys are missing from the seed
source; when the seed cannot be loaded every key is overwritten with the
built-in defaults so the site always has something to render.
"""

from __future__ import annotations

import copy
import logging
from typing import Callable, Mapping, Optional, Type, TypeVar, Union

from landing.core.config import Settings
from landing.core.errors import RecordNotFoundError, SeedUnavailableError
from landing.core.utils import make_id, now_millis
from landing.domain.content import (
    STORAGE_KEY_PRODUCTS,
    STORAGE_KEY_TESTIMONIALS,
    STORAGE_KEY_USER,
    OwnerProfile,
    Product,
    Testimonial,
)
from landing.domain.defaults import default_products, default_testimonials, default_user
from landing.repositories import build_store
from landing.repositories.base import KeyValueStore
from landing.repositories.collection_store import CollectionStore
from landing.services.seed_source import SeedSource, build_seed_source, check_seed_shape

logger = logging.getLogger(__name__)

# storage key -> field of the seed document
SEED_FIELDS = {
    STORAGE_KEY_USER: "user",
    STORAGE_KEY_PRODUCTS: "products",
    STORAGE_KEY_TESTIMONIALS: "testimonials",
}

SOURCE_STORE = "store"
SOURCE_SEED = "seed"
SOURCE_DEFAULTS = "defaults"

R = TypeVar("R", Product, Testimonial)


class ContentService:
    def __init__(
        self,
        store: KeyValueStore,
        seed_source: Optional[SeedSource] = None,
        *,
        id_factory: Callable[[], str] = make_id,
        clock: Callable[[], int] = now_millis,
    ) -> None:
        self.store = store
        self.seed_source = seed_source
        self.collections = CollectionStore(store)
        self.id_factory = id_factory
        self.clock = clock

    # -------------------------- init / reset --------------------------
    def init_data(self) -> str:
        """Populate missing keys; returns "store", "seed" or "defaults"."""
        missing = [key for key in SEED_FIELDS if not self.store.exists(key)]
        if not missing:
            return SOURCE_STORE
        try:
            seed = self._fetch_seed()
        except SeedUnavailableError as exc:
            logger.warning("Seed unavailable, writing built-in defaults: %s", exc)
            self._set_default_data()
            return SOURCE_DEFAULTS
        for key in missing:
            self.store.save(key, seed[SEED_FIELDS[key]])
        logger.info("Seeded %s from %r", ", ".join(missing), self.seed_source)
        return SOURCE_SEED

    def reset_data(self) -> str:
        """Drop all content and initialise again from the seed (or defaults)."""
        for key in SEED_FIELDS:
            self.store.remove(key)
        logger.info("Content reset")
        return self.init_data()

    def _fetch_seed(self) -> dict:
        if self.seed_source is None:
            raise SeedUnavailableError("No seed source configured")
        try:
            return check_seed_shape(self.seed_source.fetch())
        except SeedUnavailableError:
            raise
        except Exception as exc:
            raise SeedUnavailableError(f"Seed source {self.seed_source!r} failed: {exc}") from exc

    def _set_default_data(self) -> None:
        self.store.save(STORAGE_KEY_USER, default_user())
        self.store.save(STORAGE_KEY_PRODUCTS, default_products())
        self.store.save(STORAGE_KEY_TESTIMONIALS, default_testimonials())

    # -------------------------- owner profile --------------------------
    def get_user_data(self) -> OwnerProfile:
        stored = self.store.load(STORAGE_KEY_USER)
        if isinstance(stored, dict):
            return OwnerProfile.from_dict(stored)
        return OwnerProfile.from_dict(default_user())

    def update_user_data(self, profile: Union[OwnerProfile, Mapping]) -> OwnerProfile:
        record = self._coerce(OwnerProfile, profile)
        record.validate()
        self.store.save(STORAGE_KEY_USER, record.to_dict())
        return record

    # -------------------------- products --------------------------
    def get_products(self) -> list[Product]:
        return self._list(STORAGE_KEY_PRODUCTS, Product)

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        return self._get(STORAGE_KEY_PRODUCTS, Product, product_id)

    def add_product(self, product: Union[Product, Mapping]) -> Product:
        return self._add(STORAGE_KEY_PRODUCTS, Product, product)

    def update_product(self, product: Union[Product, Mapping]) -> Product:
        return self._update(STORAGE_KEY_PRODUCTS, Product, product)

    def remove_product(self, product_id: str) -> bool:
        return self.collections.remove(STORAGE_KEY_PRODUCTS, product_id)

    # -------------------------- testimonials --------------------------
    def get_testimonials(self) -> list[Testimonial]:
        return self._list(STORAGE_KEY_TESTIMONIALS, Testimonial)

    def get_testimonial_by_id(self, testimonial_id: str) -> Optional[Testimonial]:
        return self._get(STORAGE_KEY_TESTIMONIALS, Testimonial, testimonial_id)

    def add_testimonial(self, testimonial: Union[Testimonial, Mapping]) -> Testimonial:
        return self._add(STORAGE_KEY_TESTIMONIALS, Testimonial, testimonial)

    def update_testimonial(self, testimonial: Union[Testimonial, Mapping]) -> Testimonial:
        return self._update(STORAGE_KEY_TESTIMONIALS, Testimonial, testimonial)

    def remove_testimonial(self, testimonial_id: str) -> bool:
        return self.collections.remove(STORAGE_KEY_TESTIMONIALS, testimonial_id)

    # -------------------------- helpers --------------------------
    @staticmethod
    def _coerce(cls, value):
        # callers keep their own object; we stamp a copy
        if isinstance(value, cls):
            return copy.deepcopy(value)
        return cls.from_dict(value)

    def _list(self, key: str, cls: Type[R]) -> list[R]:
        records = []
        for item in self.collections.query(key):
            if not isinstance(item, dict):
                logger.warning("Skipping malformed entry in %s: %r", key, item)
                continue
            records.append(cls.from_dict(item))
        return records

    def _get(self, key: str, cls: Type[R], item_id: str) -> Optional[R]:
        item = self.collections.get(key, item_id)
        return cls.from_dict(item) if item is not None else None

    def _fresh_id(self, key: str) -> str:
        taken = {
            item.get("id")
            for item in self.collections.query(key)
            if isinstance(item, dict) and isinstance(item.get("id"), str)
        }
        new_id = self.id_factory()
        while not new_id or new_id in taken:
            new_id = self.id_factory()
        return new_id

    def _add(self, key: str, cls: Type[R], value) -> R:
        record = self._coerce(cls, value)
        record.validate()
        record.id = self._fresh_id(key)
        record.created_at = self.clock()
        record.updated_at = None
        self.collections.post(key, record.to_dict())
        logger.info("Added %s to %s", record.id, key)
        return record

    def _update(self, key: str, cls: Type[R], value) -> R:
        record = self._coerce(cls, value)
        record.validate()
        existing = self.collections.get(key, record.id) if record.id else None
        if existing is None:
            raise RecordNotFoundError(key, record.id or None)
        if record.created_at is None:
            record.created_at = cls.from_dict(existing).created_at
        record.updated_at = self.clock()
        self.collections.put(key, record.to_dict())
        logger.info("Updated %s in %s", record.id, key)
        return record


def build_content_service(
    settings: Settings,
    *,
    store: Optional[KeyValueStore] = None,
    seed_source: Optional[SeedSource] = None,
) -> ContentService:
    """Wire a ContentService from Settings (store backend + seed location)."""
    if store is None:
        store = build_store(settings)
    if seed_source is None:
        seed_source = build_seed_source(settings.seed_source, timeout=settings.seed_timeout_seconds)
    return ContentService(store, seed_source)
