"""Record types for the site content.

Stored JSON keeps the camelCase names of the seed document (``brandName``,
``createdAt``); the dataclasses use snake_case and convert in ``from_dict`` /
``to_dict``. Keys we do not know about are carried in ``extra`` so a round
trip never drops them.

``from_dict`` is lenient because it also reads whatever is already stored;
``validate`` is strict and runs before anything is written.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from landing.core.errors import ContentValidationError

STORAGE_KEY_USER = "userData"
STORAGE_KEY_PRODUCTS = "productsData"
STORAGE_KEY_TESTIMONIALS = "testimonialsData"


def _as_mapping(data: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ContentValidationError(f"{kind} must be an object")
    return data


def _text(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key)
    return "" if value is None else value


def _millis(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _extra(data: Mapping[str, Any], known: set[str]) -> dict:
    return {k: v for k, v in data.items() if k not in known}


def _require_text(value: Any, name: str, *, required: bool) -> None:
    if not isinstance(value, str):
        raise ContentValidationError(f"{name} must be a string", field=name)
    if required and not value.strip():
        raise ContentValidationError(f"{name} is required", field=name)


@dataclass
class OwnerProfile:
    brand_name: str = ""
    name: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    phone: str = ""
    extra: dict = field(default_factory=dict)

    _KNOWN = {"brandName", "name", "title", "description", "image", "phone"}

    @classmethod
    def from_dict(cls, data: Any) -> "OwnerProfile":
        data = _as_mapping(data, "Profile")
        return cls(
            brand_name=_text(data, "brandName"),
            name=_text(data, "name"),
            title=_text(data, "title"),
            description=_text(data, "description"),
            image=_text(data, "image"),
            phone=_text(data, "phone"),
            extra=_extra(data, cls._KNOWN),
        )

    def to_dict(self) -> dict:
        out = dict(self.extra)
        out.update(
            {
                "brandName": self.brand_name,
                "name": self.name,
                "title": self.title,
                "description": self.description,
                "image": self.image,
                "phone": self.phone,
            }
        )
        return out

    def validate(self) -> None:
        _require_text(self.name, "name", required=True)
        _require_text(self.phone, "phone", required=True)
        _require_text(self.brand_name, "brandName", required=False)
        _require_text(self.title, "title", required=False)
        _require_text(self.description, "description", required=False)
        _require_text(self.image, "image", required=False)


@dataclass
class Product:
    name: str = ""
    price: str = ""
    description: str = ""
    features: list = field(default_factory=list)
    id: str = ""
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    extra: dict = field(default_factory=dict)

    _KNOWN = {"id", "name", "description", "price", "features", "createdAt", "updatedAt"}

    @classmethod
    def from_dict(cls, data: Any) -> "Product":
        data = _as_mapping(data, "Product")
        features = data.get("features")
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            description=_text(data, "description"),
            price=_text(data, "price"),
            features=[] if features is None else features,
            created_at=_millis(data.get("createdAt")),
            updated_at=_millis(data.get("updatedAt")),
            extra=_extra(data, cls._KNOWN),
        )

    def to_dict(self) -> dict:
        out = dict(self.extra)
        out.update(
            {
                "id": self.id,
                "name": self.name,
                "description": self.description,
                "price": self.price,
                "features": list(self.features),
            }
        )
        if self.created_at is not None:
            out["createdAt"] = self.created_at
        if self.updated_at is not None:
            out["updatedAt"] = self.updated_at
        return out

    def validate(self) -> None:
        _require_text(self.name, "name", required=True)
        _require_text(self.price, "price", required=True)
        _require_text(self.description, "description", required=False)
        if not isinstance(self.features, list) or not all(isinstance(f, str) for f in self.features):
            raise ContentValidationError("features must be a list of strings", field="features")


@dataclass
class Testimonial:
    name: str = ""
    text: str = ""
    image: str = ""
    id: str = ""
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    extra: dict = field(default_factory=dict)

    _KNOWN = {"id", "name", "text", "image", "createdAt", "updatedAt"}

    @classmethod
    def from_dict(cls, data: Any) -> "Testimonial":
        data = _as_mapping(data, "Testimonial")
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            text=_text(data, "text"),
            image=_text(data, "image"),
            created_at=_millis(data.get("createdAt")),
            updated_at=_millis(data.get("updatedAt")),
            extra=_extra(data, cls._KNOWN),
        )

    def to_dict(self) -> dict:
        out = dict(self.extra)
        out.update({"id": self.id, "name": self.name, "text": self.text, "image": self.image})
        if self.created_at is not None:
            out["createdAt"] = self.created_at
        if self.updated_at is not None:
            out["updatedAt"] = self.updated_at
        return out

    def validate(self) -> None:
        _require_text(self.name, "name", required=True)
        _require_text(self.text, "text", required=True)
        _require_text(self.image, "image", required=False)
