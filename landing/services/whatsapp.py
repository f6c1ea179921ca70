"""Build the WhatsApp deep-link opened when a visitor orders a product."""
from __future__ import annotations

import re
from urllib.parse import quote

from landing.core.errors import ContentError
from landing.domain.content import OwnerProfile, Product

WHATSAPP_BASE = "https://wa.me/"
ORDER_MESSAGE = "שלום, אני מעוניין/ת ב{name} ({price})"
# same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "!'()*"


class MissingPhoneError(ContentError):
    """The owner profile has no phone digits to send the message to."""


def normalize_phone(raw: str | None) -> str:
    return re.sub(r"\D", "", raw or "")


def order_message(product: Product) -> str:
    return ORDER_MESSAGE.format(name=product.name, price=product.price)


def build_order_link(profile: OwnerProfile, product: Product) -> str:
    phone = normalize_phone(profile.phone)
    if not phone:
        raise MissingPhoneError("Owner phone is not available")
    text = quote(order_message(product), safe=_URI_COMPONENT_SAFE)
    return f"{WHATSAPP_BASE}{phone}?text={text}"
