from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from landing.routers import get_content_service
from landing.services.whatsapp import MissingPhoneError, build_order_link

router = APIRouter(prefix="", tags=["pages"])
logger = logging.getLogger(__name__)


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    svc = get_content_service(request)
    profile = svc.get_user_data()
    context = {
        "profile": profile,
        "products": svc.get_products(),
        "testimonials": svc.get_testimonials(),
        "css_href": getattr(request.app.state, "css_href", "/static/site.css"),
        "current_year": datetime.now().year,
    }
    return _templates(request).TemplateResponse(request, "index.html", context)


@router.get("/order/{product_id}")
def order(request: Request, product_id: str):
    svc = get_content_service(request)
    product = svc.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(404, "Product not found")
    try:
        url = build_order_link(svc.get_user_data(), product)
    except MissingPhoneError:
        logger.warning("Order link requested for %s but owner has no phone", product_id)
        raise HTTPException(409, "Phone number not available")
    return RedirectResponse(url, status_code=303)


# Silence Chrome devtools probes (noisy 404s in logs)
@router.get("/.well-known/appspecific/com.chrome.devtools.json")
def chrome_devtools_wellknown():
    return PlainTextResponse("", status_code=204)
