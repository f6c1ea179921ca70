"""
FastAPI routers grouped by concern: the public page and the content API.

Routers fetch the ContentService from ``request.app.state`` so the app
factory decides which store and seed source back them.
"""

from __future__ import annotations

from fastapi import Request

from landing.services.content_service import ContentService


def get_content_service(request: Request) -> ContentService:
    svc = getattr(getattr(request.app, "state", None), "content_service", None)
    if not svc:
        raise RuntimeError("ContentService not configured")
    return svc
