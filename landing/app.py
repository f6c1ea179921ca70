"""FastAPI application for the landing page and its content API."""
from __future__ import annotations

import hashlib
import logging
import pathlib
import shutil
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from landing.core.config import ROOT_DIR, Settings, get_settings
from landing.core.logging_setup import configure_logging
from landing.repositories import KeyValueStore
from landing.routers import content as content_router
from landing.routers import pages as pages_router
from landing.services.content_service import build_content_service
from landing.services.seed_source import SeedSource

logger = logging.getLogger(__name__)

WEB = ROOT_DIR / "web"
TEMPLATES = ROOT_DIR / "templates"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; "
            "img-src 'self' data: https:; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


class CachedStaticFiles(StaticFiles):
    def set_headers(self, scope, resp, path, stat_result):
        # fingerprinted assets never change under the same name
        resp.headers["Cache-Control"] = "public, max-age=31536000, immutable"


def _fingerprint_asset(rel_path: str) -> str:
    """
    Copy an asset to a name carrying a short hash: "site.css" -> "site.<hash8>.css".
    Returns the versioned file name (without /static).
    """
    src = pathlib.Path(WEB) / rel_path
    if not src.exists():
        return rel_path.replace("\\", "/")
    h = hashlib.sha1(src.read_bytes()).hexdigest()[:8]
    dst = src.with_name(f"{src.stem}.{h}{src.suffix}")
    if not dst.exists():
        shutil.copy2(src, dst)
    return dst.name


def create_app(
    settings: Optional[Settings] = None,
    *,
    store: Optional[KeyValueStore] = None,
    seed_source: Optional[SeedSource] = None,
) -> FastAPI:
    """Build the app; ``store``/``seed_source`` override what settings select."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    content_service = build_content_service(settings, store=store, seed_source=seed_source)
    source = content_service.init_data()
    logger.info("Content ready (source=%s, backend=%s)", source, type(content_service.store).__name__)

    app = FastAPI(title="Landing Page")
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    try:
        css_name = _fingerprint_asset("site.css")
    except OSError:
        css_name = "site.css"
    if WEB.is_dir():
        app.mount("/static", CachedStaticFiles(directory=str(WEB)), name="static")

    app.state.settings = settings
    app.state.content_service = content_service
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES))
    app.state.css_href = f"/static/{css_name}"

    app.include_router(content_router.router)
    app.include_router(pages_router.router)
    return app
