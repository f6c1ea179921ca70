"""Entry point for uvicorn: ``uvicorn landing.app_factory:create_app --factory``."""
from landing.app import create_app

__all__ = ["create_app"]
