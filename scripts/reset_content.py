#!/usr/bin/env python3
"""
Reset the site content: drop profile/products/testimonials and seed again.

Usage:
  python scripts/reset_content.py [--seed path-or-url]
"""
from __future__ import annotations

import argparse
import sys

from landing.core.config import get_settings
from landing.core.logging_setup import configure_logging
from landing.services.content_service import build_content_service
from landing.services.seed_source import build_seed_source


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset landing page content")
    ap.add_argument("--seed", help="Seed file or URL (default: SEED_SOURCE)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    seed_source = build_seed_source(args.seed, timeout=settings.seed_timeout_seconds) if args.seed else None
    svc = build_content_service(settings, seed_source=seed_source)

    source = svc.reset_data()
    print("OK: content reset")
    print(f"  Source: {source}")
    print(f"  Owner: {svc.get_user_data().name}")
    print(f"  Products: {len(svc.get_products())}")
    print(f"  Testimonials: {len(svc.get_testimonials())}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
