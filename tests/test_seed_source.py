from __future__ import annotations

import json
import sys
from pathlib import Path

import httpx
import pytest

# Make the landing package importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from landing.core.config import DEFAULT_SEED_FILE  # noqa: E402
from landing.core.errors import SeedUnavailableError  # noqa: E402
import landing.services.seed_source as seed_source  # noqa: E402
from landing.services.seed_source import (  # noqa: E402
    FileSeedSource,
    HttpSeedSource,
    build_seed_source,
)

DOC = {"user": {"name": "Noa", "phone": "1"}, "products": [], "testimonials": []}


def test_bundled_seed_is_valid():
    doc = FileSeedSource(DEFAULT_SEED_FILE).fetch()
    assert doc["user"]["phone"]
    assert [p["id"] for p in doc["products"]] == ["p1", "p2", "p3"]


def test_file_seed_errors(tmp_path):
    with pytest.raises(SeedUnavailableError):
        FileSeedSource(tmp_path / "missing.json").fetch()

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(SeedUnavailableError):
        FileSeedSource(broken).fetch()

    not_utf8 = tmp_path / "latin.json"
    not_utf8.write_bytes(b'{"user": "\xff"}')
    with pytest.raises(SeedUnavailableError):
        FileSeedSource(not_utf8).fetch()

    wrong_shape = tmp_path / "wrong.json"
    wrong_shape.write_text(json.dumps({"user": {}, "products": []}), encoding="utf-8")
    with pytest.raises(SeedUnavailableError):
        FileSeedSource(wrong_shape).fetch()


def _fake_get(status: int, body: str):
    def fake_get(url, **kwargs):
        return httpx.Response(status, text=body, request=httpx.Request("GET", url))

    return fake_get


def test_http_seed_fetches_json(monkeypatch):
    monkeypatch.setattr(seed_source.httpx, "get", _fake_get(200, json.dumps(DOC)))
    assert HttpSeedSource("https://example.com/data.json").fetch() == DOC


@pytest.mark.parametrize("status, body", [(404, "not found"), (200, "<html>"), (200, "[]")])
def test_http_seed_failures(monkeypatch, status, body):
    monkeypatch.setattr(seed_source.httpx, "get", _fake_get(status, body))
    with pytest.raises(SeedUnavailableError):
        HttpSeedSource("https://example.com/data.json").fetch()


def test_http_seed_network_error(monkeypatch):
    def boom(url, **kwargs):
        raise httpx.ConnectError("refused", request=httpx.Request("GET", url))

    monkeypatch.setattr(seed_source.httpx, "get", boom)
    with pytest.raises(SeedUnavailableError):
        HttpSeedSource("https://example.com/data.json").fetch()


def test_build_seed_source():
    assert build_seed_source("") is None
    assert build_seed_source(None) is None
    assert isinstance(build_seed_source("https://example.com/data.json"), HttpSeedSource)
    assert isinstance(build_seed_source("/srv/site/data.json"), FileSeedSource)
