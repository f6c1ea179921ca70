from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the landing package importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from landing.app import create_app  # noqa: E402
from landing.core.config import DEFAULT_SEED_FILE, Settings  # noqa: E402
from landing.repositories.json_storage import JsonFileStore  # noqa: E402
from landing.repositories.memory_storage import MemoryStore  # noqa: E402
from landing.services.seed_source import FileSeedSource  # noqa: E402


def _settings(**overrides) -> Settings:
    values = dict(
        app_env="dev",
        storage_backend="memory",
        data_file="",
        database_url="",
        seed_source=str(DEFAULT_SEED_FILE),
        seed_timeout_seconds=1.0,
        log_level="WARNING",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def client():
    app = create_app(_settings(), store=MemoryStore())
    with TestClient(app) as c:
        yield c


def test_index_renders_seeded_content(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "נועה לוי" in resp.text
    assert "דף נחיתה" in resp.text
    assert 'href="/order/p1"' in resp.text
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_order_redirects_to_whatsapp(client):
    resp = client.get("/order/p1", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"].startswith("https://wa.me/0529876543?text=")

    assert client.get("/order/missing", follow_redirects=False).status_code == 404


def test_order_without_phone_is_conflict(client):
    client.app.state.content_service.store.save("userData", {"name": "Noa", "phone": ""})
    assert client.get("/order/p1", follow_redirects=False).status_code == 409


def test_product_crud(client):
    created = client.post("/api/products", json={"name": "X", "price": "₪10", "features": []})
    assert created.status_code == 201
    body = created.json()
    assert body["id"] and body["createdAt"]
    assert client.get("/api/products").json()[-1]["id"] == body["id"]

    updated = client.put(f"/api/products/{body['id']}", json={"name": "Y", "price": "₪20", "features": ["a"]})
    assert updated.status_code == 200
    assert updated.json()["updatedAt"] >= body["createdAt"]
    assert client.get(f"/api/products/{body['id']}").json()["name"] == "Y"

    assert client.delete(f"/api/products/{body['id']}").json() == {"ok": True}
    assert client.get(f"/api/products/{body['id']}").status_code == 404
    assert client.delete(f"/api/products/{body['id']}").status_code == 404


def test_product_errors(client):
    assert client.post("/api/products", json={"name": "X"}).status_code == 422
    resp = client.put("/api/products/ghost", json={"name": "Y", "price": "₪20"})
    assert resp.status_code == 404


def test_testimonial_crud(client):
    created = client.post("/api/testimonials", json={"name": "Dana", "text": "Great"}).json()
    assert client.get(f"/api/testimonials/{created['id']}").json()["text"] == "Great"
    resp = client.put(f"/api/testimonials/{created['id']}", json={"name": "Dana", "text": "Better"})
    assert resp.json()["text"] == "Better"
    assert client.delete(f"/api/testimonials/{created['id']}").status_code == 200
    assert client.put("/api/testimonials/ghost", json={"name": "A", "text": "B"}).status_code == 404


def test_profile_and_reset(client):
    resp = client.put("/api/profile", json={"name": "Dan", "phone": "050-000-0000", "brandName": "Dan Co"})
    assert resp.status_code == 200
    assert client.get("/api/profile").json()["brandName"] == "Dan Co"
    assert client.put("/api/profile", json={"name": "Dan"}).status_code == 422

    reset = client.post("/api/reset").json()
    assert reset == {"ok": True, "source": "seed"}
    assert client.get("/api/profile").json()["name"] == "נועה לוי"


def test_json_store_and_missing_seed(tmp_path):
    settings = _settings(storage_backend="json", data_file=str(tmp_path / "content.json"))
    app = create_app(settings, seed_source=FileSeedSource(tmp_path / "missing.json"))
    with TestClient(app) as c:
        names = [p["name"] for p in c.get("/api/products").json()]
    assert names == ["חבילה בסיסית", "חבילת פרימיום", "חבילת Pro"]
    assert isinstance(app.state.content_service.store, JsonFileStore)
    assert JsonFileStore(tmp_path / "content.json").load("userData")["phone"] == "050-123-4567"
