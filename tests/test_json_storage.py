from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make the landing package importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from landing.repositories.json_storage import JsonFileStore  # noqa: E402
from landing.repositories.memory_storage import MemoryStore  # noqa: E402


def test_missing_key_loads_none(tmp_path):
    store = JsonFileStore(tmp_path / "content.json")
    assert store.load("productsData") is None
    assert store.keys() == []


def test_values_survive_a_new_store_instance(tmp_path):
    path = tmp_path / "nested" / "content.json"
    JsonFileStore(path).save("userData", {"name": "נועה", "phone": "050-1"})

    reopened = JsonFileStore(path)
    assert reopened.load("userData") == {"name": "נועה", "phone": "050-1"}
    # non-ascii is written as-is
    assert "נועה" in path.read_text(encoding="utf-8")


def test_save_overwrites_whole_value_and_remove_deletes(tmp_path):
    store = JsonFileStore(tmp_path / "content.json")
    store.save("productsData", [{"id": "a"}, {"id": "b"}])
    store.save("productsData", [{"id": "c"}])
    assert store.load("productsData") == [{"id": "c"}]

    store.remove("productsData")
    assert store.load("productsData") is None
    store.remove("productsData")  # removing twice is fine


def test_keys_are_independent(tmp_path):
    store = JsonFileStore(tmp_path / "content.json")
    store.save("userData", {"name": "x"})
    store.save("testimonialsData", [])
    store.remove("userData")
    assert store.load("testimonialsData") == []
    assert store.keys() == ["testimonialsData"]


def test_corrupt_file_reads_as_empty(tmp_path):
    path = tmp_path / "content.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(path)
    assert store.load("userData") is None

    store.save("userData", {"name": "x"})
    assert json.loads(path.read_text(encoding="utf-8")) == {"userData": {"name": "x"}}


def test_non_utf8_file_reads_as_empty(tmp_path):
    path = tmp_path / "content.json"
    path.write_bytes(b'{"userData": "\xff\xfe"}')
    store = JsonFileStore(path)
    assert store.load("userData") is None
    assert store.keys() == []

    store.save("userData", {"name": "x"})
    assert store.load("userData") == {"name": "x"}


def test_failed_write_leaves_previous_document(tmp_path):
    path = tmp_path / "content.json"
    store = JsonFileStore(path)
    store.save("productsData", [{"id": "a"}])

    with pytest.raises(TypeError):
        store.save("productsData", [{"id": object()}])

    assert store.load("productsData") == [{"id": "a"}]
    assert [p.name for p in tmp_path.iterdir()] == ["content.json"]


def test_none_cannot_be_stored(tmp_path):
    with pytest.raises(ValueError):
        JsonFileStore(tmp_path / "content.json").save("userData", None)
    with pytest.raises(ValueError):
        MemoryStore().save("userData", None)


def test_memory_store_copies_values():
    store = MemoryStore()
    items = [{"id": "a"}]
    store.save("productsData", items)
    items.append({"id": "b"})
    loaded = store.load("productsData")
    loaded.append({"id": "c"})
    assert store.load("productsData") == [{"id": "a"}]
