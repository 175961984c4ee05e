"""Unit tests for favorites store backends and factory."""

import json
import threading
from pathlib import Path

import pytest

from movie_api.adapters.favorites import factory
from movie_api.adapters.favorites.in_memory import InMemoryFavoritesStore
from movie_api.adapters.favorites.json_file import JsonFileFavoritesStore
from movie_api.core.errors import StorageAppError, ValidationAppError


def _movie(imdb_id: str, title: str) -> dict:
    return {"success": True, "result": {"imdbID": imdb_id, "Title": title}}


@pytest.fixture(params=["memory", "json_file"])
def store(request, tmp_path: Path):
    if request.param == "memory":
        return InMemoryFavoritesStore()
    return JsonFileFavoritesStore(tmp_path / "favorites.json")


def test_set_get_list_delete(store) -> None:
    store.set("tt0111161", _movie("tt0111161", "The Shawshank Redemption"))
    store.set("tt0068646", _movie("tt0068646", "The Godfather"))

    assert store.get("tt0111161")["result"]["Title"] == "The Shawshank Redemption"
    assert store.get("tt9999999") is None
    assert [doc_id for doc_id, _ in store.list()] == ["tt0111161", "tt0068646"]

    assert store.delete("tt0111161") is True
    assert store.delete("tt0111161") is False
    assert [doc_id for doc_id, _ in store.list()] == ["tt0068646"]


def test_set_replaces_existing_document(store) -> None:
    store.set("tt0111161", _movie("tt0111161", "Old"))
    store.set("tt0111161", _movie("tt0111161", "New"))

    assert len(store.list()) == 1
    assert store.get("tt0111161")["result"]["Title"] == "New"


def test_in_memory_store_isolates_callers_from_stored_state() -> None:
    store = InMemoryFavoritesStore()
    document = _movie("tt1", "A")
    store.set("tt1", document)

    document["result"]["Title"] = "mutated"
    fetched = store.get("tt1")
    fetched["result"]["Title"] = "mutated again"

    assert store.get("tt1")["result"]["Title"] == "A"


def test_in_memory_store_concurrent_writes() -> None:
    store = InMemoryFavoritesStore()

    def _writer(idx: int) -> None:
        store.set(f"tt{idx}", _movie(f"tt{idx}", str(idx)))

    threads = [threading.Thread(target=_writer, args=(i,)) for i in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store.list()) == 50


def test_json_file_store_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "favorites.json"
    JsonFileFavoritesStore(path).set("tt1", _movie("tt1", "A"))

    reopened = JsonFileFavoritesStore(path)

    assert reopened.get("tt1") == _movie("tt1", "A")
    assert json.loads(path.read_text(encoding="utf-8")) == {"tt1": _movie("tt1", "A")}
    assert list(path.parent.glob(".favorites-*.tmp")) == []


def test_json_file_store_missing_file_is_empty(tmp_path: Path) -> None:
    store = JsonFileFavoritesStore(tmp_path / "absent.json")

    assert store.list() == []
    assert store.delete("tt1") is False
    assert not (tmp_path / "absent.json").exists()


def test_json_file_store_rejects_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "favorites.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageAppError) as exc_info:
        JsonFileFavoritesStore(path).list()

    assert exc_info.value.code == "favorites_store_corrupt"


def test_json_file_store_rejects_non_object_file(tmp_path: Path) -> None:
    path = tmp_path / "favorites.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(StorageAppError) as exc_info:
        JsonFileFavoritesStore(path).get("tt1")

    assert exc_info.value.details == {"backend": "json_file", "hint": str(path)}


class TestFactory:
    def test_memory_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(factory.settings.favorites, "backend", "memory")
        assert isinstance(factory.create_favorites_store(), InMemoryFavoritesStore)

    def test_json_file_backend(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(factory.settings.favorites, "backend", "JSON_FILE")
        monkeypatch.setattr(factory.settings.favorites, "file_path", str(tmp_path / "f.json"))

        store = factory.create_favorites_store()

        assert isinstance(store, JsonFileFavoritesStore)
        assert store.path == tmp_path / "f.json"

    def test_unknown_backend_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(factory.settings.favorites, "backend", "firestore")

        with pytest.raises(ValidationAppError) as exc_info:
            factory.create_favorites_store()

        assert exc_info.value.code == "favorites_unknown_backend"
