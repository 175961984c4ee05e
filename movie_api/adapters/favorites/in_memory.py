"""In-memory favorites store. Contents are lost on restart."""

from __future__ import annotations

import copy
import threading

from movie_api.adapters.favorites.base import AbstractFavoritesStore, Document


class InMemoryFavoritesStore(AbstractFavoritesStore):
    """Thread-safe dict-backed document collection.

    Documents are deep-copied on the way in and out so callers can't mutate
    stored state.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._documents: dict[str, Document] = {}

    def set(self, doc_id: str, document: Document) -> None:
        with self._lock:
            self._documents[doc_id] = copy.deepcopy(document)

    def get(self, doc_id: str) -> Document | None:
        with self._lock:
            document = self._documents.get(doc_id)
            return copy.deepcopy(document) if document is not None else None

    def list(self) -> list[tuple[str, Document]]:
        with self._lock:
            return [(doc_id, copy.deepcopy(doc)) for doc_id, doc in self._documents.items()]

    def delete(self, doc_id: str) -> bool:
        with self._lock:
            return self._documents.pop(doc_id, None) is not None
