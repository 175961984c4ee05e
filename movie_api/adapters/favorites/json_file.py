"""JSON-file favorites store.

The whole collection is one JSON object ``{doc_id: document}``. Every write
goes to a temporary file in the same directory which then replaces the
original, so a crash mid-write never leaves a truncated file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from movie_api.adapters.favorites.base import AbstractFavoritesStore, Document
from movie_api.core.errors import StorageAppError

logger = logging.getLogger(__name__)


class JsonFileFavoritesStore(AbstractFavoritesStore):
    """Favorites persisted to a single JSON file.

    Attributes:
        path: Location of the JSON document file. Created on first write.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    def set(self, doc_id: str, document: Document) -> None:
        with self._lock:
            documents = self._load()
            documents[doc_id] = document
            self._dump(documents)

    def get(self, doc_id: str) -> Document | None:
        with self._lock:
            return self._load().get(doc_id)

    def list(self) -> list[tuple[str, Document]]:
        with self._lock:
            return list(self._load().items())

    def delete(self, doc_id: str) -> bool:
        with self._lock:
            documents = self._load()
            if doc_id not in documents:
                return False
            del documents[doc_id]
            self._dump(documents)
            return True

    def _load(self) -> dict[str, Document]:
        if not self.path.is_file():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise StorageAppError(
                code="favorites_store_corrupt",
                message="Favorites file is not valid JSON",
                details={"backend": "json_file", "hint": str(self.path)},
            ) from exc

        if not isinstance(data, dict):
            raise StorageAppError(
                code="favorites_store_corrupt",
                message="Favorites file must contain a JSON object",
                details={"backend": "json_file", "hint": str(self.path)},
            )
        return data

    def _dump(self, documents: dict[str, Document]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".favorites-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(documents, tmp, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(
            "favorites.file_written",
            extra={"path": str(self.path), "size": len(documents)},
        )
