"""Favorites store interface.

A document collection keyed by IMDB id. Documents are the movie payloads
returned by the upstream API, stored as plain JSON-compatible dicts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

Document = dict[str, Any]


class AbstractFavoritesStore(ABC):
    """Interface for favorites document stores."""

    @abstractmethod
    def set(self, doc_id: str, document: Document) -> None:
        """Create or replace the document stored under ``doc_id``."""
        raise NotImplementedError

    @abstractmethod
    def get(self, doc_id: str) -> Document | None:
        """Return the document, or None if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[tuple[str, Document]]:
        """Return all ``(doc_id, document)`` pairs in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, doc_id: str) -> bool:
        """Delete a document.

        Returns:
            True if a document was removed, False if none existed.
        """
        raise NotImplementedError
