"""In-memory timestamp registry.

Per-process only: running multiple workers gives each worker its own
registry, which multiplies the effective limit.
"""

from __future__ import annotations

import threading

from movie_api.adapters.rate_limit.base import AbstractTimestampStore


class InMemoryTimestampStore(AbstractTimestampStore):
    """Dict-backed registry mapping client key to admitted timestamps.

    Keys are created lazily and never removed; a key whose timestamps have
    all expired keeps an empty list.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._timestamps_by_key: dict[str, list[int]] = {}

    def get(self, key: str) -> list[int]:
        with self._lock:
            return list(self._timestamps_by_key.get(key, ()))

    def set(self, key: str, timestamps: list[int]) -> None:
        with self._lock:
            self._timestamps_by_key[key] = list(timestamps)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._timestamps_by_key

    def __len__(self) -> int:
        with self._lock:
            return len(self._timestamps_by_key)
