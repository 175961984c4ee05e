"""Sliding-window request counter keyed by client.

Every admission check prunes the client's timestamps to the trailing window
and then counts what is left, so the window slides with each request rather
than resetting on fixed boundaries.
"""

from __future__ import annotations

import threading
import time
from numbers import Integral, Real
from typing import Callable

from movie_api.adapters.rate_limit.base import (
    AbstractRateLimiter,
    AbstractTimestampStore,
    Decision,
    RateLimitResult,
)
from movie_api.adapters.rate_limit.in_memory import InMemoryTimestampStore


def now_ms() -> int:
    """Current UNIX time in milliseconds."""
    return time.time_ns() // 1_000_000


class SlidingWindowRateLimiter(AbstractRateLimiter):
    """Admit at most ``max_requests`` per key within any trailing window.

    Only admitted requests are recorded; a rejected attempt does not extend
    the time a client has to wait.
    """

    def __init__(
        self,
        *,
        window_seconds: float,
        max_requests: int,
        store: AbstractTimestampStore | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        """Initialize the limiter.

        Args:
            window_seconds: Length of the trailing window in seconds.
            max_requests: Maximum admitted requests per key within the window.
            store: Timestamp registry; a fresh in-memory one when omitted.
            clock: Time source returning UNIX time in milliseconds.

        Raises:
            ValueError: If window_seconds or max_requests is not positive.
        """
        if isinstance(window_seconds, bool) or not isinstance(window_seconds, Real):
            raise ValueError("window_seconds must be a number")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be > 0")
        if isinstance(max_requests, bool) or not isinstance(max_requests, Integral):
            raise ValueError("max_requests must be an integer")
        if max_requests < 1:
            raise ValueError("max_requests must be >= 1")

        self._window_seconds = window_seconds
        self._window_ms = window_seconds * 1000
        self._max_requests = int(max_requests)
        self._store = store if store is not None else InMemoryTimestampStore()
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def window_seconds(self) -> float:
        return self._window_seconds

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def store(self) -> AbstractTimestampStore:
        return self._store

    def admit(self, key: str) -> RateLimitResult:
        """Record and admit the request, or reject it if the window is full.

        The registry is always rewritten with the pruned sequence, so stale
        timestamps are dropped on rejection too.

        Raises:
            ValueError: If key is empty.
        """
        if not key:
            raise ValueError("key must be a non-empty string")

        # read-prune-write must not interleave for the same key
        with self._lock:
            now = self._clock()
            recent = [t for t in self._store.get(key) if now - t < self._window_ms]

            if len(recent) >= self._max_requests:
                self._store.set(key, recent)
                return RateLimitResult(
                    decision=Decision.REJECT,
                    limit=self._max_requests,
                    remaining=0,
                )

            recent.append(now)
            self._store.set(key, recent)
            return RateLimitResult(
                decision=Decision.ADMIT,
                limit=self._max_requests,
                remaining=self._max_requests - len(recent),
            )
