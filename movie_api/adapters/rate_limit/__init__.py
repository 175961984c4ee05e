"""Rate limiting adapters.

Starts with an in-process registry; the limiter only talks to the
``AbstractTimestampStore`` interface so a shared store can replace it later.
"""

from movie_api.adapters.rate_limit.base import (
    AbstractRateLimiter,
    AbstractTimestampStore,
    Decision,
    RateLimitResult,
)
from movie_api.adapters.rate_limit.in_memory import InMemoryTimestampStore
from movie_api.adapters.rate_limit.sliding_window import SlidingWindowRateLimiter

__all__ = [
    "AbstractRateLimiter",
    "AbstractTimestampStore",
    "Decision",
    "InMemoryTimestampStore",
    "RateLimitResult",
    "SlidingWindowRateLimiter",
]
