"""Rate limiter interfaces.

The HTTP layer depends on these abstractions, not on the concrete limiter or
the registry that backs it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Decision(str, Enum):
    """Outcome of an admission check."""

    ADMIT = "admit"
    REJECT = "reject"


@dataclass(frozen=True)
class RateLimitResult:
    """Result of a single admission check.

    Attributes:
        decision: ADMIT or REJECT.
        limit: Max admitted requests per trailing window.
        remaining: Admissions still available in the window after this check.
    """

    decision: Decision
    limit: int
    remaining: int

    @property
    def allowed(self) -> bool:
        return self.decision is Decision.ADMIT


class AbstractTimestampStore(ABC):
    """Per-key registry of admitted request timestamps (epoch milliseconds)."""

    @abstractmethod
    def get(self, key: str) -> list[int]:
        """Return the key's timestamps, oldest first (empty if unseen)."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, timestamps: list[int]) -> None:
        """Replace the key's timestamps."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError


class AbstractRateLimiter(ABC):
    """Interface for rate limiters."""

    @abstractmethod
    def admit(self, key: str) -> RateLimitResult:
        """Decide whether a request identified by ``key`` may proceed.

        Args:
            key: Client key (e.g., origin address, optionally with path).

        Returns:
            RateLimitResult describing the decision.
        """
        raise NotImplementedError
