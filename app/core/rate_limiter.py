"""
Per-client submission rate limiting.

Counters live in a ``limits`` storage. The default ``memory://`` storage is
local to the process and is cleared on restart; several server instances do
not share it. Point ``RATE_LIMIT_STORAGE_URI`` at a shared backend
(e.g. ``redis://localhost:6379``) to count across instances.
"""
import logging
import math
import time
from dataclasses import dataclass
from typing import Optional

from limits import parse
from limits.storage import Storage, storage_from_string
from limits.strategies import FixedWindowRateLimiter, MovingWindowRateLimiter

from app.core.config import settings
from app.core.exceptions import RateLimited

logger = logging.getLogger(__name__)

STRATEGIES = {
    "fixed-window": FixedWindowRateLimiter,
    "moving-window": MovingWindowRateLimiter,
}


@dataclass
class RateLimitResult:
    allowed: bool
    remaining: int
    retry_after: int


class RateLimiter:
    """Counts hits per key and rejects them once the limit is reached."""

    def __init__(
        self,
        limit: str = "5/minute",
        storage: Optional[Storage] = None,
        strategy: str = "moving-window",
    ):
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown rate limit strategy: {strategy}")
        self.item = parse(limit)
        self.storage = storage if storage is not None else storage_from_string("memory://")
        self.strategy = STRATEGIES[strategy](self.storage)

    def hit(self, key: str) -> RateLimitResult:
        """Consume one unit for ``key``."""
        allowed = self.strategy.hit(self.item, key)
        reset_time, remaining = self.strategy.get_window_stats(self.item, key)
        retry_after = 0 if allowed else max(1, math.ceil(reset_time - time.time()))
        return RateLimitResult(allowed=allowed, remaining=remaining, retry_after=retry_after)

    def check(self, key: str) -> RateLimitResult:
        """
        Consume one unit for ``key``.

        Raises:
            RateLimited: If the key is over its limit
        """
        result = self.hit(key)
        if not result.allowed:
            logger.warning("Rate limit exceeded for %s (retry in %ss)", key, result.retry_after)
            raise RateLimited(retry_after=result.retry_after)
        return result

    def reset(self) -> None:
        """Drop every counter."""
        self.storage.reset()


submission_limiter = RateLimiter(
    limit=settings.RATE_LIMIT_SUBMISSIONS,
    storage=storage_from_string(settings.RATE_LIMIT_STORAGE_URI),
    strategy=settings.RATE_LIMIT_STRATEGY,
)


def get_submission_limiter() -> RateLimiter:
    """FastAPI dependency; override it to swap the limiter."""
    return submission_limiter
