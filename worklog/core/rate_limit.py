"""
Fixed-window rate limiting for write routes.
"""
import logging
import math
import time
from typing import Callable, Dict, Optional, Tuple

from fastapi import Request

from worklog.core.config import settings
from worklog.core.errors import RateLimitError

logger = logging.getLogger(__name__)


class WriteRateLimiter:
    """
    Per-client fixed-window request counter.
    Limits default to the configured settings and are read on every call.
    """

    def __init__(
            self,
            max_requests: Optional[int] = None,
            window_seconds: Optional[int] = None,
            clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize limiter with empty counters.

        Args:
            max_requests: Requests allowed per window (settings value if None)
            window_seconds: Window length in seconds (settings value if None)
            clock: Monotonic time source
        """
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, Tuple[float, int]] = {}  # client key -> (window start, count)

    @property
    def max_requests(self) -> int:
        if self._max_requests is not None:
            return self._max_requests
        return settings.WRITE_RATE_LIMIT_MAX

    @property
    def window_seconds(self) -> int:
        if self._window_seconds is not None:
            return self._window_seconds
        return settings.WRITE_RATE_LIMIT_WINDOW_SECONDS

    def reset(self):
        """Forget all counters."""
        self._windows = {}

    def _prune(self, now: float) -> None:
        # Drop windows that have ended
        expired = [
            key for key, (window_start, _) in self._windows.items()
            if now - window_start >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]

    def hit(self, key: str) -> None:
        """
        Count one request for a client.

        Args:
            key: Client key (usually the remote host)

        Raises:
            RateLimitError: If the client exceeded the limit for the current window
        """
        if self.max_requests <= 0:
            return

        now = self._clock()
        self._prune(now)
        window_start, count = self._windows.get(key, (now, 0))

        if count >= self.max_requests:
            retry_after = max(1, math.ceil(window_start + self.window_seconds - now))
            logger.warning(f"Write rate limit exceeded for {key}")
            raise RateLimitError(retry_after=retry_after)

        self._windows[key] = (window_start, count + 1)

    async def __call__(self, request: Request) -> None:
        key = request.client.host if request.client else "unknown"
        self.hit(key)


# Shared limiter for all write routes
write_rate_limiter = WriteRateLimiter()
