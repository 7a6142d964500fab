import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from app.upload.exceptions import RateLimitExceededError

UNKNOWN_CLIENT = "unknown"
RATE_LIMIT_MESSAGE = "Too many requests. Please try again later."


@dataclass
class _Window:
    count: int
    reset_time: float


class RateLimiter:
    """Fixed-window request counter keyed by client identifier.

    State lives in this process only and is lost on restart. Windows that
    have expired are dropped lazily so the table tracks only recent clients.
    """

    def __init__(
        self,
        *,
        window_seconds: float,
        max_requests: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._window_seconds = window_seconds
        self._max_requests = max_requests
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._next_prune = float("-inf")
        self._lock = threading.Lock()

    def is_limited(self, client_id: str, now: float | None = None) -> bool:
        """Count one call for client_id and report whether it exceeds the limit."""
        if now is None:
            now = self._clock()
        with self._lock:
            if now > self._next_prune:
                self._prune(now)
            window = self._windows.get(client_id)
            if window is None or now > window.reset_time:
                self._windows[client_id] = _Window(
                    count=1, reset_time=now + self._window_seconds
                )
                return False
            window.count += 1
            return window.count > self._max_requests

    def check(self, client_id: str) -> None:
        """Raise RateLimitExceededError when client_id is over its allowance."""
        if self.is_limited(client_id or UNKNOWN_CLIENT):
            raise RateLimitExceededError(RATE_LIMIT_MESSAGE)

    def snapshot(self, client_id: str) -> tuple[int, float] | None:
        """Return (count, reset_time) for client_id, if tracked.

        Read-only inspection hook for diagnostics and tests; it does not
        count as a request.
        """
        with self._lock:
            window = self._windows.get(client_id)
            if window is None:
                return None
            return window.count, window.reset_time

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)

    def _prune(self, now: float) -> None:
        # Caller holds the lock. Sweeps at most once per window length.
        expired = [key for key, w in self._windows.items() if now > w.reset_time]
        for key in expired:
            del self._windows[key]
        self._next_prune = now + self._window_seconds
