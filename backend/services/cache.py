"""Single-slot in-memory cache for the ranked achievement list.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
Steam may be called twice per TTL window (once per worker). That is fine
at this scale.

An empty list counts as a miss, same as expired or never stored, so an
empty upstream result is re-fetched on every request.
"""

import threading
import time
from typing import Callable

from models import Achievement


class AchievementCache:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._data: list[Achievement] = []
        self._expires_at: float = float("-inf")

    def lookup(self) -> tuple[list[Achievement], bool]:
        with self._lock:
            if self._clock() < self._expires_at and self._data:
                return list(self._data), True
        return [], False

    def store(self, data: list[Achievement], ttl_seconds: float) -> None:
        """Replace the slot wholesale. Last writer wins."""
        with self._lock:
            self._data = list(data)
            self._expires_at = self._clock() + ttl_seconds

    def snapshot(self) -> dict:
        """Metadata only — safe to expose in /ready."""
        with self._lock:
            remaining = self._expires_at - self._clock()
            return {
                "entries": len(self._data),
                "fresh": remaining > 0 and bool(self._data),
                "expires_in_seconds": round(remaining, 1) if remaining > 0 else 0,
            }
