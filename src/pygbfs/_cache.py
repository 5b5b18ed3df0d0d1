"""Thread-safe expiring key/value store used for feed documents."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from pygbfs._constants import DEFAULT_CLEANUP_INTERVAL


def _ttl_seconds(ttl: timedelta | float) -> float:
    if isinstance(ttl, timedelta):
        return ttl.total_seconds()
    return float(ttl)


@dataclass(frozen=True, slots=True)
class _CacheEntry:
    value: Any
    expires_at: float


class ExpiringCache:
    """In-memory cache where every entry carries its own time-to-live.

    An entry stored with TTL ``d`` at time ``t`` is found for lookups
    strictly before ``t + d`` and missing from ``t + d`` on, whether or
    not a sweep has purged it yet.  Expired entries are swept on access
    once ``cleanup_interval`` seconds have passed since the last sweep.

    A TTL of zero or less stores nothing.
    """

    def __init__(
        self,
        *,
        cleanup_interval: float = DEFAULT_CLEANUP_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cleanup_interval = cleanup_interval
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, _CacheEntry] = {}
        self._last_sweep = clock()

    def get(self, key: str) -> tuple[Any, bool]:
        """Return ``(value, True)`` for a live entry, else ``(None, False)``."""
        with self._lock:
            now = self._clock()
            self._maybe_sweep(now)
            entry = self._entries.get(key)
            if entry is None or now >= entry.expires_at:
                return None, False
            return entry.value, True

    def set(self, key: str, value: Any, ttl: timedelta | float) -> None:
        """Store *value* under *key*, replacing any previous entry."""
        seconds = _ttl_seconds(ttl)
        with self._lock:
            now = self._clock()
            self._maybe_sweep(now)
            if seconds <= 0:
                # Immediately stale; drop whatever was there so readers refetch.
                self._entries.pop(key, None)
                return
            self._entries[key] = _CacheEntry(value=value, expires_at=now + seconds)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""
        with self._lock:
            return self._sweep(self._clock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _maybe_sweep(self, now: float) -> None:
        if now - self._last_sweep >= self._cleanup_interval:
            self._sweep(now)

    def _sweep(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
        for key in expired:
            del self._entries[key]
        self._last_sweep = now
        return len(expired)
