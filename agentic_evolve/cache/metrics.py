"""Thread-safe cache performance counters."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class CacheMetricsSnapshot:
    """Point-in-time copy of cache metrics."""

    hit_count: int
    miss_count: int
    eviction_count: int
    current_size: int
    hit_rate: float


class CacheMetrics:
    """Counts hits, misses and evictions and tracks the current size."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._size = 0

    def record_hit(self) -> None:
        with self._lock:
            self._hits += 1

    def record_miss(self) -> None:
        with self._lock:
            self._misses += 1

    def record_eviction(self) -> None:
        with self._lock:
            self._evictions += 1

    def set_size(self, size: int) -> None:
        with self._lock:
            self._size = size

    def hit_count(self) -> int:
        return self._hits

    def miss_count(self) -> int:
        return self._misses

    def eviction_count(self) -> int:
        return self._evictions

    def current_size(self) -> int:
        return self._size

    def hit_rate(self) -> float:
        """Fraction of lookups that hit; 0.0 when there were none."""
        with self._lock:
            total = self._hits + self._misses
            return 0.0 if total == 0 else self._hits / total

    def snapshot(self) -> CacheMetricsSnapshot:
        rate = self.hit_rate()
        with self._lock:
            return CacheMetricsSnapshot(
                hit_count=self._hits,
                miss_count=self._misses,
                eviction_count=self._evictions,
                current_size=self._size,
                hit_rate=rate,
            )