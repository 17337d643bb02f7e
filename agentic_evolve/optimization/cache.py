"""Short-lived cache of pattern match results."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass


@dataclass
class CachedMatch:
    """One cached match of a pattern."""

    pattern_id: str
    score: float
    timestamp: int
    hit_count: int = 0


class CacheManager:
    """Caches match lists by key, expiring them after a TTL."""

    def __init__(self, max_entries: int = 1000, ttl_seconds: int = 3600) -> None:
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._cache: dict[str, list[CachedMatch]] = {}

    def get(self, key: str) -> list[CachedMatch] | None:
        """Cached matches for ``key``; expired lists are dropped and give None."""
        entries = self._cache.get(key)
        if entries and int(time.time()) - entries[0].timestamp > self.ttl_seconds:
            del self._cache[key]
            return None
        return entries

    def put(self, key: str, matches: list[CachedMatch]) -> None:
        """Store matches; when full, first evict the list with the oldest timestamp."""
        if len(self._cache) >= self.max_entries:
            self._evict_oldest()
        self._cache[key] = matches

    def invalidate(self, key: str) -> None:
        self._cache.pop(key, None)

    def invalidate_pattern(self, pattern_id: str) -> None:
        """Drop every cached list that mentions ``pattern_id``."""
        self._cache = {
            key: entries
            for key, entries in self._cache.items()
            if not any(e.pattern_id == pattern_id for e in entries)
        }

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def hit_rate(self) -> float:
        """Average hit count per cached match; 0.0 when nothing is cached."""
        entries = [e for matches in self._cache.values() for e in matches]
        if not entries:
            return 0.0
        return sum(e.hit_count for e in entries) / len(entries)

    def _evict_oldest(self) -> None:
        if not self._cache:
            return
        oldest = min(
            self._cache,
            key=lambda k: self._cache[k][0].timestamp if self._cache[k] else sys.maxsize,
        )
        del self._cache[oldest]