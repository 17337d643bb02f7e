"""Thread-safe LRU cache with time-to-live expiration."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, Hashable, TypeVar

from .metrics import CacheMetrics

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class LruCacheConfig:
    """Serializable settings for building an :class:`LruCache`."""

    max_size: int = 1024
    ttl_secs: int = 300


@dataclass
class _Entry(Generic[V]):
    value: V
    inserted_at: float


class LruCache(Generic[K, V]):
    """A bounded cache evicting the least recently used entry.

    Entries older than the TTL are dropped lazily when touched.
    """

    def __init__(self, max_size: int, ttl: float | timedelta) -> None:
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        self._max_size = max_size
        self._ttl = float(ttl)
        self._entries: OrderedDict[K, _Entry[V]] = OrderedDict()
        self._metrics = CacheMetrics()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: LruCacheConfig) -> LruCache[K, V]:
        return cls(config.max_size, float(config.ttl_secs))

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def ttl(self) -> float:
        """Time to live in seconds."""
        return self._ttl

    def _expired(self, entry: _Entry[V], now: float) -> bool:
        return now - entry.inserted_at >= self._ttl

    def get(self, key: K) -> V | None:
        """Return the value for ``key``, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._metrics.record_miss()
                return None
            if self._expired(entry, time.monotonic()):
                del self._entries[key]
                self._metrics.record_eviction()
                self._metrics.record_miss()
                self._metrics.set_size(len(self._entries))
                return None
            self._entries.move_to_end(key)
            self._metrics.record_hit()
            return entry.value

    def insert(self, key: K, value: V) -> None:
        """Store ``value``; evicts expired entries, then the LRU one if full."""
        with self._lock:
            now = time.monotonic()
            for stale in [k for k, e in self._entries.items() if self._expired(e, now)]:
                del self._entries[stale]
                self._metrics.record_eviction()
            if (
                len(self._entries) >= self._max_size
                and key not in self._entries
                and self._entries
            ):
                self._entries.popitem(last=False)
                self._metrics.record_eviction()
            self._entries[key] = _Entry(value, now)
            self._entries.move_to_end(key)
            self._metrics.set_size(len(self._entries))

    def invalidate(self, key: K) -> bool:
        """Remove ``key``; True if it was present."""
        with self._lock:
            removed = self._entries.pop(key, None) is not None
            if removed:
                self._metrics.record_eviction()
            self._metrics.set_size(len(self._entries))
            return removed

    def clear(self) -> None:
        with self._lock:
            for _ in range(len(self._entries)):
                self._metrics.record_eviction()
            self._entries.clear()
            self._metrics.set_size(0)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._entries.get(key)  # type: ignore[arg-type]
            return entry is not None and not self._expired(entry, time.monotonic())

    def __len__(self) -> int:
        """Number of entries, including any not yet evicted after expiry."""
        with self._lock:
            return len(self._entries)

    def metrics(self) -> CacheMetrics:
        return self._metrics