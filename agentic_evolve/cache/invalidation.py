"""Dependency tracking between cache keys with cascading invalidation."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


@dataclass
class InvalidationResult(Generic[K]):
    """Keys invalidated by a cascade, the root included."""

    root: K
    invalidated: list[K]


class CacheInvalidator(Generic[K]):
    """Tracks which keys depend on which; invalidating a key invalidates its dependents."""

    def __init__(self) -> None:
        self._dependents: dict[K, set[K]] = {}
        self._lock = threading.Lock()

    def add_dependency(self, dependency: K, dependent: K) -> None:
        """Record that ``dependent`` must be invalidated with ``dependency``."""
        with self._lock:
            self._dependents.setdefault(dependency, set()).add(dependent)

    def remove_dependency(self, dependency: K, dependent: K) -> None:
        with self._lock:
            deps = self._dependents.get(dependency)
            if deps is None:
                return
            deps.discard(dependent)
            if not deps:
                del self._dependents[dependency]

    def cascade(self, root: K) -> InvalidationResult[K]:
        """Every key reachable from ``root`` through the dependency graph."""
        with self._lock:
            visited: set[K] = set()
            stack = [root]
            while stack:
                key = stack.pop()
                if key in visited:
                    continue
                visited.add(key)
                stack.extend(d for d in self._dependents.get(key, ()) if d not in visited)
        return InvalidationResult(root=root, invalidated=list(visited))

    def clear(self) -> None:
        with self._lock:
            self._dependents.clear()

    def dependency_count(self) -> int:
        """Number of keys with registered dependents."""
        with self._lock:
            return len(self._dependents)

    def has_dependents(self, key: K) -> bool:
        with self._lock:
            return bool(self._dependents.get(key))