"""Generic LRU cache with TTL, cache metrics and dependency-based invalidation."""