"""Thread-safe in-memory cache implementation.

Entries never expire and are never evicted: the geocode resolver relies
on a result, once stored, being returned unchanged for the lifetime of
the cache. Concurrent fan-out requests share one instance, so every
access goes through an RLock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Unbounded thread-safe in-memory cache.

    Implements the CachePort protocol.

    Attributes:
        name: Cache name for logging

    Example:
        cache = InMemoryCache[GeocodingResult](name="geocode")
        result = cache.get_or_compute("paris", lambda: resolve("Paris"))
    """

    name: str = "cache"

    _store: Dict[str, T] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _key_locks: Dict[str, threading.Lock] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._hits += 1
            return self._store[key]

    def set(self, key: str, value: T) -> None:
        with self._lock:
            self._store[key] = value
        self._logger.debug("Cache entry set", extra={"key": key})

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Concurrent misses on the same key compute once; the other callers
        wait for that value. If the compute function raises, nothing is
        stored and the next waiter computes again. Different keys never
        block each other.
        """
        value = self.get(key)
        if value is not None:
            self._logger.debug("Cache hit", extra={"key": key})
            return value

        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            with self._lock:
                value = self._store.get(key)
            if value is not None:
                self._logger.debug("Computed by another caller", extra={"key": key})
                return value

            self._logger.debug("Cache miss, computing", extra={"key": key})
            computed = compute_fn()
            self.set(key, computed)
            return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
        self._logger.info("Cache cleared", extra={"entries_cleared": count})
        return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }
