"""Cache port - Injectable caching abstraction.

The geocode resolver memoizes results per instance through this port,
so tests can swap in a cache that never remembers anything.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing

    Implementations must tolerate concurrent reads and writes from
    fan-out worker threads.
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None on a miss."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under key."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss."""
        ...

    def clear(self) -> int:
        """Drop every entry.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...
