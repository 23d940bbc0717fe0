"""Null cache implementation for testing.

This cache always misses, so a resolver built on it hits its geocoder
on every call. Use it to assert network behaviour without memoization.

Example:
    resolver = GeocodeResolver(geocoder=stub, cache=NullCache())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache - every get() misses, every set() is dropped."""

    name: str = "null"

    def get(self, key: str) -> Optional[T]:
        return None

    def set(self, key: str, value: T) -> None:
        pass

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0
