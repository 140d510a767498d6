"""Cache port - Injectable caching abstraction.

The graph builder uses it to reuse a graph when the segment set has
not changed between requests. Swapping in the null cache rebuilds the
graph on every request.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing / caching disabled
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if absent."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under ``key``."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss."""
        ...

    def clear(self) -> int:
        """Drop every entry and return how many were dropped."""
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...
