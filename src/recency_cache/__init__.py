"""recency-cache: fixed-capacity in-memory LRU cache.

Usage:
    cache = LRUCache[int, str](2)
    cache.put(1, "a")
    cache.get(1)        # "a"
    cache.get(9)        # ABSENT
"""

from recency_cache.cache import ABSENT, CacheStats, LRUCache
from recency_cache.config import CacheSettings, get_settings
from recency_cache.errors import CacheError, CapacityError, InvariantViolationError
from recency_cache.logging import configure_logging

__all__ = [
    "ABSENT",
    "CacheError",
    "CacheSettings",
    "CacheStats",
    "CapacityError",
    "InvariantViolationError",
    "LRUCache",
    "configure_logging",
    "get_settings",
]
__version__ = "0.1.0"
