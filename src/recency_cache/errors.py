"""Cache error hierarchy.

``CacheError`` is the root of everything a caller is expected to handle.
``InvariantViolationError`` sits outside it on purpose: it signals a defect in
the cache itself and must propagate.
"""

from __future__ import annotations


class CacheError(Exception):
    """Base class for recoverable cache errors."""


class CapacityError(CacheError, ValueError):
    """Raised at construction when the capacity is not a positive integer."""

    def __init__(self, capacity: object) -> None:
        self.capacity = capacity
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")


class InvariantViolationError(AssertionError):
    """Raised when the recency list and the index no longer agree.

    Never reachable through correct use of the public API. Treat it as fatal.
    """
