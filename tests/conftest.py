"""Shared test fixtures for recency-cache tests."""

from __future__ import annotations

import pytest
import structlog

from recency_cache import LRUCache
from recency_cache.config import get_settings


@pytest.fixture
def cache() -> LRUCache[int, int]:
    """Capacity-2 cache used by the reference scenarios."""
    return LRUCache[int, int](2)


@pytest.fixture(autouse=True)
def _reset_global_state():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
