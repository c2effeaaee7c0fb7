"""Fixed-capacity LRU cache built on an arena-backed recency list."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Hashable, TypeVar

import structlog

from .errors import CapacityError, InvariantViolationError
from .recency_list import RecencyList

if TYPE_CHECKING:
    from .config import CacheSettings


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = structlog.get_logger(__name__)


class _Absent(enum.Enum):
    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent.ABSENT
"""Returned by ``get``/``peek`` on a miss. Never equal to a stored value."""


@dataclass(frozen=True, slots=True)
class CacheStats:
    hits: int = 0
    misses: int = 0
    inserts: int = 0
    updates: int = 0
    evictions: int = 0


class LRUCache(Generic[K, V]):
    """LRU cache with a bounded capacity.

    A hash index maps each key to a handle in a ``RecencyList``. Both ``get``
    and ``put`` promote the touched entry to most recently used, so ``get`` is
    a write as far as the recency order is concerned.

    Not thread-safe. Callers sharing an instance must hold one exclusive lock
    around every ``get`` and ``put`` call.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise CapacityError(capacity)
        self._capacity = capacity
        self._index: dict[K, int] = {}
        self._list: RecencyList[K, V] = RecencyList()
        self._hits = 0
        self._misses = 0
        self._inserts = 0
        self._updates = 0
        self._evictions = 0
        logger.debug("lru cache created", capacity=capacity)

    @classmethod
    def from_settings(cls, settings: CacheSettings | None = None) -> LRUCache[K, V]:
        if settings is None:
            from .config import get_settings

            settings = get_settings()
        return cls(settings.default_capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def slots(self) -> int:
        """Allocated arena slots backing this cache."""
        return self._list.slots

    @property
    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            inserts=self._inserts,
            updates=self._updates,
            evictions=self._evictions,
        )

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._index)})"

    def get(self, key: K, default: V | _Absent = ABSENT) -> V | _Absent:
        """Return the value for ``key`` and mark it most recently used.

        Returns ``default`` (``ABSENT`` unless given) on a miss, without
        touching the recency order.
        """
        handle = self._index.get(key)
        if handle is None:
            self._misses += 1
            return default
        self._hits += 1
        value = self._list.node(handle).value
        self._list.move_to_head(handle)
        return value  # type: ignore[return-value]

    def peek(self, key: K, default: V | _Absent = ABSENT) -> V | _Absent:
        """Return the value for ``key`` without promoting it or counting a hit."""
        handle = self._index.get(key)
        if handle is None:
            return default
        return self._list.node(handle).value  # type: ignore[return-value]

    def put(self, key: K, value: V) -> None:
        """Insert or update ``key`` and mark it most recently used.

        Inserting a new key into a full cache evicts exactly one entry, the
        least recently used one.
        """
        handle = self._index.get(key)
        if handle is not None:
            self._list.node(handle).value = value
            self._list.move_to_head(handle)
            self._updates += 1
            return

        handle = self._list.allocate(key, value)
        self._list.attach_at_head(handle)
        self._index[key] = handle
        self._inserts += 1

        if len(self._index) > self._capacity:
            self._evict()

    def keys(self) -> list[K]:
        """Snapshot of live keys, most recently used first."""
        return [self._list.node(handle).key for handle in self._list]  # type: ignore[misc]

    def items(self) -> list[tuple[K, V]]:
        """Snapshot of live entries, most recently used first."""
        entries = []
        for handle in self._list:
            node = self._list.node(handle)
            entries.append((node.key, node.value))
        return entries  # type: ignore[return-value]

    def check_invariants(self) -> None:
        """Verify that the index and the recency list describe the same entries.

        Raises:
            InvariantViolationError: On any disagreement in membership, order
                linkage or size.
        """
        if len(self._index) > self._capacity:
            raise InvariantViolationError(
                f"size {len(self._index)} exceeds capacity {self._capacity}"
            )
        forward = list(self._list)
        backward = list(self._list.iter_reversed())
        if forward != backward[::-1]:
            raise InvariantViolationError("forward and backward walks disagree")
        if len(forward) != len(self._list) or len(forward) != len(self._index):
            raise InvariantViolationError(
                f"list holds {len(forward)} nodes, index holds {len(self._index)} keys"
            )
        for handle in forward:
            key = self._list.node(handle).key
            if self._index.get(key) != handle:  # type: ignore[arg-type]
                raise InvariantViolationError(f"index entry for {key!r} does not point at its node")

    def _evict(self) -> None:
        victim = self._list.lru()
        if victim is None:
            raise InvariantViolationError("least recently used entry should exist")
        key = self._list.node(victim).key
        self._list.detach(victim)
        del self._index[key]  # type: ignore[arg-type]
        self._list.release(victim)
        self._evictions += 1
        logger.debug("evicted least recently used entry", key=key, capacity=self._capacity)
