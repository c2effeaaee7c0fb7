"""Arena-backed doubly linked list ordering cache entries by recency.

Nodes are stored in a flat list and addressed by integer handles. ``prev`` and
``next`` are handles too, so the structure holds no reference cycles and an
evicted slot can be handed straight to the next insertion.

Handle ``HEAD`` (0) and ``TAIL`` (1) are permanent sentinels. Every live node
sits strictly between them, most recently used first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

from .errors import InvariantViolationError


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

NIL = -1
HEAD = 0
TAIL = 1


@dataclass(slots=True)
class Node(Generic[K, V]):
    key: K | None = None
    value: V | None = None
    prev: int = NIL
    next: int = NIL

    @property
    def linked(self) -> bool:
        return self.prev != NIL or self.next != NIL


class RecencyList(Generic[K, V]):
    """Doubly linked recency order with O(1) splice operations."""

    def __init__(self) -> None:
        self._nodes: list[Node[K, V]] = [Node(next=TAIL), Node(prev=HEAD)]
        self._free: list[int] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    @property
    def slots(self) -> int:
        """Arena size, sentinels and free slots included."""
        return len(self._nodes)

    def node(self, handle: int) -> Node[K, V]:
        return self._nodes[handle]

    def allocate(self, key: K, value: V) -> int:
        """Return the handle of a fresh, unlinked node holding ``key``/``value``."""
        if self._free:
            handle = self._free.pop()
            node = self._nodes[handle]
            node.key = key
            node.value = value
            return handle
        self._nodes.append(Node(key=key, value=value))
        return len(self._nodes) - 1

    def release(self, handle: int) -> None:
        """Recycle a detached slot and drop its key/value references."""
        self._check_not_sentinel(handle)
        node = self._nodes[handle]
        if node.linked:
            raise InvariantViolationError(f"node {handle} released while still linked")
        node.key = None
        node.value = None
        self._free.append(handle)

    def attach_at_head(self, handle: int) -> None:
        """Splice ``handle`` right after the head sentinel."""
        self._check_not_sentinel(handle)
        node = self._nodes[handle]
        if node.linked:
            raise InvariantViolationError(f"node {handle} is already linked")

        head = self._nodes[HEAD]
        first = head.next
        node.prev = HEAD
        node.next = first
        self._nodes[first].prev = handle
        head.next = handle
        self._size += 1

    def detach(self, handle: int) -> None:
        """Unlink ``handle`` and join its former neighbours."""
        self._check_not_sentinel(handle)
        node = self._nodes[handle]
        if node.prev == NIL or node.next == NIL:
            # only sentinels may lack a neighbour
            raise InvariantViolationError(f"node {handle} must have both neighbours")

        self._nodes[node.prev].next = node.next
        self._nodes[node.next].prev = node.prev
        node.prev = NIL
        node.next = NIL
        self._size -= 1

    def move_to_head(self, handle: int) -> None:
        self.detach(handle)
        self.attach_at_head(handle)

    def lru(self) -> int | None:
        """Handle of the least recently used live node, or None when empty."""
        last = self._nodes[TAIL].prev
        if last == HEAD:
            return None
        return last

    def __iter__(self) -> Iterator[int]:
        """Yield live handles from most to least recently used."""
        handle = self._nodes[HEAD].next
        steps = 0
        while handle != TAIL:
            if handle == NIL:
                raise InvariantViolationError("forward walk fell off the list")
            steps += 1
            if steps > len(self._nodes):
                raise InvariantViolationError("forward walk is cyclic")
            yield handle
            handle = self._nodes[handle].next

    def iter_reversed(self) -> Iterator[int]:
        """Yield live handles from least to most recently used."""
        handle = self._nodes[TAIL].prev
        steps = 0
        while handle != HEAD:
            if handle == NIL:
                raise InvariantViolationError("backward walk fell off the list")
            steps += 1
            if steps > len(self._nodes):
                raise InvariantViolationError("backward walk is cyclic")
            yield handle
            handle = self._nodes[handle].prev

    def _check_not_sentinel(self, handle: int) -> None:
        if handle in (HEAD, TAIL):
            raise InvariantViolationError(f"sentinel {handle} cannot be moved or released")
