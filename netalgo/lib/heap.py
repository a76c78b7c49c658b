from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Any, Dict, Generic, Hashable, List, Tuple, TypeVar

from netalgo.errors import OutOfRangeError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class KeyedHeap(Generic[K, V]):
    """
    Min-priority queue of values addressed by a unique key.

    Supports insert, extract-minimum and remove-by-key on top of `heapq`.
    Removed or replaced entries are invalidated in place and skipped when
    they surface. Ties on priority pop in insertion order.
    """

    def __init__(self) -> None:
        self._heap: List[List[Any]] = []
        self._entries: Dict[K, List[Any]] = {}
        self._counter = count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def add(self, key: K, priority: Any, value: V) -> None:
        """
        Insert `value` under `key`, replacing any entry already held for `key`.

        Args:
            key: Unique key of the entry.
            priority: Totally ordered priority; the smallest pops first.
            value: Payload returned with the key on extraction.
        """
        self.remove(key)
        entry = [priority, next(self._counter), key, value, True]
        self._entries[key] = entry
        heappush(self._heap, entry)

    def remove(self, key: K) -> bool:
        """Drop the entry for `key`. Returns True if an entry was present."""
        entry = self._entries.pop(key, None)
        if entry is None:
            return False
        entry[4] = False
        return True

    def peek(self) -> Tuple[K, Any, V]:
        """Return ``(key, priority, value)`` of the minimum entry without removing it."""
        self._discard_stale()
        if not self._heap:
            raise OutOfRangeError("peek from an empty KeyedHeap")
        priority, _, key, value, _ = self._heap[0]
        return key, priority, value

    def pop(self) -> Tuple[K, Any, V]:
        """
        Remove and return the minimum entry as ``(key, priority, value)``.

        Raises:
            OutOfRangeError: If the heap is empty.
        """
        self._discard_stale()
        if not self._heap:
            raise OutOfRangeError("pop from an empty KeyedHeap")
        priority, _, key, value, _ = heappop(self._heap)
        del self._entries[key]
        return key, priority, value

    def _discard_stale(self) -> None:
        heap = self._heap
        while heap and not heap[0][4]:
            heappop(heap)
