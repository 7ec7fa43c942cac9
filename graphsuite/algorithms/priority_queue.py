"""Binary-heap min-priority queue used by Dijkstra and Prim.

Entries with equal priority are popped in insertion order, which makes the
algorithms built on top of it deterministic.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Any, Generic, List, Tuple, TypeVar

from graphsuite.graph.errors import InvalidWeightError

Item = TypeVar("Item")


class PriorityQueue(Generic[Item]):
    """Min-priority queue with FIFO tie-breaking.

    Priorities must be mutually comparable; a comparison failure is reported
    as ``InvalidWeightError``.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Any, int, Item]] = []
        self._counter = count()

    def push(self, priority: Any, item: Item) -> None:
        """Insert ``item`` with the given priority."""
        try:
            heappush(self._heap, (priority, next(self._counter), item))
        except TypeError:
            raise InvalidWeightError(priority, "cannot be compared") from None

    def pop(self) -> Tuple[Any, Item]:
        """Remove and return ``(priority, item)`` with the smallest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        priority, _, item = heappop(self._heap)
        return priority, item

    def peek(self) -> Tuple[Any, Item]:
        """Return ``(priority, item)`` with the smallest priority without removing it."""
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        priority, _, item = self._heap[0]
        return priority, item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
