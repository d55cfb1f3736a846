"""A binary max-heap of integers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class MaxHeap:
    """Binary max-heap: the largest value is always at the root."""

    def __init__(self) -> None:
        # Values are stored negated so the standard min-heap routines apply.
        self._items: list[int] = []

    def insert(self, value: int) -> None:
        """Add a value to the heap."""
        heapq.heappush(self._items, -value)

    def find_max(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("find_max from an empty heap")
        return -self._items[0]

    def delete_max(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("delete_max from an empty heap")
        return -heapq.heappop(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def build(self, values: Iterable[int]) -> None:
        """Replace the contents with the given values, heapified in place."""
        self._items = [-value for value in values]
        heapq.heapify(self._items)