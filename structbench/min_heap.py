"""A binary min-heap of integers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class MinHeap:
    """Binary min-heap: the smallest value is always at the root."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def insert(self, value: int) -> None:
        """Add a value to the heap."""
        heapq.heappush(self._items, value)

    def find_min(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("find_min from an empty heap")
        return self._items[0]

    def delete_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("delete_min from an empty heap")
        return heapq.heappop(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def build(self, values: Iterable[int]) -> None:
        """Replace the contents with the given values, heapified in place."""
        self._items = list(values)
        heapq.heapify(self._items)