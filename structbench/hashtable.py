"""An open-addressing hash set of integers with linear probing."""

from __future__ import annotations

import os

LOAD_FACTOR = 0.75
INITIAL_CAPACITY = 4


class HashTable:
    """Set of integers stored with ``key % capacity`` hashing and linear probing."""

    def __init__(self) -> None:
        self._slots: list[int | None] = []
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._slots)

    def _probe(self, key: int):
        """Yield slot indices in probe order, visiting each slot once."""
        capacity = len(self._slots)
        start = key % capacity
        for offset in range(capacity):
            yield (start + offset) % capacity

    def _place(self, key: int) -> bool:
        """Put a key into the first free slot; return False if already present."""
        for index in self._probe(key):
            current = self._slots[index]
            if current is None:
                self._slots[index] = key
                self._size += 1
                return True
            if current == key:
                return False
        raise RuntimeError("hash table has no free slot")

    def _rehash(self) -> None:
        old = [key for key in self._slots if key is not None]
        new_capacity = INITIAL_CAPACITY if not self._slots else 2 * len(self._slots)
        self._slots = [None] * new_capacity
        self._size = 0
        for key in old:
            self._place(key)

    def insert(self, key: int) -> None:
        """Add a key; inserting a key already present has no effect."""
        if not self._slots or self._size / len(self._slots) > LOAD_FACTOR:
            self._rehash()
        self._place(key)

    def __contains__(self, key: object) -> bool:
        if not self._slots or not isinstance(key, int):
            return False
        for index in self._probe(key):
            current = self._slots[index]
            if current is None:
                return False
            if current == key:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def build_from_file(self, path: str | os.PathLike[str]) -> None:
        """Insert the whitespace-separated integers of a file.

        Reading stops at the first token that is not an integer.
        """
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        for token in tokens:
            try:
                value = int(token)
            except ValueError:
                break
            self.insert(value)