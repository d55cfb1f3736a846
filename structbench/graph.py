"""An undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from collections import deque
from typing import NamedTuple, Optional


class _Edge(NamedTuple):
    to: int
    weight: int


def _closest(distances: list[Optional[int]], settled: list[bool]) -> Optional[int]:
    """Index of the unsettled vertex with the smallest known distance.

    Ties go to the lowest index.
    """
    best = min(
        (
            (distance, vertex)
            for vertex, distance in enumerate(distances)
            if distance is not None and not settled[vertex]
        ),
        default=None,
    )
    return None if best is None else best[1]


class Graph:
    """Undirected multigraph over the vertices ``0 .. n-1`` with integer weights.

    Weights are expected to be non-negative.
    """

    def __init__(self) -> None:
        self._adjacency: list[deque[_Edge]] = []
        self._edge_count = 0

    def build(self, vertex_count: int) -> None:
        """Reset to ``vertex_count`` vertices and no edges."""
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative: {vertex_count}")
        self._adjacency = [deque() for _ in range(vertex_count)]
        self._edge_count = 0

    def _check(self, *vertices: int) -> None:
        count = len(self._adjacency)
        for vertex in vertices:
            if not 0 <= vertex < count:
                raise IndexError(f"vertex {vertex} out of range 0..{count - 1}")

    def insert_edge(self, u: int, v: int, weight: int) -> None:
        """Add an edge between ``u`` and ``v``; parallel edges are allowed."""
        self._check(u, v)
        self._adjacency[u].appendleft(_Edge(v, weight))
        self._adjacency[v].appendleft(_Edge(u, weight))
        self._edge_count += 1

    def _unlink(self, u: int, v: int) -> bool:
        edges = self._adjacency[u]
        match = next((edge for edge in edges if edge.to == v), None)
        if match is None:
            return False
        edges.remove(match)
        return True

    def delete_edge(self, u: int, v: int) -> bool:
        """Remove the most recently added edge between ``u`` and ``v``.

        Returns whether an edge was removed.
        """
        self._check(u, v)
        removed = self._unlink(u, v)
        if removed:
            self._edge_count -= 1
        self._unlink(v, u)
        return removed

    def size(self) -> tuple[int, int]:
        """Return ``(vertex_count, edge_count)``."""
        return len(self._adjacency), self._edge_count

    def shortest_path(self, src: int, dest: int) -> Optional[int]:
        """Length of the shortest path from ``src`` to ``dest`` (Dijkstra).

        Returns None when ``dest`` cannot be reached.
        """
        self._check(src, dest)
        distances: list[Optional[int]] = [None] * len(self._adjacency)
        settled = [False] * len(self._adjacency)
        distances[src] = 0
        while (current := _closest(distances, settled)) is not None:
            settled[current] = True
            base = distances[current]
            for edge in self._adjacency[current]:
                if settled[edge.to]:
                    continue
                candidate = base + edge.weight
                known = distances[edge.to]
                if known is None or candidate < known:
                    distances[edge.to] = candidate
        return distances[dest]

    def spanning_tree_weight(self) -> int:
        """Total weight of a minimum spanning tree grown from vertex 0 (Prim).

        Only the component containing vertex 0 is spanned; an empty graph gives 0.
        """
        if not self._adjacency:
            return 0
        keys: list[Optional[int]] = [None] * len(self._adjacency)
        in_tree = [False] * len(self._adjacency)
        keys[0] = 0
        total = 0
        while (current := _closest(keys, in_tree)) is not None:
            in_tree[current] = True
            total += keys[current]
            for edge in self._adjacency[current]:
                known = keys[edge.to]
                if not in_tree[edge.to] and (known is None or edge.weight < known):
                    keys[edge.to] = edge.weight
        return total

    def connected_components(self) -> int:
        """Number of connected components, found by breadth-first search."""
        visited = [False] * len(self._adjacency)
        count = 0
        for start, seen in enumerate(visited):
            if seen:
                continue
            count += 1
            visited[start] = True
            queue = deque([start])
            while queue:
                current = queue.popleft()
                for edge in self._adjacency[current]:
                    if not visited[edge.to]:
                        visited[edge.to] = True
                        queue.append(edge.to)
        return count