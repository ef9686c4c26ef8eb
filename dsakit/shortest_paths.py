"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

# Distance used by some callers to mark "no edge" in an adjacency matrix.
_NO_EDGE = 100_000_000
_GRID_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def dijkstra(n: int, edges: Iterable[Sequence[int]], source: int) -> list[float]:
    """Return shortest distances from ``source`` in an undirected weighted graph.

    Each edge is ``(u, v, weight)`` with a non-negative weight. Unreachable
    nodes get ``math.inf``.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    distance: list[float] = [math.inf] * n
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Return the least total of absolute height changes from top-left to bottom-right.

    Moves go one cell up, down, left or right.
    """
    if not heights or not heights[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(heights), len(heights[0])
    distance = [[math.inf] * cols for _ in range(rows)]
    distance[0][0] = 0
    heap = [(0, 0, 0)]
    while heap:
        dist, r, c = heapq.heappop(heap)
        if dist > distance[r][c]:
            continue
        for dr, dc in _GRID_STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                candidate = dist + abs(heights[r][c] - heights[nr][nc])
                if candidate < distance[nr][nc]:
                    distance[nr][nc] = candidate
                    heapq.heappush(heap, (candidate, nr, nc))
    return distance[-1][-1]


def bellman_ford(n: int, edges: Sequence[Sequence[int]], source: int) -> list[float]:
    """Return shortest distances from ``source`` in a directed weighted graph.

    Weights may be negative. Unreachable nodes get ``math.inf``. Raises
    NegativeCycleError if a negative cycle is reachable from the source.
    """
    distance: list[float] = [math.inf] * n
    distance[source] = 0
    for round_number in range(n):
        relaxed = False
        for u, v, weight in edges:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                if round_number == n - 1:
                    raise NegativeCycleError("graph has a negative cycle")
                distance[v] = distance[u] + weight
                relaxed = True
        if not relaxed:
            break
    if distance[source] < 0:
        raise NegativeCycleError("graph has a negative cycle")
    return distance


def _missing(value: float) -> bool:
    return value == _NO_EDGE or value == math.inf


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances for a square adjacency matrix.

    Missing edges are ``math.inf`` (or 100000000) and stay so when no path
    exists. The input is not changed and negative cycles are not detected.
    """
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("distance matrix must be square")
    result = [list(row) for row in dist]
    for k, via_row in enumerate(result):
        for i, row in enumerate(result):
            to_k = row[k]
            if i == k or _missing(to_k):
                continue
            for j, from_k in enumerate(via_row):
                if j == k or j == i or _missing(from_k):
                    continue
                row[j] = min(row[j], to_k + from_k)
    return result