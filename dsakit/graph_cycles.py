"""Cycle detection in directed and undirected graphs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _adjacency(n: int, edges: Iterable[Sequence[int]], directed: bool) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def has_undirected_cycle(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether an undirected graph on nodes ``0 .. n - 1`` has a cycle."""
    adjacency = _adjacency(n, edges, directed=False)
    visited = [False] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def _reaches_cycle(
    adjacency: Sequence[Sequence[int]],
    root: int,
    visited: list[bool],
    on_path: list[bool],
) -> bool:
    """Depth-first search from ``root``; on a cycle, leave the path marked."""
    visited[root] = on_path[root] = True
    stack = [(root, iter(adjacency[root]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if on_path[neighbour]:
                return True
            if not visited[neighbour]:
                visited[neighbour] = on_path[neighbour] = True
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            on_path[node] = False
            stack.pop()
    return False


def has_directed_cycle(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether a directed graph on nodes ``0 .. n - 1`` has a cycle."""
    adjacency = _adjacency(n, edges, directed=True)
    visited = [False] * n
    on_path = [False] * n
    return any(
        not visited[root] and _reaches_cycle(adjacency, root, visited, on_path)
        for root in range(n)
    )


def eventual_safe_nodes(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return, ascending, the nodes from which every path ends at a terminal node."""
    n = len(adjacency)
    visited = [False] * n
    on_path = [False] * n
    for root in range(n):
        if not visited[root]:
            _reaches_cycle(adjacency, root, visited, on_path)
    return [node for node in range(n) if not on_path[node]]


def longest_cycle(edges: Sequence[int]) -> int:
    """Return the longest cycle length where node ``i`` points to ``edges[i]``.

    An entry of -1 means no outgoing edge. Returns -1 when there is no cycle.
    """
    visited = [False] * len(edges)
    best = -1
    for start in range(len(edges)):
        if visited[start]:
            continue
        path: dict[int, int] = {}
        node = start
        while node != -1 and not visited[node]:
            visited[node] = True
            path[node] = len(path)
            node = edges[node]
        if node != -1 and node in path:
            best = max(best, len(path) - path[node])
    return best