"""Orderings and traversal counts on directed and undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum

from dsakit.dsu import DisjointSet

_ALPHABET = 26


class _State(Enum):
    NEW = 0
    ACTIVE = 1
    DONE = 2


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return a topological order of a directed graph by repeatedly removing sources.

    ``adjacency[u]`` lists the nodes that ``u`` points to. Raises ValueError
    if the graph has a cycle.
    """
    indegree = [0] * len(adjacency)
    for targets in adjacency:
        for target in targets:
            indegree[target] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adjacency[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    if len(order) != len(adjacency):
        raise ValueError("graph has a cycle")
    return order


def topological_sort_dfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the nodes in reverse depth-first finishing order.

    For an acyclic graph this is a topological order. Cycles are not
    detected: the result is then merely some order of all the nodes.
    """
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                finished.append(node)
                stack.pop()
    return finished[::-1]


def find_course_order(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[int]:
    """Return an order in which to take every course, or an empty list if none exists.

    Each prerequisite ``(course, required)`` means ``required`` comes first.
    """
    adjacency: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        adjacency[required].append(course)
    state = [_State.NEW] * num_courses
    finished: list[int] = []
    for root in range(num_courses):
        if state[root] is not _State.NEW:
            continue
        state[root] = _State.ACTIVE
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] is _State.ACTIVE:
                    return []
                if state[neighbour] is _State.NEW:
                    state[neighbour] = _State.ACTIVE
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                state[node] = _State.DONE
                finished.append(node)
                stack.pop()
    return finished[::-1]


def largest_path_value(colors: str, edges: Iterable[Sequence[int]]) -> int:
    """Return the highest count of one colour along any path, or -1 on a cycle.

    Node ``i`` has colour ``colors[i]``, a lower-case letter; ``edges`` are directed.
    """
    if any(not "a" <= colour <= "z" for colour in colors):
        raise ValueError("colours must be lower-case letters")
    n = len(colors)
    adjacency: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for u, v in edges:
        adjacency[u].append(v)
        indegree[v] += 1
    counts = [[0] * _ALPHABET for _ in range(n)]
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    best = 0
    processed = 0
    while queue:
        node = queue.popleft()
        processed += 1
        own = ord(colors[node]) - ord("a")
        counts[node][own] += 1
        best = max(best, counts[node][own])
        for target in adjacency[node]:
            indegree[target] -= 1
            counts[target] = [max(a, b) for a, b in zip(counts[target], counts[node])]
            if indegree[target] == 0:
                queue.append(target)
    return best if processed == n else -1


def min_reorder(n: int, connections: Iterable[Sequence[int]]) -> int:
    """Return how many roads of a tree must be reversed so every node reaches node 0.

    Each connection ``(a, b)`` is a one-way road from ``a`` to ``b``.
    """
    forward: list[list[int]] = [[] for _ in range(n)]
    backward: list[list[int]] = [[] for _ in range(n)]
    for a, b in connections:
        forward[a].append(b)
        backward[b].append(a)
    if n == 0:
        return 0
    visited = [False] * n
    visited[0] = True
    queue = deque([0])
    reversals = 0
    while queue:
        node = queue.popleft()
        for neighbour in forward[node]:
            if not visited[neighbour]:
                reversals += 1
                visited[neighbour] = True
                queue.append(neighbour)
        for neighbour in backward[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return reversals


def make_connected(n: int, connections: Iterable[Sequence[int]]) -> int:
    """Return the cable moves needed to connect all ``n`` computers, or -1 if impossible."""
    cables = list(connections)
    if len(cables) < n - 1:
        return -1
    components = DisjointSet(n)
    merges = sum(components.union(a, b) for a, b in cables)
    return n - merges - 1