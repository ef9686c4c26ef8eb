"""Breadth- and depth-first searches over graphs and grids."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Mapping, Sequence

_KNIGHT_MOVES = (
    (-2, -1), (-1, -2), (-1, 2), (-2, 1),
    (1, -2), (2, -1), (2, 1), (1, 2),
)
_GRID_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def undirected_adjacency(edges: Iterable[Sequence[int]]) -> dict[int, list[int]]:
    """Build an adjacency mapping holding every edge in both directions."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return dict(adjacency)


def bfs_levels(adjacency: Mapping[int, Sequence[int]], start: int) -> list[tuple[int, int]]:
    """Return ``(node, level)`` pairs in breadth-first order from ``start``."""
    seen = {start}
    order: list[tuple[int, int]] = []
    frontier = [start]
    level = 0
    while frontier:
        upcoming = []
        for node in frontier:
            order.append((node, level))
            for neighbour in adjacency.get(node, ()):
                if neighbour not in seen:
                    seen.add(neighbour)
                    upcoming.append(neighbour)
        frontier = upcoming
        level += 1
    return order


def dfs_order(adjacency: Mapping[int, Sequence[int]], start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    seen = {start}
    order = [start]
    stack = [iter(adjacency.get(start, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in seen:
                seen.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency.get(neighbour, ())))
                break
        else:
            stack.pop()
    return order


def knight_min_steps(knight: Sequence[int], target: Sequence[int], n: int) -> int:
    """Return the fewest knight moves between two squares of an ``n`` by ``n`` board.

    Squares are numbered from 1. Raises ValueError if the target cannot be reached.
    """
    if n < 1:
        raise ValueError("board size must be positive")
    start = (knight[0], knight[1])
    goal = (target[0], target[1])
    for x, y in (start, goal):
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"square {(x, y)} lies off the board")
    seen = {start}
    frontier = [start]
    steps = 0
    while frontier:
        upcoming = []
        for square in frontier:
            if square == goal:
                return steps
            x, y = square
            for dx, dy in _KNIGHT_MOVES:
                nxt = (x + dx, y + dy)
                if 1 <= nxt[0] <= n and 1 <= nxt[1] <= n and nxt not in seen:
                    seen.add(nxt)
                    upcoming.append(nxt)
        frontier = upcoming
        steps += 1
    raise ValueError("target square is unreachable")


def flood_fill(image: Sequence[Sequence[int]], row: int, col: int, color: int) -> list[list[int]]:
    """Return a copy of ``image`` with the region around ``(row, col)`` recoloured."""
    result = [list(line) for line in image]
    if not (0 <= row < len(result) and 0 <= col < len(result[row])):
        raise IndexError(f"pixel {(row, col)} out of range")
    original = result[row][col]
    if original == color:
        return result
    result[row][col] = color
    queue = deque([(row, col)])
    while queue:
        r, c = queue.popleft()
        for dr, dc in _GRID_STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < len(result) and 0 <= nc < len(result[nr]) and result[nr][nc] == original:
                result[nr][nc] = color
                queue.append((nr, nc))
    return result


def wells_distances(grid: Sequence[Sequence[str]]) -> list[list[int]]:
    """Return, for each house ``'H'``, twice the steps to the nearest well ``'W'``.

    Cells marked ``'N'`` cannot be crossed, and neither can wells other than
    as starting points. Unreachable houses get -1; every other cell gets 0.
    """
    distances = [[-1 if cell == "H" else 0 for cell in line] for line in grid]
    frontier = [
        (r, c)
        for r, line in enumerate(grid)
        for c, cell in enumerate(line)
        if cell == "W"
    ]
    seen = set(frontier)
    depth = 0
    while frontier:
        depth += 1
        upcoming = []
        for r, c in frontier:
            for dr, dc in _GRID_STEPS:
                nr, nc = r + dr, c + dc
                if not (0 <= nr < len(grid) and 0 <= nc < len(grid[nr])):
                    continue
                if (nr, nc) in seen:
                    continue
                seen.add((nr, nc))
                cell = grid[nr][nc]
                if cell in ("N", "W"):
                    continue
                if cell == "H":
                    distances[nr][nc] = depth * 2
                upcoming.append((nr, nc))
        frontier = upcoming
    return distances


def connected_components(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the components of an undirected graph on nodes ``0 .. n - 1``.

    Components are listed by their smallest node, each in breadth-first order.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    visited = [False] * n
    components = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        component = []
        queue = deque([root])
        while queue:
            node = queue.popleft()
            component.append(node)
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        components.append(component)
    return components


def min_dice_rolls(board: Sequence[int]) -> int:
    """Return the fewest die rolls from the first to the last square, or -1.

    ``board`` lists the squares in play order; each entry is -1 for a plain
    square, or the 1-based square a snake or ladder there leads to.
    """
    if not board:
        raise ValueError("board must not be empty")
    last = len(board) - 1
    if last == 0:
        return 0
    seen = {0}
    frontier = [0]
    rolls = 0
    while frontier:
        rolls += 1
        upcoming = []
        for square in frontier:
            for step in range(1, 7):
                landing = square + step
                if landing > last:
                    break
                dest = landing if board[landing] == -1 else board[landing] - 1
                if not 0 <= dest <= last:
                    raise ValueError(f"square {landing + 1} leads off the board")
                if dest in seen:
                    continue
                if dest == last:
                    return rolls
                seen.add(dest)
                upcoming.append(dest)
        frontier = upcoming
    return -1