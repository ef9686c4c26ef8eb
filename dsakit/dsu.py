"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class DisjointSet:
    """A partition of the integers ``0 .. n - 1`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, a: int) -> None:
        if not 0 <= a < len(self._parent):
            raise IndexError(f"element {a} out of range")

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        self._check(a)
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``; return False if already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] > self._size[root_b]:
            self._size[root_a] += self._size[root_b]
            self._parent[root_b] = root_a
        else:
            self._size[root_b] += self._size[root_a]
            self._parent[root_a] = root_b
        return True

    def connected(self, a: int, b: int) -> bool:
        """Tell whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)