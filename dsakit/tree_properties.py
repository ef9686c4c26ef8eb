"""Measurements, comparisons and reshaping of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from dsakit.tree import TreeNode


def _children(node: TreeNode) -> Iterator[TreeNode]:
    if node.left:
        yield node.left
    if node.right:
        yield node.right


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree."""
    depth = 0
    level = [root] if root else []
    while level:
        depth += 1
        level = [child for node in level for child in _children(node)]
    return depth


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def height(node: Optional[TreeNode]) -> int:
        if node is None:
            return 0
        left = height(node.left)
        if left < 0:
            return -1
        right = height(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    return height(root) >= 0


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values along any non-empty path."""
    if root is None:
        raise ValueError("tree must not be empty")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, left + right + node.val)
        return node.val + max(left, right)

    gain(root)
    return best


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrors(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None or q is None:
        return p is q
    return p.val == q.val and _mirrors(p.left, q.right) and _mirrors(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    return root is None or _mirrors(root.left, root.right)


def path_to(root: Optional[TreeNode], value: int) -> list[int]:
    """Return the values from the root down to the first node holding ``value``.

    Raises ValueError if no node holds the value.
    """
    path: list[int] = []

    def search(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == value or search(node.left) or search(node.right):
            return True
        path.pop()
        return False

    if not search(root):
        raise ValueError(f"value {value} not in tree")
    return path


def root_to_leaf_paths(root: Optional[TreeNode]) -> list[list[int]]:
    """Return every root-to-leaf path, leaves from left to right."""
    paths: list[list[int]] = []
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        path.append(node.val)
        if node.left is None and node.right is None:
            paths.append(list(path))
        walk(node.left)
        walk(node.right)
        path.pop()

    walk(root)
    return paths


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` as descendants (or itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def max_width(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting the gaps between its end nodes."""
    best = 0
    level = [(root, 0)] if root else []
    while level:
        start = level[0][1]
        best = max(best, level[-1][1] - start + 1)
        upcoming = []
        for node, index in level:
            index -= start
            if node.left:
                upcoming.append((node.left, 2 * index))
            if node.right:
                upcoming.append((node.right, 2 * index + 1))
        level = upcoming
    return best


def has_children_sum_property(root: Optional[TreeNode]) -> bool:
    """Tell whether every inner node equals the sum of its children."""
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        children = list(_children(node))
        if children and node.val != sum(child.val for child in children):
            return False
        stack.extend(children)
    return True


def make_children_sum(root: Optional[TreeNode]) -> None:
    """Raise values in place until every inner node equals the sum of its children."""
    if root is None:
        return
    child_total = sum(child.val for child in _children(root))
    if root.val <= child_total:
        root.val = child_total
    elif root.left:
        root.left.val = root.val
    elif root.right:
        root.right.val = root.val
    make_children_sum(root.left)
    make_children_sum(root.right)
    children = list(_children(root))
    if children:
        root.val = sum(child.val for child in children)


def count_complete_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete tree faster than visiting each one."""
    if root is None:
        return 0
    left_height = right_height = 0
    node: Optional[TreeNode] = root
    while node:
        left_height += 1
        node = node.left
    node = root
    while node:
        right_height += 1
        node = node.right
    if left_height == right_height:
        return 2**left_height - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)


def _parents(root: Optional[TreeNode]) -> dict[TreeNode, Optional[TreeNode]]:
    parents: dict[TreeNode, Optional[TreeNode]] = {}
    if root is None:
        return parents
    parents[root] = None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for child in _children(node):
            parents[child] = node
            queue.append(child)
    return parents


def _spread(
    start: TreeNode, parents: dict[TreeNode, Optional[TreeNode]]
) -> Iterator[list[TreeNode]]:
    """Yield the nodes at distance 0, 1, 2, ... from ``start``, parent first."""
    seen = {start}
    level = [start]
    while level:
        yield level
        upcoming = []
        for node in level:
            for neighbour in (parents.get(node), node.left, node.right):
                if neighbour is not None and neighbour not in seen:
                    seen.add(neighbour)
                    upcoming.append(neighbour)
        level = upcoming


def nodes_at_distance(root: Optional[TreeNode], target: TreeNode, k: int) -> list[int]:
    """Return the values of nodes exactly ``k`` edges away from ``target``."""
    if k < 0:
        raise ValueError("distance must not be negative")
    for distance, level in enumerate(_spread(target, _parents(root))):
        if distance == k:
            return [node.val for node in level]
    return []


def burn_time(root: Optional[TreeNode], target: int) -> int:
    """Return the steps for fire started at the node valued ``target`` to reach every node."""
    if root is None:
        return 0
    parents = _parents(root)
    start = next((node for node in parents if node.val == target), None)
    if start is None:
        raise ValueError(f"value {target} not in tree")
    return sum(1 for _ in _spread(start, parents)) - 1


def flatten(root: Optional[TreeNode]) -> None:
    """Rearrange the tree in place into a right-leaning chain in preorder."""
    current = root
    while current:
        if current.left:
            tail = current.left
            while tail.right:
                tail = tail.right
            tail.right = current.right
            current.right = current.left
            current.left = None
        current = current.right