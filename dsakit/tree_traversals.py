"""Traversals and views of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import NamedTuple, Optional

from dsakit.tree import TreeNode


class Orders(NamedTuple):
    """The three depth-first orders of a tree."""

    preorder: list[int]
    inorder: list[int]
    postorder: list[int]


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return values root first, then left subtree, then right subtree."""
    result = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)
    return result


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return values left subtree first, then root, then right subtree."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node or stack:
        if node:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.val)
            node = node.right
    return result


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Return values left subtree first, then right subtree, then root."""
    result = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left:
            stack.append(node.left)
        if node.right:
            stack.append(node.right)
    result.reverse()
    return result


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, top to bottom, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def all_orders(root: Optional[TreeNode]) -> Orders:
    """Compute preorder, inorder and postorder in a single stack pass."""
    orders = Orders([], [], [])
    stack = [(root, 1)] if root else []
    while stack:
        node, visit = stack.pop()
        if visit == 1:
            orders.preorder.append(node.val)
            stack.append((node, 2))
            if node.left:
                stack.append((node.left, 1))
        elif visit == 2:
            orders.inorder.append(node.val)
            stack.append((node, 3))
            if node.right:
                stack.append((node.right, 1))
        else:
            orders.postorder.append(node.val)
    return orders


def _rightmost_before(node: TreeNode, current: TreeNode) -> TreeNode:
    while node.right and node.right is not current:
        node = node.right
    return node


def morris_inorder(root: Optional[TreeNode]) -> list[int]:
    """Inorder traversal using temporary threads instead of a stack.

    The tree is restored to its original shape before returning.
    """
    result = []
    current = root
    while current:
        if not current.left:
            result.append(current.val)
            current = current.right
            continue
        previous = _rightmost_before(current.left, current)
        if previous.right is None:
            previous.right = current
            current = current.left
        else:
            previous.right = None
            result.append(current.val)
            current = current.right
    return result


def morris_preorder(root: Optional[TreeNode]) -> list[int]:
    """Preorder traversal using temporary threads instead of a stack.

    The tree is restored to its original shape before returning.
    """
    result = []
    current = root
    while current:
        if not current.left:
            result.append(current.val)
            current = current.right
            continue
        previous = _rightmost_before(current.left, current)
        if previous.right is None:
            result.append(current.val)
            previous.right = current
            current = current.left
        else:
            previous.right = None
            current = current.right
    return result


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return levels alternating left-to-right and right-to-left, starting left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def _leaves(root: TreeNode) -> list[int]:
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        if _is_leaf(node):
            result.append(node.val)
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)
    return result


def boundary_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the boundary anticlockwise: root, left edge, leaves, right edge upwards."""
    if root is None:
        return []
    result = [root.val]
    if _is_leaf(root):
        return result
    node = root.left
    while node:
        if not _is_leaf(node):
            result.append(node.val)
        node = node.left if node.left else node.right
    result.extend(_leaves(root))
    right_edge = []
    node = root.right
    while node and not _is_leaf(node):
        right_edge.append(node.val)
        node = node.right if node.right else node.left
    result.extend(reversed(right_edge))
    return result


def _with_columns(root: Optional[TreeNode]) -> Iterator[tuple[TreeNode, int]]:
    """Yield nodes breadth-first with their column offsets from the root."""
    queue = deque([(root, 0)] if root else [])
    while queue:
        node, column = queue.popleft()
        yield node, column
        if node.left:
            queue.append((node.left, column - 1))
        if node.right:
            queue.append((node.right, column + 1))


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Return each column's values in ascending order, columns left to right."""
    columns: dict[int, list[int]] = {}
    for node, column in _with_columns(root):
        columns.setdefault(column, []).append(node.val)
    return [sorted(columns[column]) for column in sorted(columns)]


def top_view(root: Optional[TreeNode]) -> list[int]:
    """Return the highest node of each column, columns left to right."""
    columns: dict[int, int] = {}
    for node, column in _with_columns(root):
        columns.setdefault(column, node.val)
    return [columns[column] for column in sorted(columns)]


def bottom_view(root: Optional[TreeNode]) -> list[int]:
    """Return the lowest node of each column, the later one on ties."""
    columns: dict[int, int] = {}
    for node, column in _with_columns(root):
        columns[column] = node.val
    return [columns[column] for column in sorted(columns)]


def _first_per_level(root: Optional[TreeNode], right_first: bool) -> list[int]:
    result: list[int] = []
    stack = [(root, 0)] if root else []
    while stack:
        node, level = stack.pop()
        if level == len(result):
            result.append(node.val)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        if second:
            stack.append((second, level + 1))
        if first:
            stack.append((first, level + 1))
    return result


def right_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level."""
    return _first_per_level(root, right_first=True)


def left_view(root: Optional[TreeNode]) -> list[int]:
    """Return the leftmost value of each level."""
    return _first_per_level(root, right_first=False)