"""Binary tree nodes and ways to build and encode them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

_EMPTY = "#"
_SEPARATOR = ","


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def serialize(root: Optional[TreeNode]) -> str:
    """Encode a tree level by level as comma-terminated values, ``#`` for empty."""
    parts: list[str] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append(_EMPTY)
        else:
            parts.append(str(node.val))
            queue.append(node.left)
            queue.append(node.right)
    return "".join(part + _SEPARATOR for part in parts)


def _decode(token: str) -> Optional[TreeNode]:
    if token == _EMPTY:
        return None
    try:
        return TreeNode(int(token))
    except ValueError:
        raise ValueError(f"invalid node value {token!r}") from None


def deserialize(data: str) -> Optional[TreeNode]:
    """Rebuild a tree from the text that :func:`serialize` produces.

    Tokens missing at the end are taken as empty children.
    """
    if not data:
        raise ValueError("encoded tree must not be empty")
    tokens = data.split(_SEPARATOR)
    if tokens[-1] == "":
        tokens.pop()
    stream = iter(tokens)
    root = _decode(next(stream, _EMPTY))
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left = _decode(next(stream, _EMPTY))
        if node.left is not None:
            queue.append(node.left)
        node.right = _decode(next(stream, _EMPTY))
        if node.right is not None:
            queue.append(node.right)
    return root


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder sequences."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals must have the same length")
    position = {value: index for index, value in enumerate(inorder)}
    if len(position) != len(inorder):
        raise ValueError("values must be distinct")
    if set(preorder) != set(position):
        raise ValueError("traversals must hold the same values")

    def build(pre_lo: int, pre_hi: int, in_lo: int, in_hi: int) -> Optional[TreeNode]:
        if pre_lo > pre_hi or in_lo > in_hi:
            return None
        node = TreeNode(preorder[pre_lo])
        root_index = position[node.val]
        if not in_lo <= root_index <= in_hi:
            raise ValueError("traversals do not describe the same tree")
        left_size = root_index - in_lo
        node.left = build(pre_lo + 1, pre_lo + left_size, in_lo, root_index - 1)
        node.right = build(pre_lo + left_size + 1, pre_hi, root_index + 1, in_hi)
        return node

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)