import pytest

from dsakit.tree import (
    TreeNode,
    build_from_preorder_inorder,
    deserialize,
    from_level_order,
    serialize,
)

SHAPES = [
    [1],
    [1, 2, 3],
    [1, 2, 3, None, 4],
    [3, 9, 20, None, None, 15, 7],
    [1, None, 2, None, 3, None, 4],
    [5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1],
    [-3, -7, 0],
]


def _collect(node):
    if node is None:
        return []
    return [node.val, *_collect(node.left), *_collect(node.right)]


def _inorder(node):
    if node is None:
        return []
    return [*_inorder(node.left), node.val, *_inorder(node.right)]


def test_from_level_order_empty():
    assert from_level_order([]) is None
    assert from_level_order([None, 1]) is None


def test_from_level_order_shape():
    root = from_level_order([1, 2, 3, None, 4])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None
    assert root.left.right.val == 4
    assert root.right.left is None and root.right.right is None


def test_serialize_format():
    assert serialize(from_level_order([1, 2, 3])) == "1,2,3,#,#,#,#,"


def test_serialize_empty_tree():
    assert serialize(None) == "#,"
    assert deserialize("#,") is None


@pytest.mark.parametrize("values", SHAPES)
def test_round_trip(values):
    tree = from_level_order(values)
    text = serialize(tree)
    rebuilt = deserialize(text)
    assert serialize(rebuilt) == text
    assert _collect(rebuilt) == _collect(tree)


def test_deserialize_missing_tail_tokens():
    assert serialize(deserialize("1,2,#")) == "1,2,#,#,#,"


def test_deserialize_errors():
    with pytest.raises(ValueError):
        deserialize("")
    with pytest.raises(ValueError):
        deserialize("1,a,#,")


def test_build_known_tree():
    rebuilt = build_from_preorder_inorder([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
    expected = from_level_order([3, 9, 20, None, None, 15, 7])
    assert serialize(rebuilt) == serialize(expected)


def test_build_empty():
    assert build_from_preorder_inorder([], []) is None


def test_build_errors():
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [1])
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [1, 3])
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 1], [1, 1])


def test_nodes_compare_by_identity():
    node = TreeNode(1)
    assert (node == node) is True
    assert (TreeNode(1) == TreeNode(1)) is False