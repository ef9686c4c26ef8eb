import pytest

from dsakit.tree import deserialize, from_level_order, serialize
from dsakit.tree_properties import (
    burn_time,
    count_complete_nodes,
    diameter,
    flatten,
    has_children_sum_property,
    is_balanced,
    is_same_tree,
    is_symmetric,
    lowest_common_ancestor,
    make_children_sum,
    max_depth,
    max_path_sum,
    max_width,
    nodes_at_distance,
    path_to,
    root_to_leaf_paths,
)
from dsakit.tree_traversals import level_order, preorder

SAMPLE = [1, 2, 3, 4, 5, None, 6, None, None, 7]


@pytest.fixture
def sample():
    return from_level_order(SAMPLE)


def _find(root, value):
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if node.val == value:
            return node
        stack.extend((node.left, node.right))
    raise LookupError(value)


def _chain():
    return from_level_order([1, 2, None, 3, None, 4])


def test_max_depth_matches_level_count(sample):
    assert max_depth(sample) == len(level_order(sample))
    assert max_depth(None) == 0


def test_is_balanced():
    assert is_balanced(None) is True
    assert is_balanced(from_level_order([1, 2, 3, 4, 5, 6, 7])) is True
    assert is_balanced(from_level_order([1, 2, None, 3])) is False


def test_diameter_of_chain_is_its_length():
    chain = _chain()
    assert diameter(chain) == len(path_to(chain, 4)) - 1
    assert diameter(None) == 0


def test_max_path_sum():
    assert max_path_sum(from_level_order([-3, -1, -2])) == -1
    tree = from_level_order([1, 2, 3])
    assert max_path_sum(tree) == sum(preorder(tree))
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_is_same_tree(sample):
    assert is_same_tree(sample, deserialize(serialize(sample)))
    assert is_same_tree(None, None)
    assert not is_same_tree(sample, None)
    other = deserialize(serialize(sample))
    _find(other, 7).val = 8
    assert not is_same_tree(sample, other)


def test_is_symmetric():
    assert is_symmetric(from_level_order([1, 2, 2, 3, 4, 4, 3]))
    assert not is_symmetric(from_level_order([1, 2, 2, None, 3, None, 3]))
    assert is_symmetric(None)


def test_path_to(sample):
    assert path_to(sample, 7) == [1, 2, 5, 7]
    assert path_to(sample, 1) == [1]
    with pytest.raises(ValueError):
        path_to(sample, 99)


def test_root_to_leaf_paths(sample):
    paths = root_to_leaf_paths(sample)
    assert paths == [[1, 2, 4], [1, 2, 5, 7], [1, 3, 6]]
    for path in paths:
        leaf = _find(sample, path[-1])
        assert leaf.left is None and leaf.right is None
        assert path_to(sample, path[-1]) == path
    assert root_to_leaf_paths(None) == []


def test_lowest_common_ancestor(sample):
    four, seven, two = _find(sample, 4), _find(sample, 7), _find(sample, 2)
    assert lowest_common_ancestor(sample, four, seven) is two
    assert lowest_common_ancestor(sample, two, seven) is two
    assert lowest_common_ancestor(sample, seven, _find(sample, 6)) is sample


def test_max_width():
    assert max_width(from_level_order([1, 3, 2, 5, 3, None, 9])) == 4
    full = from_level_order([1, 2, 3, 4, 5, 6, 7])
    assert max_width(full) == len(level_order(full)[-1])
    assert max_width(None) == 0


def test_children_sum_property():
    tree = from_level_order([10, 4, 6, 1, 3, 2, 4])
    assert has_children_sum_property(tree)
    assert has_children_sum_property(None)
    _find(tree, 3).val = 5
    assert not has_children_sum_property(tree)


def test_make_children_sum(sample):
    make_children_sum(sample)
    assert has_children_sum_property(sample)


def test_make_children_sum_keeps_valid_tree():
    tree = from_level_order([10, 4, 6, 1, 3, 2, 4])
    before = serialize(tree)
    make_children_sum(tree)
    assert serialize(tree) == before


@pytest.mark.parametrize("size", range(16))
def test_count_complete_nodes(size):
    tree = from_level_order(list(range(1, size + 1)))
    assert count_complete_nodes(tree) == size


def test_nodes_at_distance():
    root = from_level_order([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
    target = _find(root, 5)
    assert sorted(nodes_at_distance(root, target, 2)) == [1, 4, 7]
    assert nodes_at_distance(root, target, 0) == [5]
    assert nodes_at_distance(root, target, 50) == []
    with pytest.raises(ValueError):
        nodes_at_distance(root, target, -1)


def test_burn_time(sample):
    assert burn_time(sample, 1) == max_depth(sample) - 1
    assert burn_time(sample, 7) == 5
    chain = _chain()
    assert burn_time(chain, 4) == max_depth(chain) - 1
    assert burn_time(None, 1) == 0
    with pytest.raises(ValueError):
        burn_time(sample, 42)


def test_flatten_keeps_preorder(sample):
    expected = preorder(sample)
    flatten(sample)
    values = []
    node = sample
    while node:
        assert node.left is None
        values.append(node.val)
        node = node.right
    assert values == expected