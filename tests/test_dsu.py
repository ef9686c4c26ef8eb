import pytest

from dsakit.dsu import DisjointSet


def test_initially_each_element_is_its_own_root():
    dsu = DisjointSet(5)
    assert [dsu.find(i) for i in range(5)] == list(range(5))
    assert not dsu.connected(0, 1)


def test_union_connects():
    dsu = DisjointSet(4)
    assert dsu.union(0, 1) is True
    assert dsu.connected(0, 1)
    assert not dsu.connected(0, 2)


def test_union_is_transitive():
    dsu = DisjointSet(6)
    dsu.union(0, 1)
    dsu.union(1, 2)
    dsu.union(4, 5)
    assert dsu.connected(0, 2)
    assert not dsu.connected(2, 4)
    assert dsu.find(0) == dsu.find(1) == dsu.find(2)


def test_union_of_joined_elements_returns_false():
    dsu = DisjointSet(3)
    dsu.union(0, 2)
    assert dsu.union(2, 0) is False


def test_find_is_consistent_with_connected():
    dsu = DisjointSet(8)
    for a, b in [(0, 1), (2, 3), (1, 3), (5, 6)]:
        dsu.union(a, b)
    for a in range(8):
        for b in range(8):
            assert dsu.connected(a, b) == (dsu.find(a) == dsu.find(b))


def test_larger_set_keeps_its_root():
    dsu = DisjointSet(4)
    dsu.union(0, 1)
    root = dsu.find(0)
    dsu.union(2, 0)
    assert dsu.find(2) == root


def test_length():
    assert len(DisjointSet(7)) == 7


@pytest.mark.parametrize("element", [-1, 3, 10])
def test_out_of_range_raises(element):
    dsu = DisjointSet(3)
    with pytest.raises(IndexError):
        dsu.find(element)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)