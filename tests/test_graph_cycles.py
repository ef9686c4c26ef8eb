import random
from itertools import combinations

import pytest

from dsakit.dsu import DisjointSet
from dsakit.graph_cycles import (
    eventual_safe_nodes,
    has_directed_cycle,
    has_undirected_cycle,
    longest_cycle,
)


def test_undirected_tree_has_no_cycle():
    assert not has_undirected_cycle(5, [(0, 1), (1, 2), (1, 3), (3, 4)])


def test_undirected_triangle_has_cycle():
    assert has_undirected_cycle(4, [(0, 1), (1, 2), (2, 0)])


def test_undirected_self_loop_is_cycle():
    assert has_undirected_cycle(2, [(1, 1)])


def test_undirected_cycle_in_second_component():
    assert has_undirected_cycle(6, [(0, 1), (3, 4), (4, 5), (5, 3)])


@pytest.mark.parametrize("seed", range(12))
def test_undirected_matches_union_find(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 9)
    pairs = list(combinations(range(n), 2))
    edges = rng.sample(pairs, rng.randint(0, len(pairs)))
    dsu = DisjointSet(n)
    merged = [dsu.union(u, v) for u, v in edges]
    assert has_undirected_cycle(n, edges) == (not all(merged))


def test_directed_dag_has_no_cycle():
    assert not has_directed_cycle(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


def test_directed_cycle_found():
    assert has_directed_cycle(4, [(0, 1), (1, 2), (2, 3), (3, 1)])


def test_directed_self_loop():
    assert has_directed_cycle(3, [(0, 1), (2, 2)])


@pytest.mark.parametrize("seed", range(12))
def test_forward_edges_are_acyclic_and_safe(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 9)
    pairs = list(combinations(range(n), 2))
    edges = rng.sample(pairs, rng.randint(0, len(pairs)))
    assert not has_directed_cycle(n, edges)
    adjacency = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
    assert eventual_safe_nodes(adjacency) == list(range(n))


@pytest.mark.parametrize("seed", range(15))
def test_cycle_iff_some_node_unsafe(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 8)
    edges = [(rng.randrange(n), rng.randrange(n)) for _ in range(rng.randint(0, 2 * n))]
    adjacency = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
    safe = eventual_safe_nodes(adjacency)
    assert has_directed_cycle(n, edges) == (safe != list(range(n)))
    safe_set = set(safe)
    for node in range(n):
        if node in safe_set:
            assert all(nxt in safe_set for nxt in adjacency[node])
        else:
            assert any(nxt not in safe_set for nxt in adjacency[node])


def test_eventual_safe_worked_example():
    graph = [[1, 2], [2, 3], [5], [0], [5], [], []]
    assert eventual_safe_nodes(graph) == [2, 4, 5, 6]


def test_longest_cycle_worked_example():
    assert longest_cycle([3, 3, 4, 2, 3]) == 3


def test_longest_cycle_none():
    assert longest_cycle([2, -1, 3, 1]) == -1


@pytest.mark.parametrize("lengths", [[4], [3, 5, 2], [1, 1, 6], [2, 2]])
def test_longest_cycle_of_permutation(lengths):
    rng = random.Random(sum(lengths))
    n = sum(lengths)
    labels = list(range(n))
    rng.shuffle(labels)
    edges = [-1] * n
    offset = 0
    for length in lengths:
        members = labels[offset:offset + length]
        for i, node in enumerate(members):
            edges[node] = members[(i + 1) % length]
        offset += length
    assert longest_cycle(edges) == max(lengths)
    tails = edges + [labels[0], n, n + 1]
    assert longest_cycle(tails) == max(lengths)