# dsakit

A collection of classic algorithm and data-structure routines in plain Python,
with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.search` | `binary_search`, `search_descending`, `lower_bound`, `upper_bound`, `count_occurrences`, `rotation_count`, `search_rotated` |
| `dsakit.windows` | `max_window_sum`, `first_negatives`, `count_anagrams` |
| `dsakit.dp` | `longest_common_subsequence` |
| `dsakit.contests` | `beer_answers`, `cursed_arrangement`, `max_nourishment`, `permutation_with_ends`, `pair_constant_sums`, `make_zero_operations` |
| `dsakit.dsu` | `DisjointSet` with `find`, `union`, `connected` and `len()` |
| `dsakit.graph_search` | `undirected_adjacency`, `bfs_levels`, `dfs_order`, `knight_min_steps`, `flood_fill`, `wells_distances`, `connected_components`, `min_dice_rolls` |
| `dsakit.graph_cycles` | `has_undirected_cycle`, `has_directed_cycle`, `eventual_safe_nodes`, `longest_cycle` |
| `dsakit.graph_order` | `topological_sort`, `topological_sort_dfs`, `find_course_order`, `largest_path_value`, `min_reorder`, `make_connected` |
| `dsakit.shortest_paths` | `dijkstra`, `minimum_effort_path`, `bellman_ford`, `floyd_warshall`, `NegativeCycleError` |
| `dsakit.tree` | `TreeNode`, `from_level_order`, `serialize`, `deserialize`, `build_from_preorder_inorder` |
| `dsakit.tree_traversals` | `preorder`, `inorder`, `postorder`, `level_order`, `all_orders` (returns an `Orders` named tuple), `morris_inorder`, `morris_preorder`, `zigzag_level_order`, `boundary_traversal`, `vertical_traversal`, `top_view`, `bottom_view`, `right_view`, `left_view` |
| `dsakit.tree_properties` | `max_depth`, `is_balanced`, `diameter`, `max_path_sum`, `is_same_tree`, `is_symmetric`, `path_to`, `root_to_leaf_paths`, `lowest_common_ancestor`, `max_width`, `has_children_sum_property`, `make_children_sum`, `count_complete_nodes`, `nodes_at_distance`, `burn_time`, `flatten` |

Errors are raised as exceptions: bad arguments give `ValueError` or
`IndexError`, and `bellman_ford` raises `NegativeCycleError` (a `ValueError`)
when a negative cycle is reachable from the source. A few functions keep the
conventional sentinel results instead, such as `search_descending` and
`search_rotated` returning -1 for a missing target, or `find_course_order`
returning an empty list when no order exists.

## Examples

Searching a sorted list:

```python
from dsakit.search import lower_bound, upper_bound, count_occurrences

items = [1, 2, 2, 2, 5]
lower_bound(items, 2)        # 1, the first index holding a value >= 2
upper_bound(items, 2)        # 3, the last index holding a value <= 2
count_occurrences(items, 2)  # 3
```

Sliding windows:

```python
from dsakit.windows import max_window_sum, count_anagrams

max_window_sum([2, 3, 5, 2, 9, 7, 1], 3)   # 18
count_anagrams("for", "forxxorfxdofr")     # 3
```

Union-find:

```python
from dsakit.dsu import DisjointSet

ds = DisjointSet(5)
ds.union(0, 1)      # True, the sets were merged
ds.connected(0, 1)  # True
```

Shortest paths:

```python
from dsakit.shortest_paths import dijkstra, bellman_ford, NegativeCycleError

dijkstra(3, [[0, 1, 1], [1, 2, 3], [0, 2, 6]], 0)  # [0, 1, 4]

try:
    bellman_ford(2, [[0, 1, -1], [1, 0, -1]], 0)
except NegativeCycleError:
    ...
```

Unreachable nodes get `math.inf` from `dijkstra` and `bellman_ford`.

Binary trees are built from level-order lists, where `None` marks a missing
child:

```python
from dsakit.tree import from_level_order, serialize, deserialize
from dsakit.tree_traversals import inorder, level_order
from dsakit.tree_properties import max_depth, is_same_tree

root = from_level_order([3, 9, 20, None, None, 15, 7])
inorder(root)      # [9, 3, 15, 20, 7]
level_order(root)  # [[3], [9, 20], [15, 7]]
max_depth(root)    # 3

text = serialize(root)            # "3,9,20,#,#,15,7,#,#,#,#,"
is_same_tree(root, deserialize(text))  # True
```

`TreeNode` objects compare by identity; use `is_same_tree` to compare shape
and values.

## What it does not do

`dsakit` is a library only. It installs no command-line program and reads no
input of its own; the contest routines in `dsakit.contests` take their inputs
as Python values and return their answers rather than printing them.