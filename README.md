# algokit

A collection of classic algorithms and data structures in plain Python, with no runtime
dependencies.

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
| `algokit.heap` | `MinHeap` (bounded min-heap), `find_kth_largest_heap`, `find_kth_largest_heapify`, `make_max_heap`, `push_max_heap`, `pop_max_heap`, `heap_sort`, `heap_sort_iterative` |
| `algokit.dsu` | `DisjointSet`, `earliest_acquaintance`, `count_provinces` |
| `algokit.segment_tree` | `SumSegmentTree`, `IterativeSumSegmentTree`, `ParitySegmentTree` |
| `algokit.non_adjacent` | `NonAdjacentSumTree`, `maximum_sum_subsequence`, `maximum_sum_subsequence_flat` |
| `algokit.subsequences` | `longest_common_subsequence`, `longest_common_subsequence_table`, `longest_palindromic_subsequence` |
| `algokit.linked_list` | `ListNode`, `build_list`, `list_values`, `reverse_linked_list` |
| `algokit.arrays` | `majority_element`, `longest_subarray_within_limit`, `monotonic_stack`, `count_subarrays_with_sum`, `is_array_special`, `maximum_beauty`, `longest_equal_subarray` |
| `algokit.binary_search` | `lower_bound`, `upper_bound`, `search_answer` |
| `algokit.selection` | `find_kth_largest` (quickselect), `kth_smallest` (median of medians) |
| `algokit.knapsack` | `knapsack`, `knapsack_memo`, `knapsack_compact`, `number_of_ways`, `number_of_ways_memo` |
| `algokit.sorting` | `merge_sort`, `quick_sort`, `quick_sort_lomuto`, `radix_sort`, `height_checker` |
| `algokit.primes` | `is_prime`, `is_prime_6k`, `prime_factors`, `smallest_prime_factors`, `factorize`, `count_primes`, `count_primes_odd`, `count_primes_linear` |
| `algokit.graph_search` | `bfs`, `bfs_levels`, `dfs_iterative`, `dfs_recursive` |
| `algokit.topological` | `can_finish`, `topological_order` |
| `algokit.eulerian` | `valid_arrangement`, `find_itinerary` |
| `algokit.mst` | `min_cost_connect_points_kruskal`, `min_cost_connect_points_prim`, `min_cost_connect_points_dense` |
| `algokit.shortest_path` | `dijkstra`, `minimum_effort_path` |
| `algokit.trie` | `Trie`, `TrieNode`, `build_trie` |
| `algokit.binary_tree` | `TreeNode`, `tree_from_level_order`, `inorder`, `preorder`, `postorder`, `postorder_reversed`, `postorder_double_push`, `level_order`, `level_order_lists`, `morris_inorder`, `morris_inorder_destructive` |

Functions that take a sequence generally return a new list and leave the input alone;
`make_max_heap`, `push_max_heap` and `pop_max_heap` work on the list they are given, and
`morris_inorder_destructive` flattens the tree it walks. Invalid arguments raise
`ValueError` or `IndexError`.

## Examples

```python
from algokit.segment_tree import SumSegmentTree

tree = SumSegmentTree([1, 3, 5])
tree.sum_range(0, 2)   # 9
tree.update(1, 2)
tree.sum_range(0, 2)   # 8
```

```python
from algokit.dsu import DisjointSet

sets = DisjointSet(4)
sets.union(0, 1)       # True: two sets were joined
sets.union(1, 0)       # False: already in the same set
sets.find(1) == sets.find(0)
```

```python
from algokit.primes import count_primes, prime_factors

count_primes(10)       # 4
prime_factors(315)     # [3, 3, 5, 7]
```

```python
from algokit.binary_tree import tree_from_level_order, inorder, level_order

root = tree_from_level_order([1, None, 2, 3])
inorder(root)          # [1, 3, 2]
level_order(root)      # [[1], [2], [3]]
```

```python
from algokit.trie import Trie

trie = Trie()
trie.insert("apple")
trie.search("app")       # False
trie.starts_with("app")  # True
```

## What it does not do

algokit is a library only: it has no command-line program, and nothing in it reads or
writes files.