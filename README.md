# algobox

A library of classic algorithms and data structures in plain Python, with no
third-party dependencies. Every routine takes ordinary Python values (lists,
strings, integers) and returns a result. Nothing is printed. Invalid input
raises `ValueError`, `IndexError` or `KeyError` as fits the case.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algobox.arrays` covers array problems:
  - `three_sum`, `four_sum`
  - `find_disappeared_numbers`, `first_missing_positive`
  - `has_pythagorean_triplet`, `search_rotated`
  - `trap_rain_water`
  - `sort_012` (one pass), `sort_012_counting`
  - `equilibrium_position`, `subarray_with_sum`
  - `reverse_in_groups`, `buy_sell_days`
  - `kth_smallest` (randomised quickselect)
- `algobox.matrix` covers grid problems:
  - `rotate_clockwise`, `rotate_anticlockwise` (square matrices, new lists returned)
  - `unique_paths_with_obstacles`
  - `count_regions` (4-connected regions of 1s)
- `algobox.dynamic` covers dynamic programming:
  - `knapsack` returns the best profit and the indices of the items taken
  - `tiling`, `staircase`, `painting_fence`
  - `max_subarray_sum`, `max_non_adjacent_sum`
  - `max_increasing_subsequence_sum`, `longest_increasing_subsequence`
  - `fibonacci_mod` (modulo 1e9+7), `can_reach_target`, `pascal_row`
- `algobox.number_theory` provides `coprimes`, `coprimes_by_divisors`,
  `fast_power` and `prime_sum`.
- `algobox.streams` provides `RunningMedian`, a two-heap median tracker whose
  `add` returns the current median, and `running_medians`.
- `algobox.backtracking` provides `permutations` and `subsets`.
- `algobox.strings` provides `StringBuilder`, a string held as pieces with
  `concat` (also `+`) and KMP-based `find`, and `kth_in_custom_order`.
- `algobox.graphs` provides the directed `Graph` class and two functions:
  - `Graph` offers `add_edge`, `dfs_order`, `hamiltonian_paths` (a generator),
    `strongly_connected_count`, `topological_order` (depth-first) and
    `topological_order_kahn` (smallest ready vertex first).
  - `count_cycle_edges` and `even_forest`.
- `algobox.linked` provides `RandomListNode` and `copy_random_list`.
- `algobox.hashmap` provides `ChainedHashMap` (`insert`, `delete`, `search`,
  `items`) for int and str keys, and the hash functions `int_hash` and
  `string_hash`.
- `algobox.trees` covers binary trees:
  - `TreeNode`, `build_level_order`
  - `build_bst`, `bst_insert`, `bst_delete`, `is_bst`
  - `find_level`, `mirror`, `top_view`
  - `inorder`, `preorder`, `postorder`
- `algobox.dynarray` provides `DynamicArray`, a growable array with `append`,
  `pop`, `insert`, `erase`, `front`, `back` and a visible `capacity`.
- `algobox.contests_a`, `algobox.contests_b` and `algobox.contests_c` hold
  solutions to programming-contest problems, each a single function.

## Examples

```python
from algobox.arrays import trap_rain_water, three_sum
from algobox.dynamic import knapsack
from algobox.graphs import Graph

trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
three_sum([-1, 0, 1, 2, -1, -4])                          # [[-1, -1, 2], [-1, 0, 1]]

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.topological_order()                                     # [0, 1, 2, 3]
```

```python
from algobox.strings import StringBuilder

text = StringBuilder("hello").concat(StringBuilder("world"))
text.find("owo")                                          # 4
str(text + "!")                                           # 'helloworld!'
```

## What it does not do

The package is a library only: it has no command-line program, and it does
not read problem input from standard input or write answers out. There is no
trie or prefix-counting structure among its modules.