# algopractice

Small, self-contained implementations of classic data-structure and
algorithm exercises. The functions take plain Python values such as lists,
strings and tuples. Most of them return a new result and leave their input
unchanged. A few work in place, and this is stated below.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algopractice.arrays` | `reverse_array`, `rotate_right`, `min_max`, `shift_negatives_left`, `plus_one`, `max_subarray_sum`, `union_sorted`, `intersection_sorted`, `windows_with_sum` |
| `algopractice.searching` | `binary_search`, `rotated_search`, `first_occurrence`, `last_occurrence`, `frequency`, `can_place_birds`, `max_min_separation`, `square_root`, `partition`, `quickselect` |
| `algopractice.sorting` | `merge_sort`, `quick_sort`, `count_inversions`, `count_inversions_brute`, `heap_ordered`, `sort_012`, `smallest_concatenation` |
| `algopractice.patterns` | `star_triangle`, `right_aligned_triangle`, `pyramid`, `number_rows`, `number_sequence`, `letter_rows`, `letter_sequence`, `fizzbuzz`, `fibonacci_series`, `digital_time` |
| `algopractice.strings` | `is_balanced`, `has_redundant_parentheses`, `is_palindrome`, `is_subsequence` |
| `algopractice.counting` | `Car`, `count_rectangles`, `count_right_triangles`, `count_gp_triplets`, `longest_band`, `nearest_cars`, `min_rope_cost` |
| `algopractice.ladder` | `count_ways`, `count_ways_memo`, `count_ways_dp` |
| `algopractice.linked_list` | `Node`, `LinkedList`, `merge_sorted` |
| `algopractice.graph` | `Graph`, `WeightedGraph` |
| `algopractice.tree` | `TreeNode`, `NULL_MARKER`, `build_preorder`, `build_level_order`, `levels`, `level_order_text`, `height`, `diameter`, `diameter_fast`, `is_height_balanced`, `replace_with_descendant_sum`, `preorder`, `inorder`, `postorder` |

## Behaviour worth knowing

- The search functions `binary_search`, `rotated_search`, `first_occurrence`
  and `last_occurrence` return `None` when the key is absent.
  `max_min_separation` also returns `None` when the birds cannot be placed at
  all.
- `min_max`, `max_subarray_sum`, `plus_one` and `longest_band` raise
  `ValueError` when given no values. `quickselect` raises `IndexError` when
  `k` is out of range.
- `searching.partition` rearranges the list it is given, in place.
- `LinkedList.insert` and `LinkedList.sort` change the list they are called
  on. `tree.replace_with_descendant_sum` rewrites the tree it is given.
- `Graph` and `WeightedGraph` raise `IndexError` for a vertex outside
  `0 .. vertices - 1`.
- The pattern functions return lists of lines. They do not print anything.

## Examples

```python
from algopractice.searching import rotated_search
from algopractice.sorting import count_inversions
from algopractice.strings import is_balanced
from algopractice.ladder import count_ways_dp

rotated_search([4, 5, 6, 7, 0, 1, 2, 3], 1)   # index of 1
count_inversions([0, 5, 2, 3, 1])
is_balanced("{ a + (b+c) + ([d+e]*f)) } + k")
count_ways_dp(4, 3)
```

Graphs keep an adjacency list per vertex:

```python
from algopractice.graph import Graph

g = Graph(7)
for u, v in [(0, 1), (1, 2), (2, 3), (3, 5), (5, 6), (4, 5), (0, 4), (3, 4)]:
    g.add_edge(u, v)
g.bfs(1)
g.dfs(1)
g.adjacency_lines()
```

Binary trees can be built from the usual token streams, in which `-1` marks a
missing child. The tokens can be given as integers or as a
whitespace-separated string:

```python
from algopractice.tree import build_preorder, level_order_text, diameter

root = build_preorder("1 2 4 -1 -1 5 7 -1 -1 -1 3 -1 6 -1 -1")
print(level_order_text(root))
diameter(root)
```

Linked lists support iteration, `len`, positional insertion and merge sort:

```python
from algopractice.linked_list import LinkedList

items = LinkedList([14, 2, 17, 1, 5, 7, 10])
items.sort()
list(items)
str(items)   # "1-->2-->5-->7-->10-->14-->17-->"
```

## What it does not do

The package is a library only. It has no command-line programs and it does
not read input from standard input. Call the functions from Python code or
from a REPL.