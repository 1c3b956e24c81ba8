# algokit

A small collection of classic algorithm exercises written as plain Python
functions and classes. It has no runtime dependencies.

## Installation

```
pip install .
pip install ".[test]"   # with the test tools
```

## Modules

- `algokit.linked_list`: `ListNode` (iterable over its values), `from_values`,
  `to_values`, `swap_nodes`, `reverse_list`, `merge_two_lists`, `merge_k_lists`
- `algokit.bst`: `Node`, `insert`, `preorder`, `DuplicateValueError`
- `algokit.tree`: `TreeNode`, `width_of_binary_tree`
- `algokit.graph`: `valid_path`, `all_paths_source_target`
- `algokit.grid`: `shortest_path_binary_matrix`, `spiral_order`
- `algokit.sliding_window`: `max_sliding_window`, `max_sliding_window_brute`
- `algokit.stack`: `remove_k_digits`, `merge_intervals`
- `algokit.greedy`: `group_the_people`, `largest_number`,
  `monotone_increasing_digits`, `monotone_increasing_digits_brute`
- `algokit.heaps`: `last_stone_weight`
- `algokit.strings`: `longest_common_prefix`, `find_the_difference`,
  `unique_morse_representations`, `zigzag_convert`
- `algokit.geometry`: `SubrectangleQueries`, `count_points`, `projection_area`

## Examples

```python
from algokit.linked_list import from_values, merge_k_lists, to_values
from algokit.grid import spiral_order
from algokit.strings import zigzag_convert
from algokit.greedy import largest_number

lists = [from_values([1, 4, 5]), from_values([1, 3, 4]), from_values([2, 6])]
to_values(merge_k_lists(lists))          # [1, 1, 2, 3, 4, 4, 5, 6]

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # [1, 2, 3, 6, 9, 8, 7, 4, 5]
zigzag_convert("PAYPALISHIRING", 3)      # "PAHNAPLSIIGYIR"
largest_number([3, 30, 34, 5, 9])        # "9534330"
```

```python
from algokit.bst import Node, insert, preorder, DuplicateValueError

root = Node(5)
for value in (6, 3, 4, 12):
    root = insert(root, value)           # returns the root; a new one if given None
preorder(root)                           # [5, 3, 4, 6, 12]

try:
    insert(root, 5)
except DuplicateValueError:
    pass
```

```python
from algokit.geometry import SubrectangleQueries

rect = SubrectangleQueries([[1, 2, 1], [4, 3, 4], [3, 2, 1], [1, 1, 1]])
rect.update_subrectangle(0, 0, 3, 2, 5)
rect.get_value(0, 2)                     # 5
```

## Behaviour worth knowing

- `merge_intervals` returns the merged intervals ordered by descending start.
- `max_sliding_window` with a window wider than the sequence returns a single
  item, the maximum of the whole sequence; `max_sliding_window_brute` returns
  an empty list in that case. Both raise `ValueError` for a window size below 1.
- `group_the_people` drops people left over once the full groups of their size
  are formed.
- `swap_nodes` raises `IndexError` when `k` is outside the list;
  `valid_path` raises `IndexError` when `start` or `end` is not a vertex.
- `shortest_path_binary_matrix` returns `-1` when no clear path exists.
- `reverse_list`, `merge_two_lists`, `merge_k_lists` and `swap_nodes` reuse
  and modify the nodes they are given.

## What it does not do

algokit is a library only: it has no command-line program and keeps no data
between calls.

## Running the tests

```
pytest
```