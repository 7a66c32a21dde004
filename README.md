# dsakit

A small library of classic data structures and algorithms in plain Python,
with no runtime dependencies.

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
| `dsakit.patterns` | Text patterns returned as lists of lines: `right_aligned_pyramid`, `filled_rectangle`, `floyds_triangle`, `half_pyramid_numbers`, `hollow_rectangle`, `inverted_pyramid` |
| `dsakit.arrays` | `reverse_array`, `rotate_right`, `kth_min_max` (returns a `KthExtremes` named tuple), `sort_three_values`, `max_subarray_sum`, `min_jumps`, `longest_arithmetic_subarray`, `count_record_breaks` |
| `dsakit.sorting` | `heapify`, `heap_sort`, `partition`, `quick_sort` |
| `dsakit.text` | `abbreviate`, `shuffle_distinct`, `add_binary` |
| `dsakit.puzzles` | `prime_sieve`, `min_painting_time`, `calculate` (with the `Operation` enum), `max_split_product` |
| `dsakit.singly` | `Node`, `LinkedList` with reversal, middle value, cycle detection, node deletion and alternate merging |
| `dsakit.circular` | `CircularList` |
| `dsakit.doubly` | `DoublyLinkedList`, iterable in both directions |
| `dsakit.fifo` | `LinkedQueue` |
| `dsakit.maze` | `solve_maze`, a down-then-right path search through a square grid |
| `dsakit.binary_tree` | `TreeNode`, the traversals, level sums, node count and sum, height, diameter, `sum_replace`, `is_balanced`, left and right views |
| `dsakit.tree_build` | `build_from_preorder`, `build_from_postorder`, `lowest_common_ancestor`, `distance_between` |
| `dsakit.bst` | `bst_insert`, `build_bst`, `bst_search`, `min_node`, `bst_delete` |
| `dsakit.path_sums` | `PathSumTree`: root-to-node path sums with point updates, over an Euler tour |
| `dsakit.lca` | `EulerTourLCA`: lowest common ancestor through an Euler tour and a sparse table |
| `dsakit.coverage` | `coverage_counts`: integer points covered by exactly k segments |

## Examples

```python
from dsakit.sorting import heap_sort
from dsakit.arrays import min_jumps
from dsakit.bst import build_bst, bst_search
from dsakit.binary_tree import inorder
from dsakit.puzzles import min_painting_time
from dsakit.patterns import floyds_triangle

heap_sort([12, 11, 13, 5, 6, 7])               # [5, 6, 7, 11, 12, 13]
min_jumps([1, 3, 5, 8, 9, 2, 6, 7, 6, 8, 9])   # 3
min_jumps([0, 1])                              # None: the end cannot be reached

root = build_bst([5, 1, 3, 4, 2, 7])
inorder(root)                                  # [1, 2, 3, 4, 5, 7]
bst_search(root, 7)                            # True

min_painting_time(2, 5, [1, 10])               # 50

print("\n".join(floyds_triangle(3)))
```

The linked lists and the queue behave like ordinary Python containers:

```python
from dsakit.singly import LinkedList
from dsakit.fifo import LinkedQueue

items = LinkedList([1, 2, 3])
items.reverse()
list(items)   # [3, 2, 1]
len(items)    # 3

queue = LinkedQueue([1, 2])
queue.dequeue()   # 1
```

Trees for `PathSumTree` are numbered from 1 and rooted at node 1; trees for
`EulerTourLCA` are numbered from 0 and rooted at node 0 unless another root
is given:

```python
from dsakit.path_sums import PathSumTree
from dsakit.lca import EulerTourLCA

sums = PathSumTree([4, 2, 5], [(1, 2), (2, 3)])
sums.query(3)      # 11
sums.update(2, 10)
sums.query(3)      # 19

tree = EulerTourLCA(5, [(0, 1), (0, 2), (1, 3), (1, 4)])
tree.lca(3, 4)     # 1
```

## Errors

Operations that cannot be carried out raise an exception rather than return a
status code: removing from an empty list or queue raises `IndexError`, bad
arguments raise `ValueError`, deleting a missing value from a search tree
raises `KeyError`, and dividing by zero in `calculate` raises
`ZeroDivisionError`. A few functions return `None` where "no answer" is an
ordinary result: `min_jumps`, `solve_maze` and `shuffle_distinct`.

## What it does not do

This is a library only. It has no command-line programs, reads nothing from
standard input and prints nothing; every function returns its result for the
caller to use.