# algodrills

A handful of classic programming drills: printing a star pattern,
transposing a matrix, sorting a list of integers and answering
questions about binary trees.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

- `algodrills-pyramid [ROWS]` prints an inverted pyramid of `* ` cells,
  each row indented one space more than the one above. Without `ROWS` it
  prompts for the row count on standard input. A row count of zero or
  less prints nothing.
- `algodrills-transpose` prompts on standard input for the number of rows,
  the number of columns and then the elements, and prints
  `The transpose is` followed by each column of the input on its own
  line, every value followed by a tab.
- `algodrills-sort [--algorithm {bubble,merge}]` prompts for the number of
  elements and the elements themselves and prints them in ascending order.
  The default algorithm is `merge`.

Input is read as whitespace-separated integers. If input ends early, is not
an integer, or a count is negative, the command prints an error to standard
error and exits with status 1.

## Library use

### Patterns and matrices

```python
from algodrills.patterns import inverted_pyramid
from algodrills.matrix import transpose, format_transpose

print(inverted_pyramid(3))
transpose([[1, 2, 3], [4, 5, 6]])        # [[1, 4], [2, 5], [3, 6]]
print(format_transpose([[1, 2], [3, 4]]))
```

`transpose` raises `ValueError` when the rows are not all the same length.
`format_transpose` returns the same text the `algodrills-transpose` command
prints.

### Sorting

`bubble_sort` and `merge_sort` take any iterable of integers and return a
new sorted list. `merge` combines two already sorted sequences into one
sorted list, taking from the left one first when values are equal, so
`merge_sort` is stable.

```python
from algodrills.sorting import bubble_sort, merge, merge_sort

bubble_sort([5, 1, 4, 2])     # [1, 2, 4, 5]
merge_sort([3, 3, -1, 0])     # [-1, 0, 3, 3]
merge([1, 4], [2, 3])         # [1, 2, 3, 4]
```

### Binary trees

Trees are described in level order as space-separated values, with `N`
marking a missing child. `build_tree` turns such a line into a tree of
`Node` objects (each with `data`, `left` and `right`), or `None` when the
text is empty or starts with `N`.

```python
from algodrills.trees import build_tree, height, kth_ancestor, leaves_at_same_level

root = build_tree("1 2 3 N N 4 5")
height(root)                  # 3
kth_ancestor(root, 1, 4)      # 3
kth_ancestor(root, 5, 4)      # -1, no such ancestor
leaves_at_same_level(root)    # False
```

- `height` counts the nodes on the longest path from the root down; an
  empty tree has height 0.
- `kth_ancestor` returns the value of the node `k` levels above the first
  node, in level order, holding `node`, or -1 when there are fewer than `k`
  levels above it. It raises `ValueError` for an empty tree or when no node
  holds the value.
- `leaves_at_same_level` tells whether every leaf sits at the same depth;
  it returns `False` for an empty tree.

## What it does not do

The tree functions are available only from Python; there is no command
that reads tree descriptions from standard input.