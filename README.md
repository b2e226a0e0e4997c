# dsakit

A small collection of classic data-structure routines in plain Python:

- **Binary trees** (`dsakit.tree`): a `Node` dataclass, builders from
  pre-order and level-order value lists or from a space-separated string,
  the usual traversals, depth, diameter and zig-zag order.
- **Bounded queues** (`dsakit.queues`): a fixed-capacity `CircularQueue`,
  a fixed-capacity double-ended `BoundedDeque` and a slot-based
  `ArrayQueue`.
- **Stack algorithms** (`dsakit.stacks`): deleting the middle element,
  next/previous smaller element, largest rectangle in a histogram,
  reversing a string, sorting a stack and checking brackets.

No third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Binary trees

`build_tree` reads values in level order separated by spaces, with `N`
marking a missing child. Input that runs out early leaves the remaining
children absent; an empty string or one starting with `N` gives `None`.

```python
from dsakit.tree import build_tree, inorder, level_order, max_depth, diameter, zigzag

root = build_tree("1 2 3 4 5 N 6")

level_order(root)  # [[1], [2, 3], [4, 5, 6]]
inorder(root)      # [4, 2, 5, 1, 3, 6]
max_depth(root)    # 3
diameter(root)     # 5  (nodes on the path 4-2-1-3-6)
zigzag(root)       # [1, 3, 2, 4, 5, 6]
```

Trees can also be built from integer sequences where `-1` stands for a
missing child:

- `build_preorder(values)` reads values in pre-order, `-1` ending a subtree.
- `build_level_order(values)` takes the root first, then a left and a right
  value for each node in breadth-first order.

Both raise `ValueError` if the values run out before the tree is complete.
`inorder`, `preorder` and `postorder` return lists of values; `max_depth`
and `diameter` count nodes, not edges.

## Queues

All three containers raise `QueueFull` (a subclass of `OverflowError`) when
a value does not fit and `QueueEmpty` (a subclass of `IndexError`) when a
value is read from an empty container. A capacity below 1 raises
`ValueError`. Each supports `len()` and iteration from front to back.

```python
from dsakit.queues import CircularQueue, BoundedDeque, ArrayQueue, QueueFull

q = CircularQueue(5)
q.enqueue(10)
q.dequeue()        # 10

dq = BoundedDeque(5)
dq.push_rear(10)
dq.push_rear(20)
dq.push_front(30)
dq.push_front(40)
dq.peek_front()    # 40
dq.peek_rear()     # 20
dq.pop_front()     # 40
dq.pop_rear()      # 20

aq = ArrayQueue()  # 100001 slots by default
aq.enqueue(10)
aq.front()         # 10
aq.is_empty()      # False
```

`ArrayQueue` does not reuse slots freed by `dequeue` until the queue has
been emptied; then all of its capacity is available again.

## Stack algorithms

Stacks are plain Python lists with the top at the end.

```python
from dsakit.stacks import (
    delete_middle, largest_rectangle_area, next_smaller, prev_smaller,
    reverse_string, sort_stack, is_valid_parentheses,
)

largest_rectangle_area([2, 1, 5, 6, 2, 3])   # 10
next_smaller([2, 1, 5, 6, 2, 3])             # [1, -1, 4, 4, -1, -1]
prev_smaller([2, 1, 5, 6, 2, 3])             # [-1, -1, 1, 2, 1, 4]
reverse_string("saud")                       # "duas"

stack = [1, 2, 3, 4, 5]
delete_middle(stack)                         # 3; stack is now [1, 2, 4, 5]

stack = [2, 3, 1, 4, 5]
sort_stack(stack)                            # stack is now [1, 2, 3, 4, 5]

is_valid_parentheses("()[]{}")               # True
is_valid_parentheses("(]")                   # False
```

`sorted_insert(stack, value)` inserts into a stack already sorted with the
largest value on top. `is_valid_parentheses` accepts only the characters
`()[]{}`; any other character makes the text invalid.

## Command line

Installing the package provides a `dsakit-zigzag` command, started from
`dsakit.tree.main`. It reads a count from standard input, then that many
lines, each a level-order tree in the `build_tree` format, and prints the
zig-zag traversal of each tree on its own line:

```
printf '2\n1 2 3 4 5 N 6\n1 N 2\n' | dsakit-zigzag
```

prints

```
1 3 2 4 5 6 
1 2 
```

## Limits

Trees are built only from given sequences or strings; the package does not
prompt for values interactively. The command line covers zig-zag traversal
only; the other tree, queue and stack routines are used from Python.