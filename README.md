# structkit

structkit is a small library of classic data structures. It has no
dependencies outside the standard library.

## What it provides

- `structkit.arraystack`
  - `ArrayStack(capacity)` is a stack that holds at most `capacity` values. A
    negative capacity raises `ValueError`.
  - `push` returns `False` and leaves the stack unchanged when the stack is
    full.
  - `pop` and `peek` raise `StackEmptyError` on an empty stack.
    `StackEmptyError` is a subclass of `IndexError`.
  - The class also has `is_full`, `is_empty`, `len()` and a read-only
    `capacity`.
- `structkit.linkedstack`
  - `LinkedStack` is an unbounded stack built from linked nodes.
  - It has `push`, `pop`, `top`, `is_empty`, `clear` and `len()`.
  - Iteration runs from the top down.
  - `pop` and `top` raise `StackEmptyError` when the stack is empty.
- `structkit.linkedlist`
  - `LinkedList(values=None)` is a singly linked list of `ListNode`s, each
    with `data` and `next`.
  - Insertion: `insert_at_head`, `insert_at_tail` and
    `insert_at_index(index, value)`. The index may equal the length, which
    appends.
  - Deletion: `delete_at_head` and `delete_at_index(index)`.
  - Lookup: `get(index)` returns a node or `None`, and `search(key)` returns
    the first node holding `key` or `None`.
  - Other operations: `clear`, `len()`, iteration over the values, and
    `str()`, which joins the values with single spaces.
  - The insert-at-index and delete methods return `False` and change nothing
    when the index is negative or past the end.
- `structkit.bst`
  - Functions over `TreeNode` binary search trees. An empty tree is `None`.
  - Insertion: `insert_recursive` and `insert_iterative`. A value already in
    the tree is not inserted again.
  - Lookup: `search_recursive` and `search_iterative`.
  - Deletion: `delete_iterative`.
  - `build_tree(values, insert)` inserts the values in order. Its default
    inserter is `insert_iterative`.
  - Traversals are generators: `in_order`, `pre_order` and `post_order`.
  - `write_traversal(traversal, root, out)` writes each value to a text
    stream, followed by a space.
- `structkit.bstops`
  - Further operations on the same nodes: `find_min`, `delete_recursive`,
    `inorder_successor`, `insert_into_bst` and `search_bst`.
- `structkit.quadtree`
  - `QuadTree(top_left, bottom_right)` is a point quadtree over integer
    `Point`s. It stores `QuadNode`s.
  - A node is kept only in a cell at most one unit wide and one unit high.
    Each such cell keeps the first node that lands in it.
  - `insert` returns whether the node was kept.
  - `search(point)` returns the node in the cell `point` falls in, or `None`.
  - `in_boundary` checks, bounds included, whether a point lies in the region.

## Installation

```
pip install .
```

The test dependencies are installed with `pip install .[test]`.

## Examples

The array stack holds at most its capacity:

```python
from structkit.arraystack import ArrayStack

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
assert stack.push(3) is False   # full: ignored
assert stack.pop() == 2
```

Insertion at an index past the end of a linked list does nothing:

```python
from structkit.linkedlist import LinkedList

items = LinkedList([1, 3, 5])
items.insert_at_index(1, 2)
assert items.insert_at_index(10, 99) is False
assert str(items) == "1 2 3 5"
```

Building a binary search tree and traversing it:

```python
from structkit.bst import build_tree, insert_iterative, in_order, pre_order

root = build_tree([3, 1, 2, 0, 5, 4, 6], insert_iterative)
assert list(in_order(root)) == [0, 1, 2, 3, 4, 5, 6]
assert list(pre_order(root)) == [3, 1, 0, 2, 5, 4, 6]
```

## What it does not do

structkit is a library only. It has no command-line program. It does not
balance its trees, and it does not persist any structure to storage.

## Running the tests

```
pytest
```