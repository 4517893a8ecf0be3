"""Binary search tree built from linked nodes.

Every function takes the root of a tree, or ``None`` for an empty tree.
Functions that may change the tree return the root it ends up with.
Values already in the tree are not inserted a second time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, TextIO


@dataclass(eq=False)
class TreeNode:
    """A node holding ``val``.

    Everything under ``left`` is smaller than ``val``; everything under
    ``right`` is larger.
    """

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


Inserter = Callable[[Optional[TreeNode], int], TreeNode]
Traversal = Callable[[Optional[TreeNode]], Iterable[int]]


def insert_recursive(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` at a leaf, descending recursively; return the root."""
    if root is None:
        return TreeNode(val)
    if val < root.val:
        root.left = insert_recursive(root.left, val)
    elif val > root.val:
        root.right = insert_recursive(root.right, val)
    return root


def insert_iterative(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` at a leaf, descending in a loop; return the root."""
    if root is None:
        return TreeNode(val)
    current = root
    while True:
        if val < current.val:
            if current.left is None:
                current.left = TreeNode(val)
                return root
            current = current.left
        elif val > current.val:
            if current.right is None:
                current.right = TreeNode(val)
                return root
            current = current.right
        else:
            return root


def search_recursive(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val``, or ``None``."""
    if root is None or root.val == val:
        return root
    if val < root.val:
        return search_recursive(root.left, val)
    return search_recursive(root.right, val)


def search_iterative(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val``, or ``None``."""
    current = root
    while current is not None and current.val != val:
        current = current.left if val < current.val else current.right
    return current


def delete_iterative(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove ``key`` from the tree and return the resulting root.

    A node with two children takes the value of its in-order successor,
    which is then unlinked. A missing key leaves the tree unchanged.
    """
    parent: Optional[TreeNode] = None
    current = root
    while current is not None and current.val != key:
        parent = current
        current = current.left if key < current.val else current.right

    if current is None:
        return root

    if current.left is None or current.right is None:
        child = current.left if current.right is None else current.right
        if parent is None:
            return child
        if parent.left is current:
            parent.left = child
        else:
            parent.right = child
        return root

    successor_parent: Optional[TreeNode] = None
    successor = current.right
    while successor.left is not None:
        successor_parent = successor
        successor = successor.left

    if successor_parent is not None:
        successor_parent.left = successor.right
    else:
        current.right = successor.right
    current.val = successor.val
    return root


def build_tree(values: Iterable[int], insert: Inserter = insert_iterative) -> Optional[TreeNode]:
    """Insert ``values`` in order with ``insert`` and return the root."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert(root, value)
    return root


def in_order(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree: ascending order."""
    if root is not None:
        yield from in_order(root.left)
        yield root.val
        yield from in_order(root.right)


def pre_order(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if root is not None:
        yield root.val
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def post_order(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root.val


def write_traversal(traversal: Traversal, root: Optional[TreeNode], out: TextIO) -> None:
    """Write each value ``traversal`` yields to ``out``, each followed by a space."""
    for value in traversal(root):
        out.write(f"{value} ")