"""Single-purpose operations on binary search trees.

These work on the nodes defined in :mod:`structkit.bst`. Each takes the
root of a tree, or ``None`` for an empty one.
"""

from __future__ import annotations

from typing import Optional

from structkit.bst import TreeNode


def find_min(root: TreeNode) -> TreeNode:
    """Return the leftmost node under ``root``, which holds its smallest value."""
    node = root
    while node.left is not None:
        node = node.left
    return node


def delete_recursive(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove ``key`` from the tree and return the resulting root.

    A node with two children takes the smallest value of its right
    subtree, which is then removed from that subtree. A missing key
    leaves the tree unchanged.
    """
    if root is None:
        return None
    if key > root.val:
        root.right = delete_recursive(root.right, key)
        return root
    if key < root.val:
        root.left = delete_recursive(root.left, key)
        return root

    if root.left is None:
        return root.right
    if root.right is None:
        return root.left

    successor = find_min(root.right)
    root.val = successor.val
    root.right = delete_recursive(root.right, successor.val)
    return root


def inorder_successor(root: Optional[TreeNode], p: TreeNode) -> Optional[TreeNode]:
    """Return the node with the smallest value greater than ``p.val``.

    ``p`` must be a node of the tree; if it is not found, or has no
    successor, ``None`` is returned.
    """
    current = root
    # The last ancestor at which the search for p turned left: its value
    # is greater than p's.
    last_left_turn: Optional[TreeNode] = None

    while current is not None and current is not p:
        if p.val < current.val:
            last_left_turn = current
            current = current.left
        else:
            current = current.right

    if current is None:
        return None
    if current.right is not None:
        return find_min(current.right)
    return last_left_turn


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` at a leaf and return the root; duplicates are ignored."""
    parent: Optional[TreeNode] = None
    current = root
    while current is not None:
        parent = current
        if val < current.val:
            current = current.left
        elif val > current.val:
            current = current.right
        else:
            return current if root is None else root

    node = TreeNode(val)
    if parent is None:
        return node
    if val < parent.val:
        parent.left = node
    else:
        parent.right = node
    assert root is not None
    return root


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the subtree rooted at the node holding ``val``, or ``None``."""
    current = root
    while current is not None and current.val != val:
        current = current.left if val < current.val else current.right
    return current