"""Classic data structures: stacks, a linked list, binary search trees and a quadtree."""

__version__ = "0.1.0"

__all__ = ["arraystack", "linkedstack", "linkedlist", "quadtree", "bst", "bstops"]