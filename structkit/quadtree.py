"""A point quadtree over an integer grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


@dataclass
class QuadNode:
    """A stored item positioned at ``pos``."""

    pos: Point
    leaf: bool = True


def _mid(a: int, b: int) -> int:
    """Midpoint rounded toward zero."""
    total = a + b
    return total // 2 if total >= 0 else -((-total) // 2)


class QuadTree:
    """Region from ``top_left`` to ``bottom_right``, split into quadrants.

    A node is kept only in a cell no larger than one unit each way; a
    cell holds at most one node, and later nodes landing there are dropped.
    """

    def __init__(self, top_left: Point = Point(0, 0), bottom_right: Point = Point(0, 0)) -> None:
        self.top_left = top_left
        self.bottom_right = bottom_right
        self.node: Optional[QuadNode] = None
        self.top_left_tree: Optional[QuadTree] = None
        self.top_right_tree: Optional[QuadTree] = None
        self.bottom_left_tree: Optional[QuadTree] = None
        self.bottom_right_tree: Optional[QuadTree] = None

    def _is_unit(self) -> bool:
        return (
            abs(self.top_left.x - self.bottom_right.x) <= 1
            and abs(self.top_left.y - self.bottom_right.y) <= 1
        )

    def insert(self, node: Optional[QuadNode]) -> bool:
        """Store ``node``; return whether it was kept."""
        if node is None or not self.in_boundary(node.pos):
            return False

        if self._is_unit():
            if self.node is None:
                self.node = node
                return True
            return False

        tl, br = self.top_left, self.bottom_right
        mx, my = _mid(tl.x, br.x), _mid(tl.y, br.y)

        if mx >= node.pos.x:
            if my >= node.pos.y:
                if self.top_left_tree is None:
                    self.top_left_tree = QuadTree(Point(tl.x, tl.y), Point(mx, my))
                return self.top_left_tree.insert(node)
            if self.bottom_left_tree is None:
                self.bottom_left_tree = QuadTree(Point(tl.x, my), Point(mx, br.y))
            return self.bottom_left_tree.insert(node)

        if my >= node.pos.y:
            if self.top_right_tree is None:
                self.top_right_tree = QuadTree(Point(mx, tl.y), Point(br.x, my))
            return self.top_right_tree.insert(node)
        if self.bottom_right_tree is None:
            self.bottom_right_tree = QuadTree(Point(mx, my), Point(br.x, br.y))
        return self.bottom_right_tree.insert(node)

    def search(self, point: Point) -> Optional[QuadNode]:
        """Return the node held by the unit cell that ``point`` falls in."""
        if not self.in_boundary(point):
            return None
        if self.node is not None:
            return self.node

        mx = _mid(self.top_left.x, self.bottom_right.x)
        my = _mid(self.top_left.y, self.bottom_right.y)
        if mx >= point.x:
            child = self.top_left_tree if my >= point.y else self.bottom_left_tree
        else:
            child = self.top_right_tree if my >= point.y else self.bottom_right_tree
        return child.search(point) if child is not None else None

    def in_boundary(self, point: Point) -> bool:
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )