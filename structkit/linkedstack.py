"""An unbounded stack built from linked nodes."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from structkit.arraystack import StackEmptyError


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: Optional["_Node"]) -> None:
        self.data = data
        self.next = next_node


class LinkedStack:
    """Stack whose values are kept in a chain of nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, data: Any) -> None:
        self._top = _Node(data, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("pop from empty stack")
        data = self._top.data
        self._top = self._top.next
        self._size -= 1
        return data

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("top of empty stack")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        """Remove every value."""
        self._top = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"