"""A singly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """One link of a :class:`LinkedList`."""

    data: Any
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode(data={self.data!r})"


class LinkedList:
    """Singly linked list.

    Index-based operations given an index outside the list leave it
    unchanged and report ``False``.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[ListNode] = None
        if values is not None:
            tail: Optional[ListNode] = None
            for value in values:
                node = ListNode(value)
                if tail is None:
                    self._head = node
                else:
                    tail.next = node
                tail = node

    @property
    def head(self) -> Optional[ListNode]:
        return self._head

    def _nodes(self) -> Iterator[ListNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert_at_head(self, value: Any) -> None:
        self._head = ListNode(value, self._head)

    def insert_at_tail(self, value: Any) -> None:
        if self._head is None:
            self.insert_at_head(value)
            return
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = ListNode(value)

    def insert_at_index(self, index: int, value: Any) -> bool:
        """Insert ``value`` so that it ends up at ``index``.

        ``index`` may equal the length, which appends. Returns whether
        the value was inserted.
        """
        if index < 0:
            return False
        if index == 0:
            self.insert_at_head(value)
            return True
        before = self.get(index - 1)
        if before is None:
            return False
        before.next = ListNode(value, before.next)
        return True

    def delete_at_head(self) -> bool:
        """Remove the first node; return whether one was removed."""
        if self._head is None:
            return False
        self._head = self._head.next
        return True

    def delete_at_index(self, index: int) -> bool:
        """Remove the node at ``index``; return whether one was removed."""
        if self._head is None or index < 0:
            return False
        if index == 0:
            return self.delete_at_head()
        before = self.get(index - 1)
        if before is None or before.next is None:
            return False
        before.next = before.next.next
        return True

    def get(self, index: int) -> Optional[ListNode]:
        """Return the node at ``index``, or ``None`` if there is none."""
        if index < 0:
            return None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def search(self, key: Any) -> Optional[ListNode]:
        """Return the first node holding ``key``, or ``None``."""
        return next((node for node in self._nodes() if node.data == key), None)

    def clear(self) -> None:
        self._head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"