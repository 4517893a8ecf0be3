"""A bounded stack of fixed capacity."""

from __future__ import annotations

from typing import Any


class StackEmptyError(IndexError):
    """Raised when a value is read from an empty stack."""


class ArrayStack:
    """Stack holding at most ``capacity`` values.

    Pushing onto a full stack leaves it unchanged and reports ``False``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._data: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> bool:
        """Push ``value``; return whether it was stored."""
        if self.is_full():
            return False
        self._data.append(value)
        return True

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackEmptyError("pop from empty stack")
        return self._data.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackEmptyError("peek at empty stack")
        return self._data[-1]

    def is_full(self) -> bool:
        return len(self._data) == self._capacity

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self._capacity}, size={len(self._data)})"