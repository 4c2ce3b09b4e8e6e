"""Stacks: a bounded array-backed stack and an unbounded linked stack."""

from __future__ import annotations

from typing import Any, Iterator, Optional

DEFAULT_CAPACITY = 100


class StackEmptyError(Exception):
    """Raised when reading or removing from an empty stack."""


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def top(self) -> Any:
        """Return the item on top without removing it."""
        if not self._items:
            raise StackEmptyError("nessun elemento nella pila")
        return self._items[-1]

    def pop(self) -> Any:
        """Remove and return the item on top."""
        if not self._items:
            raise StackEmptyError("nessun elemento nella pila")
        return self._items.pop()

    def push(self, item: Any) -> None:
        """Put an item on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackFullError("raggiunta capacità massima della pila")
        self._items.append(item)

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the bottom to the top."""
        return iter(list(self._items))

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)


class _Cell:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_cell: Optional["_Cell"]) -> None:
        self.value = value
        self.next = next_cell


class LinkedStack:
    """An unbounded stack built from linked cells."""

    def __init__(self) -> None:
        self._head: Optional[_Cell] = None
        self._size = 0

    def empty(self) -> bool:
        """Return True when the stack holds no items."""
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def top(self) -> Any:
        """Return the item on top without removing it."""
        if self._head is None:
            raise StackEmptyError("nessun elemento nella pila")
        return self._head.value

    def pop(self) -> Any:
        """Remove and return the item on top."""
        if self._head is None:
            raise StackEmptyError("nessun elemento nella pila")
        cell = self._head
        self._head = cell.next
        self._size -= 1
        return cell.value

    def push(self, item: Any) -> None:
        """Put an item on top of the stack."""
        self._head = _Cell(item, self._head)
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the top to the bottom."""
        cell = self._head
        while cell is not None:
            yield cell.value
            cell = cell.next