"""FIFO queues: an unbounded linked queue and a bounded circular queue."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class QueueEmptyError(Exception):
    """Raised when reading the front of an empty queue."""


class _Cell:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: Optional[_Cell] = None


class LinkedQueue:
    """An unbounded queue built from linked cells."""

    def __init__(self) -> None:
        self._head: Optional[_Cell] = None
        self._tail: Optional[_Cell] = None
        self._size = 0

    def empty(self) -> bool:
        """Return True when the queue holds no items."""
        return self._head is None

    def enqueue(self, item: Any) -> None:
        """Add an item at the back."""
        cell = _Cell(item)
        if self._tail is None:
            self._head = cell
        else:
            self._tail.next = cell
        self._tail = cell
        self._size += 1

    def front(self) -> Any:
        """Return the item that entered first."""
        if self._head is None:
            raise QueueEmptyError("Coda vuota !")
        return self._head.value

    def dequeue(self) -> Any:
        """Remove and return the front item; an empty queue is left as is and gives None."""
        if self._head is None:
            return None
        cell = self._head
        self._head = cell.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return cell.value

    def clear(self) -> None:
        """Remove every item."""
        self._head = self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from front to back."""
        cell = self._head
        while cell is not None:
            yield cell.value
            cell = cell.next

    def copy(self) -> "LinkedQueue":
        """Return an independent queue with the same items."""
        duplicate = LinkedQueue()
        for item in self:
            duplicate.enqueue(item)
        return duplicate

    def __str__(self) -> str:
        if self.empty():
            return "Coda vuota !"
        return "(TESTA) [" + " ".join(str(item) for item in self) + "] (CODA)"


class CircularQueue:
    """A queue of fixed capacity stored in a circular array."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._length = 0

    def empty(self) -> bool:
        """Return True when the queue holds no items."""
        return self._length == 0

    def full(self) -> bool:
        """Return True when no more items fit."""
        return self._length == len(self._slots)

    def enqueue(self, item: Any) -> bool:
        """Add an item at the back; return False, leaving the queue as is, when full."""
        if self.full():
            return False
        self._slots[(self._head + self._length) % len(self._slots)] = item
        self._length += 1
        return True

    def front(self) -> Any:
        """Return the item that entered first."""
        if self.empty():
            raise QueueEmptyError("Coda vuota !")
        return self._slots[self._head]

    def dequeue(self) -> Any:
        """Remove and return the front item; an empty queue is left as is and gives None."""
        if self.empty():
            return None
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._length -= 1
        return item

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Yield items from front to back."""
        capacity = len(self._slots)
        return (self._slots[(self._head + offset) % capacity] for offset in range(self._length))

    def copy(self) -> "CircularQueue":
        """Return an independent queue with the same capacity and items."""
        duplicate = CircularQueue(len(self._slots))
        for item in self:
            duplicate.enqueue(item)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularQueue):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)