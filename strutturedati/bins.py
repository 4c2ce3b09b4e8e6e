"""Three queues sorting integers by range: 1-3, 4-6 and the rest."""

from __future__ import annotations

from typing import Optional

from strutturedati.queues import LinkedQueue


class Bins:
    """Integers 1-3 go to bin 0, 4-6 to bin 1, everything else to bin 2."""

    def __init__(self) -> None:
        self._bins = (LinkedQueue(), LinkedQueue(), LinkedQueue())

    def _bin(self, index: int) -> LinkedQueue:
        if not 0 <= index < len(self._bins):
            raise IndexError(f"errore input: bin {index} does not exist")
        return self._bins[index]

    def insert(self, value: int) -> None:
        """Enqueue value in the bin for its range."""
        if 0 < value <= 3:
            self._bins[0].enqueue(value)
        elif 4 <= value <= 6:
            self._bins[1].enqueue(value)
        else:
            self._bins[2].enqueue(value)

    def delete(self, index: int) -> Optional[int]:
        """Dequeue from the given bin and return the value, or None if it was empty."""
        return self._bin(index).dequeue()

    def mean(self, index: int) -> float:
        """Return the mean of the values in the bin, 0.0 when empty."""
        queue = self._bin(index)
        if queue.empty():
            return 0.0
        return sum(queue) / len(queue)

    def freq(self, index: int) -> int:
        """Return how many values the bin holds."""
        return len(self._bin(index))

    def render(self, index: int) -> str:
        """Return the printed form of the bin."""
        return str(self._bin(index))