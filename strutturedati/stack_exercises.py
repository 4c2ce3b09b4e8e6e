"""Operations on stacks built from push, pop and top."""

from __future__ import annotations

from typing import Any

from strutturedati.stacks import ArrayStack


def _refill(stack: ArrayStack, items: list[Any]) -> None:
    stack.clear()
    for item in items:
        stack.push(item)


def reversed_stack(stack: ArrayStack) -> ArrayStack:
    """Move every item into a new stack, emptying the given one.

    The old top ends up at the bottom of the result.
    """
    result = ArrayStack(stack.capacity)
    while not stack.empty():
        result.push(stack.pop())
    return result


def remove_greater(stack: ArrayStack, k: Any) -> None:
    """Remove every item greater than k, keeping the order of the rest."""
    _refill(stack, [item for item in stack if item <= k])


def remove_all(stack: ArrayStack, k: Any) -> None:
    """Remove every occurrence of k, keeping the order of the rest."""
    _refill(stack, [item for item in stack if item != k])


def count(stack: ArrayStack, k: Any) -> int:
    """Return the number of occurrences of k; the stack is left unchanged."""
    return sum(1 for item in stack if item == k)


def reverse_stack(stack: ArrayStack) -> ArrayStack:
    """Return a new stack with the items in reverse order; the given one is left unchanged."""
    result = ArrayStack(stack.capacity)
    for item in reversed(list(stack)):
        result.push(item)
    return result