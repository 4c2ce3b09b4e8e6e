"""Exam exercises on directed matrix graphs: neighbourhoods, reachability and paths."""

from __future__ import annotations

from itertools import accumulate
from typing import Any, Optional

from strutturedati.graph import MatrixGraph


def relevant_adjacent(graph: MatrixGraph, node: int, k: Any) -> list[Any]:
    """Return the labels of the successors of node whose outgoing weights add up to more than k.

    The weights of a successor are summed in adjacency order and it qualifies
    as soon as a running total exceeds k. Labels come in increasing node id order.
    """
    result = []
    for successor in graph.adjacent(node):
        weights = (graph.weight(successor, other) for other in graph.adjacent(successor))
        if any(total > k for total in accumulate(weights)):
            result.append(graph.label(successor))
    result.reverse()
    return result


def update_adjacent(graph: MatrixGraph, node: int) -> None:
    """Label every successor of node with the sum of the weights of its outgoing edges."""
    for successor in graph.adjacent(node):
        total = sum(graph.weight(successor, other) for other in graph.adjacent(successor))
        graph.set_label(successor, total)


def reachable(graph: MatrixGraph, node: int, k: int) -> list[Any]:
    """Return the labels of the distinct nodes reached from node in at most k steps.

    The most recently discovered node comes first. The start node is included
    only if a walk leads back to it. Visited flags are reset first and left marked.
    """
    graph.reset_visited()
    if k <= 0:
        return []
    found: list[Any] = []
    # Largest budget with which a node has been fully explored; exploring it
    # again with no more budget cannot discover anything new.
    explored: dict[int, int] = {}
    stack = [(node, iter(graph.adjacent(node)), 0)]
    while stack:
        current, successors, steps = stack[-1]
        for successor in successors:
            if not graph.visited(successor):
                found.append(graph.label(successor))
                graph.set_visited(successor, True)
            remaining = k - steps - 1
            if remaining > 0 and explored.get(successor, 0) < remaining:
                stack.append((successor, iter(graph.adjacent(successor)), steps + 1))
                break
        else:
            stack.pop()
            explored[current] = max(explored.get(current, 0), k - steps)
    found.reverse()
    return found


def same_color_path(graph: MatrixGraph, start: int, goal: int) -> bool:
    """Return True if a path leads from start to goal through nodes of one colour only.

    Colours are the node labels; start and goal must share theirs.
    """
    graph.reset_visited()
    color = graph.label(start)
    if color != graph.label(goal):
        return False
    if start == goal:
        return True
    graph.set_visited(start, True)
    stack = [iter(graph.adjacent(start))]
    while stack:
        for successor in stack[-1]:
            if graph.visited(successor):
                continue
            graph.set_visited(successor, True)
            if graph.label(successor) == color:
                if successor == goal:
                    return True
                stack.append(iter(graph.adjacent(successor)))
                break
        else:
            stack.pop()
    return False


def uniform_color_path(graph: MatrixGraph, start: int, goal: int) -> bool:
    """Return True if a path leads from start to goal where each node's colour
    differs from the colour of the node before it."""
    graph.reset_visited()
    if start == goal:
        return True
    graph.set_visited(start, True)
    stack = [(iter(graph.adjacent(start)), graph.label(start))]
    while stack:
        successors, color = stack[-1]
        for successor in successors:
            if graph.visited(successor):
                continue
            graph.set_visited(successor, True)
            label = graph.label(successor)
            if label != color:
                if successor == goal:
                    return True
                stack.append((iter(graph.adjacent(successor)), label))
                break
        else:
            stack.pop()
    return False


def mean_n2(graph: MatrixGraph, node: int) -> float:
    """Return the mean label of the nodes first reached from node by a path of length 2.

    A node already met as a direct successor is not counted again.
    Raise ValueError when no such node exists.
    """
    graph.reset_visited()
    total = 0.0
    found = 0
    for first in graph.adjacent(node):
        if graph.visited(first):
            continue
        graph.set_visited(first, True)
        for second in graph.adjacent(first):
            if not graph.visited(second):
                graph.set_visited(second, True)
                found += 1
                total += graph.label(second)
    if found == 0:
        raise ValueError(f"no node is reached from {node} in two steps")
    return total / found


def count_same(graph: MatrixGraph, node: int) -> int:
    """Return how many nodes reachable from node, node itself included, share its label."""
    graph.reset_visited()
    value = graph.label(node)
    graph.set_visited(node, True)
    count = 0
    pending = [node]
    while pending:
        current = pending.pop()
        if graph.label(current) == value:
            count += 1
        for successor in graph.adjacent(current):
            if not graph.visited(successor):
                graph.set_visited(successor, True)
                pending.append(successor)
    return count


def count_unit_paths(graph: MatrixGraph, start: int, goal: int) -> tuple[int, Optional[float]]:
    """Count the paths from start to a node labelled like goal using only edges of weight 1.

    Return the number of paths and their mean length, None when there are none.
    A successor met through an edge of another weight stays marked and is not
    tried again from elsewhere during the same search.
    """
    target = graph.label(goal)
    graph.reset_visited()
    lengths: list[int] = []

    def explore(current: int, length: int) -> None:
        if graph.label(current) == target:
            lengths.append(length)
        graph.set_visited(current, True)
        for successor in graph.adjacent(current):
            if not graph.visited(successor):
                graph.set_visited(successor, True)
                if graph.weight(current, successor) == 1:
                    explore(successor, length + 1)
        graph.set_visited(current, False)

    explore(start, 0)
    if not lengths:
        return 0, None
    return len(lengths), sum(lengths) / len(lengths)


def sum_path(graph: MatrixGraph, limit: Any, start: int, goal: int) -> bool:
    """Return True if a path from start reaches a node labelled like goal with a
    label sum below limit.

    The sum covers the labels of the nodes after start. Nodes are never
    revisited during the search.
    """
    if graph.is_empty():
        return False
    graph.reset_visited()
    target = graph.label(goal)
    if graph.label(start) == target and 0 < limit:
        return True
    graph.set_visited(start, True)
    stack = [(iter(graph.adjacent(start)), 0)]
    while stack:
        successors, current_sum = stack[-1]
        for successor in successors:
            if graph.visited(successor):
                continue
            label = graph.label(successor)
            new_sum = current_sum + label
            if label == target and new_sum < limit:
                return True
            graph.set_visited(successor, True)
            stack.append((iter(graph.adjacent(successor)), new_sum))
            break
        else:
            stack.pop()
    return False