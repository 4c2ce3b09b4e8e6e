"""Degree and path queries on matrix graphs."""

from __future__ import annotations

from typing import Any, Optional

from strutturedati.graph import MatrixGraph


def out_degree(graph: MatrixGraph, node: int) -> int:
    """Return the number of edges leaving node."""
    if graph.is_empty():
        return 0
    return len(graph.adjacent(node))


def find_path(graph: MatrixGraph, start: int, goal: int) -> Optional[list[Any]]:
    """Search depth first from start for a node labelled like goal.

    Return the labels along the path found, or None. The visited flags are
    reset first and left marked by the search.
    """
    graph.reset_visited()
    target = graph.label(goal)
    graph.set_visited(start, True)
    path = [graph.label(start)]
    if path[0] == target:
        return path
    pending = [iter(graph.adjacent(start))]
    while pending:
        for successor in pending[-1]:
            if not graph.visited(successor):
                graph.set_visited(successor, True)
                path.append(graph.label(successor))
                if path[-1] == target:
                    return path
                pending.append(iter(graph.adjacent(successor)))
                break
        else:
            pending.pop()
            path.pop()
    return None