"""Directed weighted graphs stored as an adjacency matrix."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Edge:
    """A weighted edge from source to target."""

    source: int
    target: int
    weight: Any


class Graph(ABC):
    """A directed graph whose nodes carry labels and whose edges carry weights."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True when the graph has no nodes."""

    @abstractmethod
    def add_node(self, node: int) -> None:
        """Add a node."""

    @abstractmethod
    def add_edge(self, source: int, target: int, weight: Any) -> None:
        """Add an edge with the given weight."""

    @abstractmethod
    def remove_node(self, node: int) -> None:
        """Remove a node and the edges touching it."""

    @abstractmethod
    def remove_edge(self, source: int, target: int) -> None:
        """Remove an edge."""

    @abstractmethod
    def adjacent(self, node: int) -> list[int]:
        """Return the nodes reached by an edge leaving node."""

    @abstractmethod
    def nodes(self) -> list[int]:
        """Return every node of the graph."""

    @abstractmethod
    def label(self, node: int) -> Any:
        """Return the label of node."""

    @abstractmethod
    def set_label(self, node: int, label: Any) -> None:
        """Change the label of node."""

    @abstractmethod
    def weight(self, source: int, target: int) -> Any:
        """Return the weight of an edge."""

    @abstractmethod
    def set_weight(self, source: int, target: int, weight: Any) -> None:
        """Change the weight of an edge."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of nodes."""

    @abstractmethod
    def edge_count(self) -> int:
        """Return the number of edges."""


class MatrixGraph(Graph):
    """A graph of at most ``capacity`` nodes, identified by ids 0..capacity-1.

    Lists of nodes come in decreasing id order. Each node also has a visited
    flag used by the traversals.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._present = [False] * capacity
        self._labels: list[Any] = [None] * capacity
        self._visited = [False] * capacity
        self._matrix: list[list[Optional[Edge]]] = [[None] * capacity for _ in range(capacity)]
        self._nodes = 0
        self._edges = 0

    def _check(self, node: int) -> None:
        if not 0 <= node < self._capacity:
            raise IndexError(f"node {node} is outside 0..{self._capacity - 1}")

    def is_empty(self) -> bool:
        return self._nodes == 0

    def add_node(self, node: int) -> None:
        """Add a node; adding one already present does nothing."""
        self._check(node)
        if not self._present[node]:
            self._present[node] = True
            self._nodes += 1

    def add_edge(self, source: int, target: int, weight: Any) -> None:
        """Add an edge between present nodes; an existing edge keeps its weight."""
        self._check(source)
        self._check(target)
        if self._present[source] and self._present[target] and self._matrix[source][target] is None:
            self._matrix[source][target] = Edge(source, target, weight)
            self._edges += 1

    def remove_node(self, node: int) -> None:
        """Remove a node with its incoming and outgoing edges; an absent node is ignored."""
        self._check(node)
        if not self._present[node]:
            return
        for other in range(self._capacity):
            if self._matrix[node][other] is not None:
                self._matrix[node][other] = None
                self._edges -= 1
            if self._matrix[other][node] is not None:
                self._matrix[other][node] = None
                self._edges -= 1
        self._present[node] = False
        self._labels[node] = None
        self._visited[node] = False
        self._nodes -= 1

    def remove_edge(self, source: int, target: int) -> None:
        """Remove an edge; a missing edge is ignored."""
        if self.has_edge(source, target):
            self._matrix[source][target] = None
            self._edges -= 1

    def has_node(self, node: int) -> bool:
        """Return True if node is in the graph."""
        self._check(node)
        return self._present[node]

    def has_edge(self, source: int, target: int) -> bool:
        """Return True if an edge leads from source to target."""
        self._check(source)
        self._check(target)
        return (
            self._present[source]
            and self._present[target]
            and self._matrix[source][target] is not None
        )

    def adjacent(self, node: int) -> list[int]:
        """Return the successors of node in decreasing id order; empty if node is absent."""
        self._check(node)
        if not self._present[node]:
            return []
        row = self._matrix[node]
        return [
            other
            for other in reversed(range(self._capacity))
            if self._present[other] and row[other] is not None
        ]

    def nodes(self) -> list[int]:
        """Return every node in decreasing id order."""
        return [node for node in reversed(range(self._capacity)) if self._present[node]]

    def label(self, node: int) -> Any:
        """Return the label of node, None if it was never set."""
        self._check(node)
        return self._labels[node]

    def set_label(self, node: int, label: Any) -> None:
        """Change the label of a present node; an absent node is ignored."""
        self._check(node)
        if self._present[node]:
            self._labels[node] = label

    def visited(self, node: int) -> bool:
        """Return the visited flag of node."""
        self._check(node)
        return self._visited[node]

    def set_visited(self, node: int, flag: bool) -> None:
        """Set the visited flag of a present node; an absent node is ignored."""
        self._check(node)
        if self._present[node]:
            self._visited[node] = flag

    def weight(self, source: int, target: int) -> Any:
        """Return the weight of the edge, or None if there is no such edge."""
        if self.has_edge(source, target):
            return self._matrix[source][target].weight
        return None

    def set_weight(self, source: int, target: int, weight: Any) -> None:
        """Change the weight of an existing edge; a missing edge is ignored."""
        if self.has_edge(source, target):
            self._matrix[source][target].weight = weight

    def reset_visited(self) -> None:
        """Mark every node as not visited."""
        for node in self.nodes():
            self._visited[node] = False

    def _require(self, node: int) -> None:
        if not self.has_node(node):
            raise KeyError(node)

    def dfs(self, start: int) -> list[int]:
        """Visit depth first from start and return nodes in visiting order.

        Visited flags are not reset first: nodes already marked are skipped.
        """
        self._require(start)
        order = [start]
        self._visited[start] = True
        pending = [iter(self.adjacent(start))]
        while pending:
            for successor in pending[-1]:
                if not self._visited[successor]:
                    self._visited[successor] = True
                    order.append(successor)
                    pending.append(iter(self.adjacent(successor)))
                    break
            else:
                pending.pop()
        return order

    def bfs(self, start: int) -> list[int]:
        """Reset the visited flags, visit breadth first from start, return the order."""
        self._require(start)
        self.reset_visited()
        order: list[int] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            if not self._visited[node]:
                self._visited[node] = True
                order.append(node)
            queue.extend(
                successor for successor in self.adjacent(node) if not self._visited[successor]
            )
        return order

    def node_count(self) -> int:
        return self._nodes

    def edge_count(self) -> int:
        return self._edges