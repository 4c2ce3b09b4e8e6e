"""Stacks, queues and adjacency-matrix graphs, with exercises and small algorithms on them."""

__version__ = "0.1.0"