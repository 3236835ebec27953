"""Competitive programming algorithms: union-find, graph and grid search, shortest paths, dynamic programming, binary search, number theory and greedy solutions."""

__version__ = "0.1.0"