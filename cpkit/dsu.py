"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations

from collections.abc import Iterable


class DSU:
    """Disjoint sets over the items ``0..n``, each starting in its own set.

    Item 0 is present but not counted in ``num_components``, so the usual
    1-based items ``1..n`` start as ``n`` components.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self.n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self.num_components = n

    def _check(self, i: int) -> None:
        if not 0 <= i <= self.n:
            raise IndexError(f"item {i} is outside 0..{self.n}")

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        self._check(i)
        parent = self._parent
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    def unite(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return True if they were apart."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_v] = root_u
        self._size[root_u] += self._size[root_v]
        self.num_components -= 1
        return True

    def connected(self, u: int, v: int) -> bool:
        """Return True if ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)


def connect_components(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the fewest new roads that join cities ``1..n`` into one network.

    Each road links the representatives of two neighbouring components,
    taken in increasing order of representative.
    """
    dsu = DSU(n)
    for u, v in edges:
        dsu.unite(u, v)
    roots = sorted({dsu.find(i) for i in range(1, n + 1)})
    return [(cur, prev) for prev, cur in zip(roots, roots[1:])]