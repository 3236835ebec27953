"""Dijkstra shortest paths on directed weighted graphs numbered from 1."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable

WeightedEdge = tuple[int, int, int]


def _adjacency(n: int, edges: Iterable[WeightedEdge]) -> list[list[tuple[int, int]]]:
    if n < 1:
        raise ValueError("there must be at least one city")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        for x in (u, v):
            if not 1 <= x <= n:
                raise IndexError(f"city {x} is outside 1..{n}")
        adj[u].append((v, w))
    return adj


def shortest_routes(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Return the shortest distance from city 1 to each city ``1..n``.

    Edges are one-way flights ``(from, to, cost)``. Unreachable cities get None.
    """
    adj = _adjacency(n, edges)
    dist: list[float] = [math.inf] * (n + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adj[u]:
            if d + w < dist[v]:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return [None if d == math.inf else int(d) for d in dist[1:]]


def flight_discount(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Return the cheapest cost from city 1 to city ``n`` with one flight at half price.

    The discounted flight costs ``cost // 2``. Returns None when ``n`` is unreachable.
    """
    adj = _adjacency(n, edges)
    # dist[state][city]: state 1 once the coupon has been spent.
    dist: list[list[float]] = [[math.inf] * (n + 1) for _ in range(2)]
    dist[0][1] = 0
    heap = [(0, 1, 0)]
    while heap:
        d, u, used = heapq.heappop(heap)
        if d > dist[used][u]:
            continue
        for v, w in adj[u]:
            if d + w < dist[used][v]:
                dist[used][v] = d + w
                heapq.heappush(heap, (d + w, v, used))
            if not used and d + w // 2 < dist[1][v]:
                dist[1][v] = d + w // 2
                heapq.heappush(heap, (d + w // 2, v, 1))
    best = min(dist[0][n], dist[1][n])
    return None if best == math.inf else int(best)