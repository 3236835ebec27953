"""Searches over unweighted graphs whose vertices are numbered from 1."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]

_UNSEEN, _ACTIVE, _DONE = 0, 1, 2


class NoSolution(ValueError):
    """Raised when a graph problem has no valid answer."""


def _adjacency(n: int, edges: Iterable[Edge], *, directed: bool = False) -> list[list[int]]:
    if n < 0:
        raise ValueError("n must not be negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        for x in (u, v):
            if not 1 <= x <= n:
                raise IndexError(f"vertex {x} is outside 1..{n}")
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def _close_cycle(parent: Sequence[int], start: int, end: int) -> list[int]:
    """Walk parents from ``end`` back to ``start`` and return the closed cycle."""
    path = [end]
    while path[-1] != start:
        path.append(parent[path[-1]])
    path.reverse()
    path.append(start)
    return path


def building_roads(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return roads joining the first city of each component to the next one's."""
    adj = _adjacency(n, edges)
    seen = [False] * (n + 1)
    leaders = []
    for city in range(1, n + 1):
        if seen[city]:
            continue
        leaders.append(city)
        seen[city] = True
        stack = [city]
        while stack:
            node = stack.pop()
            for child in adj[node]:
                if not seen[child]:
                    seen[child] = True
                    stack.append(child)
    return list(zip(leaders, leaders[1:]))


def build_teams(n: int, edges: Iterable[Edge]) -> list[int]:
    """Split pupils ``1..n`` into teams 1 and 2 so that no friends share a team.

    The lowest-numbered pupil of each group goes to team 1. Raises
    NoSolution when the friendship graph is not bipartite.
    """
    adj = _adjacency(n, edges)
    team = [0] * (n + 1)
    for start in range(1, n + 1):
        if team[start]:
            continue
        team[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            other = 3 - team[node]
            for child in adj[node]:
                if team[child] == 0:
                    team[child] = other
                    queue.append(child)
                elif team[child] != other:
                    raise NoSolution("the pupils cannot be split into two teams")
    return team[1:]


def course_schedule(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return an order of courses ``1..n`` that respects every ``(before, after)`` pair.

    Courses become available in the order their last prerequisite is taken.
    Raises NoSolution when the requirements form a cycle.
    """
    adj = _adjacency(n, edges, directed=True)
    indegree = [0] * (n + 1)
    for children in adj:
        for child in children:
            indegree[child] += 1
    queue = deque(course for course in range(1, n + 1) if indegree[course] == 0)
    order = []
    while queue:
        course = queue.popleft()
        order.append(course)
        for child in adj[course]:
            indegree[child] -= 1
            if indegree[child] == 0:
                queue.append(child)
    if len(order) != n:
        raise NoSolution("the course requirements contain a cycle")
    return order


def message_route(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a route with the fewest computers from 1 to ``n``, both included.

    Raises NoSolution when ``n`` cannot be reached.
    """
    if n < 1:
        raise ValueError("there must be at least one computer")
    adj = _adjacency(n, edges)
    parent = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        if node == n:
            break
        for child in adj[node]:
            if child not in parent:
                parent[child] = node
                queue.append(child)
    if n not in parent:
        raise NoSolution(f"computer {n} cannot be reached from computer 1")
    route = [n]
    while route[-1] != 1:
        route.append(parent[route[-1]])
    route.reverse()
    return route


def round_trip(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a cycle ``[c, ..., c]`` in an undirected graph.

    Raises NoSolution when the graph is a forest.
    """
    adj = _adjacency(n, edges)
    state = [_UNSEEN] * (n + 1)
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if state[root] != _UNSEEN:
            continue
        state[root] = _ACTIVE
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child == parent[node] or state[child] == _DONE:
                    continue
                if state[child] == _ACTIVE:
                    return _close_cycle(parent, child, node)
                state[child] = _ACTIVE
                parent[child] = node
                stack.append((child, iter(adj[child])))
                break
            else:
                state[node] = _DONE
                stack.pop()
    raise NoSolution("the graph has no cycle")


def round_trip_directed(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a directed cycle ``[c, ..., c]`` following the flight directions.

    Raises NoSolution when the graph is acyclic.
    """
    adj = _adjacency(n, edges, directed=True)
    state = [_UNSEEN] * (n + 1)
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if state[root] != _UNSEEN:
            continue
        state[root] = _ACTIVE
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if state[child] == _ACTIVE:
                    return _close_cycle(parent, child, node)
                if state[child] == _UNSEEN:
                    state[child] = _ACTIVE
                    parent[child] = node
                    stack.append((child, iter(adj[child])))
                    break
            else:
                state[node] = _DONE
                stack.pop()
    raise NoSolution("the graph has no directed cycle")


def min_jumps(jumps: Sequence[int]) -> int:
    """Return the fewest moves from cell 1 to the cell just past the last one.

    From cell ``i`` one may step to ``i + 1`` or jump to ``i + jumps[i - 1]``
    when that cell lies between 1 and ``len(jumps) + 1``.
    """
    goal = len(jumps) + 1
    adj: list[list[int]] = [[] for _ in range(goal + 1)]
    for cell, jump in enumerate(jumps, start=1):
        adj[cell].append(cell + 1)
        target = cell + jump
        if 1 <= target <= goal:
            adj[cell].append(target)
    dist = {1: 0}
    queue = deque([1])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            break
        for nxt in adj[cell]:
            if nxt not in dist:
                dist[nxt] = dist[cell] + 1
                queue.append(nxt)
    return dist[goal]


def orient_tree(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Direct every edge of a tree, rooting the scheme at a vertex of degree two or more.

    Returns directed edges ``(from, to)``. Raises NoSolution when no vertex
    has at least two neighbours.
    """
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n vertices has n - 1 edges")
    adj = _adjacency(n, edges)
    root = next((v for v in range(1, n + 1) if len(adj[v]) >= 2), None)
    if root is None:
        raise NoSolution("no vertex has two or more neighbours")

    visited = [False] * (n + 1)
    visited[root] = True
    result: list[Edge] = []

    def walk(start: int, reverse: bool) -> None:
        if visited[start]:
            return
        visited[start] = True
        stack = [(start, root, reverse, iter(adj[start]))]
        while stack:
            node, par, flipped, children = stack[-1]
            for child in children:
                if child == par or visited[child]:
                    continue
                result.append((child, node) if flipped else (node, child))
                visited[child] = True
                stack.append((child, node, not flipped, iter(adj[child])))
                break
            else:
                stack.pop()

    first, *rest = adj[root]
    walk(first, False)
    for child in rest:
        walk(child, True)
        result.append((root, child))
    result.append((first, root))
    return result