"""Breadth-first searches over character grids with 4-way moves."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

# Order matters for the labyrinth route: up, down, left, right.
_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))

Cell = tuple[int, int]


def _shape(grid: Sequence[str]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def _neighbours(cell: Cell, rows: int, cols: int) -> Iterator[tuple[str, Cell]]:
    r, c = cell
    for name, dr, dc in _MOVES:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield name, (nr, nc)


def count_rooms(grid: Sequence[str]) -> int:
    """Count the connected regions of floor cells ``'.'``."""
    rows, cols = _shape(grid)
    seen: set[Cell] = set()
    rooms = 0
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                cell = queue.popleft()
                for _, (nr, nc) in _neighbours(cell, rows, cols):
                    if grid[nr][nc] == "." and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return rooms


def grid_distances(grid: Sequence[str], start: Cell) -> dict[Cell, int]:
    """Return the step distance from ``start`` to every reachable cell.

    Cells holding ``'#'`` are walls; anything else can be walked on.
    """
    rows, cols = _shape(grid)
    sr, sc = start
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise IndexError(f"start {start} is outside the grid")
    dist = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for _, (nr, nc) in _neighbours(cell, rows, cols):
            if grid[nr][nc] != "#" and (nr, nc) not in dist:
                dist[(nr, nc)] = dist[cell] + 1
                queue.append((nr, nc))
    return dist


def labyrinth_path(grid: Sequence[str]) -> str | None:
    """Return a shortest move string (``U``, ``D``, ``L``, ``R``) from A to B.

    Only ``'.'``, ``'A'`` and ``'B'`` cells can be walked on. Returns None
    when B cannot be reached.
    """
    rows, cols = _shape(grid)
    start = end = None
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == "A":
                start = (r, c)
            elif ch == "B":
                end = (r, c)
    if start is None or end is None:
        raise ValueError("grid must contain both 'A' and 'B'")

    came_from: dict[Cell, tuple[Cell, str]] = {}
    seen = {start}
    queue = deque([start])
    found = False
    while queue:
        cell = queue.popleft()
        if cell == end:
            found = True
            break
        for name, (nr, nc) in _neighbours(cell, rows, cols):
            if grid[nr][nc] in ".AB" and (nr, nc) not in seen:
                seen.add((nr, nc))
                came_from[(nr, nc)] = (cell, name)
                queue.append((nr, nc))
    if not found:
        return None

    steps = []
    cell = end
    while cell != start:
        cell, name = came_from[cell]
        steps.append(name)
    return "".join(reversed(steps))