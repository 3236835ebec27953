"""Dynamic-programming solutions to classic counting and optimisation problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def frog1(heights: Sequence[int]) -> int:
    """Return the least total cost for a frog to reach the last stone.

    From stone ``i`` the frog jumps to ``i + 1`` or ``i + 2``, paying the
    absolute difference of the two heights.
    """
    return frog2(heights, 2)


def frog2(heights: Sequence[int], k: int) -> int:
    """Return the least cost to reach the last stone jumping at most ``k`` stones."""
    if not heights:
        raise ValueError("there must be at least one stone")
    if k < 1:
        raise ValueError("k must be at least 1")
    cost = [0] * len(heights)
    for i in range(1, len(heights)):
        cost[i] = min(
            cost[j] + abs(heights[i] - heights[j]) for j in range(max(0, i - k), i)
        )
    return cost[-1]


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Return the greatest total value of items ``(weight, value)`` that fit in ``capacity``.

    Each item may be taken at most once.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("weights must not be negative")
        for room in range(capacity, weight - 1, -1):
            candidate = best[room - weight] + value
            if candidate > best[room]:
                best[room] = candidate
    return best[capacity]


def vacation(days: Iterable[Sequence[int]]) -> int:
    """Return the greatest happiness over days of three activities each.

    Each day offers happiness ``(a, b, c)`` for its three activities; the same
    activity may not be chosen on two consecutive days.
    """
    best = (0, 0, 0)
    for day in days:
        if len(day) != 3:
            raise ValueError("each day must offer exactly three activities")
        best = tuple(
            day[act] + max(best[other] for other in range(3) if other != act)
            for act in range(3)
        )
    return max(best)


def tribonacci(n: int) -> int:
    """Return the ``n``-th tribonacci number, with T0 = 0 and T1 = T2 = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for _ in range(max(rows, 0)):
        if not triangle:
            triangle.append([1])
            continue
        prev = triangle[-1]
        triangle.append([1] + [x + y for x, y in zip(prev, prev[1:])] + [1])
    return triangle


def divisor_game(n: int) -> bool:
    """Return True if the first player wins the divisor game starting from ``n``.

    A move subtracts a divisor ``x`` of the current number with ``x`` in 1..2;
    the player who cannot move loses.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    wins = [False] * (n + 1)
    for m in range(2, n + 1):
        wins[m] = any(
            m % x == 0 and m - x >= 1 and not wins[m - x] for x in (1, 2)
        )
    return wins[n]