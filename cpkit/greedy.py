"""Greedy and constructive answers to short contest problems."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterable, Sequence


def sort_if_mixed_parity(values: Iterable[int]) -> list[int]:
    """Return the values sorted when both parities occur, otherwise unchanged."""
    values = list(values)
    parities = {v % 2 for v in values}
    return sorted(values) if len(parities) == 2 else values


def _half(total: int) -> int:
    """Halve rounding toward zero."""
    return total // 2 if total >= 0 else -((-total) // 2)


def neighbour_gaps(values: Sequence[int]) -> list[int]:
    """Return, for each element, the width of the region of points nearest to it.

    The smallest and largest elements get -1, their region being unbounded.
    """
    order = sorted(range(len(values)), key=lambda i: (values[i], i))
    sorted_values = [values[i] for i in order]
    mids = [_half(x + y) for x, y in zip(sorted_values, sorted_values[1:])]
    gaps = [-1] * len(values)
    for rank in range(1, len(values) - 1):
        gaps[order[rank]] = mids[rank] - mids[rank - 1]
    return gaps


def make_peaks(values: Sequence[int]) -> int:
    """Return the total decrease needed so each odd position stands above its neighbours.

    Odd positions (counting from 0) take the running maximum seen so far.
    """
    if len(values) < 2:
        raise ValueError("there must be at least two values")
    v = list(values)
    running = 0
    for i, value in enumerate(v):
        running = max(running, value)
        if i % 2:
            v[i] = running
    last = len(v) - 1
    total = 0
    for i in range(0, len(v), 2):
        if i == 0:
            low = v[1]
        elif i == last:
            low = v[i - 1]
        else:
            low = min(v[i - 1], v[i + 1])
        if v[i] >= low:
            total += v[i] - low + 1
    return total


def even_sum_wins(x: int, y: int) -> bool:
    """Return True if the even multiples of ``x`` up to ``y`` sum to at least the odd ones."""
    if x < 1:
        raise ValueError("x must be at least 1")
    multiples = range(x, y + 1, x)
    odd = sum(m for m in multiples if m % 2)
    even = sum(m for m in multiples if m % 2 == 0)
    return even >= odd


def single_operation(values: Sequence[int], mask: str) -> list[tuple[int, int]] | None:
    """Return the operations, as 1-based ranges, that satisfy every marked position.

    A position marked ``'1'`` needs a value strictly between the two end
    values. Returns None when that cannot be done.
    """
    n = len(values)
    if len(mask) != n:
        raise ValueError("mask must be as long as values")
    if n == 0:
        return []
    if mask[0] == "1" or mask[-1] == "1":
        return None
    if "1" not in mask:
        return []
    low, high = sorted((values[0], values[-1]))
    for value, flag in zip(values[1:-1], mask[1:-1]):
        if flag == "1" and not low < value < high:
            return None
    return [(1, n)]


def slay_monsters(
    swords: Iterable[int], lives: Sequence[int], rewards: Sequence[int]
) -> int:
    """Return how many monsters can be slain.

    A sword of damage ``d`` kills a monster of life ``b <= d`` and is used up;
    a monster with reward ``c > 0`` then leaves a sword of damage ``max(d, c)``.
    Rewarding monsters are fought first, each kind from the weakest up,
    always with the weakest sword that suffices.
    """
    if len(lives) != len(rewards):
        raise ValueError("lives and rewards must have the same length")
    available = sorted(swords)
    monsters = sorted(zip(lives, rewards), key=lambda m: (m[1] == 0, m[0]))
    killed = 0
    for life, reward in monsters:
        pos = bisect_left(available, life)
        if pos == len(available):
            continue
        damage = available.pop(pos)
        killed += 1
        if reward > 0:
            insort(available, max(damage, reward))
    return killed


def _non_decreasing(s: str) -> bool:
    return all(x <= y for x, y in zip(s, s[1:]))


def _palindrome(s: str) -> bool:
    return s == s[::-1]


def split_sorted_palindrome(s: str) -> list[int]:
    """Return 1-based positions of a non-decreasing subsequence whose removal leaves a palindrome.

    Subsets are tried in increasing bitmask order. Returns an empty list
    when nothing is found.
    """
    n = len(s)
    for mask in range(1 << n):
        chosen = [k for k in range(n) if mask >> k & 1]
        rest = [k for k in range(n) if not mask >> k & 1]
        a = "".join(s[k] for k in chosen)
        b = "".join(s[k] for k in rest)
        if _non_decreasing(a) and _palindrome(b):
            return [k + 1 for k in chosen]
        if _non_decreasing(b) and _palindrome(b):
            return [k + 1 for k in rest]
    return []


def xor_operations(a: int, b: int) -> list[int] | None:
    """Return values ``x``, each at most the current number, whose xors turn ``a`` into ``b``.

    At most two operations are used. Returns None when ``b`` has a higher
    top bit than ``a`` or no such pair is found.
    """
    if a < 0 or b < 0:
        raise ValueError("a and b must not be negative")
    if a == b:
        return []
    top_a = a.bit_length() - 1
    if b.bit_length() - 1 > top_a:
        return None
    x = a ^ b
    if x <= a:
        return [x]
    y = (1 << top_a) - 1
    after = y ^ a
    second = b ^ after
    if second <= after:
        return [y, second]
    return None