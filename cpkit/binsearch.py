"""Binary search on the answer and the problems solved with it."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable, Sequence
from itertools import count


def first_true(lo: int, hi: int, predicate: Callable[[int], bool]) -> int:
    """Return the least ``x`` in ``lo..hi`` for which a monotone ``predicate`` holds.

    The predicate must be false then true across the range. Returns
    ``hi + 1`` when it holds nowhere.
    """
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if predicate(mid):
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def aggressive_cows(stalls: Sequence[int], cows: int) -> int:
    """Return the largest least distance between ``cows`` cows placed in ``stalls``."""
    if cows < 1 or cows > len(stalls):
        raise ValueError("cows must be between 1 and the number of stalls")
    positions = sorted(stalls)

    def fits(gap: int) -> bool:
        placed, last = 1, positions[0]
        for pos in positions[1:]:
            if pos - last >= gap:
                placed += 1
                last = pos
        return placed >= cows

    return first_true(0, 10**14, lambda gap: not fits(gap)) - 1


def chat_ban(k: int, x: int) -> int:
    """Return how many messages of a size-``k`` emote triangle are sent before a ban.

    Message ``i`` of the ``2k - 1`` messages holds ``i`` emotes going up to ``k``
    and then one fewer each time. The ban comes with the first message that
    brings the total to at least ``x``; if it never does, all are sent.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    last = 2 * k - 1
    if x >= k * k:
        return last

    def sent(m: int) -> int:
        if m <= k:
            return m * (m + 1) // 2
        unsent = last - m
        return k * k - unsent * (unsent + 1) // 2

    return first_true(1, last, lambda m: sent(m) >= x)


def count_pair_sums_at_most(a: Sequence[int], b: Sequence[int], x: int) -> int:
    """Return the number of pairs ``(a[i], b[j])`` whose sum is at most ``x``."""
    ordered = sorted(b)
    return sum(bisect_right(ordered, x - value) for value in a)


def kth_sum(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest sum ``a[i] + b[j]`` over all pairs, counting from 1."""
    if not 1 <= k <= len(a) * len(b):
        raise ValueError("k must be between 1 and the number of pairs")
    ordered_b = sorted(b)
    lo = min(a) + ordered_b[0]
    hi = max(a) + ordered_b[-1]
    return first_true(lo, hi, lambda x: count_pair_sums_at_most(a, ordered_b, x) >= k)


def _digit_sum(value: int) -> int:
    return sum(map(int, str(value)))


def perfect_number(n: int) -> int:
    """Return the ``n``-th smallest positive integer whose digits add up to 10."""
    if n < 1:
        raise ValueError("n must be at least 1")
    # Digit sum 10 means the number is 1 more than a multiple of 9.
    found = 0
    for candidate in count(1, 9):
        if _digit_sum(candidate) == 10:
            found += 1
            if found == n:
                return candidate
    raise AssertionError("unreachable")


def kth_not_divisible(n: int, k: int) -> int:
    """Return the ``k``-th positive integer that is not divisible by ``n``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if k < 1:
        raise ValueError("k must be at least 1")
    return first_true(1, 10**18, lambda m: m - m // n >= k)