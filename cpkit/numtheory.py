"""Counting and divisibility problems over small integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from math import gcd

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)


class BinomialTable:
    """Binomial coefficients modulo a prime, from precomputed factorials."""

    def __init__(self, limit: int = 10**6, modulus: int = 10**9 + 7) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        if modulus < 2:
            raise ValueError("modulus must be at least 2")
        if limit >= modulus:
            raise ValueError("limit must be smaller than the modulus")
        self.limit = limit
        self.modulus = modulus
        fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fact[i] = fact[i - 1] * i % modulus
        inv = [1] * (limit + 1)
        inv[limit] = pow(fact[limit], modulus - 2, modulus)
        for i in range(limit, 0, -1):
            inv[i - 1] = inv[i] * i % modulus
        self._fact = fact
        self._inv = inv

    def choose(self, n: int, r: int) -> int:
        """Return ``C(n, r)`` modulo the table's modulus."""
        if not 0 <= n <= self.limit:
            raise ValueError(f"n must be between 0 and {self.limit}")
        if not 0 <= r <= n:
            raise ValueError("r must be between 0 and n")
        m = self.modulus
        return self._fact[n] * self._inv[r] % m * self._inv[n - r] % m


def smallest_prime_factors(limit: int) -> list[int]:
    """Return a list whose entry ``i`` is the least prime dividing ``i``.

    Entries 0 and 1 are 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    spf = [0] * (limit + 1)
    for i in range(2, limit + 1):
        if spf[i] == 0:
            for j in range(i, limit + 1, i):
                if spf[j] == 0:
                    spf[j] = i
    return spf


def _distinct_prime_factors(x: int, spf: Sequence[int]) -> Iterator[int]:
    while x > 1:
        p = spf[x]
        yield p
        while x % p == 0:
            x //= p


def _frequencies(values: Sequence[int]) -> list[int]:
    if any(v < 1 for v in values):
        raise ValueError("values must be positive")
    freq = [0] * (max(values) + 1)
    for v in values:
        freq[v] += 1
    return freq


def count_rhyme_pairs(values: Iterable[int]) -> int:
    """Count pairs ``i < j`` whose gcd is divisible by no element of ``values``.

    An element equal to 1 divides everything, so then no pair qualifies.
    """
    values = list(values)
    if not values:
        return 0
    freq = _frequencies(values)
    top = len(freq) - 1
    if freq[1]:
        return 0
    exact = [0] * (top + 1)
    for g in range(top, 0, -1):
        multiples = sum(freq[g::g])
        exact[g] = multiples * (multiples - 1) // 2 - sum(exact[2 * g :: g])
    bad = [False] * (top + 1)
    for d in range(2, top + 1):
        if freq[d]:
            bad[d::d] = [True] * len(range(d, top + 1, d))
    return sum(count for g, count in enumerate(exact) if g and not bad[g])


def min_gcd_operations(values: Iterable[int]) -> int:
    """Return how many increments by one make two elements share a factor above 1.

    The answer is 0 when two elements already share one, 1 when adding one
    to some element gives it a prime that divides another element, else 2.
    """
    values = list(values)
    if not values:
        raise ValueError("there must be at least one value")
    freq = _frequencies(values)
    top = len(freq) - 1
    has_multiple = [False] * (top + 1)
    for d in range(2, top + 1):
        count = sum(freq[d::d])
        if count >= 2:
            return 0
        has_multiple[d] = count >= 1
    spf = smallest_prime_factors(top + 1)
    for x in sorted(set(values)):
        for p in _distinct_prime_factors(x + 1, spf):
            if p <= top and has_multiple[p]:
                return 1
    return 2


def smallest_coprime_prime(values: Iterable[int]) -> int | None:
    """Return the least prime up to 53 that fails to divide some element.

    Returns None when every such prime divides every element.
    """
    values = list(values)
    return next(
        (p for p in _SMALL_PRIMES if any(v % p != 0 for v in values)), None
    )


def gcd_order(n: int) -> list[int]:
    """Return ``1..n`` ordered by ``gcd(i, n)`` descending, then by ``i``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return sorted(range(1, n + 1), key=lambda i: (-gcd(i, n), i))