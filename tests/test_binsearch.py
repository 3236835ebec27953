import pytest

from cpkit.binsearch import (
    aggressive_cows,
    chat_ban,
    count_pair_sums_at_most,
    first_true,
    kth_not_divisible,
    kth_sum,
    perfect_number,
)


def test_first_true_finds_threshold():
    assert first_true(0, 100, lambda x: x >= 37) == 37


def test_first_true_none_true():
    assert first_true(5, 50, lambda x: False) == 51


def test_first_true_all_true():
    assert first_true(5, 50, lambda x: True) == 5


def test_aggressive_cows_sample():
    assert aggressive_cows([1, 2, 8, 4, 9], 3) == 3


def test_aggressive_cows_two_cows_use_ends():
    stalls = [14, 3, 27, 9, 40]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


def test_aggressive_cows_all_stalls_filled():
    stalls = [14, 3, 27, 9, 40]
    ordered = sorted(stalls)
    assert aggressive_cows(stalls, len(stalls)) == min(
        y - x for x, y in zip(ordered, ordered[1:])
    )


def test_aggressive_cows_more_cows_never_wider():
    stalls = [1, 2, 4, 8, 9, 15, 23, 31]
    gaps = [aggressive_cows(stalls, c) for c in range(2, len(stalls) + 1)]
    assert all(a >= b for a, b in zip(gaps, gaps[1:]))


def test_aggressive_cows_too_many_cows():
    with pytest.raises(ValueError):
        aggressive_cows([1, 2], 3)


def test_chat_ban_sample():
    assert chat_ban(4, 6) == 3


def test_chat_ban_never_banned():
    k = 5
    assert chat_ban(k, k * k) == 2 * k - 1
    assert chat_ban(k, k * k + 100) == 2 * k - 1


def test_chat_ban_first_message():
    assert chat_ban(7, 1) == 1


def test_chat_ban_monotone_in_limit():
    k = 6
    results = [chat_ban(k, x) for x in range(1, k * k + 2)]
    assert all(a <= b for a, b in zip(results, results[1:]))
    assert all(1 <= r <= 2 * k - 1 for r in results)


def test_count_pair_sums_extremes():
    a, b = [4, 1, 7], [2, 9]
    assert count_pair_sums_at_most(a, b, max(a) + max(b)) == len(a) * len(b)
    assert count_pair_sums_at_most(a, b, min(a) + min(b) - 1) == 0


def test_kth_sum_small():
    assert kth_sum([1, 2], [3, 4], 3) == 5


def test_kth_sum_ends():
    a, b = [5, 1, 8], [3, 10, 2]
    assert kth_sum(a, b, 1) == min(a) + min(b)
    assert kth_sum(a, b, len(a) * len(b)) == max(a) + max(b)


def test_kth_sum_counts_agree():
    a, b = [5, 1, 8, 3], [3, 10, 2, 6]
    for k in range(1, 17):
        value = kth_sum(a, b, k)
        assert count_pair_sums_at_most(a, b, value) >= k
        assert count_pair_sums_at_most(a, b, value - 1) < k


def test_kth_sum_out_of_range():
    with pytest.raises(ValueError):
        kth_sum([1], [2], 2)
    with pytest.raises(ValueError):
        kth_sum([1], [2], 0)


def test_perfect_number_sequence_properties():
    values = [perfect_number(n) for n in range(1, 30)]
    assert all(sum(map(int, str(v))) == 10 for v in values)
    assert all(a < b for a, b in zip(values, values[1:]))


def test_perfect_number_rejects_zero():
    with pytest.raises(ValueError):
        perfect_number(0)


@pytest.mark.parametrize("n,k", [(3, 7), (4, 12), (2, 1), (1000000000, 1000000000)])
def test_kth_not_divisible(n, k):
    value = kth_not_divisible(n, k)
    assert value % n != 0
    assert value - value // n == k


def test_kth_not_divisible_rejects_one():
    with pytest.raises(ValueError):
        kth_not_divisible(1, 5)