import pytest

from cpkit.greedy import (
    even_sum_wins,
    make_peaks,
    neighbour_gaps,
    single_operation,
    slay_monsters,
    sort_if_mixed_parity,
    split_sorted_palindrome,
    xor_operations,
)


def test_same_parity_kept_in_order():
    assert sort_if_mixed_parity([5, 1, 3]) == [5, 1, 3]
    assert sort_if_mixed_parity([8, 2, 4]) == [8, 2, 4]


def test_mixed_parity_sorted():
    values = [5, 2, 9, 4]
    assert sort_if_mixed_parity(values) == sorted(values)


def test_neighbour_gaps_ends_unbounded():
    gaps = neighbour_gaps([30, 10, 20])
    assert gaps[0] == -1
    assert gaps[1] == -1
    assert len(gaps) == 3


def test_neighbour_gaps_even_spacing():
    assert neighbour_gaps([40, 10, 30, 20]) == [-1, -1, 10, 10]


def test_neighbour_gaps_tiny_inputs():
    assert neighbour_gaps([7]) == [-1]
    assert neighbour_gaps([]) == []


def test_make_peaks_already_peaked():
    assert make_peaks([1, 5, 1, 5, 1]) == 0


def test_make_peaks_never_negative():
    for values in ([3, 1], [5, 5, 5, 5], [9, 2, 8, 3, 7]):
        assert make_peaks(values) >= 0


def test_make_peaks_needs_two():
    with pytest.raises(ValueError):
        make_peaks([4])


def test_even_sum_wins():
    assert even_sum_wins(2, 100) is True
    assert even_sum_wins(1, 1) is False


def test_even_sum_rejects_zero_step():
    with pytest.raises(ValueError):
        even_sum_wins(0, 10)


def test_single_operation_cases():
    assert single_operation([1, 2, 3], "100") is None
    assert single_operation([1, 2, 3], "001") is None
    assert single_operation([1, 2, 3], "000") == []
    assert single_operation([1, 2, 3], "010") == [(1, 3)]
    assert single_operation([1, 5, 3], "010") is None


def test_single_operation_length_mismatch():
    with pytest.raises(ValueError):
        single_operation([1, 2], "010")


def test_slay_all_monsters():
    lives = [3, 4]
    assert slay_monsters([5], lives, [10, 0]) == len(lives)


def test_slay_no_sword_strong_enough():
    assert slay_monsters([1], [3], [0]) == 0


def test_slay_bounded_by_monsters():
    lives = [2, 7, 4, 9, 1]
    assert 0 <= slay_monsters([3, 8], lives, [0, 5, 0, 0, 6]) <= len(lives)


def test_slay_length_mismatch():
    with pytest.raises(ValueError):
        slay_monsters([1], [1, 2], [0])


def test_split_palindrome_needs_nothing():
    assert split_sorted_palindrome("0110") == []


@pytest.mark.parametrize("s", ["0011", "1010", "abc", "ba", "10010"])
def test_split_invariant(s):
    picked = split_sorted_palindrome(s)
    chosen = "".join(s[k - 1] for k in picked)
    rest = "".join(ch for k, ch in enumerate(s, 1) if k not in picked)
    assert picked == sorted(set(picked))
    assert list(chosen) == sorted(chosen)
    assert rest == rest[::-1] or chosen == chosen[::-1]


def _apply(a, ops):
    for x in ops:
        assert x <= a
        a ^= x
    return a


@pytest.mark.parametrize("a,b", [(9, 6), (8, 7), (13, 2), (5, 4), (100, 37)])
def test_xor_operations_reach_target(a, b):
    ops = xor_operations(a, b)
    if ops is not None:
        assert len(ops) <= 2
        assert _apply(a, ops) == b


def test_xor_operations_equal():
    assert xor_operations(7, 7) == []


def test_xor_operations_higher_bit_impossible():
    assert xor_operations(3, 8) is None
    assert xor_operations(0, 1) is None


def test_xor_operations_rejects_negative():
    with pytest.raises(ValueError):
        xor_operations(-1, 2)