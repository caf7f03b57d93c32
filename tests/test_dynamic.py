import pytest

from algobox.dynamic import (
    MOD,
    can_reach_target,
    fibonacci_mod,
    knapsack,
    longest_increasing_subsequence,
    max_increasing_subsequence_sum,
    max_non_adjacent_sum,
    max_subarray_sum,
    painting_fence,
    pascal_row,
    staircase,
    tiling,
)


def test_knapsack_known_case():
    items = [(1, 1), (3, 4), (4, 5), (5, 7)]
    profit, chosen = knapsack(items, 7)
    assert profit == 9
    assert sum(items[i][0] for i in chosen) <= 7
    assert sum(items[i][1] for i in chosen) == profit


def test_knapsack_single_item_fits():
    profit, chosen = knapsack([(4, 11)], 10)
    assert (profit, chosen) == (11, [0])


def test_knapsack_nothing_fits():
    profit, chosen = knapsack([(5, 3), (6, 8)], 4)
    assert profit == 0
    assert chosen == []


def test_knapsack_chosen_items_are_consistent():
    items = [(2, 3), (3, 4), (4, 5), (5, 6), (1, 2)]
    for capacity in range(12):
        profit, chosen = knapsack(items, capacity)
        assert sum(items[i][0] for i in chosen) <= capacity
        assert sum(items[i][1] for i in chosen) == profit


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        knapsack([(1, 1)], -1)


@pytest.mark.parametrize("n", [1, 2])
def test_tiling_base_cases(n):
    assert tiling(n) == n


@pytest.mark.parametrize("n", range(3, 25))
def test_tiling_recurrence(n):
    assert tiling(n) == tiling(n - 1) + tiling(n - 2)


@pytest.mark.parametrize("n", range(1, 20))
def test_staircase_matches_tiling(n):
    assert staircase(n) == tiling(n)


def test_tiling_rejects_zero():
    with pytest.raises(ValueError):
        tiling(0)
    with pytest.raises(ValueError):
        staircase(0)


def test_fibonacci_start():
    assert fibonacci_mod(1) == fibonacci_mod(2) == 1


@pytest.mark.parametrize("n", list(range(3, 60)) + [10**6, 10**12])
def test_fibonacci_recurrence(n):
    expected = (fibonacci_mod(n - 1) + fibonacci_mod(n - 2)) % MOD
    assert fibonacci_mod(n) == expected
    assert 0 <= fibonacci_mod(n) < MOD


@pytest.mark.parametrize("n", range(1, 30))
def test_fibonacci_matches_tiling(n):
    assert fibonacci_mod(n + 1) == tiling(n)


def test_fibonacci_rejects_zero():
    with pytest.raises(ValueError):
        fibonacci_mod(0)


@pytest.mark.parametrize("k", range(1, 6))
def test_painting_fence_small_fences(k):
    assert painting_fence(1, k) == k
    assert painting_fence(2, k) == k * k


@pytest.mark.parametrize("k", range(1, 5))
@pytest.mark.parametrize("n", range(3, 9))
def test_painting_fence_recurrence(n, k):
    expected = (k - 1) * (painting_fence(n - 1, k) + painting_fence(n - 2, k))
    assert painting_fence(n, k) == expected


def test_painting_fence_rejects_empty_fence():
    with pytest.raises(ValueError):
        painting_fence(0, 3)


def test_max_subarray_known_case():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_all_negative():
    values = [-8, -3, -6, -2, -5, -4]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_all_positive():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_rejects_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_max_non_adjacent_separated_values():
    values = [3, 0, 4, 0, 5]
    assert max_non_adjacent_sum(values) == sum(values)


@pytest.mark.parametrize("pair", [(4, 9), (9, 4), (7, 7)])
def test_max_non_adjacent_pair(pair):
    assert max_non_adjacent_sum(list(pair)) == max(pair)


def test_max_non_adjacent_single():
    assert max_non_adjacent_sum([42]) == 42


def test_max_non_adjacent_rejects_empty():
    with pytest.raises(ValueError):
        max_non_adjacent_sum([])


def test_max_increasing_sum_ascending():
    values = [1, 2, 2, 5, 9]
    assert max_increasing_subsequence_sum(values) == sum(values)


def test_max_increasing_sum_descending():
    values = [9, 7, 4, 3]
    assert max_increasing_subsequence_sum(values) == max(values)


def test_max_increasing_sum_bounds():
    values = [4, 1, 1, 1, 5, 2, 8, 3]
    result = max_increasing_subsequence_sum(values)
    assert max(values) <= result <= sum(values)


def test_max_increasing_sum_rejects_empty():
    with pytest.raises(ValueError):
        max_increasing_subsequence_sum([])


def test_lis_known_case():
    assert longest_increasing_subsequence([10, 9, 2, 5, 3, 7, 101, 18]) == 4


def test_lis_ascending():
    values = list(range(12))
    assert longest_increasing_subsequence(values) == len(values)


def test_lis_all_equal():
    assert longest_increasing_subsequence([7, 7, 7, 7]) == 1


def test_can_reach_full_sum():
    values = [3, 5, 2, 8]
    assert can_reach_target(values, sum(values)) is True


def test_cannot_reach_wrong_parity():
    values = [3, 5, 2, 8]
    assert can_reach_target(values, sum(values) + 1) is False


def test_first_value_cannot_be_negated():
    values = [1, 2, 3]
    assert can_reach_target(values, -sum(values)) is False


def test_can_reach_target_needs_two_values():
    with pytest.raises(ValueError):
        can_reach_target([5], 5)


@pytest.mark.parametrize("n", range(1, 15))
def test_pascal_row_properties(n):
    row = pascal_row(n)
    assert len(row) == n
    assert sum(row) == 2 ** (n - 1)
    assert row == row[::-1]
    assert row[0] == row[-1] == 1


def test_pascal_row_first():
    assert pascal_row(1) == [1]


def test_pascal_row_rejects_zero():
    with pytest.raises(ValueError):
        pascal_row(0)