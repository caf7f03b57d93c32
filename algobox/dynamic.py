"""Dynamic-programming classics: knapsack, tilings, subsequences and sums."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from operator import add

MOD = 1_000_000_007


def knapsack(
    items: Sequence[tuple[int, int]], capacity: int
) -> tuple[int, list[int]]:
    """Solve the 0/1 knapsack for ``(weight, profit)`` items.

    Returns the best total profit and the indices of the items taken.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight, _ in items):
        raise ValueError("item weights must not be negative")

    table: list[list[int]] = []
    previous = [0] * (capacity + 1)
    for weight, profit in items:
        row = previous[:]
        for room in range(weight, capacity + 1):
            row[room] = max(previous[room], profit + previous[room - weight])
        table.append(row)
        previous = row

    chosen = []
    room = capacity
    for index in reversed(range(len(table))):
        before = table[index - 1][room] if index else 0
        if table[index][room] != before:
            chosen.append(index)
            room -= items[index][0]
    return previous[capacity], sorted(chosen)


def tiling(n: int) -> int:
    """Count the ways to tile a 2 x n board with 2 x 1 dominoes."""
    if n < 1:
        raise ValueError("board length must be positive")
    if n == 1:
        return 1
    shorter, current = 1, 2
    for _ in range(n - 2):
        shorter, current = current, shorter + current
    return current


def staircase(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 1:
        raise ValueError("number of stairs must be positive")
    return tiling(n)


def painting_fence(n: int, k: int) -> int:
    """Count colourings of ``n`` posts with ``k`` colours, no three in a row alike."""
    if n < 1:
        raise ValueError("fence must have at least one post")
    if n == 1:
        return k
    total = k * k
    different = k * (k - 1)
    for _ in range(n - 2):
        previous_different = different
        different = total * (k - 1)
        total = different + previous_different
    return total


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    if not values:
        raise ValueError("maximum subarray of an empty sequence")
    best = values[0]
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def max_non_adjacent_sum(values: Sequence[int]) -> int:
    """Return the largest sum of elements no two of which are neighbours."""
    if not values:
        raise ValueError("maximum sum of an empty sequence")
    inclusive, exclusive = values[0], 0
    for value in values[1:]:
        inclusive, exclusive = max(exclusive + value, inclusive), inclusive
    return inclusive


def max_increasing_subsequence_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-decreasing subsequence."""
    if not values:
        raise ValueError("maximum sum of an empty sequence")
    best: list[int] = []
    for value in values:
        extension = max(
            (total for earlier, total in zip(values, best) if earlier <= value),
            default=0,
        )
        best.append(value + max(extension, 0))
    return max(best)


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def _fibonacci_pair(n: int) -> tuple[int, int]:
    """Return (F(n), F(n+1)) modulo MOD by fast doubling."""
    if n == 0:
        return 0, 1
    a, b = _fibonacci_pair(n >> 1)
    even = a * ((2 * b - a) % MOD) % MOD
    odd = (a * a + b * b) % MOD
    return (odd, (even + odd) % MOD) if n & 1 else (even, odd)


def fibonacci_mod(n: int) -> int:
    """Return the n-th Fibonacci number (F(1) = F(2) = 1) modulo 1e9+7."""
    if n < 1:
        raise ValueError("Fibonacci index must be positive")
    return _fibonacci_pair(n)[0]


def can_reach_target(values: Sequence[int], target: int) -> bool:
    """Tell whether adding or subtracting each later value to the first hits ``target``."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    first, second, *rest = values
    sums = {first + second, first - second}
    for value in rest:
        sums = {total + value for total in sums} | {total - value for total in sums}
    return target in sums


def pascal_row(n: int) -> list[int]:
    """Return the n-th row (1-based) of Pascal's triangle."""
    if n < 1:
        raise ValueError("row number must be positive")
    row = [1]
    for _ in range(n - 1):
        row = [1, *map(add, row, row[1:]), 1]
    return row