"""Classic array problems: k-sums, partitions, searches and linear scans."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import accumulate


def _distinct_indices(values: Sequence[int], start: int, stop: int) -> Iterator[int]:
    """Yield indices in ``[start, stop)`` that begin a run of equal values."""
    for index in range(start, stop):
        if index == start or values[index] != values[index - 1]:
            yield index


def _pairs_with_sum(
    values: Sequence[int], start: int, target: int
) -> Iterator[tuple[int, int]]:
    """Yield distinct pairs from sorted ``values[start:]`` adding up to ``target``."""
    low, high = start, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            yield values[low], values[high]
            while low < high and values[low] == values[low + 1]:
                low += 1
            while low < high and values[high] == values[high - 1]:
                high -= 1
            low += 1
            high -= 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of ``nums`` that sums to zero."""
    values = sorted(nums)
    return [
        [values[first], second, third]
        for first in _distinct_indices(values, 0, len(values) - 2)
        for second, third in _pairs_with_sum(values, first + 1, -values[first])
    ]


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruplet of ``nums`` summing to ``target``."""
    values = sorted(nums)
    size = len(values)
    return [
        [values[first], values[second], third, fourth]
        for first in _distinct_indices(values, 0, size - 3)
        for second in _distinct_indices(values, first + 1, size - 2)
        for third, fourth in _pairs_with_sum(
            values, second + 1, target - values[first] - values[second]
        )
    ]


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return the numbers in ``1..len(nums)`` that do not occur in ``nums``."""
    size = len(nums)
    marks = list(nums)
    for value in nums:
        if not 1 <= value <= size:
            raise ValueError(f"value {value} is outside 1..{size}")
        marks[value - 1] = -abs(marks[value - 1])
    return [position for position, mark in enumerate(marks, 1) if mark > 0]


def first_missing_positive(nums: Sequence[int]) -> int:
    """Return the smallest positive integer that does not occur in ``nums``."""
    positives = [value for value in nums if value > 0]
    size = len(positives)
    marks = list(positives)
    for value in positives:
        if value <= size:
            marks[value - 1] = -abs(marks[value - 1])
    for position, mark in enumerate(marks, 1):
        if mark > 0:
            return position
    return size + 1


def has_pythagorean_triplet(values: Sequence[int]) -> bool:
    """Tell whether three of ``values`` satisfy a*a + b*b == c*c."""
    squares = sorted(value * value for value in values)
    for top in range(len(squares) - 1, 1, -1):
        low, high = 0, top - 1
        while low < high:
            total = squares[low] + squares[high]
            if total < squares[top]:
                low += 1
            elif total > squares[top]:
                high -= 1
            else:
                return True
    return False


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def trap_rain_water(heights: Sequence[int]) -> int:
    """Return how much water an elevation map of bar heights holds."""
    left, right = 0, len(heights) - 1
    left_max = right_max = trapped = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] >= left_max:
                left_max = heights[left]
            else:
                trapped += left_max - heights[left]
            left += 1
        else:
            if heights[right] >= right_max:
                right_max = heights[right]
            else:
                trapped += right_max - heights[right]
            right -= 1
    return trapped


def _check_012(values: Sequence[int]) -> None:
    for value in values:
        if value not in (0, 1, 2):
            raise ValueError(f"expected only 0, 1 or 2, got {value!r}")


def sort_012(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag)."""
    _check_012(values)
    result = list(values)
    low = current = 0
    high = len(result) - 1
    while current <= high:
        value = result[current]
        if value == 0:
            result[current], result[low] = result[low], result[current]
            current += 1
            low += 1
        elif value == 1:
            current += 1
        else:
            result[current], result[high] = result[high], result[current]
            high -= 1
    return result


def sort_012_counting(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s by counting each value."""
    _check_012(values)
    counts = Counter(values)
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def equilibrium_position(values: Sequence[int]) -> int:
    """Return the 1-based position whose left and right sums are equal, or -1.

    A single element is its own equilibrium; the first element of a longer
    sequence is never considered.
    """
    if not values:
        raise ValueError("equilibrium position of an empty sequence")
    if len(values) == 1:
        return 1
    prefix = list(accumulate(values))
    total = prefix[-1]
    for position, (before, upto) in enumerate(zip(prefix, prefix[1:]), start=2):
        if total - upto == before:
            return position
    return -1


def subarray_with_sum(
    values: Sequence[int], target: int
) -> tuple[int, int] | None:
    """Return 1-based (start, end) of the first window of non-negative values
    summing to ``target``, or None."""
    window = 0
    start = 0
    for end, value in enumerate(values):
        window += value
        while window > target and start <= end:
            window -= values[start]
            start += 1
        if window == target:
            return start + 1, end + 1
    return None


def reverse_in_groups(values: Sequence[int], k: int) -> list[int]:
    """Reverse every consecutive group of ``k`` elements; the last may be shorter."""
    if k <= 0:
        raise ValueError("group size must be positive")
    return [
        item
        for start in range(0, len(values), k)
        for item in reversed(values[start:start + k])
    ]


def buy_sell_days(prices: Sequence[int]) -> list[tuple[int, int]]:
    """Return (buy, sell) day pairs covering every stretch of rising prices."""
    size = len(prices)
    trades = []
    day = 0
    while day < size - 1:
        while day < size - 1 and prices[day + 1] <= prices[day]:
            day += 1
        if day == size - 1:
            break
        buy = day
        day += 1
        while day < size and prices[day] >= prices[day - 1]:
            day += 1
        trades.append((buy, day - 1))
    return trades


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the k-th smallest value (1-based) by randomised quickselect."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must lie in 1..{len(values)}, got {k}")
    items = list(values)
    wanted = k - 1
    left, right = 0, len(items) - 1
    while left < right:
        pivot_index = random.randrange(left, right)
        items[pivot_index], items[right] = items[right], items[pivot_index]
        pivot = items[right]
        store = left
        for index in range(left, right):
            if items[index] <= pivot:
                items[store], items[index] = items[index], items[store]
                store += 1
        items[store], items[right] = items[right], items[store]
        if store == wanted:
            return items[store]
        if store < wanted:
            left = store + 1
        else:
            right = store - 1
    return items[left]