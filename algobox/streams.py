"""Statistics over a stream of numbers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class RunningMedian:
    """Median of the values seen so far, kept with two heaps."""

    def __init__(self) -> None:
        self._lower: list[float] = []  # max-heap, values negated
        self._upper: list[float] = []  # min-heap
        self._median = 0.0

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def add(self, value: float) -> float:
        """Take in ``value`` and return the median of everything seen."""
        if not self:
            heapq.heappush(self._upper, value)
        elif value < self._median:
            heapq.heappush(self._lower, -value)
        else:
            heapq.heappush(self._upper, value)

        if len(self._upper) - len(self._lower) > 1:
            heapq.heappush(self._lower, -heapq.heappop(self._upper))
        elif len(self._lower) - len(self._upper) > 1:
            heapq.heappush(self._upper, -heapq.heappop(self._lower))

        if len(self._upper) == len(self._lower):
            self._median = (self._upper[0] - self._lower[0]) / 2
        elif len(self._upper) > len(self._lower):
            self._median = float(self._upper[0])
        else:
            self._median = float(-self._lower[0])
        return self._median


def running_medians(values: Iterable[float]) -> list[float]:
    """Return the median after each value of ``values`` is taken in."""
    tracker = RunningMedian()
    return [tracker.add(value) for value in values]