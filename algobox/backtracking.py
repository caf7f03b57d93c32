"""Exhaustive generation of permutations and subsets."""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def permutations(nums: Sequence[T]) -> list[list[T]]:
    """Return every ordering of distinct ``nums``, in backtracking order."""
    if len(set(nums)) != len(nums):
        raise ValueError("values must be distinct")
    return [list(order) for order in itertools.permutations(nums)]


def subsets(nums: Sequence[T]) -> list[list[T]]:
    """Return every subset of ``nums``, each in input order, in backtracking order."""
    items = list(nums)
    result: list[list[T]] = []

    def extend(prefix: list[T], start: int) -> None:
        result.append(prefix)
        for index, item in enumerate(items[start:], start):
            extend([*prefix, item], index + 1)

    extend([], 0)
    return result