"""Contest problems: unions, medians, typing, schedules, progressions and gifts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def group_sizes(n: int, groups: Iterable[Sequence[int]]) -> list[int]:
    """Return, for each user ``1..n``, the size of the connected set of users
    reachable through shared groups."""
    if n < 0:
        raise ValueError("number of users must not be negative")
    parent = list(range(n + 1))
    size = [1] * (n + 1)

    def find(user: int) -> int:
        while user != parent[user]:
            parent[user] = parent[parent[user]]
            user = parent[user]
        return user

    def unite(first: int, second: int) -> None:
        root_a, root_b = find(first), find(second)
        if root_a == root_b:
            return
        if size[root_a] > size[root_b]:
            root_a, root_b = root_b, root_a
        parent[root_a] = root_b
        size[root_b] += size[root_a]

    for group in groups:
        members = list(group)
        for member in members:
            if not 1 <= member <= n:
                raise ValueError(f"user {member} is outside 1..{n}")
        for first, second in zip(members, members[1:]):
            unite(first, second)
    return [size[find(user)] for user in range(1, n + 1)]


def max_median(values: Sequence[int], k: int) -> int:
    """Return the largest median reachable by at most ``k`` unit increments."""
    if not values:
        raise ValueError("median of an empty sequence")
    if k < 0:
        raise ValueError("k must not be negative")
    ordered = sorted(values)
    middle = (len(ordered) - 1) // 2
    for index in range(middle, len(ordered) - 1):
        count = index - middle + 1
        cost = (ordered[index + 1] - ordered[index]) * count
        if k < cost:
            return ordered[index] + k // count
        k -= cost
    return ordered[-1] + k // (len(ordered) - middle)


def min_rope_moves(positions: Sequence[int], d: int) -> int:
    """Return the unit moves needed so three walkers stand pairwise ``d`` apart."""
    if len(positions) != 3:
        raise ValueError("exactly three positions are needed")
    if d == 0:
        return 0
    low, mid, high = sorted(positions)
    return max(0, d - (mid - low)) + max(0, d - (high - mid))


def is_stretched_typing(s: str, t: str) -> bool:
    """Tell whether ``t`` could come from typing ``s`` on keys that may repeat."""
    if not s or not t:
        raise ValueError("words must not be empty")
    if s[0] != t[0] or len(s) > len(t) or s[-1] != t[-1]:
        return False
    i = j = 0
    while i < len(s) and j < len(t):
        if s[i] == t[j]:
            i += 1
            j += 1
        elif i and t[j] == s[i - 1]:
            j += 1
        else:
            return False
    if i != len(s):
        return False
    return all(char == s[-1] for char in t[j:])


def min_removals_per_student(durations: Sequence[int], limit: int) -> list[int]:
    """For each student, return how many earlier students must leave so that
    everyone up to and including them fits within ``limit``."""
    answers = []
    total = 0
    for index, duration in enumerate(durations):
        total += duration
        excess = total - limit
        removed = 0
        for earlier in sorted(durations[:index], reverse=True):
            if excess <= 0:
                break
            excess -= earlier
            removed += 1
        answers.append(removed)
    return answers


def _is_progression(values: Sequence[int]) -> bool:
    return len({b - a for a, b in zip(values, values[1:])}) <= 1


def _skip_candidate(ordered: Sequence[int], d: int) -> int | None:
    """Return the one position to skip so ``ordered`` follows step ``d`` from its start."""
    expected = ordered[0] + d
    skipped = None
    for position in range(1, len(ordered)):
        if ordered[position] == expected:
            expected += d
        elif skipped is None:
            skipped = position
        else:
            return None
    return len(ordered) - 1 if skipped is None else skipped


def removable_for_progression(values: Sequence[int]) -> int:
    """Return the 1-based index of an element whose removal lets the rest be
    reordered into an arithmetic progression, or -1."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    order = sorted(range(len(values)), key=values.__getitem__)
    ordered = [values[index] for index in order]

    candidates = [0, 1]
    if len(ordered) >= 3:
        skip = _skip_candidate(ordered, ordered[1] - ordered[0])
        if skip is not None:
            candidates.append(skip)
    for position in candidates:
        rest = ordered[:position] + ordered[position + 1:]
        if _is_progression(rest):
            return order[position] + 1
    return -1


def centered_square_cells(n: int) -> int:
    """Return the cell count of the n-th order centred square."""
    if n < 1:
        raise ValueError("order must be positive")
    cells = 1
    for order in range(2, n + 1):
        cells += 4 * (order - 1)
    return cells


def can_form_equal_rectangles(n: int, sticks: Sequence[int]) -> bool:
    """Tell whether ``4n`` sticks make ``n`` rectangles of one common area."""
    if n < 1:
        raise ValueError("n must be positive")
    if len(sticks) != 4 * n:
        raise ValueError(f"expected {4 * n} sticks, got {len(sticks)}")
    ordered = sorted(sticks)
    area = ordered[0] * ordered[-1]
    low, high = 0, len(ordered) - 1
    while low < high:
        if ordered[low] != ordered[low + 1] or ordered[high] != ordered[high - 1]:
            return False
        if ordered[low] * ordered[high] != area:
            return False
        low += 2
        high -= 2
    return True


def nearest_interesting(a: int) -> int:
    """Return the smallest number not below ``a`` whose digit sum divides by 4."""
    if a < 0:
        raise ValueError("a must not be negative")
    while sum(map(int, str(a))) % 4:
        a += 1
    return a


def max_equal_price(prices: Sequence[int], k: int) -> int:
    """Return the largest common price within ``k`` of every price, or -1."""
    if not prices:
        raise ValueError("no prices given")
    if k < 0:
        raise ValueError("k must not be negative")
    lowest, highest = min(prices), max(prices)
    ceiling = lowest + k
    if ceiling < max(highest - k, 0):
        return -1
    return ceiling


def max_play_turns(charge: int, turns: int, a: int, b: int) -> int:
    """Return the most turns spent just playing (cost ``a``) among ``turns``
    turns, the rest charging while playing (cost ``b``), keeping the charge
    above zero; -1 if impossible."""
    if a <= b:
        raise ValueError("playing must cost more than charging while playing")
    if b * turns >= charge:
        return -1
    if a * turns < charge:
        return turns
    spare = charge - b * turns
    step = a - b
    quotient, remainder = divmod(spare, step)
    return min(turns, quotient - 1 if remainder == 0 else quotient)


def max_gift_size(types: Iterable[object]) -> int:
    """Return the largest gift whose per-type counts are all distinct."""
    frequencies = sorted(Counter(types).values(), reverse=True)
    if not frequencies:
        raise ValueError("no candies given")
    total = 0
    cap = frequencies[0]
    for frequency in frequencies:
        taken = min(frequency, cap)
        if taken <= 0:
            break
        total += taken
        cap = taken - 1
    return total