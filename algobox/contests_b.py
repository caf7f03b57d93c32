"""Contest problems: splits, circles, candies, moves, graphs and small games."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

OVERFLOW_LIMIT = 4294967295


def split_unbalanced(s: str) -> list[str]:
    """Split a binary string into the fewest pieces whose 0 and 1 counts differ."""
    if not s:
        raise ValueError("string must not be empty")
    if set(s) - {"0", "1"}:
        raise ValueError("string must hold only 0 and 1")
    if len(s) == 1 or s.count("0") != s.count("1"):
        return [s]
    return [s[0], s[1:]]


def arrange_circle(values: Sequence[int]) -> list[int] | None:
    """Arrange ``values`` in a circle so each is less than the sum of its
    neighbours; return None when that is impossible."""
    if len(values) < 3:
        raise ValueError("at least three values are needed")
    ordered = sorted(values)
    if ordered[-1] >= ordered[-2] + ordered[-3]:
        return None
    ordered[-1], ordered[-2] = ordered[-2], ordered[-1]
    size = len(ordered)
    for index, value in enumerate(ordered):
        if ordered[index - 1] + ordered[(index + 1) % size] <= value:
            return None
    return ordered


def candy_counts(
    digits: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the candies earned by repeatedly pairing digits in each query range.

    Each query is a 1-based inclusive range whose length is a power of two.
    Every pair summing to 10 or more earns a candy and leaves its sum mod 10.
    """
    if any(not 0 <= digit <= 9 for digit in digits):
        raise ValueError("digits must lie in 0..9")
    levels: list[list[tuple[int, int]]] = [[(digit, 0) for digit in digits]]
    width = 1
    while 2 * width <= len(digits):
        previous = levels[-1]
        current = []
        for start in range(len(digits) - 2 * width + 1):
            left_digit, left_candies = previous[start]
            right_digit, right_candies = previous[start + width]
            total = left_digit + right_digit
            current.append(
                (total % 10, left_candies + right_candies + (total >= 10))
            )
        levels.append(current)
        width *= 2

    answers = []
    for low, high in queries:
        if not 1 <= low <= high <= len(digits):
            raise ValueError(f"range ({low}, {high}) is outside 1..{len(digits)}")
        length = high - low + 1
        if length & (length - 1):
            raise ValueError("range length must be a power of two")
        answers.append(levels[length.bit_length() - 1][low - 1][1])
    return answers


def max_test_score(answers: Sequence[str], points: Sequence[int]) -> int:
    """Return the largest total score the class could get when every question's
    correct answer is chosen to favour the most students."""
    if any(len(row) != len(points) for row in answers):
        raise ValueError("every answer row must have one answer per question")
    total = 0
    for column, worth in enumerate(points):
        counts = Counter(row[column] for row in answers)
        total += max(max(counts.values(), default=1), 1) * worth
    return total


def moves_to_one(n: int) -> int:
    """Return the moves to reach 1 by n/2, 2n/3 or 4n/5 steps, or -1."""
    if n < 1:
        raise ValueError("n must be positive")
    moves = 0
    while n != 1:
        if n % 2 == 0:
            n //= 2
        elif n % 3 == 0:
            n = 2 * n // 3
        elif n % 5 == 0:
            n = 4 * n // 5
        else:
            return -1
        moves += 1
    return moves


def max_divisible_by_three(values: Iterable[int]) -> int:
    """Return the most elements divisible by 3 after merging pairs by sum."""
    remainders = Counter(value % 3 for value in values)
    pairs = min(remainders[1], remainders[2])
    return (
        remainders[0]
        + pairs
        + (remainders[1] - pairs) // 3
        + (remainders[2] - pairs) // 3
    )


def choose_dominating_vertices(
    n: int, edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Choose at most n // 2 vertices of a connected graph on ``1..n`` so that
    every other vertex has a chosen neighbour."""
    if n < 1:
        raise ValueError("graph needs at least one vertex")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} is outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * (n + 1)
    colour = [-1] * (n + 1)
    for root in range(1, n + 1):
        if colour[root] == -1:
            colour[root] = 0
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if visited[neighbour] or colour[neighbour] != -1:
                    continue
                colour[neighbour] = 1 - colour[vertex]
                visited[neighbour] = True
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
            else:
                stack.pop()

    ones = [vertex for vertex in range(1, n + 1) if colour[vertex] == 1]
    zeros = [vertex for vertex in range(1, n + 1) if colour[vertex] == 0]
    return ones if len(ones) < len(zeros) else zeros


def steps_to_zero(n: int, k: int) -> int:
    """Return the steps to reach 0 by decrementing or dividing by ``k``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if k < 2:
        raise ValueError("k must be at least 2")
    steps = 0
    while n:
        steps += n % k
        n //= k
        if n:
            steps += 1
    return steps


def run_loop_program(lines: Iterable[str]) -> int:
    """Return the value ``x`` reaches running ``add``, ``for N`` and ``end`` lines
    from zero; raise OverflowError once it exceeds 2**32 - 1."""
    multiplier = 1
    loops: list[int] = []
    value = 0
    for line in lines:
        command, *arguments = line.split()
        if command == "add":
            value += multiplier
        elif command == "for":
            if len(arguments) != 1:
                raise ValueError(f"malformed loop line {line!r}")
            count = int(arguments[0])
            if count < 1:
                raise ValueError("loop count must be positive")
            loops.append(count)
            multiplier *= count
        elif command == "end":
            if not loops:
                raise ValueError("end without a matching for")
            multiplier //= loops.pop()
        else:
            raise ValueError(f"unknown command {command!r}")
        if value > OVERFLOW_LIMIT:
            raise OverflowError("OVERFLOW!!!")
    return value


def remaining_number(n: int, x: int) -> int:
    """Return the x-th number left after repeatedly striking out 1..n by rounds."""
    if not 1 <= x < n:
        raise ValueError("x must lie in 1..n-1")
    return 2 * x


def min_paint_for_cross(picture: Sequence[str]) -> int:
    """Return the fewest white cells to paint so a full row and column are black."""
    if not picture or not picture[0]:
        raise ValueError("picture must not be empty")
    width = len(picture[0])
    if any(len(row) != width for row in picture):
        raise ValueError("rows must have equal length")
    row_white = [row.count(".") for row in picture]
    column_white = [sum(row[c] == "." for row in picture) for c in range(width)]
    return min(
        row_white[r] + column_white[c] - (cell == ".")
        for r, row in enumerate(picture)
        for c, cell in enumerate(row)
    )


def _is_subsequence(short: str, long: str) -> bool:
    remaining = iter(long)
    return all(char in remaining for char in short)


def can_transform(s: str, t: str, p: str) -> bool:
    """Tell whether inserting letters taken from ``p`` into ``s`` can give ``t``."""
    if not _is_subsequence(s, t):
        return False
    needed = Counter(t)
    needed.subtract(s)
    available = Counter(p)
    return all(count <= available[char] for char, count in needed.items())


def chip_game_winner(position: int, k: int) -> str:
    """Return "Alice" or "Bob", the winner of the chip game from ``position``."""
    if position <= 0:
        return "Bob"
    if position <= 2:
        return "Alice"
    if position < k:
        return "Alice" if position % 2 == 0 else "Bob"
    if position == k:
        return "Alice"
    return "Alice" if (position - k) % 2 == 0 else "Bob"