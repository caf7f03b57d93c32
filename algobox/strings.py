"""String utilities: a piecewise string builder and custom alphabet ordering."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import chain
from string import ascii_lowercase


def _prefix_table(pattern: str) -> list[int]:
    """Return the KMP failure table of ``pattern``."""
    table = [0] * len(pattern)
    matched = 0
    for position, char in enumerate(pattern[1:], 1):
        while matched and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
        table[position] = matched
    return table


class StringBuilder:
    """A string kept as a sequence of pieces that are joined only on demand."""

    def __init__(self, *pieces: str) -> None:
        for piece in pieces:
            if not isinstance(piece, str):
                raise TypeError(f"pieces must be str, got {type(piece).__name__}")
        self._pieces = tuple(pieces)

    @property
    def pieces(self) -> tuple[str, ...]:
        """The pieces in order."""
        return self._pieces

    def __str__(self) -> str:
        return "".join(self._pieces)

    def __repr__(self) -> str:
        return f"StringBuilder{self._pieces!r}"

    def __len__(self) -> int:
        return sum(map(len, self._pieces))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringBuilder):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def _chars(self) -> Iterator[str]:
        return chain.from_iterable(self._pieces)

    def concat(self, other: StringBuilder | str) -> StringBuilder:
        """Return a new builder holding this one's pieces followed by ``other``'s."""
        extra = other.pieces if isinstance(other, StringBuilder) else (other,)
        return StringBuilder(*self._pieces, *extra)

    __add__ = concat

    def find(self, substring: str) -> int:
        """Return the index of the first occurrence of ``substring``, or -1."""
        if not substring:
            return 0
        table = _prefix_table(substring)
        matched = 0
        for position, char in enumerate(self._chars()):
            while matched and char != substring[matched]:
                matched = table[matched - 1]
            if char == substring[matched]:
                matched += 1
            if matched == len(substring):
                return position - matched + 1
        return -1


def kth_in_custom_order(order: str, words: Sequence[str], k: int) -> str:
    """Return the k-th (1-based) word when sorted by the alphabet ``order``."""
    if sorted(order) != list(ascii_lowercase):
        raise ValueError("order must be a permutation of the lowercase alphabet")
    if not 1 <= k <= len(words):
        raise ValueError(f"k must lie in 1..{len(words)}, got {k}")
    rank = {letter: position for position, letter in enumerate(order)}
    try:
        ordered = sorted(words, key=lambda word: [rank[c] for c in word])
    except KeyError as error:
        raise ValueError(f"character {error.args[0]!r} is not in the alphabet") from None
    return ordered[k - 1]