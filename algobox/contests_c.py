"""Contest problems: recovering an array from its extension, and card sorting."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Sequence
from itertools import chain, compress
from math import isqrt


def _sieve(limit: int) -> bytearray:
    """Return flags telling which numbers in ``0..limit`` are prime."""
    flags = bytearray(b"\x01") * (limit + 1)
    flags[0] = 0
    if limit >= 1:
        flags[1] = 0
    for factor in range(2, isqrt(limit) + 1):
        if flags[factor]:
            start = factor * factor
            flags[start::factor] = bytes(len(range(start, limit + 1, factor)))
    return flags


def restore_array(values: Sequence[int]) -> list[int]:
    """Recover the array that produced ``values``.

    Each original element ``a`` contributes itself and either the a-th prime
    (when ``a`` is prime) or its greatest proper divisor (otherwise).
    Composites come out largest first, then primes smallest first.
    """
    if len(values) % 2:
        raise ValueError("the extended array must have an even length")
    if any(value < 2 for value in values):
        raise ValueError("values must be at least 2")
    if not values:
        return []

    limit = max(values)
    is_prime = _sieve(limit)
    primes = list(compress(range(limit + 1), is_prime))
    remaining = Counter(values)

    def take(value: int) -> None:
        if remaining[value] <= 0:
            raise ValueError(f"{value} is missing from the extended array")
        remaining[value] -= 1

    result = []
    for composite in sorted((v for v in values if not is_prime[v]), reverse=True):
        if remaining[composite]:
            take(composite)
            result.append(composite)
            smallest = next(p for p in primes if composite % p == 0)
            take(composite // smallest)
    for prime in sorted(v for v in values if is_prime[v]):
        if remaining[prime]:
            take(prime)
            result.append(prime)
            if prime > len(primes):
                raise ValueError(f"the {prime}-th prime is missing from the extended array")
            take(primes[prime - 1])
    return result


def min_card_operations(hand: Sequence[int], pile: Sequence[int]) -> int:
    """Return the operations needed to stack cards 1..n in order on the pile.

    ``hand`` and ``pile`` (top first) hold the cards 1..n once each, with 0
    marking an empty card. Each operation plays a card from the hand to the
    bottom of the pile and draws the top card.
    """
    size = len(hand)
    if len(pile) != size:
        raise ValueError("hand and pile must have the same length")
    if sorted(card for card in chain(hand, pile) if card) != list(range(1, size + 1)):
        raise ValueError("cards 1..n must each appear exactly once")

    latest = max(
        (position - card + 2 for position, card in enumerate(pile) if card),
        default=0,
    )
    in_hand = [card for card in hand if card]
    heapq.heapify(in_hand)
    queue = deque(pile)
    plays = 0
    while in_hand:
        drawn = queue.popleft()
        queue.append(heapq.heappop(in_hand))
        if drawn:
            heapq.heappush(in_hand, drawn)
        plays += 1
    if list(queue) == list(range(1, size + 1)):
        return plays
    return latest + size