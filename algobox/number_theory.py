"""Number-theory helpers: co-primes, fast exponentiation and prime sums."""

from __future__ import annotations

from math import isqrt


def coprimes(n: int) -> list[int]:
    """Return the numbers in ``2..n-1`` that share no factor with ``n``.

    Multiples of each divisor of ``n`` are struck out as they are met.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    struck = bytearray(max(n, 0))
    result = []
    for candidate in range(2, n):
        if struck[candidate]:
            continue
        if n % candidate == 0:
            multiples = range(candidate, n, candidate)
            struck[candidate::candidate] = b"\x01" * len(multiples)
        else:
            result.append(candidate)
    return result


def coprimes_by_divisors(n: int) -> list[int]:
    """Return the numbers in ``2..n-1`` divisible by no proper divisor of ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    divisors = [d for d in range(2, n // 2 + 1) if n % d == 0]
    return [
        candidate
        for candidate in range(2, n)
        if not any(candidate % divisor == 0 for divisor in divisors)
    ]


def fast_power(base: int, power: int) -> int:
    """Return ``base ** power`` by repeated squaring."""
    if power < 0:
        raise ValueError("power must not be negative")
    result = 1
    while power > 0:
        if power % 2 == 0:
            power //= 2
            base *= base
        else:
            result *= base
            power -= 1
    return result


def prime_sum(low: int, high: int) -> int:
    """Return the sum of the primes in ``low..high`` inclusive."""
    if high < 2 or low > high:
        return 0
    sieve = bytearray(b"\x01") * (high + 1)
    sieve[0] = sieve[1] = 0
    for factor in range(2, isqrt(high) + 1):
        if sieve[factor]:
            multiples = range(factor * factor, high + 1, factor)
            sieve[factor * factor::factor] = bytes(len(multiples))
    return sum(p for p in range(max(low, 2), high + 1) if sieve[p])