"""A fixed-size hash map with separate chaining for int and str keys."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

BUCKETS = 100
_MULTIPLIER = 0x45D9F3B
_SEED = 131


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def int_hash(key: int) -> int:
    """Return the 32-bit integer mix of ``key`` as a signed value."""
    key = _to_int32(key)
    key = _to_int32(((key >> 16) ^ key) * _MULTIPLIER)
    key = _to_int32(((key >> 16) ^ key) * _MULTIPLIER)
    return (key >> 16) ^ key


def string_hash(key: str) -> int:
    """Return the base-131 polynomial hash of ``key`` as a signed 32-bit value."""
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (value * _SEED + signed) & 0xFFFFFFFFFFFFFFFF
    return _to_int32(value)


def _bucket(key: Any) -> int:
    if isinstance(key, str):
        return string_hash(key) % BUCKETS
    if isinstance(key, int):
        return int_hash(key) % BUCKETS
    raise TypeError(f"keys must be int or str, got {type(key).__name__}")


class ChainedHashMap:
    """Maps int or str keys to values in a fixed number of chained buckets."""

    def __init__(self) -> None:
        self._buckets: list[list[list[Any]]] = [[] for _ in range(BUCKETS)]

    def insert(self, key: Any, value: Any) -> None:
        """Set ``key`` to ``value``, replacing any earlier value."""
        chain = self._buckets[_bucket(key)]
        for entry in chain:
            if entry[0] == key:
                entry[1] = value
                return
        chain.append([key, value])

    def delete(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        chain = self._buckets[_bucket(key)]
        for index, entry in enumerate(chain):
            if entry[0] == key:
                del chain[index]
                return
        raise KeyError(key)

    def search(self, key: Any) -> Any:
        """Return the value of ``key``; raise KeyError if it is absent."""
        for stored, value in self._buckets[_bucket(key)]:
            if stored == key:
                return value
        raise KeyError(key)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs bucket by bucket."""
        for chain in self._buckets:
            for key, value in chain:
                yield key, value

    def __len__(self) -> int:
        return sum(map(len, self._buckets))

    def __contains__(self, key: object) -> bool:
        try:
            self.search(key)
        except (KeyError, TypeError):
            return False
        return True