"""A growable array with explicit capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 10


class DynamicArray:
    """An array that doubles its capacity whenever it fills up."""

    def __init__(self, count: int = 0, fill: Any = 0) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        capacity = 2 * count if count else DEFAULT_CAPACITY
        self._slots: list[Any] = [fill] * count + [None] * (capacity - count)
        self._size = count

    @property
    def capacity(self) -> int:
        """The number of elements held before the storage grows."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[: self._size])

    def __getitem__(self, index: int) -> Any:
        return self._slots[range(self._size)[index]]

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"

    def _make_room(self) -> None:
        if self._size == len(self._slots):
            self._slots.extend([None] * max(len(self._slots), 1))

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self._make_room()
        self._slots[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("pop from an empty array")
        self._size -= 1
        value = self._slots[self._size]
        self._slots[self._size] = None
        return value

    def insert(self, index: int, value: Any) -> None:
        """Put ``value`` at ``index``, shifting later elements right."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is outside 0..{self._size}")
        self._make_room()
        self._slots[index + 1 : self._size + 1] = self._slots[index : self._size]
        self._slots[index] = value
        self._size += 1

    def erase(self, index: int) -> Any:
        """Remove and return the element at ``index``, shifting later ones left."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is outside 0..{self._size - 1}")
        value = self._slots[index]
        self._slots[index : self._size - 1] = self._slots[index + 1 : self._size]
        self._size -= 1
        self._slots[self._size] = None
        return value

    def front(self) -> Any:
        """Return the first element."""
        if not self._size:
            raise IndexError("front of an empty array")
        return self._slots[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._size:
            raise IndexError("back of an empty array")
        return self._slots[self._size - 1]