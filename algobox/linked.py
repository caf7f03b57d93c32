"""Linked lists whose nodes carry an extra pointer to any node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class RandomListNode:
    """A list node with a ``next`` link and a ``random`` link to any node or None."""

    label: Any
    next: RandomListNode | None = None
    random: RandomListNode | None = None

    def __iter__(self) -> Iterator[RandomListNode]:
        node: RandomListNode | None = self
        while node is not None:
            yield node
            node = node.next


def copy_random_list(head: RandomListNode | None) -> RandomListNode | None:
    """Return a deep copy of the list, with random links pointing into the copy."""
    if head is None:
        return None
    copies = {id(node): RandomListNode(node.label) for node in head}
    for node in head:
        copy = copies[id(node)]
        if node.next is not None:
            copy.next = copies[id(node.next)]
        if node.random is not None:
            copy.random = copies[id(node.random)]
    return copies[id(head)]