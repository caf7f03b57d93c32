"""Binary trees: level-order building, search-tree edits, views and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a complete binary tree filling each level from left to right."""
    items = iter(values)
    try:
        root = TreeNode(next(items))
    except StopIteration:
        return None
    parents = deque([root])
    for value in items:
        node = TreeNode(value)
        parent = parents[0]
        if parent.left is None:
            parent.left = node
        else:
            parent.right = node
            parents.popleft()
        parents.append(node)
    return root


def bst_insert(root: TreeNode | None, key: Any) -> TreeNode:
    """Insert ``key`` into a binary search tree; duplicates are ignored.

    Returns the root, which is a new node when ``root`` is None.
    """
    if root is None:
        return TreeNode(key)
    node = root
    while True:
        if key < node.data:
            if node.left is None:
                node.left = TreeNode(key)
                break
            node = node.left
        elif key > node.data:
            if node.right is None:
                node.right = TreeNode(key)
                break
            node = node.right
        else:
            break
    return root


def build_bst(values: Iterable[Any]) -> TreeNode | None:
    """Build a binary search tree by inserting ``values`` in order."""
    root: TreeNode | None = None
    for value in values:
        root = bst_insert(root, value)
    return root


def bst_delete(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Remove ``key`` from a binary search tree and return the new root.

    A node with two children takes the value of its in-order successor.
    """
    parent: TreeNode | None = None
    node = root
    while node is not None and node.data != key:
        parent = node
        node = node.left if key < node.data else node.right
    if node is None:
        return root

    if node.left is not None and node.right is not None:
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        node.data = successor.data
        if successor_parent is node:
            successor_parent.right = successor.right
        else:
            successor_parent.left = successor.right
        return root

    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root


def is_bst(root: TreeNode | None) -> bool:
    """Tell whether the tree is a search tree.

    Values equal to a node are allowed in its left subtree only.
    """
    stack: list[tuple[TreeNode | None, Any, Any]] = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if (high is not None and node.data > high) or (
            low is not None and node.data <= low
        ):
            return False
        stack.append((node.left, low, node.data))
        stack.append((node.right, node.data, high))
    return True


def find_level(root: TreeNode | None, key: Any) -> int:
    """Return the depth (root is 0) of the first ``key`` met in preorder, or -1."""
    stack: list[tuple[TreeNode, int]] = [] if root is None else [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.data == key:
            return depth
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))
    return -1


def mirror(root: TreeNode | None) -> TreeNode | None:
    """Swap the children of every node in place and return the root."""
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def top_view(root: TreeNode | None) -> list[Any]:
    """Return the nodes seen from above, in breadth-first order of discovery."""
    if root is None:
        return []
    seen: set[int] = set()
    view = []
    queue = deque([(root, 0)])
    while queue:
        node, offset = queue.popleft()
        if offset not in seen:
            seen.add(offset)
            view.append(node.data)
        if node.left is not None:
            queue.append((node.left, offset - 1))
        if node.right is not None:
            queue.append((node.right, offset + 1))
    return view


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, node, right order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in node, left, right order."""
    result = []
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, node order."""
    result = []
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return result[::-1]