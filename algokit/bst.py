"""A minimal binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A node of a binary search tree."""

    val: int = 0
    left: Node | None = None
    right: Node | None = None


class DuplicateValueError(ValueError):
    """Raised when a value already in the tree is inserted again."""


def insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` and return the root, which is new if ``root`` is None."""
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if value == node.val:
            raise DuplicateValueError(f"{value} is already in the tree")
        if value < node.val:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def _walk(node: Node | None) -> Iterator[int]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.val
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def preorder(root: Node | None) -> list[int]:
    """Return the values in pre-order: node, left subtree, right subtree."""
    return list(_walk(root))