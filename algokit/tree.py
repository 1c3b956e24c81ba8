"""Binary tree measurements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def width_of_binary_tree(root: TreeNode | None) -> int:
    """Return the largest level width, counting gaps between the end nodes."""
    if root is None:
        return 0
    level = [(root, 0)]
    width = 0
    while level:
        first, last = level[0][1], level[-1][1]
        width = max(width, last - first + 1)
        level = [
            (child, 2 * (pos - first) + offset)
            for node, pos in level
            for child, offset in ((node.left, 1), (node.right, 2))
            if child is not None
        ]
    return width