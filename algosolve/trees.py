"""Binary trees: building from level order, depth and width."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, None marking a missing child."""
    if not values or values[0] is None:
        return None
    root = TreeNode(values[0])
    queue: deque[TreeNode] = deque([root])
    rest = iter(values[1:])
    for left, right in zip_longest(rest, rest):
        if not queue:
            if left is None and right is None:
                continue
            raise ValueError("values give children to a missing node")
        node = queue.popleft()
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return depth


def width_of_binary_tree(root: TreeNode | None) -> int:
    """Return the widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    best = 1
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        start, end = level[0][1], level[-1][1]
        best = max(best, end - start + 1)
        level = [
            (child, 2 * (index - start) + offset)
            for node, index in level
            for offset, child in ((1, node.left), (2, node.right))
            if child is not None
        ]
    return best