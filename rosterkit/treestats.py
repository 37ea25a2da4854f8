"""Shape statistics over a student search tree computed level by level."""

from __future__ import annotations

from typing import Optional

from .tree import TreeNode


def leaf_count(node: Optional[TreeNode]) -> int:
    """Number of nodes without children in the subtree under ``node``."""
    if node is None:
        return 0
    if node.is_leaf:
        return 1
    return leaf_count(node.left) + leaf_count(node.right)


def depth(node: Optional[TreeNode], level: int = 0) -> int:
    """Deepest leaf level plus one, counting ``node`` as sitting on ``level``."""
    if node is None:
        return 0
    if node.is_leaf:
        return level + 1
    return max(depth(node.left, level + 1), depth(node.right, level + 1))


def children_on_level(node: Optional[TreeNode], level: int) -> int:
    """Number of children held by the nodes on ``level`` below ``node``."""

    def visit(current: Optional[TreeNode], current_level: int) -> int:
        if current is None:
            return 0
        if current_level == level:
            return sum(1 for _ in current.children())
        return visit(current.left, current_level + 1) + visit(current.right, current_level + 1)

    return visit(node, 0)


def widest_level(node: Optional[TreeNode]) -> int:
    """Largest number of nodes on a level; 0 when empty, 1 for a lone node."""
    if node is None:
        return 0
    widest = max(
        (children_on_level(node, level) for level in range(depth(node, 0))), default=0
    )
    return widest or 1


def height_gap(node: TreeNode) -> int:
    """Difference between the depths of the two subtrees of ``node``."""
    return abs(depth(node.left, 0) - depth(node.right, 0))


def max_height_gap(node: Optional[TreeNode], best: int = 0) -> int:
    """Largest height gap at any inner node, never below ``best`` for one."""
    if node is None or node.is_leaf:
        return 0
    here = max(height_gap(node), best)
    return max(here, max_height_gap(node.left, here), max_height_gap(node.right, here))


def one_child_parents(node: Optional[TreeNode]) -> int:
    """Number of nodes with exactly one child."""
    if node is None or node.is_leaf:
        return 0
    here = 0 if (node.left is not None and node.right is not None) else 1
    return one_child_parents(node.left) + one_child_parents(node.right) + here