"""Recursive shape statistics over the nodes of a student search tree."""

from __future__ import annotations

from typing import List, Optional

from .tree import TreeNode


def leaf_count(node: Optional[TreeNode]) -> int:
    """Number of nodes without children in the subtree under ``node``."""
    if node is None:
        return 0
    if node.is_leaf:
        return 1
    return leaf_count(node.left) + leaf_count(node.right)


def subtree_height(node: Optional[TreeNode], level: int = 1) -> int:
    """Height of the subtree under ``node``.

    With ``level`` 1 the result is the number of levels; with ``level`` 0
    it is the number of edges on the longest downward path. A missing
    subtree has height 0 either way.
    """
    if node is None:
        return 0
    if node.is_leaf:
        return level
    return level + 1 + max(subtree_height(node.left, 0), subtree_height(node.right, 0))


def level_sizes(node: Optional[TreeNode], height: int) -> List[int]:
    """Number of nodes on each of the first ``height`` levels under ``node``."""
    if height < 0:
        raise ValueError("height must not be negative")
    sizes = [0] * height

    def visit(current: Optional[TreeNode], depth: int) -> None:
        if depth == height or current is None:
            return
        sizes[depth] += 1
        for child in current.children():
            visit(child, depth + 1)

    visit(node, 0)
    return sizes


def max_level_size(node: Optional[TreeNode]) -> int:
    """Largest number of nodes on a single level; 0 for an empty subtree."""
    if node is None:
        return 0
    return max(level_sizes(node, subtree_height(node, 1)))


def one_child_parents(node: Optional[TreeNode]) -> int:
    """Number of nodes with exactly one child."""
    if node is None:
        return 0
    here = 1 if (node.left is None) != (node.right is None) else 0
    return here + one_child_parents(node.left) + one_child_parents(node.right)


def max_balance_gap(node: Optional[TreeNode], best: int = 0) -> int:
    """Largest difference of subtree heights (in levels) at any inner node.

    ``best`` is a gap already found elsewhere; the result is never below it
    unless ``node`` is a leaf or missing, which yields 0.
    """
    if node is None or node.is_leaf:
        return 0
    gap = abs(subtree_height(node.left, 1) - subtree_height(node.right, 1))
    here = max(best, gap)
    below = [max_balance_gap(child, here) for child in node.children()]
    return max([here, *below])