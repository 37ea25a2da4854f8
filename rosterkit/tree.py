"""A binary search tree of student records with level and shape statistics."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, TextIO

from .record import Student, iter_students


@dataclass(eq=False)
class TreeNode:
    """One record in the tree with links to its two subtrees."""

    record: Student
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> Iterator["TreeNode"]:
        """Existing children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


def _preorder(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def _level_sizes(node: Optional[TreeNode]) -> Iterator[int]:
    """Yield the number of nodes on each level below ``node``, top down."""
    level = [node] if node is not None else []
    while level:
        yield len(level)
        level = [child for current in level for child in current.children()]


class StudentTree:
    """Records kept in search order: smaller to the left, equal or greater to the right."""

    def __init__(self, records: Iterable[Student] = ()):
        self.root: Optional[TreeNode] = None
        for record in records:
            self.insert(record)

    @classmethod
    def read(cls, stream: TextIO, max_read: Optional[int] = None) -> "StudentTree":
        """Build a tree from ``name value`` pairs; raises RecordError on bad input."""
        return cls(iter_students(stream, max_read))

    def insert(self, record: Student) -> TreeNode:
        """Place ``record`` in the tree and return its new node."""
        node = TreeNode(record)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if record < current.record:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right

    def __len__(self) -> int:
        return sum(1 for _ in _preorder(self.root))

    def __iter__(self) -> Iterator[Student]:
        """Records in pre-order: node, left subtree, right subtree."""
        return (node.record for node in _preorder(self.root))

    def lines(self, r: int = 10) -> List[str]:
        """Pre-order printout of levels 0..r, each indented by two spaces per level."""
        result: List[str] = []
        stack = [(self.root, 0)] if self.root is not None else []
        while stack:
            node, level = stack.pop()
            if level > r:
                continue
            result.append(" " * (2 * level) + node.record.line())
            if node.right is not None:
                stack.append((node.right, level + 1))
            if node.left is not None:
                stack.append((node.left, level + 1))
        return result

    def leaf_count(self) -> int:
        """Number of nodes without children."""
        return sum(1 for node in _preorder(self.root) if node.is_leaf)

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return self.subtree_height(self.root)

    def subtree_height(self, node: Optional[TreeNode]) -> int:
        """Number of levels in the subtree under ``node``; 0 for None."""
        return sum(1 for _ in _level_sizes(node))

    def max_level_size(self) -> int:
        """Largest number of nodes found on a single level."""
        return max(_level_sizes(self.root), default=0)

    def max_balance_gap(self) -> int:
        """Largest difference between the heights of a node's two subtrees.

        Heights here count edges, and a leaf and a missing subtree both
        count as 0, so a node with a single leaf child has a gap of 0.
        """
        heights: Dict[TreeNode, int] = {}
        best = 0
        for node in reversed(list(_preorder(self.root))):
            if node.is_leaf:
                heights[node] = 0
                continue
            left = heights.get(node.left, 0) if node.left is not None else 0
            right = heights.get(node.right, 0) if node.right is not None else 0
            heights[node] = max(left, right) + 1
            best = max(best, abs(left - right))
        return best

    def one_child_parents(self) -> int:
        """Number of nodes with exactly one child."""
        return sum(
            1 for node in _preorder(self.root) if (node.left is None) != (node.right is None)
        )