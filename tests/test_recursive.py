import random

import pytest

from rosterkit.record import Student
from rosterkit.recursive import (
    leaf_count,
    level_sizes,
    max_balance_gap,
    max_level_size,
    one_child_parents,
    subtree_height,
)
from rosterkit.tree import StudentTree


def _random_tree(seed, size=40):
    rng = random.Random(seed)
    values = rng.sample(range(500), size)
    return StudentTree(Student("s", v) for v in values)


def _chain(n):
    return StudentTree(Student("s", v) for v in range(n))


def _nodes(node):
    if node is None:
        return []
    return [node] + _nodes(node.left) + _nodes(node.right)


@pytest.mark.parametrize("seed", range(8))
def test_counts_agree_with_tree(seed):
    tree = _random_tree(seed)
    root = tree.root
    assert leaf_count(root) == tree.leaf_count()
    assert subtree_height(root, 1) == tree.height()
    assert max_level_size(root) == tree.max_level_size()
    assert one_child_parents(root) == tree.one_child_parents()


@pytest.mark.parametrize("seed", range(5))
def test_level_sizes_cover_every_node(seed):
    tree = _random_tree(seed, size=30)
    sizes = level_sizes(tree.root, tree.height())
    assert sum(sizes) == len(tree)
    assert len(sizes) == tree.height()
    assert all(size > 0 for size in sizes)


@pytest.mark.parametrize("seed", range(3))
def test_level_sizes_truncated(seed):
    tree = _random_tree(seed, size=25)
    height = tree.height()
    full = level_sizes(tree.root, height)
    assert level_sizes(tree.root, height - 1) == full[: height - 1]


def test_level_sizes_negative_height():
    with pytest.raises(ValueError):
        level_sizes(_chain(3).root, -1)


@pytest.mark.parametrize("seed", range(4))
def test_edge_height_is_one_less_than_levels(seed):
    tree = _random_tree(seed, size=20)
    for node in _nodes(tree.root):
        assert subtree_height(node, 0) == subtree_height(node, 1) - 1


def test_empty_subtree():
    empty = StudentTree()
    assert leaf_count(None) == empty.leaf_count()
    assert max_level_size(None) == empty.max_level_size()
    assert subtree_height(None, 1) == empty.height()
    assert one_child_parents(None) == empty.one_child_parents()
    assert max_balance_gap(None) == empty.leaf_count()


@pytest.mark.parametrize("n", [2, 5, 12])
def test_chain(n):
    tree = _chain(n)
    assert subtree_height(tree.root, 1) == n
    assert max_balance_gap(tree.root) == n - 1
    assert one_child_parents(tree.root) == n - 1
    assert max_level_size(tree.root) == 1


def test_worked_example_gap():
    tree = StudentTree(Student("s", v) for v in (5, 3, 8, 1))
    assert max_balance_gap(tree.root) == 1


@pytest.mark.parametrize("seed", range(5))
def test_gap_bounded_by_height(seed):
    tree = _random_tree(seed)
    gap = max_balance_gap(tree.root)
    assert 0 <= gap <= tree.height() - 1


def test_prior_best_is_kept():
    tree = _random_tree(1)
    assert max_balance_gap(tree.root, 100) == 100