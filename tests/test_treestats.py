import random

import pytest

from rosterkit import recursive
from rosterkit.record import Student
from rosterkit.tree import StudentTree
from rosterkit.treestats import (
    children_on_level,
    depth,
    height_gap,
    leaf_count,
    max_height_gap,
    one_child_parents,
    widest_level,
)


def _random_tree(seed, size=40):
    rng = random.Random(seed)
    values = rng.sample(range(500), size)
    return StudentTree(Student("s", v) for v in values)


def _chain(n):
    return StudentTree(Student("s", v) for v in range(n))


@pytest.mark.parametrize("seed", range(8))
def test_counts_agree_with_tree(seed):
    tree = _random_tree(seed)
    root = tree.root
    assert leaf_count(root) == tree.leaf_count()
    assert depth(root, 0) == tree.height()
    assert widest_level(root) == tree.max_level_size()
    assert one_child_parents(root) == tree.one_child_parents()


@pytest.mark.parametrize("seed", range(6))
def test_gap_agrees_with_recursive(seed):
    tree = _random_tree(seed, size=30)
    assert max_height_gap(tree.root) == recursive.max_balance_gap(tree.root)


@pytest.mark.parametrize("seed", range(5))
def test_children_on_levels_cover_all_but_root(seed):
    tree = _random_tree(seed, size=30)
    total = sum(children_on_level(tree.root, level) for level in range(tree.height()))
    assert total == len(tree) - 1


@pytest.mark.parametrize("seed", range(4))
def test_children_on_level_matches_next_level(seed):
    tree = _random_tree(seed, size=30)
    height = tree.height()
    sizes = recursive.level_sizes(tree.root, height)
    for level in range(height - 1):
        assert children_on_level(tree.root, level) == sizes[level + 1]
    assert children_on_level(tree.root, height - 1) == tree.leaf_count() - tree.leaf_count()


def test_depth_offset_shifts_result():
    tree = _random_tree(2, size=20)
    assert depth(tree.root, 7) == depth(tree.root, 0) + 7


def test_empty_tree():
    empty = StudentTree()
    assert leaf_count(None) == empty.leaf_count()
    assert depth(None) == empty.height()
    assert widest_level(None) == empty.max_level_size()
    assert one_child_parents(None) == empty.one_child_parents()
    assert max_height_gap(None) == empty.height()


def test_lone_node_is_one_wide():
    tree = _chain(1)
    assert widest_level(tree.root) == 1
    assert depth(tree.root) == len(tree)


@pytest.mark.parametrize("n", [2, 4, 9])
def test_chain(n):
    tree = _chain(n)
    assert depth(tree.root) == n
    assert height_gap(tree.root) == n - 1
    assert max_height_gap(tree.root) == n - 1
    assert one_child_parents(tree.root) == n - 1


def test_worked_example():
    tree = StudentTree(Student("s", v) for v in (5, 3, 8, 1))
    assert height_gap(tree.root) == 1
    assert widest_level(tree.root) == 2


def test_prior_best_is_kept():
    tree = _random_tree(3)
    assert max_height_gap(tree.root, 250) == 250