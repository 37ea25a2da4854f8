import io
import random

import pytest

from rosterkit.record import IoStatus, RecordError, Student
from rosterkit.slist import SortableList


def _random_records(seed, count):
    rng = random.Random(seed)
    return [Student(rng.choice(["ann", "bob", "cid", "dee"]), rng.randint(-5, 5)) for _ in range(count)]


def _keys(records):
    return sorted((r.name, r.value) for r in records)


def test_read_and_lines():
    lst = SortableList.read(io.StringIO("bob 3\nann 7\n"))
    assert len(lst) == 2
    assert lst.lines() == ["bob 3", "ann 7"]
    assert lst.lines(1) == ["bob 3"]
    assert lst.lines(-1) == ["bob 3", "ann 7"]


def test_read_respects_max_read():
    lst = SortableList.read(io.StringIO("a 1 b 2 c 3"), 2)
    assert lst.lines() == ["a 1", "b 2"]


def test_read_bad_value_raises_format():
    with pytest.raises(RecordError) as info:
        SortableList.read(io.StringIO("a 1 b x"))
    assert info.value.status is IoStatus.FORMAT


@pytest.mark.parametrize("method", ["bubble_sort", "insertion_sort", "merge_sort"])
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
@pytest.mark.parametrize("count", [0, 1, 2, 3, 7, 16, 33])
def test_full_sorts_order_and_keep_records(method, seed, count):
    records = _random_records(seed, count)
    lst = SortableList(records)
    getattr(lst, method)()
    assert lst.inversions() == 0
    assert len(lst) == count
    assert _keys(lst) == _keys(records)


@pytest.mark.parametrize("method", ["bubble_sort", "insertion_sort", "merge_sort"])
def test_full_sorts_match_each_other(method):
    records = _random_records(42, 25)
    reference = SortableList(records)
    reference.insertion_sort()
    lst = SortableList(records)
    getattr(lst, method)()
    assert lst.lines(-1) == reference.lines(-1)


def test_selection_sort_drops_greatest_for_three_or_more():
    lst = SortableList([Student("bob", 2), Student("ann", 1), Student("cid", 3)])
    lst.selection_sort()
    assert lst.lines() == ["ann 1", "bob 2"]


@pytest.mark.parametrize("seed", [5, 6, 7])
def test_selection_sort_keeps_all_but_maximum(seed):
    records = _random_records(seed, 12)
    lst = SortableList(records)
    lst.selection_sort()
    assert lst.inversions() == 0
    assert len(lst) == len(records) - 1
    assert _keys(lst) == _keys(records)[:-1]


def test_selection_sort_two_records_swapped():
    lst = SortableList([Student("bob", 2), Student("ann", 1)])
    lst.selection_sort()
    assert lst.lines() == ["ann 1", "bob 2"]


def test_selection_sort_small_lists_unchanged():
    single = SortableList([Student("bob", 2)])
    single.selection_sort()
    assert single.lines() == ["bob 2"]
    empty = SortableList()
    empty.selection_sort()
    assert len(empty) == 0


def test_inversions_counts_descents():
    lst = SortableList([Student("a", 3), Student("a", 2), Student("a", 1)])
    assert lst.inversions() == len(lst) - 1


def test_name_orders_before_value():
    lst = SortableList([Student("b", 1), Student("a", 9)])
    lst.merge_sort()
    assert lst.lines() == ["a 9", "b 1"]


def test_iteration_yields_records():
    records = [Student("x", 1), Student("y", 2)]
    lst = SortableList(records)
    assert [r.line() for r in lst] == ["x 1", "y 2"]