# rosterkit

rosterkit reads rosters of student records and works on them. It provides
a list with editing tasks, a list with four sorting methods, and a binary
search tree with shape statistics.

## Roster files

A roster file is plain text made of whitespace-separated pairs. Each pair
is a name followed by an integer value:

```
alice 5
bob 3
carol 7
```

Reading stops quietly at the end of the input, even in the middle of a
pair. A value that is not an integer raises
`rosterkit.record.RecordError` with status `IoStatus.FORMAT`.

Records (`rosterkit.record.Student`) compare by name first, byte by byte,
and then by value. `Student.cmp` gives the three-way result, and
`Student.line()` gives the printed form `name value`.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Using the library

```python
from rosterkit.slist import SortableList
from rosterkit.tree import StudentTree

with open("roster.txt", encoding="utf-8") as stream:
    people = SortableList.read(stream)
people.merge_sort()
print(people.inversions())        # 0 once the list is sorted
print("\n".join(people.lines(10)))

with open("roster.txt", encoding="utf-8") as stream:
    tree = StudentTree.read(stream)
print(tree.leaf_count(), tree.height(), tree.max_level_size())
print(tree.max_balance_gap(), tree.one_child_parents())
```

Every container takes an optional `max_read` in `read(stream, max_read)`,
and its `lines(r)` gives the printed form of the first `r` entries (for
the lists, a negative `r` means all of them).

### `rosterkit.dlist.DoubleList`

- `shift(k)`: cyclic shift that makes the record at index `n-1-k` the new
  head. `k` is reduced as an unsigned 32-bit count modulo the length, so
  a negative `k` wraps around. When `k` reduces to `n-1`, only the head
  remains.
- `remove_greater_than_previous(k)`: from the tail back, drops a record
  that is greater than any of the `k` records before it.
- `remove_greater_than_next(k)`: from the head on, drops a record that is
  greater than any of the `k` records after it.
- `remove_equal_runs(k)`: drops every run of equal neighbours longer than
  `k`.
- `remove_nonincreasing_runs(k)`: drops every non-increasing run of
  neighbours longer than `k`.
- `remove_between_equal_runs(k)`: drops everything that lies between two
  consecutive equal runs longer than `k`.

For the two run removals, a single-record list is emptied when `k` is 0.

### `rosterkit.slist.SortableList`

`bubble_sort`, `selection_sort`, `insertion_sort` and `merge_sort` sort
the list in place. `inversions()` counts the neighbours where the earlier
record is greater. `selection_sort` on three or more records stops when a
single record is left, and that last, greatest record is not kept.

### `rosterkit.tree.StudentTree`

Smaller records go to the left and equal or greater records go to the
right. `insert(record)` adds a record. Iterating over a tree gives its
records in pre-order. `lines(r)` prints levels 0 to `r`, each indented by
two spaces per level.

- `leaf_count()` counts the nodes that have no children.
- `height()` and `subtree_height(node)` count levels.
- `max_level_size()` gives the size of the widest level.
- `one_child_parents()` counts the nodes that have exactly one child.
- `max_balance_gap()` gives the largest difference between the heights of
  a node's two subtrees. Here heights count edges, and a leaf counts the
  same as a missing subtree.

### Recursive statistics

`rosterkit.recursive` and `rosterkit.treestats` compute statistics of the
same kind from a `TreeNode` (for example `tree.root`). `recursive` offers
`leaf_count`, `subtree_height(node, level)`, `level_sizes`,
`max_level_size`, `one_child_parents` and `max_balance_gap`, which
measures heights in levels. `treestats` offers `leaf_count`,
`depth(node, level)`, `children_on_level`, `widest_level`, `height_gap`,
`max_height_gap` and `one_child_parents`.

## Command line

```
rosterkit list TASK R FILE K
rosterkit sort TASK R FILE
rosterkit tree R FILE
rosterkit tree-summary R FILE
rosterkit stack R FILE
rosterkit airdrop R FILE
```

- `list` prints `Old List` followed by the first `R` records. It then
  applies list task `TASK` with window `K` and prints `New List` and the
  records again. The last line gives the task, the old and new lengths,
  and the elapsed time. The tasks are: 1 shift, 2 remove greater than
  previous, 3 remove greater than next, 4 and 5 remove equal runs, 6
  remove non-increasing runs, and 7 remove between equal runs.
- `sort` does the same with sorting method `TASK` (1 bubble, 2 selection,
  3 insertion, 4 merge). Its last line gives the number of inversions
  that remain.
- `TASK` may be a number or a name that ends in `a<number>.out`, such as
  `a05.out`. An unknown task leaves the list unchanged.
- `tree`, `tree-summary` and `stack` print `Tree:`, the first `R` levels,
  and then one `Task = N Result = ...` line per statistic. The statistics
  are 1 leaves, 2 height, 3 widest level, 4 balance gap and 5 one-child
  parents. `stack` leaves out task 4.
- `airdrop` prints the same report using `rosterkit.treestats`.

Errors print a message and end with a non-zero status. Bad arguments or
bad data print `Invalid arguments` with status 4, and a file that cannot
be opened prints `Cannot open file` with status 3. `airdrop` prints its
own messages, such as `Usage: ...`, `Cannot open` or `Error read`, and
returns -1.

## What it does not do

rosterkit only reads rosters. It has no way to write a changed list or
tree back to a file, and no interactive mode. There is no `--help`
option: the commands above are the whole interface.