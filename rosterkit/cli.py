"""Command-line entry points that run the roster tasks over a data file."""

from __future__ import annotations

import re
import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TextIO, Tuple, TypeVar

from . import recursive, treestats
from .dlist import DoubleList
from .record import IoStatus, RecordError, error_message, task_number
from .slist import SortableList
from .tree import StudentTree

_PROG = "rosterkit"
_INT = re.compile(r"\s*([+-]?\d+)")

_T = TypeVar("_T")

_LIST_TASKS: Dict[int, Callable[[DoubleList, int], None]] = {
    1: DoubleList.shift,
    2: DoubleList.remove_greater_than_previous,
    3: DoubleList.remove_greater_than_next,
    4: DoubleList.remove_equal_runs,
    5: DoubleList.remove_equal_runs,
    6: DoubleList.remove_nonincreasing_runs,
    7: DoubleList.remove_between_equal_runs,
}

_SORT_TASKS: Dict[int, Callable[[SortableList], None]] = {
    1: SortableList.bubble_sort,
    2: SortableList.selection_sort,
    3: SortableList.insertion_sort,
    4: SortableList.merge_sort,
}

_AIRDROP_MESSAGES = {
    IoStatus.READNT: "Error read",
    IoStatus.MEMORY: "Not enough memory",
    IoStatus.EOF: "Empty",
    IoStatus.OPENT: "Cannot open",
    IoStatus.FORMAT: "Error format",
}


@dataclass(frozen=True)
class ListOutcome:
    """What a list-editing run reports after the new list."""

    task: int
    old_length: int
    new_length: int
    elapsed: float

    def summary(self, program: str) -> str:
        return (
            f"{program} : Task = {self.task} Len Old = {self.old_length} "
            f"Len New = {self.new_length} Elapsed = {self.elapsed:.2f}"
        )


@dataclass(frozen=True)
class SortOutcome:
    """What a sorting run reports after the new list."""

    task: int
    inversions: int
    elapsed: float

    def summary(self, program: str) -> str:
        return (
            f"{program} : Task = {self.task} Diff = {self.inversions} "
            f"Elapsed = {self.elapsed:.2f}"
        )


def _parse_int(text: str) -> int:
    """Leading integer of ``text``; raises RecordError(FORMAT) when there is none."""
    match = _INT.match(text)
    if match is None:
        raise RecordError(IoStatus.FORMAT)
    return int(match.group(1))


def _parse_task(text: str) -> int:
    """A task given as a number, or encoded in a program name such as ``a05.out``."""
    match = _INT.match(text)
    if match is not None:
        return int(match.group(1))
    return task_number(text)


def _load(path: str, reader: Callable[[TextIO], _T]) -> _T:
    try:
        with open(path, encoding="utf-8") as stream:
            return reader(stream)
    except OSError as exc:
        raise RecordError(IoStatus.OPENT) from exc


def _write(out: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        out.write(line + "\n")


def _timed(action: Callable[[], _T]) -> Tuple[_T, float]:
    start = time.process_time()
    result = action()
    return result, time.process_time() - start


def _result_line(program: str, task: int, result: int, elapsed: float) -> str:
    return f"{program} : Task = {task} Result = {result} Elapsed = {elapsed:.2f}"


def _profile_each(
    program: str, out: TextIO, tasks: Sequence[Tuple[int, Callable[[], int]]]
) -> Dict[int, int]:
    """Run each task and report it straight away."""
    results: Dict[int, int] = {}
    for task, action in tasks:
        result, elapsed = _timed(action)
        results[task] = result
        _write(out, [_result_line(program, task, result, elapsed)])
    return results


def _profile_all(
    program: str, out: TextIO, tasks: Sequence[Tuple[int, Callable[[], int]]]
) -> Dict[int, int]:
    """Run every task first, then report them together."""
    timed = [(task, *_timed(action)) for task, action in tasks]
    _write(out, [_result_line(program, task, result, elapsed) for task, result, elapsed in timed])
    return {task: result for task, result, _ in timed}


def run_list_task(task: int, r: int, path: str, k: int, out: TextIO) -> ListOutcome:
    """Read a list from ``path``, print it, apply list task ``task`` with ``k``, print it again."""
    roster = _load(path, DoubleList.read)
    old_length = len(roster)
    _write(out, ["Old List", *roster.lines(r)])
    action = _LIST_TASKS.get(task)
    _, elapsed = _timed(lambda: action(roster, k) if action is not None else None)
    _write(out, ["New List", *roster.lines(r)])
    return ListOutcome(task, old_length, len(roster), elapsed)


def run_sort_task(task: int, r: int, path: str, out: TextIO) -> SortOutcome:
    """Read a list from ``path``, print it, sort it with method ``task``, print it again."""
    roster = _load(path, SortableList.read)
    _write(out, ["Old List", *roster.lines(r)])
    action = _SORT_TASKS.get(task)
    _, elapsed = _timed(lambda: action(roster) if action is not None else None)
    _write(out, ["New List", *roster.lines(r)])
    return SortOutcome(task, roster.inversions(), elapsed)


def run_tree_report(program: str, r: int, path: str, out: TextIO) -> Dict[int, int]:
    """Print the tree and the five shape statistics, each as soon as it is known."""
    tree = _load(path, StudentTree.read)
    _write(out, ["Tree:", *tree.lines(r)])
    return _profile_each(
        program,
        out,
        [
            (1, tree.leaf_count),
            (2, tree.height),
            (3, tree.max_level_size),
            (4, tree.max_balance_gap),
            (5, tree.one_child_parents),
        ],
    )


def run_tree_summary(program: str, r: int, path: str, out: TextIO) -> Dict[int, int]:
    """Print the tree, compute the five statistics recursively, then report them."""
    tree = _load(path, StudentTree.read)
    _write(out, ["Tree:", *tree.lines(r)])
    root = tree.root
    return _profile_all(
        program,
        out,
        [
            (1, lambda: recursive.leaf_count(root)),
            (2, lambda: recursive.subtree_height(root, 1)),
            (3, lambda: recursive.max_level_size(root)),
            (4, lambda: recursive.max_balance_gap(root, 0)),
            (5, lambda: recursive.one_child_parents(root)),
        ],
    )


def run_stack_report(program: str, r: int, path: str, out: TextIO) -> Dict[int, int]:
    """Print the tree and the level statistics, leaving out the balance gap."""
    tree = _load(path, StudentTree.read)
    _write(out, ["Tree:", *tree.lines(r)])
    return _profile_all(
        program,
        out,
        [
            (1, tree.leaf_count),
            (2, tree.height),
            (3, tree.max_level_size),
            (5, tree.one_child_parents),
        ],
    )


def run_airdrop_report(program: str, r: int, path: str, out: TextIO) -> Dict[int, int]:
    """Print the tree and the five statistics computed level by level.

    A malformed data file is reported as a read error (READNT).
    """
    try:
        tree = _load(path, StudentTree.read)
    except RecordError as exc:
        if exc.status is IoStatus.FORMAT:
            raise RecordError(IoStatus.READNT, _AIRDROP_MESSAGES[IoStatus.READNT]) from exc
        raise
    _write(out, ["Tree:", *tree.lines(r)])
    root = tree.root
    return _profile_each(
        program,
        out,
        [
            (1, lambda: treestats.leaf_count(root)),
            (2, lambda: treestats.depth(root, 0)),
            (3, lambda: treestats.widest_level(root)),
            (4, lambda: treestats.max_height_gap(root, 0)),
            (5, lambda: treestats.one_child_parents(root)),
        ],
    )


_TREE_COMMANDS: Dict[str, Callable[[str, int, str, TextIO], Dict[int, int]]] = {
    "tree": run_tree_report,
    "tree-summary": run_tree_summary,
    "stack": run_stack_report,
}


def _airdrop_main(program: str, rest: List[str], out: TextIO) -> int:
    match = _INT.match(rest[0]) if len(rest) == 2 else None
    if match is None:
        _write(out, [f"Usage: {program} r file"])
        return -1
    try:
        run_airdrop_report(program, int(match.group(1)), rest[1], out)
    except RecordError as exc:
        _write(out, [_AIRDROP_MESSAGES.get(exc.status, "Unknown ERROR")])
        return -1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command and return its exit code.

    Commands: ``list TASK R FILE K``, ``sort TASK R FILE``, ``tree R FILE``,
    ``tree-summary R FILE``, ``stack R FILE`` and ``airdrop R FILE``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    command, rest = (args[0], args[1:]) if args else ("", [])
    program = f"{_PROG} {command}" if command else _PROG
    if command == "airdrop":
        return _airdrop_main(program, rest, out)
    try:
        if command == "list":
            if len(rest) != 4:
                raise RecordError(IoStatus.FORMAT)
            task = _parse_task(rest[0])
            r = _parse_int(rest[1])
            k = _parse_int(rest[3])
            outcome = run_list_task(task, r, rest[2], k, out)
            _write(out, [outcome.summary(program)])
        elif command == "sort":
            if len(rest) != 3:
                raise RecordError(IoStatus.FORMAT)
            task = _parse_task(rest[0])
            r = _parse_int(rest[1])
            sorted_outcome = run_sort_task(task, r, rest[2], out)
            _write(out, [sorted_outcome.summary(program)])
        elif command in _TREE_COMMANDS:
            if len(rest) != 2:
                raise RecordError(IoStatus.FORMAT)
            r = _parse_int(rest[0])
            _TREE_COMMANDS[command](program, r, rest[1], out)
        else:
            raise RecordError(IoStatus.FORMAT)
    except RecordError as exc:
        message = error_message(exc.status)
        if message is not None:
            _write(out, [message])
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())