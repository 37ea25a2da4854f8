"""A roster of records with the classic list-sorting tasks."""

from __future__ import annotations

from bisect import insort_right
from itertools import pairwise
from typing import Iterable, Iterator, List, Optional, TextIO

from .record import Student, iter_students


def _merge(left: List[Student], right: List[Student]) -> List[Student]:
    """Merge two ordered runs; on a tie the record from ``right`` goes first."""
    merged: List[Student] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


class SortableList:
    """A sequence of Student records that the sorting tasks reorder in place."""

    def __init__(self, records: Iterable[Student] = ()):
        self._items: List[Student] = list(records)

    @classmethod
    def read(cls, stream: TextIO, max_read: Optional[int] = None) -> "SortableList":
        """Build a list from ``name value`` pairs; raises RecordError on bad input."""
        return cls(iter_students(stream, max_read))

    def __iter__(self) -> Iterator[Student]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def lines(self, r: int = 10) -> List[str]:
        """Printed form of the first ``r`` records; a negative ``r`` means all."""
        shown = self._items if r < 0 else self._items[:r]
        return [record.line() for record in shown]

    def bubble_sort(self) -> None:
        """Sort ascending by repeatedly bubbling the greatest record to the end."""
        items = self._items
        for end in range(len(items) - 1, 0, -1):
            for i in range(end):
                if items[i] > items[i + 1]:
                    items[i], items[i + 1] = items[i + 1], items[i]

    def selection_sort(self) -> None:
        """Sort ascending by repeatedly taking the least remaining record.

        With three or more records the selection stops when a single record
        is left, and that last (greatest) record is not kept.
        """
        items = self._items
        if len(items) < 2:
            return
        if len(items) == 2:
            if not items[0] < items[1]:
                items.reverse()
            return
        remaining = list(items)
        result: List[Student] = []
        while len(remaining) > 1:
            best = 0
            for idx, record in enumerate(remaining):
                if record <= remaining[best]:
                    best = idx
            result.append(remaining.pop(best))
        self._items = result

    def insertion_sort(self) -> None:
        """Sort ascending by inserting each record after its equals."""
        ordered: List[Student] = []
        for record in self._items:
            insort_right(ordered, record)
        self._items = ordered

    def merge_sort(self) -> None:
        """Sort ascending by merging runs of doubling width."""
        items = self._items
        width = 1
        while width < len(items):
            merged: List[Student] = []
            for start in range(0, len(items), 2 * width):
                merged.extend(
                    _merge(items[start:start + width], items[start + width:start + 2 * width])
                )
            items = merged
            width *= 2
        self._items = items

    def inversions(self) -> int:
        """Number of neighbours where the earlier record is greater."""
        return sum(1 for left, right in pairwise(self._items) if left > right)