"""An ordered roster of records with the list-editing tasks."""

from __future__ import annotations

from itertools import pairwise
from typing import Callable, Iterable, Iterator, List, Optional, TextIO, Tuple

from .record import Student, iter_students

_UINT = 2 ** 32


def _runs(
    items: List[Student], linked: Callable[[Student, Student], bool]
) -> Iterator[Tuple[int, int]]:
    """Yield (start, stop) of maximal stretches of two or more linked records."""
    start = None
    for idx, (left, right) in enumerate(pairwise(items)):
        if linked(left, right):
            if start is None:
                start = idx
        elif start is not None:
            yield start, idx + 1
            start = None
    if start is not None:
        yield start, len(items)


class DoubleList:
    """A sequence of Student records edited in place by the tasks below."""

    def __init__(self, records: Iterable[Student] = ()):
        self._items: List[Student] = list(records)

    @classmethod
    def read(cls, stream: TextIO, max_read: Optional[int] = None) -> "DoubleList":
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

    def shift(self, k: int) -> None:
        """Cyclic shift: the record at index ``n-1-k`` becomes the head.

        ``k`` is reduced as an unsigned 32-bit count modulo the length, so
        negative values wrap. When the new head would be the old head
        (``k == n-1``) only the head remains.
        """
        n = len(self._items)
        if n == 0:
            return
        k = (k % _UINT) % n
        if k == 0:
            return
        cut = n - 1 - k
        if cut == 0:
            del self._items[1:]
        else:
            self._items = self._items[cut:] + self._items[:cut]

    def remove_greater_than_previous(self, k: int) -> None:
        """From the tail back, drop a record greater than any of the ``k`` before it."""
        items = self._items
        for idx in range(len(items) - 1, 0, -1):
            window = items[max(0, idx - k):idx] if k > 0 else []
            if any(items[idx] > earlier for earlier in window):
                del items[idx]

    def remove_greater_than_next(self, k: int) -> None:
        """From the head on, drop a record greater than any of the ``k`` after it."""
        items = self._items
        idx = 0
        while idx < len(items) - 1:
            window = items[idx + 1:idx + 1 + k] if k > 0 else []
            if any(items[idx] > later for later in window):
                del items[idx]
            else:
                idx += 1

    def _drop_runs(self, linked: Callable[[Student, Student], bool], k: int) -> None:
        doomed = set()
        for start, stop in _runs(self._items, linked):
            if stop - start > k:
                doomed.update(range(start, stop))
        self._items = [r for idx, r in enumerate(self._items) if idx not in doomed]

    def remove_equal_runs(self, k: int) -> None:
        """Drop every run of equal neighbours longer than ``k``."""
        if len(self._items) == 1:
            if k == 0:
                self._items.clear()
            return
        self._drop_runs(lambda a, b: a == b, k)

    def remove_nonincreasing_runs(self, k: int) -> None:
        """Drop every non-increasing run of neighbours longer than ``k``."""
        if len(self._items) == 1:
            if k == 0:
                self._items.clear()
            return
        self._drop_runs(lambda a, b: a >= b, k)

    def remove_between_equal_runs(self, k: int) -> None:
        """Drop everything lying between consecutive equal runs longer than ``k``."""
        items = self._items
        runs = [(s, e) for s, e in _runs(items, lambda a, b: a == b) if e - s > k]
        doomed = set()
        for (_, prev_stop), (next_start, _) in pairwise(runs):
            doomed.update(range(prev_stop, next_start))
        self._items = [r for idx, r in enumerate(items) if idx not in doomed]