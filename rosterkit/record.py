"""Student records: the (name, value) pair held by every container."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, TextIO


class IoStatus(IntEnum):
    """Outcome of reading or running; the value doubles as the exit code."""

    SUCCESS = 0
    EOF = 1
    READNT = 2
    OPENT = 3
    FORMAT = 4
    MEMORY = 5


_MESSAGES = {
    IoStatus.FORMAT: "Invalid arguments",
    IoStatus.MEMORY: "Cannot allocate memory",
    IoStatus.OPENT: "Cannot open file",
    IoStatus.EOF: "Unexpected eof",
    IoStatus.READNT: "Cannot read from file",
}


def error_message(status: IoStatus) -> Optional[str]:
    """Return the message reported for ``status``, or None for success."""
    return _MESSAGES.get(IoStatus(status))


class RecordError(Exception):
    """Raised when records cannot be read or a run cannot proceed."""

    def __init__(self, status: IoStatus, detail: Optional[str] = None):
        self.status = IoStatus(status)
        super().__init__(detail or error_message(self.status) or self.status.name.lower())

    @property
    def exit_code(self) -> int:
        return int(self.status)


@dataclass(eq=False)
class Student:
    """A named integer record ordered by name, then by value."""

    name: Optional[str] = None
    value: int = 0

    def cmp(self, other: "Student") -> int:
        """Three-way comparison: negative, zero or positive."""
        if self.name is None:
            if other.name is not None:
                return -1
            return self.value - other.value
        if other.name is None:
            return 1
        mine, theirs = self.name.encode(), other.name.encode()
        if mine != theirs:
            return -1 if mine < theirs else 1
        return self.value - other.value

    def line(self) -> str:
        """The record as printed: name, a space, the value."""
        name = "(null)" if self.name is None else self.name
        return f"{name} {self.value}"

    def __eq__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return self.cmp(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return self.cmp(other) >= 0


_WORD = re.compile(r"\s*(\S+)")
_NUMBER = re.compile(r"\s*([+-]?\d+)")


def iter_students(stream: TextIO, max_read: Optional[int] = None) -> Iterator[Student]:
    """Yield records read as whitespace-separated ``name value`` pairs.

    Reading stops quietly at the end of the input (even mid-record) and
    raises RecordError with FORMAT when a value is not an integer.
    """
    if max_read is not None and max_read < 0:
        raise ValueError("max_read must not be negative")
    text = stream.read()
    pos = 0
    count = 0
    while max_read is None or count < max_read:
        word = _WORD.match(text, pos)
        if word is None:
            return
        pos = word.end()
        number = _NUMBER.match(text, pos)
        if number is None:
            if text[pos:].strip() in ("", "+", "-"):
                return
            raise RecordError(IoStatus.FORMAT)
        pos = number.end()
        count += 1
        yield Student(word.group(1), int(number.group(1)))


_TASK = re.compile(r"a\s*([+-]?\d+)")


def task_number(program: str) -> int:
    """Task number encoded after the last ``a`` of a program name, or -1."""
    pos = program.rfind("a")
    if pos < 0:
        return -1
    match = _TASK.match(program, pos)
    return int(match.group(1)) if match else -1