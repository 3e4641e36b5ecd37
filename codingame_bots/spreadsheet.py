"""Evaluate a one-dimensional spreadsheet whose cells may reference each other."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union


class Operation(Enum):
    """The operation a spreadsheet cell performs on its two arguments."""

    VALUE = "VALUE"
    ADD = "ADD"
    SUB = "SUB"
    MULT = "MULT"

    def apply(self, left: Optional[int], right: Optional[int]) -> int:
        """Compute the operation on already resolved arguments."""
        if left is None:
            raise ValueError(f"{self.value} needs a first argument")
        if self is Operation.VALUE:
            return left
        if right is None:
            raise ValueError(f"{self.value} needs a second argument")
        if self is Operation.ADD:
            return left + right
        if self is Operation.SUB:
            return left - right
        return left * right


@dataclass(frozen=True)
class Ref:
    """A reference to another cell by its index."""

    index: int


Arg = Union[int, Ref, None]


@dataclass(frozen=True)
class Cell:
    """One spreadsheet cell: an operation and its two arguments."""

    operation: Operation
    arg1: Arg
    arg2: Arg


def parse_arg(text: str) -> Arg:
    """Parse an argument: ``$n`` is a reference, ``_`` is empty, else an integer."""
    text = text.strip()
    if not text:
        raise ValueError("empty argument")
    if text.startswith("$"):
        return Ref(int(text[1:]))
    if text.startswith("_"):
        return None
    return int(text)


def parse_cell(line: str) -> Cell:
    """Parse a line of the form ``OPERATION arg1 arg2``."""
    parts = line.split()
    if len(parts) != 3:
        raise ValueError(f"malformed cell: {line!r}")
    name, arg1, arg2 = parts
    try:
        operation = Operation(name)
    except ValueError:
        raise ValueError(f"unknown operation: {name!r}") from None
    return Cell(operation, parse_arg(arg1), parse_arg(arg2))


_UNRESOLVED = object()


def _resolve(arg: Arg, values: list[Optional[int]]):
    if not isinstance(arg, Ref):
        return arg
    if not 0 <= arg.index < len(values):
        raise ValueError(f"reference out of range: ${arg.index}")
    value = values[arg.index]
    return _UNRESOLVED if value is None else value


def evaluate(cells: Iterable[Cell]) -> list[int]:
    """Compute the value of every cell, resolving references in any order."""
    cells = list(cells)
    values: list[Optional[int]] = [None] * len(cells)
    pending = list(range(len(cells)))
    while pending:
        remaining = []
        for index in pending:
            cell = cells[index]
            left = _resolve(cell.arg1, values)
            right = _resolve(cell.arg2, values)
            if left is _UNRESOLVED or right is _UNRESOLVED:
                remaining.append(index)
            else:
                values[index] = cell.operation.apply(left, right)
        if len(remaining) == len(pending):
            raise ValueError("circular references between cells")
        pending = remaining
    return [value for value in values if value is not None]


def main(argv=None) -> None:
    """Read a spreadsheet from standard input and print every cell's value."""
    lines = sys.stdin.read().splitlines()
    count = int(lines[0])
    cells = [parse_cell(line) for line in lines[1 : 1 + count]]
    for value in evaluate(cells):
        print(value)


if __name__ == "__main__":
    main()