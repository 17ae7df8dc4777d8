"""
Fuzzy zip of exactly two collections.

The matrix is built and solved up front; `Fuzip2Iterator` only replays the
solved pairs and then the columns nobody was matched to.
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, Sequence, TypeVar

from ..assignment import hungarian_min_cost
from ..log import timed
from .matrix import build_cost_matrix, orient
from .models import Fuzip, Fuzippable

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Fuzippable)


def fuzzy_zip_two(lefts: Sequence[T], rights: Sequence[T]) -> "Fuzip2Iterator[T]":
    """
    Pair `lefts` with `rights` minimizing the total edit distance of the keys.

    Yields `max(len(lefts), len(rights))` records of width 2 in left/right
    order. Elements of the longer side that could not be paired come last,
    with the other slot set to None.
    """
    if not lefts:
        raise ValueError("lefts empty")
    if not rights:
        raise ValueError("rights empty")

    oriented = orient(lefts, rights)
    with timed("build matrix"):
        matrix = build_cost_matrix(oriented.rows, oriented.columns)
    with timed("solve with Kuhn-Munkres"):
        total, assignment = hungarian_min_cost(matrix)
    logger.debug(
        "matched %d of %d with total distance %d",
        len(assignment),
        len(oriented.columns),
        total,
    )
    return Fuzip2Iterator(oriented.rows, oriented.columns, assignment, oriented.swapped)


class Fuzip2Iterator(Generic[T]):
    def __init__(
        self,
        rows: Sequence[T],
        columns: Sequence[T],
        assignment: Sequence[int],
        swapped: bool,
    ) -> None:
        if len(rows) > len(columns):
            raise ValueError("rows must not outnumber columns")
        if len(assignment) != len(rows):
            raise ValueError("assignment must cover every row")
        self._rows = rows
        # Guaranteed to be the longest side
        self._columns = columns
        self._assignment = list(assignment)
        self._swapped = swapped
        self._consumed: List[bool] = [False] * len(columns)
        self._next_row = 0
        self._next_column = 0
        self._remaining = len(columns)

    def __iter__(self) -> "Fuzip2Iterator[T]":
        return self

    def __len__(self) -> int:
        return self._remaining

    def __length_hint__(self) -> int:
        return self._remaining

    def __next__(self) -> Fuzip[T]:
        if self._next_row < len(self._assignment):
            # Matched row/column pairs
            row_index = self._next_row
            column_index = self._assignment[row_index]
            self._next_row += 1
            if self._consumed[column_index]:
                raise ValueError(f"column {column_index} assigned twice")
            self._consumed[column_index] = True
            self._remaining -= 1
            return self._record(self._rows[row_index], self._columns[column_index])

        # Unmatched stragglers, in their original order
        while self._next_column < len(self._columns):
            column_index = self._next_column
            self._next_column += 1
            if self._consumed[column_index]:
                continue
            self._consumed[column_index] = True
            self._remaining -= 1
            return self._record(None, self._columns[column_index])
        raise StopIteration

    def _record(self, row: Optional[T], column: T) -> Fuzip[T]:
        if self._swapped:
            return Fuzip((column, row))
        return Fuzip((row, column))
