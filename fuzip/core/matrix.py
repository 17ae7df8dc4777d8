"""
Cost matrix construction for fuzzy zipping.

The assignment solver needs at least as many columns as rows, so `orient`
picks the shorter side as rows and remembers whether that meant swapping the
caller's left and right.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, List, Sequence, TypeVar

from rapidfuzz.distance import DamerauLevenshtein

from .models import Fuzippable

logger = logging.getLogger(__name__)

I64_MAX = 2**63 - 1

T = TypeVar("T", bound=Fuzippable)


@dataclass(frozen=True, slots=True)
class Orientation(Generic[T]):
    rows: Sequence[T]
    columns: Sequence[T]
    swapped: bool


def orient(lefts: Sequence[T], rights: Sequence[T]) -> Orientation[T]:
    if len(lefts) <= len(rights):
        return Orientation(lefts, rights, False)
    logger.debug("swapping lefts & rights (%d > %d)", len(lefts), len(rights))
    return Orientation(rights, lefts, True)


def key_distance(left: Sequence[Hashable], right: Sequence[Hashable]) -> int:
    """Unrestricted Damerau-Levenshtein distance between two keys."""
    weight = DamerauLevenshtein.distance(left, right)
    if weight > I64_MAX:
        raise OverflowError(f"weight {weight} unable to fit in i64")
    return weight


def build_cost_matrix(rows: Sequence[Fuzippable], columns: Sequence[Fuzippable]) -> List[List[int]]:
    if not rows or not columns:
        raise ValueError("cost matrix needs non-empty rows and columns")
    if len(rows) > len(columns):
        raise ValueError(
            f"cost matrix needs rows <= columns, got {len(rows)}x{len(columns)}"
        )
    column_keys = [column.key() for column in columns]
    matrix: List[List[int]] = []
    for row in rows:
        row_key = row.key()
        cells: List[int] = []
        for column_key in column_keys:
            cells.append(key_distance(row_key, column_key))
        matrix.append(cells)
    return matrix
