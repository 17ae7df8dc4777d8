"""
Domain models for fuzzy zipping.

These are pure data models with no dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Iterator, Optional, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Fuzippable(Protocol):
    """
    An element that can be fuzzy zipped.

    `key()` feeds the edit distance and must be stable for the duration of a
    match; `display()` is what gets printed or substituted into commands.
    """

    def get(self) -> Any: ...

    def key(self) -> Sequence[Hashable]: ...

    def display(self) -> str: ...


@dataclass(frozen=True, slots=True)
class FuzipText:
    """Plain string element, keyed and displayed as itself."""

    value: str

    def get(self) -> str:
        return self.value

    def key(self) -> str:
        return self.value

    def display(self) -> str:
        return self.value


class FuzipMissing(LookupError):
    """A record slot could not be read."""


class NoMatch(FuzipMissing):
    def __init__(self, index: int) -> None:
        super().__init__(f"no matching value for slot {index + 1}")
        self.index = index


class OutOfBounds(FuzipMissing):
    def __init__(self, index: int, width: int) -> None:
        super().__init__(f"slot {index + 1} out of bounds (width {width})")
        self.index = index
        self.width = width


@dataclass(frozen=True, slots=True)
class Fuzip(Generic[T]):
    """
    One output record of a fuzzy zip.

    Each slot holds the caller's own element or None when that side had
    nothing left to pair with.
    """

    slots: tuple[Optional[T], ...]

    def get(self, index: int) -> T:
        if index < 0 or index >= len(self.slots):
            raise OutOfBounds(index, len(self.slots))
        value = self.slots[index]
        if value is None:
            raise NoMatch(index)
        return value

    @property
    def width(self) -> int:
        return len(self.slots)

    def complete(self) -> bool:
        return all(slot is not None for slot in self.slots)

    def __iter__(self) -> Iterator[Optional[T]]:
        return iter(self.slots)

    def __str__(self) -> str:
        return " ".join(slot.display() for slot in self.slots if slot is not None)
