"""Solutions to the smart pointer exercises: a cons list and clone-on-write data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, MutableSequence, Sequence


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; a tail of None ends the list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding a few values."""
    return Cons(1, Cons(2))


class Cow:
    """Data that is either borrowed from the caller or owned, copied on first write."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self.data = data
        self.owned = owned

    def _to_mut(self) -> MutableSequence[int]:
        if not self.owned or not isinstance(self.data, list):
            self.data = list(self.data)
            self.owned = True
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if a change is needed."""
    for index, value in enumerate(list(cow.data)):
        if value < 0:
            cow._to_mut()[index] = -value
    return cow