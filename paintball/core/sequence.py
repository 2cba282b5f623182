"""
Counted iteration over ordered rosters.

Rosters are plain lists. Queries hand out a ``SizedIterator`` built from a
snapshot of the list, so callers can ask how many elements there are while
iterating, and later mutations of the roster do not disturb the iteration.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Sequence, TypeVar

T = TypeVar("T")


class SizedIterator(Generic[T]):
    """Iterator over a fixed snapshot that also reports its element count."""

    def __init__(self, items: Iterable[T]):
        self._items: List[T] = list(items)
        self._index = 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._index >= len(self._items):
            raise StopIteration
        item = self._items[self._index]
        self._index += 1
        return item

    def __len__(self) -> int:
        """Total number of elements in the snapshot."""
        return len(self._items)

    def has_next(self) -> bool:
        return self._index < len(self._items)

    def remaining(self) -> int:
        """Number of elements not yet returned."""
        return len(self._items) - self._index

    def __repr__(self) -> str:
        return f"SizedIterator(size={len(self._items)}, remaining={self.remaining()})"


def index_of(items: Sequence[T], item: T) -> int:
    """
    Find the position of ``item`` by identity.

    Raises:
        ValueError: If the object is not in the sequence
    """
    for i, candidate in enumerate(items):
        if candidate is item:
            return i
    raise ValueError(f"{item!r} is not in the sequence")
