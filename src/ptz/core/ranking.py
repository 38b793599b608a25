"""Ranked list - an ordered sequence whose order is the priority ranking."""

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class RankedList(Generic[T]):
    """
    Ordered container with dense 1-based ranks.

    Ranks are never stored on the items; they are always the 1..N
    positions of the underlying sequence. `move` is the only way to
    reorder existing items.
    """

    def __init__(self, items: list[T] | None = None):
        self._items: list[T] = list(items or [])

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return any(i is item for i in self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RankedList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"RankedList({self._items!r})"

    def rank_of(self, item: T) -> int:
        """1-based rank of item. Raises ValueError if it is not a member."""
        for index, candidate in enumerate(self._items):
            if candidate is item:
                return index + 1
        raise ValueError(f"{item!r} is not in the ranked list")

    def append(self, item: T) -> int:
        """Add item at the lowest rank and return that rank."""
        self._items.append(item)
        return len(self._items)

    def remove(self, item: T) -> None:
        """Remove item; everything below moves up one rank."""
        del self._items[self.rank_of(item) - 1]

    def move(self, item: T, new_rank: int) -> None:
        """
        Move item to new_rank, preserving the relative order of all others.

        Raises IndexError if new_rank is outside 1..len.
        """
        if not 1 <= new_rank <= len(self._items):
            raise IndexError(f"rank {new_rank} outside 1-{len(self._items)}")
        del self._items[self.rank_of(item) - 1]
        self._items.insert(new_rank - 1, item)

    def to_list(self) -> list[T]:
        return list(self._items)
