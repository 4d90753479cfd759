"""Linked-list-backed sequences in mutable and immutable flavours."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, TypeVar

from segdeque.linked_list import LinkedList
from segdeque.sequence import Sequence

T = TypeVar("T")


class _ListBacked(Sequence[T]):
    """Construction, iteration and display shared by both list sequences."""

    _list: LinkedList[T]

    @classmethod
    def _wrap(cls, linked: LinkedList[T]):
        sequence = cls.__new__(cls)
        sequence._list = linked
        return sequence

    def __iter__(self):
        return iter(self._list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._list)!r})"


class MutableListSequence(_ListBacked[T]):
    """List sequence whose modifying operations change it in place and return it."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._list = LinkedList(items)

    def get_first(self) -> T:
        """Return the first element, raising ``IndexError`` when empty."""
        return self._list.get_first()

    def get_last(self) -> T:
        """Return the last element, raising ``IndexError`` when empty."""
        return self._list.get_last()

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        return self._list.get(index)

    def get_subsequence(self, start_index: int, end_index: int) -> MutableListSequence[T]:
        """Return a new sequence of the elements from start to end inclusive."""
        return self._wrap(self._list.get_sublist(start_index, end_index))

    def __len__(self) -> int:
        return len(self._list)

    def copy(self) -> MutableListSequence[T]:
        """Return an independent sequence holding the same elements."""
        return self._wrap(self._list.copy())

    def append(self, item: T) -> MutableListSequence[T]:
        self._list.append(item)
        return self

    def prepend(self, item: T) -> MutableListSequence[T]:
        self._list.prepend(item)
        return self

    def insert_at(self, item: T, index: int) -> MutableListSequence[T]:
        self._list.insert_at(item, index)
        return self

    def concat(self, other: Sequence[T]) -> MutableListSequence[T]:
        """Return a new sequence; this one is left unchanged."""
        result = self.copy()
        for item in other:
            result.append(item)
        return result

    def remove_at(self, index: int) -> MutableListSequence[T]:
        self._list.remove_at(index)
        return self

    def clear(self) -> None:
        """Remove every element."""
        self._list = LinkedList()

    def __setitem__(self, index: int, value: T) -> None:
        self._list[index] = value


class ImmutableListSequence(_ListBacked[T]):
    """List sequence whose modifying operations return a new sequence."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._list = LinkedList(items)

    def get_first(self) -> T:
        """Return the first element, raising ``IndexError`` when empty."""
        return self._list.get_first()

    def get_last(self) -> T:
        """Return the last element, raising ``IndexError`` when empty."""
        return self._list.get_last()

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        return self._list.get(index)

    def get_subsequence(self, start_index: int, end_index: int) -> ImmutableListSequence[T]:
        """Return a new sequence of the elements from start to end inclusive."""
        return self._wrap(self._list.get_sublist(start_index, end_index))

    def __len__(self) -> int:
        return len(self._list)

    def copy(self) -> ImmutableListSequence[T]:
        """Return an independent sequence holding the same elements."""
        return self._wrap(self._list.copy())

    def append(self, item: T) -> ImmutableListSequence[T]:
        linked = self._list.copy()
        linked.append(item)
        return self._wrap(linked)

    def prepend(self, item: T) -> ImmutableListSequence[T]:
        linked = self._list.copy()
        linked.prepend(item)
        return self._wrap(linked)

    def insert_at(self, item: T, index: int) -> ImmutableListSequence[T]:
        linked = self._list.copy()
        linked.insert_at(item, index)
        return self._wrap(linked)

    def concat(self, other: Sequence[T]) -> ImmutableListSequence[T]:
        return self._wrap(self._list.concat(other))

    def remove_at(self, index: int) -> ImmutableListSequence[T]:
        linked = self._list.copy()
        linked.remove_at(index)
        return self._wrap(linked)