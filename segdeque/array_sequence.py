"""Array-backed sequences in mutable and immutable flavours."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, TypeVar

from segdeque.dynamic_array import DynamicArray
from segdeque.sequence import Sequence

T = TypeVar("T")

_DEFAULT_CAPACITY = 50


def _new_array(items: Optional[Iterable[T]]) -> DynamicArray[T]:
    if items is None:
        return DynamicArray(_DEFAULT_CAPACITY)
    return DynamicArray.from_items(items)


def _check_range(start_index: int, end_index: int, length: int) -> None:
    if start_index < 0 or end_index >= length or start_index > end_index:
        raise IndexError(f"invalid range {start_index}..{end_index}")


def _check_index(index: int, length: int) -> None:
    if index < 0 or index >= length:
        raise IndexError(f"index {index} out of range")


def _check_insert(index: int, length: int) -> None:
    if index < 0 or index > length:
        raise IndexError(f"index {index} out of range")


def _first(array: DynamicArray[T]) -> T:
    if len(array) == 0:
        raise IndexError("empty sequence")
    return array.get(0)


def _last(array: DynamicArray[T]) -> T:
    if len(array) == 0:
        raise IndexError("empty sequence")
    return array.get(len(array) - 1)


def _at(array: DynamicArray[T], index: int) -> T:
    _check_index(index, len(array))
    return array.get(index)


def _slice(array: DynamicArray[T], start_index: int, end_index: int) -> DynamicArray[T]:
    _check_range(start_index, end_index, len(array))
    return DynamicArray.from_items(list(array)[start_index : end_index + 1])


class _ArrayBacked(Sequence[T]):
    """Construction and display shared by both array sequences."""

    _items: DynamicArray[T]

    @classmethod
    def _wrap(cls, array: DynamicArray[T]):
        sequence = cls.__new__(cls)
        sequence._items = array
        return sequence

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class MutableArraySequence(_ArrayBacked[T]):
    """Array sequence whose modifying operations change it in place and return it."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items = _new_array(items)

    def get_first(self) -> T:
        """Return the first element, raising ``IndexError`` when empty."""
        return _first(self._items)

    def get_last(self) -> T:
        """Return the last element, raising ``IndexError`` when empty."""
        return _last(self._items)

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        return _at(self._items, index)

    def get_subsequence(self, start_index: int, end_index: int) -> MutableArraySequence[T]:
        """Return a new sequence of the elements from start to end inclusive."""
        return self._wrap(_slice(self._items, start_index, end_index))

    def __len__(self) -> int:
        return len(self._items)

    def copy(self) -> MutableArraySequence[T]:
        """Return an independent sequence holding the same elements."""
        return self._wrap(DynamicArray.from_items(self._items))

    def append(self, item: T) -> MutableArraySequence[T]:
        length = len(self._items)
        self._items.resize(length + 1)
        self._items.set(length, item)
        return self

    def prepend(self, item: T) -> MutableArraySequence[T]:
        return self.insert_at(item, 0)

    def insert_at(self, item: T, index: int) -> MutableArraySequence[T]:
        _check_insert(index, len(self._items))
        values = list(self._items)
        values.insert(index, item)
        self._items = DynamicArray.from_items(values)
        return self

    def concat(self, other: Sequence[T]) -> MutableArraySequence[T]:
        """Return a new sequence; this one is left unchanged."""
        result = self.copy()
        for item in other:
            result.append(item)
        return result

    def remove_at(self, index: int) -> MutableArraySequence[T]:
        _check_index(index, len(self._items))
        values = list(self._items)
        del values[index]
        self._items = DynamicArray.from_items(values)
        return self

    def __setitem__(self, index: int, value: T) -> None:
        _check_index(index, len(self._items))
        self._items[index] = value


class ImmutableArraySequence(_ArrayBacked[T]):
    """Array sequence whose modifying operations return a new sequence."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items = _new_array(items)

    def _with(self, values: list[T]) -> ImmutableArraySequence[T]:
        return self._wrap(DynamicArray.from_items(values))

    def get_first(self) -> T:
        """Return the first element, raising ``IndexError`` when empty."""
        return _first(self._items)

    def get_last(self) -> T:
        """Return the last element, raising ``IndexError`` when empty."""
        return _last(self._items)

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        return _at(self._items, index)

    def get_subsequence(self, start_index: int, end_index: int) -> ImmutableArraySequence[T]:
        """Return a new sequence of the elements from start to end inclusive."""
        return self._wrap(_slice(self._items, start_index, end_index))

    def __len__(self) -> int:
        return len(self._items)

    def copy(self) -> ImmutableArraySequence[T]:
        """Return an independent sequence holding the same elements."""
        return self._wrap(DynamicArray.from_items(self._items))

    def append(self, item: T) -> ImmutableArraySequence[T]:
        return self._with([*self._items, item])

    def prepend(self, item: T) -> ImmutableArraySequence[T]:
        return self._with([item, *self._items])

    def insert_at(self, item: T, index: int) -> ImmutableArraySequence[T]:
        _check_insert(index, len(self._items))
        values = list(self._items)
        values.insert(index, item)
        return self._with(values)

    def concat(self, other: Sequence[T]) -> ImmutableArraySequence[T]:
        return self._with([*self._items, *other])

    def remove_at(self, index: int) -> ImmutableArraySequence[T]:
        _check_index(index, len(self._items))
        values = list(self._items)
        del values[index]
        return self._with(values)