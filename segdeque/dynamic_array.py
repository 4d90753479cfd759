"""Resizable array with a separate capacity and element count."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """A fixed block of slots of which the first ``len(self)`` are in use.

    Slots past the count can be written with :meth:`set` (up to the
    capacity) but cannot be read until a resize brings them into use.
    New slots are filled with ``None``.
    """

    __slots__ = ("_data", "_count")

    def __init__(self, size: int) -> None:
        capacity = size if size > 0 else 1
        self._data: list[Any] = [None] * capacity
        self._count = 0

    @classmethod
    def from_items(cls, items: Iterable[T]) -> DynamicArray[T]:
        """Build an array whose count and capacity equal the number of items."""
        array = cls.__new__(cls)
        array._data = list(items)
        array._count = len(array._data)
        return array

    @staticmethod
    def _check(index: int, limit: int) -> None:
        if index < 0 or index >= limit:
            raise IndexError(f"index {index} out of range")

    def get(self, index: int) -> T:
        """Return the element at ``index``; it must be below the count."""
        self._check(index, self._count)
        return self._data[index]

    def set(self, index: int, value: T) -> None:
        """Store ``value`` at ``index``; it must be below the capacity."""
        self._check(index, len(self._data))
        self._data[index] = value

    def resize(self, new_size: int) -> None:
        """Change both capacity and count to ``new_size``, keeping used slots."""
        if new_size < 0:
            raise ValueError(f"wrong size {new_size}")
        kept = self._data[: min(self._count, new_size)]
        self._data = kept + [None] * (new_size - len(kept))
        self._count = new_size

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> T:
        self._check(index, self._count)
        return self._data[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index, self._count)
        self._data[index] = value

    def __iter__(self) -> Iterator[T]:
        yield from self._data[: self._count]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"