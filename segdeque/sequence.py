"""Abstract interface shared by every positional sequence in the package."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Sequence(ABC, Generic[T]):
    """An ordered collection whose elements are addressed by position.

    Indices start at zero; negative indices are rejected with ``IndexError``.
    """

    @abstractmethod
    def get_first(self) -> T:
        """Return the first element, raising ``IndexError`` when empty."""

    @abstractmethod
    def get_last(self) -> T:
        """Return the last element, raising ``IndexError`` when empty."""

    @abstractmethod
    def get(self, index: int) -> T:
        """Return the element at ``index``."""

    @abstractmethod
    def get_subsequence(self, start_index: int, end_index: int) -> Sequence[T]:
        """Return the elements from ``start_index`` to ``end_index`` inclusive."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def append(self, item: T) -> Sequence[T]:
        """Add ``item`` at the end."""

    @abstractmethod
    def prepend(self, item: T) -> Sequence[T]:
        """Add ``item`` at the front."""

    @abstractmethod
    def insert_at(self, item: T, index: int) -> Sequence[T]:
        """Insert ``item`` so that it ends up at position ``index``."""

    @abstractmethod
    def concat(self, other: Sequence[T]) -> Sequence[T]:
        """Return a sequence holding these elements followed by ``other``'s."""

    def remove_at(self, index: int) -> Sequence[T]:
        """Remove the element at ``index``; unsupported unless overridden."""
        raise RuntimeError("cannot remove from this sequence")

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __iter__(self) -> Iterator[T]:
        for position in range(len(self)):
            yield self.get(position)