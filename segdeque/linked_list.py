"""Singly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedList(Generic[T]):
    """A singly linked list; positional access walks from the head."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        if items is not None:
            for item in items:
                self.append(item)

    def copy(self) -> LinkedList[T]:
        """Return a new list holding the same elements."""
        return LinkedList(self)

    def _check(self, index: int) -> None:
        if index < 0 or index >= self._length:
            raise IndexError(f"index {index} out of range")

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def get_first(self) -> T:
        """Return the first element, raising ``IndexError`` when empty."""
        if self._head is None:
            raise IndexError("empty list")
        return self._head.value

    def get_last(self) -> T:
        """Return the last element, raising ``IndexError`` when empty."""
        if self._tail is None:
            raise IndexError("empty list")
        return self._tail.value

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        self._check(index)
        return self._node_at(index).value

    def get_sublist(self, start_index: int, end_index: int) -> LinkedList[T]:
        """Return a new list of the elements from start to end inclusive."""
        if start_index < 0 or end_index >= self._length or start_index > end_index:
            raise IndexError(f"invalid range {start_index}..{end_index}")
        sublist: LinkedList[T] = LinkedList()
        node = self._node_at(start_index)
        for _ in range(end_index - start_index + 1):
            sublist.append(node.value)
            node = node.next
        return sublist

    def __len__(self) -> int:
        return self._length

    def append(self, item: T) -> None:
        """Add ``item`` at the end."""
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._length += 1

    def prepend(self, item: T) -> None:
        """Add ``item`` at the front."""
        self._head = _Node(item, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def insert_at(self, item: T, index: int) -> None:
        """Insert ``item`` so that it ends up at position ``index``."""
        if index < 0 or index > self._length:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            self.prepend(item)
        elif index == self._length:
            self.append(item)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(item, before.next)
            self._length += 1

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._check(index)
        if index == 0:
            self._head = self._head.next
            self._length -= 1
            if self._length == 0:
                self._tail = None
            return
        before = self._node_at(index - 1)
        removed = before.next
        before.next = removed.next
        if removed is self._tail:
            self._tail = before
        self._length -= 1

    def concat(self, other: Iterable[T]) -> LinkedList[T]:
        """Return a new list holding these elements followed by ``other``'s."""
        result = self.copy()
        for item in other:
            result.append(item)
        return result

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._node_at(index).value

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._node_at(index).value = value

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"