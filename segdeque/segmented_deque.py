"""Double-ended queue stored as a linked list of fixed-capacity array segments."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from segdeque.array_sequence import MutableArraySequence
from segdeque.list_sequence import MutableListSequence
from segdeque.sequence import Sequence

T = TypeVar("T")

_DEFAULT_SEGMENT_CAPACITY = 16


class SegmentedDeque(Sequence[T]):
    """A deque whose elements live in array segments of bounded size.

    New segments are opened at either end when the segment there is full,
    and a segment is dropped as soon as it becomes empty.
    """

    def __init__(self, segment_capacity: int = _DEFAULT_SEGMENT_CAPACITY) -> None:
        self._segment_capacity = segment_capacity
        self._segments: MutableListSequence[MutableArraySequence[T]] = MutableListSequence()
        self._size = 0

    def _empty_like(self) -> SegmentedDeque[T]:
        return SegmentedDeque(self._segment_capacity)

    def copy(self) -> SegmentedDeque[T]:
        """Return an independent deque with the same elements and segment layout."""
        result = self._empty_like()
        for segment in self._segments:
            result._segments.append(segment.copy())
        result._size = self._size
        return result

    def _require_items(self) -> None:
        if self._size == 0:
            raise IndexError("deque is empty")

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of range")

    def _locate(self, index: int) -> tuple[MutableArraySequence[T], int]:
        self._check_index(index)
        offset = index
        for segment in self._segments:
            if offset < len(segment):
                return segment, offset
            offset -= len(segment)
        raise IndexError(f"index {index} out of range")

    def push_front(self, value: T) -> None:
        """Add ``value`` at the front."""
        if len(self._segments) == 0 or len(self._segments[0]) >= self._segment_capacity:
            self._segments.prepend(MutableArraySequence())
        self._segments[0].prepend(value)
        self._size += 1

    def push_back(self, value: T) -> None:
        """Add ``value`` at the back."""
        count = len(self._segments)
        if count == 0 or len(self._segments[count - 1]) >= self._segment_capacity:
            self._segments.append(MutableArraySequence())
        self._segments[len(self._segments) - 1].append(value)
        self._size += 1

    def pop_front(self) -> None:
        """Remove the front element, raising ``IndexError`` when empty."""
        self._require_items()
        first = self._segments[0]
        first.remove_at(0)
        self._size -= 1
        if len(first) == 0:
            self._segments.remove_at(0)

    def pop_back(self) -> None:
        """Remove the back element, raising ``IndexError`` when empty."""
        self._require_items()
        last_index = len(self._segments) - 1
        last = self._segments[last_index]
        last.remove_at(len(last) - 1)
        self._size -= 1
        if len(last) == 0:
            self._segments.remove_at(last_index)

    def front(self) -> T:
        """Return the front element, raising ``IndexError`` when empty."""
        self._require_items()
        return self._segments[0][0]

    def back(self) -> T:
        """Return the back element, raising ``IndexError`` when empty."""
        self._require_items()
        last = self._segments[len(self._segments) - 1]
        return last[len(last) - 1]

    def __getitem__(self, index: int) -> T:
        segment, offset = self._locate(index)
        return segment[offset]

    def __setitem__(self, index: int, value: T) -> None:
        segment, offset = self._locate(index)
        segment[offset] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for segment in self._segments:
            yield from segment

    def is_empty(self) -> bool:
        """Return whether the deque holds no elements."""
        return self._size == 0

    def clear(self) -> None:
        """Remove every element."""
        self._segments.clear()
        self._size = 0

    def concat(self, other: Sequence[T]) -> SegmentedDeque[T]:
        """Return a new deque of these elements followed by ``other``'s."""
        if not isinstance(other, SegmentedDeque):
            raise TypeError("invalid type for concatenation")
        result = self._empty_like()
        for item in self:
            result.push_back(item)
        for item in other:
            result.push_back(item)
        return result

    def get_subsequence(self, start_index: int, end_index: int) -> SegmentedDeque[T]:
        """Return a new deque of the elements from start to end inclusive."""
        if start_index < 0 or end_index >= self._size or start_index > end_index:
            raise IndexError(f"invalid range {start_index}..{end_index}")
        result = self._empty_like()
        for index in range(start_index, end_index + 1):
            result.push_back(self[index])
        return result

    def sort(self) -> None:
        """Sort the elements in place; a deque of functions is left as it is."""
        if self._size == 0:
            return
        values = list(self)
        if all(callable(value) for value in values):
            return
        values.sort()
        self.clear()
        for value in values:
            self.push_back(value)

    def map(self, func: Callable[[T], T]) -> SegmentedDeque[T]:
        """Return a new deque with ``func`` applied to every element."""
        result = self._empty_like()
        for item in self:
            result.push_back(func(item))
        return result

    def where(self, predicate: Callable[[T], bool]) -> SegmentedDeque[T]:
        """Return a new deque of the elements for which ``predicate`` holds."""
        result = self._empty_like()
        for item in self:
            if predicate(item):
                result.push_back(item)
        return result

    def reduce(self, func: Callable[[T, T], T], init: T) -> T:
        """Fold the elements from front to back, starting from ``init``."""
        if callable(init):
            raise TypeError("reduce is not supported for functions")
        accumulator = init
        for item in self:
            accumulator = func(accumulator, item)
        return accumulator

    def find_subsequence(self, subsequence: SegmentedDeque[T]) -> int:
        """Return the first index where ``subsequence`` occurs, or -1."""
        needle = list(subsequence)
        if not needle or len(needle) > self._size:
            return -1
        haystack = list(self)
        if any(callable(value) for value in haystack):
            return -1
        width = len(needle)
        for start in range(self._size - width + 1):
            if all(a == b for a, b in zip(haystack[start : start + width], needle)):
                return start
        return -1

    def merge(self, other: SegmentedDeque[T]) -> SegmentedDeque[T]:
        """Return a new deque of these elements followed by ``other``'s."""
        return self.concat(other)

    def get_first(self) -> T:
        """Return the front element, raising ``IndexError`` when empty."""
        return self.front()

    def get_last(self) -> T:
        """Return the back element, raising ``IndexError`` when empty."""
        return self.back()

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        return self[index]

    def append(self, item: T) -> SegmentedDeque[T]:
        """Add ``item`` at the back and return this deque."""
        self.push_back(item)
        return self

    def prepend(self, item: T) -> SegmentedDeque[T]:
        """Add ``item`` at the front and return this deque."""
        self.push_front(item)
        return self

    def insert_at(self, item: T, index: int) -> SegmentedDeque[T]:
        """Return a new deque with ``item`` inserted at ``index``."""
        if index < 0 or index > self._size:
            raise IndexError(f"index {index} out of range")
        result = self._empty_like()
        values: list[Any] = list(self)
        values.insert(index, item)
        for value in values:
            result.push_back(value)
        return result

    def remove_at(self, index: int) -> SegmentedDeque[T]:
        """Return a new deque without the element at ``index``."""
        self._check_index(index)
        result = self._empty_like()
        for position, value in enumerate(self):
            if position != index:
                result.push_back(value)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"