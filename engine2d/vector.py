"""A dynamic array with in-place, chainable operations and tracked capacity."""

from __future__ import annotations

import random
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from engine2d.result import Result

T = TypeVar("T")

_NOT_FOUND = "Could not find value"
_OUT_OF_RANGE = "Index out of range"
_BAD_RANGE = "Invalid start/end index"


class Vector(Generic[T]):
    """A growable sequence of items.

    Most operations change the vector in place and return it, so calls can be
    chained. Use :meth:`copy` to keep the original untouched. Capacity is
    tracked separately from the number of items and doubles when full.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Iterable[T] = (), *, capacity: Optional[int] = None) -> None:
        self._items: list[T] = list(items)
        if capacity is None:
            capacity = len(self._items)
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self._capacity = max(capacity, len(self._items))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(_OUT_OF_RANGE)

    def _clamped_range(self, start: int, end: int) -> tuple[int, int]:
        end = min(end, len(self._items))
        if start < 0 or start > end:
            raise ValueError(_BAD_RANGE)
        return start, end

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def capacity(self) -> int:
        """The number of items the vector can hold before it grows."""
        return self._capacity

    def at(self, index: int) -> T:
        """The item at ``index``; raises IndexError when out of range."""
        return self[index]

    def back(self) -> T:
        """The last item; raises IndexError when empty."""
        if not self._items:
            raise IndexError(_OUT_OF_RANGE)
        return self._items[-1]

    def front(self) -> T:
        """The first item; raises IndexError when empty."""
        if not self._items:
            raise IndexError(_OUT_OF_RANGE)
        return self._items[0]

    def clear(self) -> Vector[T]:
        """Remove every item and release the capacity."""
        self._items.clear()
        self._capacity = 0
        return self

    def copy(self) -> Vector[T]:
        """A new vector with the same items and capacity."""
        return Vector(self._items, capacity=self._capacity)

    def contains(self, value: Any) -> bool:
        """Whether ``value`` is among the items."""
        return self.index_of(value).ok()

    def empty(self) -> bool:
        """Whether the vector holds no items."""
        return not self._items

    def erase(self, index: int) -> Vector[T]:
        """Remove the item at ``index``; raises IndexError when out of range."""
        self._check_index(index)
        del self._items[index]
        return self

    def filter(self, condition: Callable[[T], bool]) -> Vector[T]:
        """Keep only the items for which ``condition`` is true."""
        self._items[:] = [item for item in self._items if condition(item)]
        return self

    def flood(self, value: T, start: int, end: int) -> Vector[T]:
        """Set every item from ``start`` up to ``end`` (clamped to the size) to ``value``."""
        start, end = self._clamped_range(start, end)
        self._items[start:end] = [value] * (end - start)
        return self

    def for_each(self, callback: Callable[[T], Any]) -> None:
        """Call ``callback`` with each item in order."""
        for item in self._items:
            callback(item)

    def index_of(self, value: Any) -> Result[int]:
        """The index of the first item equal to ``value``, wrapped in a Result."""
        for index, item in enumerate(self._items):
            if item == value:
                return Result.success(index)
        return Result.failure(_NOT_FOUND)

    def indexes_of(self, value: Any) -> Vector[int]:
        """The indexes of every item equal to ``value``."""
        return Vector(index for index, item in enumerate(self._items) if item == value)

    def insert(self, index: int, value: T) -> Vector[T]:
        """Insert ``value`` before ``index``; ``index`` may equal the size."""
        if not 0 <= index <= len(self._items):
            raise IndexError(_OUT_OF_RANGE)
        if len(self._items) == self._capacity:
            self.resize(max(1, self._capacity * 2))
        self._items.insert(index, value)
        return self

    def replace(self, index: int, value: T) -> Vector[T]:
        """Replace the item at ``index`` with ``value``."""
        self._check_index(index)
        self._items[index] = value
        return self

    def merge(self, other: Iterable[T]) -> Vector[T]:
        """Append every item of ``other`` in order."""
        for item in list(other):
            self.push_back(item)
        return self

    def merge_front(self, other: Iterable[T]) -> Vector[T]:
        """Place every item of ``other`` at the front, keeping their order."""
        for item in reversed(list(other)):
            self.push_front(item)
        return self

    def pop_back(self) -> None:
        """Remove the last item; raises IndexError when empty."""
        self.erase(len(self._items) - 1)

    def pop_front(self) -> None:
        """Remove the first item; raises IndexError when empty."""
        self.erase(0)

    def push_back(self, value: T) -> None:
        """Append ``value`` at the end."""
        self.insert(len(self._items), value)

    def push_front(self, value: T) -> None:
        """Insert ``value`` at the front."""
        self.insert(0, value)

    def reserve(self, new_capacity: int) -> None:
        """Grow the capacity to at least ``new_capacity``."""
        if new_capacity > self._capacity:
            self.resize(new_capacity)

    def resize(self, new_capacity: int) -> None:
        """Set the capacity; items beyond it are dropped."""
        if new_capacity < 0:
            raise ValueError("capacity cannot be negative")
        del self._items[new_capacity:]
        self._capacity = new_capacity

    def reverse(self) -> Vector[T]:
        """Reverse the order of the items."""
        self._items.reverse()
        return self

    def sort(self, comparator: Callable[[T, T], bool]) -> Vector[T]:
        """Sort so that ``comparator(a, b)`` true puts ``a`` before ``b``."""

        def compare(a: T, b: T) -> int:
            if comparator(a, b):
                return -1
            if comparator(b, a):
                return 1
            return 0

        self._items.sort(key=cmp_to_key(compare))
        return self

    def shuffle(self) -> Vector[T]:
        """Put the items in a random order."""
        random.shuffle(self._items)
        return self

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the number of items."""
        self.resize(len(self._items))

    def slice(self, start: int, end: int) -> Vector[T]:
        """A new vector of the items from ``start`` up to ``end`` (clamped to the size)."""
        start, end = self._clamped_range(start, end)
        return Vector(self._items[start:end])

    def some(self, condition: Callable[[T], bool]) -> bool:
        """Whether any item passes ``condition``."""
        return any(condition(item) for item in self._items)

    def most(self, condition: Callable[[T], bool]) -> bool:
        """Whether more than half of the items pass ``condition``."""
        passed = sum(1 for item in self._items if condition(item))
        return passed > len(self._items) // 2

    def every(self, condition: Callable[[T], bool]) -> bool:
        """Whether every item passes ``condition``."""
        return all(condition(item) for item in self._items)

    def unique(self) -> Vector[T]:
        """A new vector holding the first occurrence of each distinct item."""
        seen: list[T] = []
        for item in self._items:
            if item not in seen:
                seen.append(item)
        return Vector(seen)