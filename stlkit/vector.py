"""A growable array with an explicit capacity and random-access cursors."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from stlkit.iterators import RandomAccessIterator


class VectorIterator(RandomAccessIterator):
    """A random-access cursor over a Vector."""

    def __init__(self, vector: Vector, position: int) -> None:
        self._vector = vector
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    def is_valid(self) -> bool:
        return 0 <= self._position < len(self._vector)

    def value(self) -> Any:
        return self._vector.at(self._position)

    def set_value(self, value: Any) -> None:
        self._vector.set_at(self._position, value)

    def next(self) -> VectorIterator:
        if self._position < len(self._vector):
            self._position += 1
        return self

    def prev(self) -> VectorIterator:
        if self._position >= 0:
            self._position -= 1
        return self

    def clone(self) -> VectorIterator:
        return VectorIterator(self._vector, self._position)

    def iterator_at(self, position: int) -> VectorIterator:
        return VectorIterator(self._vector, position)

    def equal(self, other: Any) -> bool:
        return (
            isinstance(other, VectorIterator)
            and other._vector is self._vector
            and other._position == self._position
        )


def _position_of(iterator: Any) -> int:
    if not isinstance(iterator, VectorIterator):
        raise TypeError(f"expected a VectorIterator, got {type(iterator).__name__}")
    return iterator.position


class Vector:
    """A list of values that tracks a reserved capacity.

    Out-of-range reads return None and out-of-range writes are ignored.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: list[Any] = []
        self._capacity = capacity

    @classmethod
    def from_vector(cls, other: Vector) -> Vector:
        """Return a copy of ``other`` with the same size and capacity."""
        vector = cls(other.capacity())
        vector._data = list(other._data)
        return vector

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._data))

    def capacity(self) -> int:
        """Return the number of elements the vector can hold before growing."""
        return self._capacity

    def empty(self) -> bool:
        """Return True if the vector holds no elements."""
        return not self._data

    def _grow_for(self, needed: int) -> None:
        if needed > self._capacity:
            self._capacity = max(needed, self._capacity * 2)

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self._grow_for(len(self._data) + 1)
        self._data.append(value)

    def set_at(self, pos: int, value: Any) -> None:
        """Replace the element at ``pos``; out-of-range positions are ignored."""
        if 0 <= pos < len(self._data):
            self._data[pos] = value

    def insert_at(self, pos: int, value: Any) -> None:
        """Insert ``value`` before ``pos``; ``pos`` may equal the size."""
        if not 0 <= pos <= len(self._data):
            return
        self._grow_for(len(self._data) + 1)
        self._data.insert(pos, value)

    def erase_at(self, pos: int) -> None:
        """Remove the element at ``pos``."""
        self.erase_index_range(pos, pos + 1)

    def erase_index_range(self, first: int, last: int) -> None:
        """Remove the elements in ``[first, last)``; invalid ranges are ignored."""
        if first > last or first < 0 or last > len(self._data):
            return
        del self._data[first:last]

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``, or None when out of range."""
        if 0 <= pos < len(self._data):
            return self._data[pos]
        return None

    def front(self) -> Any:
        """Return the first element, or None when empty."""
        return self.at(0)

    def back(self) -> Any:
        """Return the last element, or None when empty."""
        return self.at(len(self._data) - 1)

    def pop_back(self) -> Any:
        """Remove and return the last element, or return None when empty."""
        if not self._data:
            return None
        return self._data.pop()

    def reserve(self, capacity: int) -> None:
        """Raise the capacity to at least ``capacity``."""
        if capacity > self._capacity:
            self._capacity = capacity

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        self._capacity = len(self._data)

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._data.clear()

    def data(self) -> list[Any]:
        """Return the underlying list itself."""
        return self._data

    def begin(self) -> VectorIterator:
        """Return a cursor at the first element."""
        return self.first()

    def end(self) -> VectorIterator:
        """Return a cursor one past the last element."""
        return self.iter_at(len(self._data))

    def first(self) -> VectorIterator:
        """Return a cursor at the first element."""
        return self.iter_at(0)

    def last(self) -> VectorIterator:
        """Return a cursor at the last element."""
        return self.iter_at(len(self._data) - 1)

    def iter_at(self, pos: int) -> VectorIterator:
        """Return a cursor at ``pos``."""
        return VectorIterator(self, pos)

    def insert(self, iterator: VectorIterator, value: Any) -> VectorIterator:
        """Insert ``value`` at the cursor's position and return a cursor there."""
        index = _position_of(iterator)
        self.insert_at(index, value)
        return VectorIterator(self, index)

    def erase(self, iterator: VectorIterator) -> VectorIterator:
        """Remove the element under the cursor and return a cursor at its position."""
        index = _position_of(iterator)
        self.erase_at(index)
        return VectorIterator(self, index)

    def erase_range(self, first: VectorIterator, last: VectorIterator) -> VectorIterator:
        """Remove the elements in ``[first, last)`` and return a cursor at ``first``."""
        start = _position_of(first)
        self.erase_index_range(start, _position_of(last))
        return VectorIterator(self, start)

    def resize(self, size: int) -> None:
        """Truncate to ``size`` elements; a larger size leaves the vector unchanged."""
        if size >= len(self._data) or size < 0:
            return
        del self._data[size:]

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self._data) + "]"

    def __repr__(self) -> str:
        return f"Vector({self._data!r}, capacity={self._capacity})"