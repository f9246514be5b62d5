"""Sequence views with STL-style random-access cursors.

``Slice`` wraps a list of arbitrary values, ``TypedSlice`` wraps a list whose
elements must fit one numeric or string kind, and ``SliceWrapper`` wraps any
mutable sequence. All of them work in place on the sequence they are given.
"""

from __future__ import annotations

import enum
import struct
from collections.abc import MutableSequence
from typing import Any, Protocol

from stlkit.iterators import RandomAccessIterator


class _Indexed(Protocol):
    def __len__(self) -> int: ...

    def at(self, position: int) -> Any: ...

    def set(self, position: int, value: Any) -> None: ...


class SliceIterator(RandomAccessIterator):
    """A random-access cursor over a Slice, TypedSlice or SliceWrapper."""

    def __init__(self, container: _Indexed, position: int) -> None:
        self._container = container
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    def is_valid(self) -> bool:
        return 0 <= self._position < len(self._container)

    def value(self) -> Any:
        return self._container.at(self._position)

    def set_value(self, value: Any) -> None:
        self._container.set(self._position, value)

    def next(self) -> SliceIterator:
        if self._position < len(self._container):
            self._position += 1
        return self

    def prev(self) -> SliceIterator:
        if self._position >= 0:
            self._position -= 1
        return self

    def clone(self) -> SliceIterator:
        return SliceIterator(self._container, self._position)

    def iterator_at(self, position: int) -> SliceIterator:
        return SliceIterator(self._container, position)

    def equal(self, other: Any) -> bool:
        return isinstance(other, SliceIterator) and other._position == self._position


class ElementKind(enum.Enum):
    """The element type a TypedSlice accepts."""

    INT = ("int", "int", 64)
    UINT = ("uint", "uint", 64)
    INT8 = ("int8", "int", 8)
    UINT8 = ("uint8", "uint", 8)
    INT16 = ("int16", "int", 16)
    UINT16 = ("uint16", "uint", 16)
    INT32 = ("int32", "int", 32)
    UINT32 = ("uint32", "uint", 32)
    INT64 = ("int64", "int", 64)
    UINT64 = ("uint64", "uint", 64)
    FLOAT32 = ("float32", "float", 32)
    FLOAT64 = ("float64", "float", 64)
    STRING = ("string", "str", 0)

    def __init__(self, label: str, category: str, bits: int) -> None:
        self.label = label
        self.category = category
        self.bits = bits

    def coerce(self, value: Any) -> Any:
        """Return ``value`` as stored by this kind.

        Raises TypeError for a value of the wrong type and OverflowError for
        one outside the kind's range.
        """
        if self.category == "str":
            if not isinstance(value, str):
                raise TypeError(f"{self.label} slice expects str, got {type(value).__name__}")
            return value
        if isinstance(value, bool):
            raise TypeError(f"{self.label} slice does not accept bool")
        if self.category == "float":
            if not isinstance(value, (int, float)):
                raise TypeError(f"{self.label} slice expects a number, got {type(value).__name__}")
            number = float(value)
            if self.bits == 32:
                try:
                    number = struct.unpack("<f", struct.pack("<f", number))[0]
                except OverflowError as exc:
                    raise OverflowError(f"{value!r} does not fit in {self.label}") from exc
            return number
        if not isinstance(value, int):
            raise TypeError(f"{self.label} slice expects int, got {type(value).__name__}")
        if self.category == "int":
            low, high = -(1 << (self.bits - 1)), (1 << (self.bits - 1)) - 1
        else:
            low, high = 0, (1 << self.bits) - 1
        if not low <= value <= high:
            raise OverflowError(f"{value!r} does not fit in {self.label}")
        return value


class Slice:
    """A view over a list of values of any type."""

    def __init__(self, data: MutableSequence[Any] | None = None) -> None:
        self._data: MutableSequence[Any] = [] if data is None else data

    def __len__(self) -> int:
        return len(self._data)

    def _in_range(self, position: int) -> bool:
        return 0 <= position < len(self._data)

    def at(self, position: int) -> Any:
        """Return the element at ``position``, or None when out of range."""
        if not self._in_range(position):
            return None
        return self._data[position]

    def set(self, position: int, value: Any) -> None:
        """Replace the element at ``position``; out-of-range positions are ignored."""
        if self._in_range(position):
            self._data[position] = value

    def begin(self) -> SliceIterator:
        """Return a cursor at the first element."""
        return self.first()

    def end(self) -> SliceIterator:
        """Return a cursor one past the last element."""
        return SliceIterator(self, len(self._data))

    def first(self) -> SliceIterator:
        """Return a cursor at the first element."""
        return SliceIterator(self, 0)

    def last(self) -> SliceIterator:
        """Return the cursor at position ``len``, the same place as ``end``."""
        return SliceIterator(self, len(self._data))


class TypedSlice(Slice):
    """A view over a list whose elements all belong to one ElementKind."""

    def __init__(self, kind: ElementKind, data: MutableSequence[Any] | None = None) -> None:
        self.kind = kind
        if data is not None:
            data[:] = [kind.coerce(item) for item in data]
        super().__init__(data)

    def __len__(self) -> int:
        return len(self._data)

    def at(self, position: int) -> Any:
        """Return the element at ``position``, or None when out of range."""
        return super().at(position)

    def set(self, position: int, value: Any) -> None:
        """Replace the element at ``position`` with ``value`` coerced to the kind.

        Out-of-range positions are ignored.
        """
        if self._in_range(position):
            self._data[position] = self.kind.coerce(value)

    def begin(self) -> SliceIterator:
        """Return a cursor at the first element."""
        return self.first()

    def end(self) -> SliceIterator:
        """Return a cursor one past the last element."""
        return SliceIterator(self, len(self._data))

    def first(self) -> SliceIterator:
        """Return a cursor at the first element."""
        return SliceIterator(self, 0)

    def last(self) -> SliceIterator:
        """Return a cursor at the last element."""
        return SliceIterator(self, len(self._data) - 1)


class SliceWrapper(Slice):
    """A view over any mutable sequence, which can be swapped for another."""

    def __init__(self, sequence: MutableSequence[Any]) -> None:
        if not isinstance(sequence, MutableSequence):
            raise TypeError(f"expected a mutable sequence, got {type(sequence).__name__}")
        super().__init__(sequence)

    def attach(self, new_sequence: Any) -> None:
        """Switch to ``new_sequence``; anything that is not a mutable sequence is ignored."""
        if isinstance(new_sequence, MutableSequence):
            self._data = new_sequence

    def __len__(self) -> int:
        return len(self._data)

    def at(self, position: int) -> Any:
        """Return the element at ``position``, or None when out of range."""
        return super().at(position)

    def set(self, position: int, value: Any) -> None:
        """Replace the element at ``position``; out-of-range positions are ignored."""
        super().set(position, value)

    def begin(self) -> SliceIterator:
        """Return a cursor at the first element."""
        return self.first()

    def end(self) -> SliceIterator:
        """Return a cursor one past the last element."""
        return SliceIterator(self, len(self._data))

    def first(self) -> SliceIterator:
        """Return a cursor at the first element."""
        return SliceIterator(self, 0)

    def last(self) -> SliceIterator:
        """Return the cursor at position ``len``, the same place as ``end``."""
        return SliceIterator(self, len(self._data))