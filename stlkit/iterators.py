"""Iterator protocols shared by the containers, and visitor signatures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

Visitor = Callable[[Any], bool]
"""Called with each element; returning a false value stops the traversal."""

KvVisitor = Callable[[Any, Any], bool]
"""Called with each key and value; returning a false value stops the traversal."""


class ConstIterator(ABC):
    """A forward cursor over a container."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True while the cursor points at an element."""

    @abstractmethod
    def next(self) -> ConstIterator:
        """Advance to the next element and return self."""

    @abstractmethod
    def value(self) -> Any:
        """Return the element under the cursor."""

    @abstractmethod
    def clone(self) -> ConstIterator:
        """Return an independent cursor at the same position."""

    @abstractmethod
    def equal(self, other: Any) -> bool:
        """Return True if ``other`` points at the same position."""


class BidIterator(ConstIterator):
    """A cursor that can also move backwards."""

    @abstractmethod
    def prev(self) -> BidIterator:
        """Step back to the previous element and return self."""


class KvIterator(BidIterator):
    """A bidirectional cursor over key-value pairs with a writable value."""

    @abstractmethod
    def key(self) -> Any:
        """Return the key under the cursor."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """Replace the value under the cursor."""


class RandomAccessIterator(BidIterator):
    """A bidirectional cursor addressed by integer position."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """Replace the element under the cursor."""

    @abstractmethod
    def iterator_at(self, position: int) -> RandomAccessIterator:
        """Return a new cursor over the same container at ``position``."""

    @property
    @abstractmethod
    def position(self) -> int:
        """The index the cursor points at."""


def walk(iterator: ConstIterator) -> Iterator[Any]:
    """Yield the values from ``iterator`` onwards without moving it."""
    cursor = iterator.clone()
    while cursor.is_valid():
        yield cursor.value()
        cursor.next()