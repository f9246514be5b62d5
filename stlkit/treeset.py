"""Ordered sets backed by a red-black tree: unique keys and repeatable keys."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from stlkit.comparator import Comparator, builtin_type_comparator
from stlkit.iterators import BidIterator, Visitor
from stlkit.locker import Locker, make_locker
from stlkit.rbtree import Node, RbTree

EMPTY = 0
"""Placeholder value stored alongside every element in the underlying tree."""


class SetIterator(BidIterator):
    """A bidirectional cursor over the elements of a Set or MultiSet.

    Cursors are not protected by the container's lock.
    """

    def __init__(self, node: Node | None) -> None:
        self._node = node

    def is_valid(self) -> bool:
        return self._node is not None

    def next(self) -> SetIterator:
        if self._node is not None:
            self._node = self._node.next()
        return self

    def prev(self) -> SetIterator:
        if self._node is not None:
            self._node = self._node.prev()
        return self

    def value(self) -> Any:
        if self._node is None:
            raise ValueError("iterator is not valid")
        return self._node.key

    def clone(self) -> SetIterator:
        return SetIterator(self._node)

    def equal(self, other: Any) -> bool:
        return isinstance(other, SetIterator) and other._node is self._node


class _TreeBacked:
    """Storage and locking shared by Set and MultiSet."""

    def __init__(
        self,
        key_cmp: Comparator = builtin_type_comparator,
        thread_safe: bool = False,
    ) -> None:
        self._cmp = key_cmp
        self._tree = RbTree(key_cmp)
        self._lock: Locker = make_locker(thread_safe)

    def _cursor(self, locate: Callable[..., Node | None], *args: Any) -> SetIterator:
        with self._lock.read():
            return SetIterator(locate(*args))

    def _has(self, element: Any) -> bool:
        with self._lock.read():
            return self._tree.find_node(element) is not None

    def _size(self) -> int:
        with self._lock.read():
            return len(self._tree)

    def _snapshot(self) -> list[Any]:
        with self._lock.read():
            return [key for key, _ in self._tree]

    def _visit(self, visitor: Visitor) -> None:
        with self._lock.read():
            for key, _ in self._tree:
                if not visitor(key):
                    break

    def _wipe(self) -> None:
        with self._lock.write():
            self._tree.clear()

    def _render(self) -> str:
        return "[" + " ".join(str(element) for element in self._snapshot()) + "]"


class Set(_TreeBacked):
    """An ordered collection of unique elements."""

    def insert(self, element: Any) -> None:
        """Add ``element`` unless an equal one is already present."""
        with self._lock.write():
            if self._tree.find_node(element) is None:
                self._tree.insert(element, EMPTY)

    def erase(self, element: Any) -> None:
        """Remove the element equal to ``element``, if present."""
        with self._lock.write():
            node = self._tree.find_node(element)
            if node is not None:
                self._tree.delete(node)

    def find(self, element: Any) -> SetIterator:
        """Return a cursor at the element equal to ``element``."""
        return self._cursor(self._tree.find_node, element)

    def lower_bound(self, element: Any) -> SetIterator:
        """Return a cursor at the first element not less than ``element``."""
        return self._cursor(self._tree.find_lower_bound_node, element)

    def upper_bound(self, element: Any) -> SetIterator:
        """Return a cursor at the first element greater than ``element``."""
        return self._cursor(self._tree.find_upper_bound_node, element)

    def begin(self) -> SetIterator:
        """Return a cursor at the smallest element."""
        return self.first()

    def first(self) -> SetIterator:
        """Return a cursor at the smallest element."""
        return self._cursor(self._tree.first)

    def last(self) -> SetIterator:
        """Return a cursor at the largest element."""
        return self._cursor(self._tree.last)

    def clear(self) -> None:
        """Remove every element."""
        self._wipe()

    def contains(self, element: Any) -> bool:
        """Return True if an element equal to ``element`` is present."""
        return self._has(element)

    def __contains__(self, element: Any) -> bool:
        return self._has(element)

    def __len__(self) -> int:
        return self._size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._snapshot())

    def traversal(self, visitor: Visitor) -> None:
        """Call ``visitor`` with each element in order until it returns a false value."""
        self._visit(visitor)

    def __str__(self) -> str:
        return self._render()

    def _merged(self, other: Set, keep_left: bool, keep_both: bool, keep_right: bool) -> Set:
        result = Set(self._cmp)
        with self._lock.read():
            left = self._tree.iter_first()
            right = other._tree.iter_first()
            while left.is_valid() and right.is_valid():
                order = self._cmp(left.key(), right.key())
                if order == 0:
                    if keep_both:
                        result._tree.insert(left.key(), EMPTY)
                    left.next()
                    right.next()
                elif order < 0:
                    if keep_left:
                        result._tree.insert(left.key(), EMPTY)
                    left.next()
                else:
                    if keep_right:
                        result._tree.insert(right.key(), EMPTY)
                    right.next()
            while keep_left and left.is_valid():
                result._tree.insert(left.key(), EMPTY)
                left.next()
            while keep_right and right.is_valid():
                result._tree.insert(right.key(), EMPTY)
                right.next()
        return result

    def intersect(self, other: Set) -> Set:
        """Return a new set of the elements present in both sets.

        Both sets must use the same comparator.
        """
        return self._merged(other, keep_left=False, keep_both=True, keep_right=False)

    def union(self, other: Set) -> Set:
        """Return a new set of the elements present in either set.

        Both sets must use the same comparator.
        """
        return self._merged(other, keep_left=True, keep_both=True, keep_right=True)

    def diff(self, other: Set) -> Set:
        """Return a new set of the elements in this set but not in ``other``.

        Both sets must use the same comparator.
        """
        return self._merged(other, keep_left=True, keep_both=False, keep_right=False)


class MultiSet(_TreeBacked):
    """An ordered collection in which equal elements may repeat."""

    def insert(self, element: Any) -> None:
        """Add ``element``, after any equal elements already present."""
        with self._lock.write():
            self._tree.insert(element, EMPTY)

    def erase(self, element: Any) -> None:
        """Remove every element equal to ``element``."""
        with self._lock.write():
            while (node := self._tree.find_node(element)) is not None:
                self._tree.delete(node)

    def find(self, element: Any) -> SetIterator:
        """Return a cursor at the first element equal to ``element``."""
        return self._cursor(self._tree.find_node, element)

    def lower_bound(self, element: Any) -> SetIterator:
        """Return a cursor at the first element not less than ``element``."""
        return self._cursor(self._tree.find_lower_bound_node, element)

    def upper_bound(self, element: Any) -> SetIterator:
        """Return a cursor at the first element greater than ``element``."""
        return self._cursor(self._tree.find_upper_bound_node, element)

    def begin(self) -> SetIterator:
        """Return a cursor at the smallest element."""
        return self.first()

    def first(self) -> SetIterator:
        """Return a cursor at the smallest element."""
        return self._cursor(self._tree.first)

    def last(self) -> SetIterator:
        """Return a cursor at the largest element."""
        return self._cursor(self._tree.last)

    def clear(self) -> None:
        """Remove every element."""
        self._wipe()

    def contains(self, element: Any) -> bool:
        """Return True if an element equal to ``element`` is present."""
        return self._has(element)

    def __contains__(self, element: Any) -> bool:
        return self._has(element)

    def __len__(self) -> int:
        return self._size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._snapshot())

    def traversal(self, visitor: Visitor) -> None:
        """Call ``visitor`` with each element in order until it returns a false value."""
        self._visit(visitor)

    def __str__(self) -> str:
        return self._render()