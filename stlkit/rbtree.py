"""Red-black tree keyed by a comparator, allowing duplicate keys."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Any

from stlkit.comparator import Comparator, builtin_type_comparator
from stlkit.iterators import KvIterator, KvVisitor


class Color(enum.Enum):
    """Colour of a tree node."""

    RED = "red"
    BLACK = "black"


class Node:
    """A tree node holding a key and a value."""

    __slots__ = ("parent", "left", "right", "color", "key", "value")

    def __init__(
        self,
        key: Any,
        value: Any,
        color: Color = Color.RED,
        parent: Node | None = None,
    ) -> None:
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None
        self.color = color
        self.key = key
        self.value = value

    def next(self) -> Node | None:
        """Return the in-order successor, or None at the end."""
        return _successor(self)

    def prev(self) -> Node | None:
        """Return the in-order predecessor, or None at the start."""
        return _predecessor(self)

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r}, color={self.color.value})"


def _minimum(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _maximum(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _successor(x: Node) -> Node | None:
    if x.right is not None:
        return _minimum(x.right)
    y = x.parent
    while y is not None and x is y.right:
        x, y = y, y.parent
    return y


def _predecessor(x: Node) -> Node | None:
    if x.left is not None:
        return _maximum(x.left)
    y = x.parent
    while y is not None and x is y.left:
        x, y = y, y.parent
    return y


def _color(node: Node | None) -> Color:
    return Color.BLACK if node is None else node.color


class RbTreeIterator(KvIterator):
    """A bidirectional cursor over the nodes of an RbTree."""

    def __init__(self, node: Node | None) -> None:
        self._node = node

    def _current(self) -> Node:
        if self._node is None:
            raise ValueError("iterator is not valid")
        return self._node

    def is_valid(self) -> bool:
        return self._node is not None

    def next(self) -> RbTreeIterator:
        if self._node is not None:
            self._node = self._node.next()
        return self

    def prev(self) -> RbTreeIterator:
        if self._node is not None:
            self._node = self._node.prev()
        return self

    def key(self) -> Any:
        return self._current().key

    def value(self) -> Any:
        return self._current().value

    def set_value(self, value: Any) -> None:
        self._current().value = value

    def clone(self) -> RbTreeIterator:
        return RbTreeIterator(self._node)

    def equal(self, other: Any) -> bool:
        return isinstance(other, RbTreeIterator) and other._node is self._node


class RbTree:
    """A self-balancing binary search tree; equal keys are kept in insertion order."""

    def __init__(self, key_cmp: Comparator = builtin_type_comparator) -> None:
        self._root: Node | None = None
        self._size = 0
        self._cmp = key_cmp

    def clear(self) -> None:
        """Remove every node."""
        self._root = None
        self._size = 0

    def find(self, key: Any) -> Any:
        """Return the value of the first node with ``key``, or None."""
        node = self.find_node(key)
        return None if node is None else node.value

    def find_node(self, key: Any) -> Node | None:
        """Return the first node whose key equals ``key``, or None."""
        node = self.find_lower_bound_node(key)
        if node is not None and self._cmp(node.key, key) == 0:
            return node
        return None

    def begin(self) -> Node | None:
        """Return the node with the smallest key."""
        return self.first()

    def first(self) -> Node | None:
        """Return the node with the smallest key, or None when empty."""
        return None if self._root is None else _minimum(self._root)

    def rbegin(self) -> Node | None:
        """Return the node with the largest key."""
        return self.last()

    def last(self) -> Node | None:
        """Return the node with the largest key, or None when empty."""
        return None if self._root is None else _maximum(self._root)

    def iter_first(self) -> RbTreeIterator:
        """Return a cursor at the smallest key."""
        return RbTreeIterator(self.first())

    def iter_last(self) -> RbTreeIterator:
        """Return a cursor at the largest key."""
        return RbTreeIterator(self.last())

    def empty(self) -> bool:
        """Return True if the tree holds no nodes."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        node = self.first()
        while node is not None:
            yield node.key, node.value
            node = node.next()

    def insert(self, key: Any, value: Any) -> None:
        """Add a key-value pair; an equal key goes after existing ones."""
        parent = None
        x = self._root
        while x is not None:
            parent = x
            x = x.left if self._cmp(key, x.key) < 0 else x.right

        z = Node(key, value, Color.RED, parent)
        self._size += 1
        if parent is None:
            z.color = Color.BLACK
            self._root = z
            return
        if self._cmp(key, parent.key) < 0:
            parent.left = z
        else:
            parent.right = z
        self._insert_fixup(z)

    def _insert_fixup(self, z: Node) -> None:
        while z.parent is not None and z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle is not None and uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._left_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._right_rotate(z.parent.parent)
            else:
                uncle = grand.left
                if uncle is not None and uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._right_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._left_rotate(z.parent.parent)
        self._root.color = Color.BLACK

    def delete(self, node: Node | None) -> None:
        """Remove ``node`` from the tree; None is ignored."""
        z = node
        if z is None:
            return

        y = _successor(z) if z.left is not None and z.right is not None else z
        x = y.left if y.left is not None else y.right
        x_parent = y.parent
        if x is not None:
            x.parent = x_parent
        if y.parent is None:
            self._root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x

        removed_color = y.color
        if y is not z:
            # Move the successor node into z's place rather than copying its data,
            # so nodes held by callers keep their key and value.
            if x_parent is z:
                x_parent = y
            y.parent = z.parent
            if z.parent is None:
                self._root = y
            elif z.parent.left is z:
                z.parent.left = y
            else:
                z.parent.right = y
            y.left = z.left
            y.left.parent = y
            y.right = z.right
            if y.right is not None:
                y.right.parent = y
            y.color = z.color

        z.parent = z.left = z.right = None
        if removed_color is Color.BLACK:
            self._delete_fixup(x, x_parent)
        self._size -= 1

    def _delete_fixup(self, x: Node | None, parent: Node | None) -> None:
        while x is not self._root and _color(x) is Color.BLACK:
            if x is not None:
                parent = x.parent
            if x is parent.left:
                x = self._fixup_left(parent)
            else:
                x = self._fixup_right(parent)
        if x is not None:
            x.color = Color.BLACK

    def _fixup_left(self, parent: Node) -> Node | None:
        w = parent.right
        if w.color is Color.RED:
            w.color = Color.BLACK
            parent.color = Color.RED
            self._left_rotate(parent)
            w = parent.right
        if _color(w.left) is Color.BLACK and _color(w.right) is Color.BLACK:
            w.color = Color.RED
            return parent
        if _color(w.right) is Color.BLACK:
            if w.left is not None:
                w.left.color = Color.BLACK
            w.color = Color.RED
            self._right_rotate(w)
            w = parent.right
        w.color = parent.color
        parent.color = Color.BLACK
        if w.right is not None:
            w.right.color = Color.BLACK
        self._left_rotate(parent)
        return self._root

    def _fixup_right(self, parent: Node) -> Node | None:
        w = parent.left
        if w.color is Color.RED:
            w.color = Color.BLACK
            parent.color = Color.RED
            self._right_rotate(parent)
            w = parent.left
        if _color(w.left) is Color.BLACK and _color(w.right) is Color.BLACK:
            w.color = Color.RED
            return parent
        if _color(w.left) is Color.BLACK:
            if w.right is not None:
                w.right.color = Color.BLACK
            w.color = Color.RED
            self._left_rotate(w)
            w = parent.left
        w.color = parent.color
        parent.color = Color.BLACK
        if w.left is not None:
            w.left.color = Color.BLACK
        self._right_rotate(parent)
        return self._root

    def _left_rotate(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, x: Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def find_lower_bound_node(self, key: Any) -> Node | None:
        """Return the first node whose key is equal to or greater than ``key``."""
        found = None
        x = self._root
        while x is not None:
            if self._cmp(key, x.key) <= 0:
                found = x
                x = x.left
            else:
                x = x.right
        return found

    def find_upper_bound_node(self, key: Any) -> Node | None:
        """Return the first node whose key is greater than ``key``."""
        found = None
        x = self._root
        while x is not None:
            if self._cmp(key, x.key) >= 0:
                x = x.right
            else:
                found = x
                x = x.left
        return found

    def traversal(self, visitor: KvVisitor) -> None:
        """Call ``visitor(key, value)`` in key order until it returns a false value."""
        for key, value in self:
            if not visitor(key, value):
                break

    def is_rb_tree(self) -> bool:
        """Return True if the red-black properties hold.

        Raises ValueError naming the violated property otherwise.
        """
        self._black_height(self._root)
        return True

    def _black_height(self, node: Node | None) -> int:
        if node is None:
            return 1
        if node is self._root and node.color is not Color.BLACK:
            raise ValueError("violate property 2")
        left = self._black_height(node.left)
        right = self._black_height(node.right)
        if left != right:
            raise ValueError("violate property 5")
        if node.color is Color.RED:
            if _color(node.left) is not Color.BLACK or _color(node.right) is not Color.BLACK:
                raise ValueError("violate property 4")
            return left
        return left + 1