"""Last-in-first-out stack over a deque or a list."""

from __future__ import annotations

from collections import deque
from typing import Any

from stlkit.locker import Locker, make_locker


class Stack:
    """A last-in-first-out collection.

    ``use_list`` stores the elements in a list instead of the default deque.
    Reading the top of, or popping, an empty stack gives None.
    """

    def __init__(self, thread_safe: bool = False, use_list: bool = False) -> None:
        self._items: deque[Any] | list[Any] = [] if use_list else deque()
        self._lock: Locker = make_locker(thread_safe)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._items)

    def empty(self) -> bool:
        """Return True if the stack holds no elements."""
        with self._lock.read():
            return not self._items

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        with self._lock.write():
            self._items.append(value)

    def top(self) -> Any:
        """Return the top value without removing it, or None when empty."""
        with self._lock.read():
            return self._items[-1] if self._items else None

    def pop(self) -> Any:
        """Remove and return the top value, or return None when empty."""
        with self._lock.write():
            return self._items.pop() if self._items else None

    def clear(self) -> None:
        """Remove every element."""
        with self._lock.write():
            self._items.clear()

    def __str__(self) -> str:
        with self._lock.read():
            return "[" + " ".join(str(item) for item in self._items) + "]"