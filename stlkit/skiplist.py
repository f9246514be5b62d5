"""Skip list: an ordered key-value map with probabilistic balancing."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Any

from stlkit.comparator import Comparator, builtin_type_comparator
from stlkit.iterators import KvVisitor
from stlkit.locker import Locker, make_locker

DEFAULT_MAX_LEVEL = 10


class _Element:
    __slots__ = ("key", "value", "forward")

    def __init__(self, key: Any, value: Any, level: int) -> None:
        self.key = key
        self.value = value
        self.forward: list[_Element | None] = [None] * level


class Skiplist:
    """An ordered map with unique keys; inserting an existing key updates its value."""

    def __init__(
        self,
        key_cmp: Comparator = builtin_type_comparator,
        max_level: int = DEFAULT_MAX_LEVEL,
        thread_safe: bool = False,
    ) -> None:
        if max_level < 1:
            raise ValueError("max_level must be at least 1")
        self._cmp = key_cmp
        self._max_level = max_level
        self._lock: Locker = make_locker(thread_safe)
        self._head = _Element(None, None, max_level)
        self._len = 0
        self._rng = random.Random()

    def _random_level(self) -> int:
        # Level n is chosen with probability about 2**-n.
        total = (1 << self._max_level) - 1
        k = self._rng.getrandbits(64) % total
        level_n = 1 << (self._max_level - 1)
        level = 1
        total -= level_n
        while total > k:
            level_n >>= 1
            total -= level_n
            level += 1
        return level

    def _find_prev_nodes(self, key: Any) -> list[_Element]:
        prevs: list[_Element] = [self._head] * self._max_level
        prev = self._head
        for i in reversed(range(self._max_level)):
            nxt = prev.forward[i]
            while nxt is not None and self._cmp(nxt.key, key) < 0:
                prev = nxt
                nxt = nxt.forward[i]
            prevs[i] = prev
        return prevs

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        with self._lock.write():
            prevs = self._find_prev_nodes(key)
            candidate = prevs[0].forward[0]
            if candidate is not None and self._cmp(candidate.key, key) == 0:
                candidate.value = value
                return
            element = _Element(key, value, self._random_level())
            for i in range(len(element.forward)):
                element.forward[i] = prevs[i].forward[i]
                prevs[i].forward[i] = element
            self._len += 1

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if absent."""
        with self._lock.read():
            pre = self._head
            for i in reversed(range(self._max_level)):
                cur = pre.forward[i]
                while cur is not None:
                    order = self._cmp(cur.key, key)
                    if order == 0:
                        return cur.value
                    if order > 0:
                        break
                    pre = cur
                    cur = cur.forward[i]
            return None

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return True if it was present."""
        with self._lock.write():
            prevs = self._find_prev_nodes(key)
            element = prevs[0].forward[0]
            if element is None or self._cmp(element.key, key) != 0:
                return False
            for i, nxt in enumerate(element.forward):
                prevs[i].forward[i] = nxt
            self._len -= 1
            return True

    def __len__(self) -> int:
        with self._lock.read():
            return self._len

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        with self._lock.read():
            pairs = []
            element = self._head.forward[0]
            while element is not None:
                pairs.append((element.key, element.value))
                element = element.forward[0]
        return iter(pairs)

    def traversal(self, visitor: KvVisitor) -> None:
        """Call ``visitor(key, value)`` in key order until it returns a false value."""
        with self._lock.read():
            element = self._head.forward[0]
            while element is not None:
                if not visitor(element.key, element.value):
                    return
                element = element.forward[0]

    def keys(self) -> list[Any]:
        """Return all keys in order."""
        return [key for key, _ in self]