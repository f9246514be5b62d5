"""Ordered containers with STL-style cursors: comparators, red-black tree, sets, skip list, slices, vector and stack."""

__version__ = "0.1.0"

__all__ = [
    "comparator",
    "iterators",
    "locker",
    "rbtree",
    "treeset",
    "skiplist",
    "slices",
    "vector",
    "stack",
]