# stlkit

Ordered containers with explicit, STL-style cursors (`begin`, `next`, `prev`,
`is_valid`, `value`), alongside the usual Python protocols where they fit
(`len()`, `in`, iteration). Pure Python, no dependencies.

## Modules

- `stlkit.comparator` – three-way comparators returning -1, 0 or 1:
  `builtin_type_comparator` (the default everywhere; orders complex numbers by
  real then imaginary part), `int_comparator`, `float_comparator`,
  `string_comparator`, `bool_comparator`, `complex_comparator`, which raise
  `TypeError` for values of the wrong type, and `reverse(cmp)` to flip any
  comparator.
- `stlkit.iterators` – the cursor base classes `ConstIterator`, `BidIterator`,
  `KvIterator` and `RandomAccessIterator`, the `Visitor` / `KvVisitor`
  callback types, and `walk(cursor)`, a generator over the values from a
  cursor onwards that leaves the cursor where it was.
- `stlkit.locker` – `FakeLocker` (no locking) and `RWLock` (a readers-writer
  lock that favours waiting writers, not reentrant). Both offer `read()` and
  `write()` context managers; `make_locker(thread_safe)` picks one.
- `stlkit.rbtree` – `RbTree(key_cmp=...)`, a red-black tree that keeps
  duplicate keys in insertion order. It exposes `Node` objects (`key`,
  `value`, `next()`, `prev()`), `RbTreeIterator` cursors, `find`,
  `find_node`, `find_lower_bound_node`, `find_upper_bound_node`, `delete`,
  `traversal` and `is_rb_tree`, which raises `ValueError` naming the violated
  property. Iterating a tree yields `(key, value)` pairs.
- `stlkit.treeset` – `Set` (unique elements) and `MultiSet` (repeatable
  elements), both taking `key_cmp` and `thread_safe`. They provide `insert`,
  `erase` (a `MultiSet` removes every equal element), `find`, `lower_bound`,
  `upper_bound`, `first`/`begin`, `last`, `contains`, `traversal` and a
  `str()` of the form `[1 2 3]`. `Set` also has `intersect`, `union` and
  `diff`, which expect both sets to share a comparator. Cursors are not
  covered by the lock.
- `stlkit.skiplist` – `Skiplist(key_cmp=..., max_level=10, thread_safe=False)`,
  an ordered map with unique keys: `insert` replaces the value of an existing
  key, `get` returns `None` for a missing key, `remove` returns whether the
  key was present, and `keys()` lists keys in order.
- `stlkit.slices` – cursor access to existing lists, changed in place:
  `Slice` over any values, `TypedSlice(kind, data)` whose elements are
  checked and coerced by an `ElementKind` (`INT8` … `UINT64`, `FLOAT32`,
  `FLOAT64`, `STRING`; wrong types raise `TypeError`, out-of-range numbers
  `OverflowError`), and `SliceWrapper` over any mutable sequence, which
  `attach` can swap. Out-of-range `at` returns `None` and out-of-range `set`
  is ignored. `last()` is the final element for `TypedSlice` but the
  one-past-the-end position for `Slice` and `SliceWrapper`.
- `stlkit.vector` – `Vector(capacity=0)`, a list with a tracked capacity:
  `push_back`, `insert_at`, `erase_at`, `erase_index_range`, `pop_back`,
  `reserve`, `shrink_to_fit`, `resize` (which only truncates),
  `Vector.from_vector`, and cursor-based `insert`, `erase` and
  `erase_range`. Out-of-range reads return `None`; invalid writes are ignored.
- `stlkit.stack` – `Stack(thread_safe=False, use_list=False)`, last in, first
  out, over a deque or a list. `top` and `pop` return `None` when empty.

## Installation

```
pip install .
```

## Example

```python
from stlkit.comparator import reverse, builtin_type_comparator
from stlkit.rbtree import RbTree
from stlkit.treeset import Set
from stlkit.skiplist import Skiplist

tree = RbTree()
tree.insert(1, "aaa")
tree.insert(5, "bbb")
tree.insert(3, "ccc")
print(tree.find(5))          # bbb
for key, value in tree:
    print(key, value)

s = Set()
for n in (1, 5, 3, 4, 2):
    s.insert(n)
s.erase(4)
print(s)                     # [1 2 3 5]
print(3 in s, 10 in s)       # True False

it = s.lower_bound(3)
while it.is_valid():
    print(it.value())        # 3, then 5
    it.next()

desc = Set(key_cmp=reverse(builtin_type_comparator))
for n in (1, 2, 3):
    desc.insert(n)
print(desc)                  # [3 2 1]

sl = Skiplist(max_level=15)
sl.insert("aaa", "1111")
sl.insert("bbb", "2222")
print(sl.get("aaa"), sl.keys())
```

## What it does not include

There are no generic algorithms (sorting, searching, permutations) that run
over the cursors, and no deque, linked-list, map, queue or priority-queue
types: `Stack` uses Python's own `collections.deque` or `list` internally.
Nothing is persisted; all containers live in memory.

## Running the tests

```
pip install .[test]
pytest
```