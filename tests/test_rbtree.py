import random

import pytest

from stlkit.comparator import int_comparator, reverse, builtin_type_comparator
from stlkit.rbtree import Color, RbTree, RbTreeIterator


def _visited(traverse, keep_going):
    seen = []

    def visit(key, value):
        seen.append(key)
        return keep_going(key, value)

    traverse(visit)
    return seen


def test_find():
    tree = RbTree()
    for i in range(10):
        tree.insert(i, i + 10000)
    assert not tree.empty()
    assert len(tree) == 10

    for i in range(10):
        assert tree.find(i) == i + 10000
    for i in range(10):
        assert tree.find_lower_bound_node(i).value == i + 10000
        assert tree.find_upper_bound_node(i - 1).value == i + 10000

    for i in range(10):
        tree.insert(i, i + 20000)

    for i in range(10):
        count = 0
        node = tree.find_lower_bound_node(i)
        while node is not None and node.key == i:
            count += 1
            node = node.next()
        assert count == 2

    for i in range(10):
        count = 0
        node = tree.find_upper_bound_node(i - 1)
        while node is not None and node.key == i:
            count += 1
            node = node.next()
        assert count == 2


def test_find_missing_key():
    tree = RbTree()
    for i in range(0, 10, 2):
        tree.insert(i, i)
    assert tree.find(3) is None
    assert tree.find_node(3) is None
    assert tree.find_lower_bound_node(3).key == 4
    assert tree.find_upper_bound_node(8) is None


def test_delete():
    tree = RbTree()
    expected = {}
    for i in range(1000):
        tree.insert(i, i)
        expected[i] = i
    order = list(expected)
    random.Random(7).shuffle(order)
    count = 1000
    for key in order:
        node = tree.find_node(key)
        assert node.value == expected[key]
        tree.delete(node)
        assert tree.find_node(key) is None
        count -= 1
        assert len(tree) == count
        if count % 97 == 0:
            assert tree.is_rb_tree()


def test_delete_none_is_ignored():
    tree = RbTree()
    tree.insert(1, "a")
    tree.delete(None)
    assert len(tree) == 1


def test_traversal():
    tree = RbTree()
    for i in range(10):
        tree.insert(i, i + 100)
    seen = []

    def visit(key, value):
        seen.append((key, value))
        return True

    tree.traversal(visit)
    assert seen == [(i, i + 100) for i in range(10)]


def test_traversal_stops_when_visitor_returns_false():
    tree = RbTree()
    for i in range(10):
        tree.insert(i, i)
    assert _visited(tree.traversal, lambda key, value: key < 3) == [0, 1, 2, 3]


def test_insert_delete_random():
    tree = RbTree()
    mirror = {}
    rng = random.Random(12345)
    for step in range(10000):
        key = rng.randrange(1000)
        val = rng.randrange(1 << 30)
        if key in mirror:
            node = tree.find_node(key)
            assert node.value == mirror[key]
            del mirror[key]
            tree.delete(node)
        else:
            assert tree.find_node(key) is None
            mirror[key] = val
            tree.insert(key, val)
        assert len(tree) == len(mirror)
        if step % 10 == 0:
            assert tree.is_rb_tree()
    assert tree.is_rb_tree()
    assert list(tree) == sorted(mirror.items())
    tree.clear()
    assert len(tree) == 0


def test_iterator():
    tree = RbTree(int_comparator)
    for i in range(10):
        tree.insert(i, i + 100)

    i = 0
    it = tree.iter_first().clone()
    while it.is_valid():
        assert it.key() == i
        assert it.value() == i + 100
        i += 1
        it.next()
    assert i == 10

    i = 9
    it = tree.iter_last()
    while it.is_valid():
        assert it.key() == i
        assert it.value() == i + 100
        it.set_value(i * 2)
        i -= 1
        it.prev()
    assert i == -1

    i = 0
    it = tree.iter_first()
    while it.is_valid():
        assert it.key() == i
        assert it.value() == i * 2
        i += 1
        it.next()

    assert tree.iter_first().equal(tree.iter_first().clone())
    assert not tree.iter_first().equal(None)
    assert not tree.iter_first().equal(tree.iter_last())


def test_invalid_iterator():
    tree = RbTree()
    it = tree.iter_first()
    assert not it.is_valid()
    assert not it.next().is_valid()
    with pytest.raises(ValueError):
        it.value()
    assert it.equal(RbTreeIterator(None))


def test_node():
    tree = RbTree()
    for i in range(10):
        tree.insert(i, i + 100)

    i = 0
    node = tree.begin()
    while node is not None:
        assert node.key == i
        assert node.value == i + 100
        i += 1
        node = node.next()
    assert i == 10

    i = 9
    node = tree.rbegin()
    while node is not None:
        assert node.key == i
        assert node.value == i + 100
        node.value = i * 2
        i -= 1
        node = node.prev()
    assert i == -1

    assert [value for _, value in tree] == [i * 2 for i in range(10)]


def test_empty_tree():
    tree = RbTree()
    assert tree.empty()
    assert tree.first() is None
    assert tree.last() is None
    assert list(tree) == []
    assert tree.is_rb_tree()


def test_reverse_comparator_orders_descending():
    tree = RbTree(reverse(builtin_type_comparator))
    for key in [5, 13, 7, 9, 0, 88]:
        tree.insert(key, str(key))
    assert [key for key, _ in tree] == [88, 13, 9, 7, 5, 0]


def test_is_rb_tree_detects_red_root():
    tree = RbTree()
    tree.insert(1, "a")
    tree.first().color = Color.RED
    with pytest.raises(ValueError, match="property 2"):
        tree.is_rb_tree()


def test_is_rb_tree_detects_black_height_mismatch():
    tree = RbTree()
    for key in (1, 2, 3):
        tree.insert(key, key)
    tree.find_node(1).color = Color.BLACK
    with pytest.raises(ValueError, match="property 5"):
        tree.is_rb_tree()


def test_is_rb_tree_detects_red_red():
    tree = RbTree()
    for key in (1, 2, 3, 4):
        tree.insert(key, key)
    tree.find_node(3).color = Color.RED
    with pytest.raises(ValueError, match="property 4"):
        tree.is_rb_tree()