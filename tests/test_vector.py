import pytest

from stlkit.iterators import walk
from stlkit.vector import Vector, VectorIterator


def test_vector_base():
    v = Vector(capacity=10)
    assert v.empty()
    assert v.capacity() == 10
    v.push_back(1)
    v.push_back(2)
    assert not v.empty()
    assert len(v) == 2
    assert v.front() == 1
    assert v.back() == 2


def test_vector_resize():
    v = Vector(capacity=10)
    v.push_back(1)
    v.push_back(2)
    v.shrink_to_fit()
    assert v.capacity() == 2
    assert v.at(0) == 1
    assert v.front() == 1

    v.reserve(20)
    assert v.capacity() == 20
    assert len(v) == 2
    assert v.at(1) == 2
    v.clear()
    assert len(v) == 0
    assert v.empty()

    for i in range(10):
        v.push_back(i)
    assert len(v) == 10
    v.resize(20)
    assert len(v) == 10
    v.resize(4)
    assert len(v) == 4

    b = Vector.from_vector(v)
    assert len(b) == 4
    assert b.data() == [0, 1, 2, 3]
    assert b.capacity() == v.capacity()


def test_from_vector_is_independent():
    v = Vector()
    v.push_back(1)
    b = Vector.from_vector(v)
    b.set_at(0, 5)
    assert v.at(0) == 1
    assert b.at(0) == 5


def test_modify_vector():
    v = Vector()
    v.push_back(1)
    v.push_back(2)
    v.push_back(3)
    assert v.pop_back() == 3
    v.push_back(4)
    v.set_at(1, 9)
    assert v.at(1) == 9
    v.insert_at(0, 8)
    assert str(v) == "[8 1 9 4]"
    v.clear()
    assert v.at(10) is None


def test_vector_iter():
    v = Vector()
    for value in (1, 2, 3, 4):
        v.push_back(value)

    seen = []
    it = v.begin()
    while it.is_valid():
        seen.append(it.value())
        it.next()
    assert seen == [1, 2, 3, 4]

    seen = []
    it = v.last()
    while it.is_valid():
        seen.append(it.value())
        it.prev()
    assert seen == [4, 3, 2, 1]

    it = v.erase(v.begin())
    assert it.value() == 2

    v.push_back(5)
    v.push_back(6)
    it = v.erase_range(v.begin().next(), v.begin().next().next().next())
    assert it.value() == 5
    assert str(v) == "[2 5 6]"

    it = v.insert(v.begin(), 7)
    assert it.value() == 7
    assert str(v) == "[7 2 5 6]"

    assert v.begin().equal(v.begin().clone())
    assert not v.begin().equal(v.last())


def test_iterator_equal_requires_same_vector():
    a = Vector()
    b = Vector()
    a.push_back(1)
    b.push_back(1)
    assert not a.begin().equal(b.begin())
    assert not a.begin().equal(None)


def test_iterator_set_value_and_iterator_at():
    v = Vector()
    for i in range(5):
        v.push_back(i)
    it = v.begin().iterator_at(3)
    assert it.position == 3
    assert it.value() == 3
    it.set_value(30)
    assert v.at(3) == 30
    assert list(walk(v.begin())) == [0, 1, 2, 30, 4]


def test_iterator_stops_at_bounds():
    v = Vector()
    v.push_back(1)
    it = v.begin()
    it.next().next().next()
    assert it.position == 1
    assert it.equal(v.end())
    back = v.begin()
    back.prev().prev()
    assert back.position == -1
    assert not back.is_valid()


def test_out_of_range_operations_are_ignored():
    v = Vector()
    v.push_back(1)
    v.set_at(5, 9)
    v.insert_at(3, 9)
    v.erase_index_range(1, 0)
    v.erase_index_range(0, 5)
    assert v.data() == [1]
    assert Vector().pop_back() is None
    assert Vector().front() is None
    assert Vector().back() is None


def test_insert_at_end_and_capacity_growth():
    v = Vector(capacity=1)
    v.push_back(1)
    v.insert_at(1, 2)
    assert v.data() == [1, 2]
    assert v.capacity() >= 2


def test_iteration_protocol():
    v = Vector()
    for value in "abc":
        v.push_back(value)
    assert list(v) == ["a", "b", "c"]


def test_insert_with_foreign_iterator_raises():
    v = Vector()
    with pytest.raises(TypeError):
        v.insert(object(), 1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Vector(capacity=-1)


def test_iterator_type():
    v = Vector()
    v.push_back(1)
    it = v.iter_at(0)
    assert isinstance(it, VectorIterator) and it.value() == 1