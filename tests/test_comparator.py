import math

import pytest

from stlkit.comparator import (
    bool_comparator,
    builtin_type_comparator,
    complex_comparator,
    float_comparator,
    int_comparator,
    reverse,
    string_comparator,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 2, -1),
        (2, 1, 1),
        (3, 3, 0),
        ("aaaa", "bbbb", -1),
        ("bbbb", "bb", 1),
        (1.5, 2.5, -1),
        (False, True, -1),
        (True, False, 1),
        (1 + 2j, 1 + 3j, -1),
        (2 + 0j, 1 + 5j, 1),
        (1 + 1j, 1 + 1j, 0),
    ],
)
def test_builtin_type_comparator(a, b, expected):
    assert builtin_type_comparator(a, b) == expected


def test_builtin_nan_is_never_less():
    assert builtin_type_comparator(math.nan, 1.0) == 1
    assert builtin_type_comparator(1.0, math.nan) == 1


def test_builtin_mismatched_types_raise():
    with pytest.raises(TypeError):
        builtin_type_comparator(1, "a")


def test_builtin_agrees_with_sorted_order():
    ordered = ["aaaa", "bb", "bbbb", "bbbb", "ccc"]
    results = [builtin_type_comparator(a, b) for a, b in zip(ordered, ordered[1:])]
    assert results == [-1, -1, 0, -1]


@pytest.mark.parametrize("pair", [(1, 2), (2, 1), (4, 4), ("x", "y")])
def test_reverse_negates(pair):
    a, b = pair
    assert reverse(builtin_type_comparator)(a, b) == -builtin_type_comparator(a, b)


def test_reverse_orders_descending():
    descending = reverse(builtin_type_comparator)
    values = [88, 13, 9, 7, 5, 0]
    results = [descending(a, b) for a, b in zip(values, values[1:])]
    assert results == [-1] * 5


@pytest.mark.parametrize(
    "cmp, low, high",
    [
        (int_comparator, 1, 2),
        (float_comparator, 1.0, 2.0),
        (string_comparator, "a", "b"),
        (bool_comparator, False, True),
        (complex_comparator, 1j, 1 + 0j),
    ],
)
def test_typed_comparators_order(cmp, low, high):
    assert cmp(low, high) == -1
    assert cmp(high, low) == 1
    assert cmp(low, low) == 0


@pytest.mark.parametrize(
    "cmp, a, b",
    [
        (int_comparator, 1, "a"),
        (int_comparator, True, False),
        (float_comparator, 1, 2.0),
        (string_comparator, "a", 1),
        (bool_comparator, 0, True),
        (complex_comparator, 1.0, 2j),
    ],
)
def test_typed_comparators_reject_wrong_types(cmp, a, b):
    with pytest.raises(TypeError):
        cmp(a, b)