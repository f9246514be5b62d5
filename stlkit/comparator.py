"""Three-way comparison functions used to order container keys.

A comparator returns -1 when ``a < b``, 0 when ``a == b`` and 1 otherwise.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def _complex_cmp(a: complex, b: complex) -> int:
    if a.real < b.real:
        return -1
    if a.real == b.real and a.imag < b.imag:
        return -1
    return 1


def _expect(value: Any, kinds: tuple[type, ...], label: str, exclude_bool: bool = False) -> None:
    if not isinstance(value, kinds) or (exclude_bool and isinstance(value, bool)):
        raise TypeError(f"expected {label}, got {type(value).__name__}")


def builtin_type_comparator(a: Any, b: Any) -> int:
    """Compare two values of the same built-in type.

    Complex numbers are ordered by real part, then imaginary part; anything
    else uses ``<``. Values that are neither equal nor less compare as 1.
    """
    if a == b:
        return 0
    if isinstance(a, complex) or isinstance(b, complex):
        return _complex_cmp(complex(a), complex(b))
    return -1 if a < b else 1


def reverse(cmp: Comparator) -> Comparator:
    """Return a comparator giving the opposite order of ``cmp``."""

    def reversed_cmp(a: Any, b: Any) -> int:
        return -cmp(a, b)

    return reversed_cmp


def int_comparator(a: Any, b: Any) -> int:
    """Compare two integers (booleans are rejected)."""
    if a == b:
        return 0
    _expect(a, (int,), "int", exclude_bool=True)
    _expect(b, (int,), "int", exclude_bool=True)
    return -1 if a < b else 1


def float_comparator(a: Any, b: Any) -> int:
    """Compare two floats."""
    if a == b:
        return 0
    _expect(a, (float,), "float")
    _expect(b, (float,), "float")
    return -1 if a < b else 1


def string_comparator(a: Any, b: Any) -> int:
    """Compare two strings lexicographically."""
    if a == b:
        return 0
    _expect(a, (str,), "str")
    _expect(b, (str,), "str")
    return -1 if a < b else 1


def bool_comparator(a: Any, b: Any) -> int:
    """Compare two booleans, with False ordered before True."""
    if a == b:
        return 0
    _expect(a, (bool,), "bool")
    _expect(b, (bool,), "bool")
    return -1 if (not a and b) else 1


def complex_comparator(a: Any, b: Any) -> int:
    """Compare two complex numbers by real part, then imaginary part."""
    if a == b:
        return 0
    _expect(a, (complex,), "complex")
    _expect(b, (complex,), "complex")
    return _complex_cmp(a, b)