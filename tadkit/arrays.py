"""In-place operations on Python lists driven by three-way comparators."""

from functools import cmp_to_key
from typing import Any, Callable, TypeVar

T = TypeVar("T")
Comparator = Callable[[Any, Any], int]


def add(arr: list[T], e: T) -> int:
    """Append ``e`` and return the new length."""
    arr.append(e)
    return len(arr)


def insert(arr: list[T], e: T, p: int) -> None:
    """Insert ``e`` at position ``p``, shifting later elements right."""
    if not 0 <= p <= len(arr):
        raise IndexError(f"insert position {p} out of range")
    arr.insert(p, e)


def remove(arr: list[T], p: int) -> T:
    """Remove and return the element at position ``p``."""
    if not 0 <= p < len(arr):
        raise IndexError(f"remove position {p} out of range")
    return arr.pop(p)


def find(arr: list[T], key: Any, cmp: Comparator) -> int:
    """Return the index of the first element comparing equal to ``key``, or -1."""
    return next((i for i, x in enumerate(arr) if cmp(x, key) == 0), -1)


def ordered_insert(arr: list[T], e: T, cmp: Comparator) -> int:
    """Insert ``e`` before the first element not less than it; return its index."""
    p = next((i for i, x in enumerate(arr) if cmp(x, e) >= 0), len(arr))
    arr.insert(p, e)
    return p


def sort(arr: list[T], cmp: Comparator) -> None:
    """Sort ``arr`` in place, stably, using ``cmp``."""
    arr.sort(key=cmp_to_key(cmp))