"""A growable array with comparator-driven search, insertion and sorting."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Iterator, TextIO

from tadkit import arrays

Comparator = Callable[[Any, Any], int]


class Array:
    """An ordered, growable sequence of elements."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Array({self._items!r})"

    def _check(self, p: int) -> None:
        if not 0 <= p < len(self._items):
            raise IndexError(f"position {p} out of range for {len(self._items)} elements")

    def add(self, t: Any) -> int:
        """Append ``t`` and return its index."""
        return arrays.add(self._items, t) - 1

    def get(self, p: int) -> Any:
        """Return the element at position ``p``."""
        self._check(p)
        return self._items[p]

    def set(self, p: int, t: Any) -> None:
        """Replace the element at position ``p`` with ``t``."""
        self._check(p)
        self._items[p] = t

    def insert(self, t: Any, p: int) -> None:
        """Insert ``t`` at position ``p``, shifting later elements right."""
        arrays.insert(self._items, t, p)

    def remove(self, p: int) -> Any:
        """Remove and return the element at position ``p``."""
        return arrays.remove(self._items, p)

    def remove_all(self) -> None:
        """Drop every element."""
        self._items.clear()

    def find(self, key: Any, cmp: Comparator) -> int:
        """Return the index of the first element comparing equal to ``key``, or -1."""
        return arrays.find(self._items, key, cmp)

    def ordered_insert(self, t: Any, cmp: Comparator) -> int:
        """Insert ``t`` before the first element not less than it; return its index."""
        return arrays.ordered_insert(self._items, t, cmp)

    def discover(self, t: Any, cmp: Comparator) -> Any:
        """Return the element equal to ``t``, appending ``t`` first if there is none."""
        pos = self.find(t, cmp)
        if pos < 0:
            pos = self.add(t)
        return self._items[pos]

    def sort(self, cmp: Comparator) -> None:
        """Sort the elements in place, stably, with ``cmp``."""
        arrays.sort(self._items, cmp)

    def display(self, file: TextIO | None = None) -> None:
        """Print each element on its own line."""
        out = file or sys.stdout
        for item in self._items:
            print(item, file=out)