"""An insertion-ordered key-value map with cursors and comparator sorting."""

from __future__ import annotations

import sys
from functools import cmp_to_key
from typing import Any, Callable, TextIO

from tadkit import arrays

Comparator = Callable[[Any, Any], int]


def cmp_tt(a: Any, b: Any) -> int:
    """Compare with ``<`` only: -1 if ``a < b``, 1 if ``b < a``, else 0."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class Map:
    """Keys and values held side by side in insertion order.

    Keys are matched with :func:`cmp_tt`. Separate cursors walk the keys and
    the values.
    """

    def __init__(self) -> None:
        self._keys: list[Any] = []
        self._values: list[Any] = []
        self._key_pos = 0
        self._value_pos = 0

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in zip(self._keys, self._values))
        return f"Map({{{pairs}}})"

    def _index(self, k: Any) -> int:
        return arrays.find(self._keys, k, cmp_tt)

    def get(self, k: Any) -> Any | None:
        """Return the value for ``k``, or None when the key is absent."""
        pos = self._index(k)
        return None if pos < 0 else self._values[pos]

    def put(self, k: Any, v: Any) -> Any:
        """Associate ``v`` with ``k``, replacing any earlier value, and return ``v``."""
        pos = self._index(k)
        if pos < 0:
            self._keys.append(k)
            self._values.append(v)
        else:
            self._values[pos] = v
        return v

    def contains(self, k: Any) -> bool:
        """Whether ``k`` is a key of the map."""
        return self._index(k) >= 0

    def remove(self, k: Any) -> Any:
        """Remove ``k`` and return its value; raises KeyError when absent."""
        pos = self._index(k)
        if pos < 0:
            raise KeyError(k)
        del self._keys[pos]
        return self._values.pop(pos)

    def remove_all(self) -> None:
        """Drop every entry."""
        self._keys.clear()
        self._values.clear()

    def has_next(self) -> bool:
        """Whether both cursors have entries left to visit."""
        size = len(self)
        return self._key_pos < size and self._value_pos < size

    def next_key(self) -> Any:
        """Return the key under the key cursor and advance it."""
        if self._key_pos >= len(self):
            raise IndexError("no keys left to visit")
        key = self._keys[self._key_pos]
        self._key_pos += 1
        return key

    def next_value(self) -> Any:
        """Return the value under the value cursor and advance it."""
        if self._value_pos >= len(self):
            raise IndexError("no values left to visit")
        value = self._values[self._value_pos]
        self._value_pos += 1
        return value

    def reset(self) -> None:
        """Move both cursors back to the first entry."""
        self._key_pos = 0
        self._value_pos = 0

    def discover(self, k: Any, v: Any) -> Any:
        """Return the value for ``k``, storing ``v`` first when the key is absent."""
        if not self.contains(k):
            self.put(k, v)
        return self.get(k)

    def _reorder(self, cmp: Comparator, by_value: bool) -> None:
        column = 1 if by_value else 0
        pairs = sorted(
            zip(self._keys, self._values),
            key=cmp_to_key(lambda a, b: cmp(a[column], b[column])),
        )
        self._keys = [k for k, _ in pairs]
        self._values = [v for _, v in pairs]

    def sort_by_keys(self, cmp: Comparator) -> None:
        """Reorder the entries stably by key."""
        self._reorder(cmp, by_value=False)

    def sort_by_values(self, cmp: Comparator) -> None:
        """Reorder the entries stably by value."""
        self._reorder(cmp, by_value=True)

    def display(self, file: TextIO | None = None) -> None:
        """Print one line per entry, leaving the cursors untouched."""
        out = file or sys.stdout
        for k, v in zip(self._keys, self._values):
            print(f"La key {k} tiene el value asociado: {v}", file=out)