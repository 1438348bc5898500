"""A linked list that tracks its size and keeps an iteration cursor."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterable, Iterator, TextIO

from tadkit.nodes import NodeList

Comparator = Callable[[Any, Any], int]


class LinkedList:
    """A singly linked list with a size count and a step-by-step cursor."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._nodes = NodeList()
        self._count = 0
        self._cursor = 0
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add(self, e: Any) -> Any:
        """Append ``e`` at the end and return it."""
        node = self._nodes.add(e)
        self._count += 1
        return node.info

    def add_first(self, e: Any) -> Any:
        """Put ``e`` at the front and return it."""
        node = self._nodes.add_first(e)
        self._count += 1
        return node.info

    def remove(self, key: Any, cmp: Comparator) -> Any:
        """Remove and return the first element comparing equal to ``key``.

        Raises ValueError when no element matches.
        """
        item = self._nodes.remove(key, cmp)
        self._count -= 1
        return item

    def remove_first(self) -> Any:
        """Remove and return the front element; raises IndexError when empty."""
        item = self._nodes.remove_first()
        self._count -= 1
        return item

    def find(self, key: Any, cmp: Comparator) -> Any | None:
        """Return the first element comparing equal to ``key``, or None."""
        node = self._nodes.find(key, cmp)
        return None if node is None else node.info

    def is_empty(self) -> bool:
        """Whether the list holds no elements."""
        return self._nodes.is_empty()

    def clear(self) -> None:
        """Drop every element."""
        self._nodes.clear()
        self._count = 0

    def discover(self, t: Any, cmp: Comparator) -> Any:
        """Return the element equal to ``t``, inserting ``t`` in order if there is none."""
        node, found = self._nodes.search_and_insert(t, cmp)
        if not found:
            self._count += 1
        return node.info

    def ordered_insert(self, t: Any, cmp: Comparator) -> Any:
        """Insert ``t`` before the first element not less than it and return it."""
        node = self._nodes.ordered_insert(t, cmp)
        self._count += 1
        return node.info

    def sort(self, cmp: Comparator) -> None:
        """Sort the elements stably with ``cmp``."""
        self._nodes.sort(cmp)

    def reset(self) -> None:
        """Move the cursor back to the first element."""
        self._cursor = 0

    def has_next(self) -> bool:
        """Whether the cursor has elements left to visit."""
        return self._cursor < self._count

    def next(self) -> Any:
        """Return the element under the cursor and advance it."""
        if not self.has_next():
            raise IndexError("no elements left to visit")
        item = next(islice(self._nodes, self._cursor, None))
        self._cursor += 1
        return item

    def display(self, file: TextIO | None = None) -> None:
        """Print the elements joined by arrows."""
        self._nodes.display(file)