"""A last-in, first-out stack built on linked nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from tadkit.nodes import NodeList


class Stack:
    """A LIFO stack that keeps count of its elements."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._nodes = NodeList()
        self._count = 0
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def push(self, e: Any) -> Any:
        """Put ``e`` on top of the stack and return it."""
        node = self._nodes.push(e)
        self._count += 1
        return node.info

    def pop(self) -> Any:
        """Remove and return the top element; raises IndexError when empty."""
        if self._nodes.is_empty():
            raise IndexError("pop from an empty stack")
        item = self._nodes.pop()
        self._count -= 1
        return item

    def is_empty(self) -> bool:
        """Whether the stack holds no elements."""
        return self._nodes.is_empty()