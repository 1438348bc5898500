"""A first-in, first-out queue built on linked nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from tadkit.nodes import Node


class Queue:
    """A FIFO queue with front and back links that keeps count of its elements."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._front: Node | None = None
        self._back: Node | None = None
        self._count = 0
        for item in items:
            self.enqueue(item)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        node = self._front
        while node is not None:
            yield node.info
            node = node.next

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"

    def enqueue(self, e: Any) -> None:
        """Add ``e`` at the back of the queue."""
        node = Node(e)
        if self._back is None:
            self._front = node
        else:
            self._back.next = node
        self._back = node
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front element; raises IndexError when empty."""
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        self._count -= 1
        return node.info

    def is_empty(self) -> bool:
        """Whether the queue holds no elements."""
        return self._front is None