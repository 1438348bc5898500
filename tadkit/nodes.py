"""Singly linked nodes used as lists, stacks and queues."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, TextIO

Comparator = Callable[[Any, Any], int]


@dataclass(eq=False)
class Node:
    """A node holding ``info`` and a link to the next node."""

    info: Any
    next: Node | None = None


class NodeList:
    """A chain of nodes starting at ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.add(item)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.info
            node = node.next

    def _last(self) -> Node | None:
        node = self.head
        while node is not None and node.next is not None:
            node = node.next
        return node

    def add(self, e: Any) -> Node:
        """Append ``e`` at the end and return its node."""
        node = Node(e)
        last = self._last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def add_first(self, e: Any) -> Node:
        """Put ``e`` at the front and return its node."""
        self.head = Node(e, self.head)
        return self.head

    def remove(self, key: Any, cmp: Comparator) -> Any:
        """Unlink the first element comparing equal to ``key`` and return it."""
        previous: Node | None = None
        node = self.head
        while node is not None and cmp(node.info, key) != 0:
            previous, node = node, node.next
        if node is None:
            raise ValueError("no element matches the key")
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        return node.info

    def remove_first(self) -> Any:
        """Unlink the front element and return it."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        node = self.head
        self.head = node.next
        return node.info

    def find(self, key: Any, cmp: Comparator) -> Node | None:
        """Return the first node whose element compares equal to ``key``, or None."""
        node = self.head
        while node is not None and cmp(node.info, key) != 0:
            node = node.next
        return node

    def ordered_insert(self, e: Any, cmp: Comparator) -> Node:
        """Insert ``e`` before the first element not less than it; return its node."""
        previous: Node | None = None
        node = self.head
        while node is not None and cmp(node.info, e) < 0:
            previous, node = node, node.next
        new = Node(e, node)
        if previous is None:
            self.head = new
        else:
            previous.next = new
        return new

    def search_and_insert(self, e: Any, cmp: Comparator) -> tuple[Node, bool]:
        """Return the node equal to ``e`` and True, or insert it in order and return False."""
        node = self.find(e, cmp)
        if node is not None:
            return node, True
        return self.ordered_insert(e, cmp), False

    def sort(self, cmp: Comparator) -> None:
        """Sort the elements stably with ``cmp``."""
        items = sorted(self, key=cmp_to_key(cmp))
        self.head = None
        for item in reversed(items):
            self.head = Node(item, self.head)

    def is_empty(self) -> bool:
        """Whether the list holds no elements."""
        return self.head is None

    def clear(self) -> None:
        """Drop every element."""
        self.head = None

    def push(self, e: Any) -> Node:
        """Push ``e`` on top, treating the list as a stack."""
        return self.add_first(e)

    def pop(self) -> Any:
        """Pop the top element, treating the list as a stack."""
        return self.remove_first()

    def enqueue(self, e: Any) -> Node:
        """Add ``e`` at the back, treating the list as a queue."""
        return self.add(e)

    def dequeue(self) -> Any:
        """Take the front element, treating the list as a queue."""
        return self.remove_first()

    def display(self, file: TextIO | None = None) -> None:
        """Print the elements joined by arrows; nothing for an empty list."""
        if self.head is not None:
            print(" -> ".join(str(item) for item in self), file=file or sys.stdout)


class CircularQueue:
    """A queue kept as a ring, reached through its last node."""

    def __init__(self) -> None:
        self.tail: Node | None = None

    def enqueue(self, e: Any) -> Node:
        """Add ``e`` at the back and return its node."""
        node = Node(e)
        if self.tail is None:
            node.next = node
        else:
            node.next = self.tail.next
            self.tail.next = node
        self.tail = node
        return node

    def dequeue(self) -> Any:
        """Take the front element."""
        if self.tail is None:
            raise IndexError("dequeue from an empty queue")
        first = self.tail.next
        assert first is not None
        if first is self.tail:
            self.tail = None
        else:
            self.tail.next = first.next
        return first.info

    def is_empty(self) -> bool:
        """Whether the queue holds no elements."""
        return self.tail is None