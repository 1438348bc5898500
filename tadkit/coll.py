"""A collection stored as one string of separator-delimited tokens."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator

from tadkit import tokens

Comparator = Callable[[Any, Any], int]


class Coll:
    """Elements kept as text tokens, converted on the way in and out.

    ``to_string`` turns an element into its token and ``from_string`` turns
    a token back into an element. A cursor supports step-by-step iteration.
    """

    def __init__(
        self,
        sep: str = "|",
        *,
        to_string: Callable[[Any], str] = str,
        from_string: Callable[[str], Any] = str,
    ) -> None:
        if len(sep) != 1:
            raise ValueError("the separator must be a single character")
        self.sep = sep
        self.to_string = to_string
        self.from_string = from_string
        self._text = ""
        self._pos = 0

    def _tokens(self) -> list[str]:
        return self._text.split(self.sep) if self._text else []

    def __len__(self) -> int:
        return tokens.token_count(self._text, self.sep)

    def __str__(self) -> str:
        return self._text

    def __iter__(self) -> Iterator[Any]:
        return (self.from_string(token) for token in self._tokens())

    def add(self, t: Any) -> int:
        """Append ``t`` and return its index."""
        self._text = tokens.add_token(self._text, self.sep, self.to_string(t))
        return len(self) - 1

    def set_at(self, t: Any, p: int) -> None:
        """Replace the element at position ``p`` with ``t``."""
        self._text = tokens.set_token_at(self._text, self.sep, self.to_string(t), p)

    def get_at(self, p: int) -> Any:
        """Return the element at position ``p``."""
        return self.from_string(tokens.get_token_at(self._text, self.sep, p))

    def remove_at(self, p: int) -> None:
        """Remove the element at position ``p``."""
        self._text = tokens.remove_token_at(self._text, self.sep, p)

    def remove_all(self) -> None:
        """Drop every element."""
        self._text = ""

    def find(self, key: Any, cmp: Comparator) -> int:
        """Return the index of the first element comparing equal to ``key``, or -1."""
        return next((i for i, item in enumerate(self) if cmp(item, key) == 0), -1)

    def sort(self, cmp: Comparator) -> None:
        """Sort the elements stably with ``cmp``."""
        ordered = sorted(self, key=cmp_to_key(cmp))
        self._text = self.sep.join(self.to_string(item) for item in ordered)

    def has_next(self) -> bool:
        """Whether the cursor has elements left to visit."""
        return self._pos < len(self)

    def next(self) -> Any:
        """Return the element under the cursor and advance it."""
        item = self.get_at(self._pos)
        self._pos += 1
        return item

    def reset(self) -> None:
        """Move the cursor back to the first element."""
        self._pos = 0