"""A two-dimensional grid stored row by row in a token collection."""

from __future__ import annotations

from typing import Any, Callable

from tadkit.coll import Coll


class Matrix:
    """A ``rows`` by ``cols`` grid whose cells all start as ``default``.

    ``to_string`` and ``from_string`` convert cells to and from the text
    tokens the grid is stored in.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        default: Any,
        to_string: Callable[[Any], str] = str,
        from_string: Callable[[str], Any] = str,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._data = Coll(to_string=to_string, from_string=from_string)
        for _ in range(rows * cols):
            self._data.add(default)

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols})"

    def index_of(self, row: int, col: int) -> int:
        """Return the flat, row-major position of cell (``row``, ``col``)."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside a {self.rows}x{self.cols} matrix")
        return row * self.cols + col

    def get_at(self, row: int, col: int) -> Any:
        """Return the value of cell (``row``, ``col``)."""
        return self._data.get_at(self.index_of(row, col))

    def set_at(self, value: Any, row: int, col: int) -> None:
        """Store ``value`` in cell (``row``, ``col``)."""
        self._data.set_at(value, self.index_of(row, col))