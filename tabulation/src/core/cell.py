"""Single-cell view over a :class:`~tabulation.src.core.grid.Grid`."""

from __future__ import annotations

from typing import Any

from .grid import Grid


class Cell:
    """Addresses one position of a grid without owning any storage."""

    def __init__(self, grid: Grid, row: int, column: int) -> None:
        self._grid = grid
        self._row = row
        self._column = column

    @property
    def row_index(self) -> int:
        return self._row

    @property
    def column_index(self) -> int:
        return self._column

    def empty(self) -> bool:
        """Return ``True`` if the address lies outside the current grid extent.

        The row index is checked against the row count and the column index
        against the column count.
        """
        return not self._grid.contains(self._row, self._column)

    @property
    def value(self) -> Any:
        """Stored value, or ``None`` when unset or out of bounds."""
        return self._grid.get(self._row, self._column)

    @value.setter
    def value(self, value: Any) -> None:
        self._grid.set(self._row, self._column, value)

    def __repr__(self) -> str:
        return f"Cell(row={self._row}, column={self._column}, value={self.value!r})"


__all__ = ["Cell"]
