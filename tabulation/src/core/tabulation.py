"""Two-dimensional, mutable table of values."""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

import numpy as np

from .cell import Cell
from .columns import Column, ColumnCollection
from .grid import Grid
from .rows import Row, RowCollection


class Tabulation:
    """A table of arbitrary values that grows as cells, rows and columns are added.

    Rows, columns and cells are returned as views holding a reference to the
    same underlying :class:`Grid`, so changes made through one view are visible
    through every other.

    Example::

        t = Tabulation()
        t.rows.push([1, 2])
        t.rows << [3, 4]
        t.cell(1, 1).value  # 4
    """

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        self._grid = Grid().resize(rows, columns)

    # Construction helpers ------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Any]) -> "Tabulation":
        """Return a tabulation with each item of ``rows`` pushed as a row."""
        tabulation = cls()
        for values in rows:
            tabulation.rows.push(values)
        return tabulation

    @classmethod
    def from_columns(cls, columns: Iterable[Any]) -> "Tabulation":
        """Return a tabulation with each item of ``columns`` pushed as a column."""
        tabulation = cls()
        for values in columns:
            tabulation.columns.push(values)
        return tabulation

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Tabulation":
        """Return a tabulation holding the values of a 1-D or 2-D array.

        A 1-D array becomes a single row.
        """
        arr = np.asarray(arr)
        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        if arr.ndim != 2:
            raise ValueError(f"expected a 1-D or 2-D array, got {arr.ndim} dimensions")
        tabulation = cls()
        tabulation._grid = Grid(arr.tolist())
        return tabulation

    # Views ---------------------------------------------------------------

    @property
    def rows(self) -> RowCollection:
        return RowCollection(self._grid)

    def row(self, row: int) -> Row:
        return Row(self._grid, row)

    @property
    def columns(self) -> ColumnCollection:
        return ColumnCollection(self._grid)

    def column(self, column: int) -> Column:
        return Column(self._grid, column)

    def cell(self, row: int, column: int) -> Cell:
        return Cell(self._grid, row, column)

    # Whole-table operations ----------------------------------------------

    @property
    def rows_count(self) -> int:
        return self._grid.rows_count

    @property
    def columns_count(self) -> int:
        return self._grid.columns_count

    @property
    def cells_count(self) -> int:
        return self._grid.cells_count

    def shape(self) -> Tuple[int, int]:
        return self._grid.shape()

    def empty(self) -> bool:
        """Return ``True`` if no cells are allocated."""
        return self._grid.cells_count <= 0

    def any(self) -> bool:
        """Return ``True`` if at least one cell is allocated."""
        return not self.empty()

    def clear(self) -> "Tabulation":
        """Delete all cells and return ``self``."""
        self._grid.resize(0, 0)
        return self

    def to_list(self) -> List[List[Any]]:
        """Return the values as a list of row lists."""
        return self._grid.to_list()

    def to_array(self) -> np.ndarray:
        """Return the values as a 2-D object array; unset cells are ``None``."""
        arr = np.empty(self.shape(), dtype=object)
        for r, row in enumerate(self._grid.values):
            for c, value in enumerate(row):
                arr[r, c] = value
        return arr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tabulation):
            return NotImplemented
        return self._grid.values == other._grid.values

    def __repr__(self) -> str:
        return f"Tabulation(shape={self.shape()})"


__all__ = ["Tabulation"]
