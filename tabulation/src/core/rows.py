"""Row views: a single row, its cells, and the collection of all rows."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

from .cell import Cell
from .grid import Grid
from .grid_utils import coerce_values


class Row:
    """A single row of a tabulation."""

    def __init__(self, grid: Grid, index: int) -> None:
        self._grid = grid
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def empty(self) -> bool:
        """Return ``True`` if the row index is at or past the row count."""
        return self._index >= self._grid.rows_count

    @property
    def columns(self) -> "Row.CellCollection":
        """Return the cells of this row, one per column."""
        return Row.CellCollection(self._grid, self._index)

    def column(self, column: int) -> Cell:
        return Cell(self._grid, self._index, column)

    def values(self) -> List[Any]:
        """Return the values of this row as a list."""
        return [cell.value for cell in self.columns]

    def __repr__(self) -> str:
        return f"Row(index={self._index})"

    class CellCollection:
        """Lazy sequence of the cells along one row."""

        def __init__(self, grid: Grid, row: int) -> None:
            self._grid = grid
            self._row = row

        def __iter__(self) -> Iterator[Cell]:
            for column in range(self._grid.columns_count):
                yield Cell(self._grid, self._row, column)

        def __len__(self) -> int:
            return self._grid.columns_count

        def each(self, visit: Optional[Callable[[Cell], Any]] = None):
            """Call ``visit`` once per cell, or return a fresh iterator if omitted."""
            if visit is None:
                return iter(self)
            for cell in self:
                visit(cell)
            return self


class RowCollection:
    """All rows of a tabulation."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    def empty(self) -> bool:
        return self._grid.rows_count <= 0

    def push(self, values: Any) -> "RowCollection":
        """Append a row holding ``values``.

        The grid widens when the row is longer than the current column count;
        shorter rows are padded with ``None``. ``None`` or an empty sequence
        leaves the grid untouched.
        """
        values = coerce_values(values)
        if values:
            self._grid.insert_row(self._grid.rows_count, values)
        return self

    append = push

    def __lshift__(self, values: Any) -> "RowCollection":
        return self.push(values)

    def insert(self, index: int, values: Any) -> "RowCollection":
        """Insert a row holding ``values`` before row ``index``.

        Missing rows up to ``index`` are created first.
        """
        values = coerce_values(values)
        if values:
            self._grid.insert_row(index, values)
        return self

    def __iter__(self) -> Iterator[Row]:
        for index in range(self._grid.rows_count):
            yield Row(self._grid, index)

    def __len__(self) -> int:
        return self._grid.rows_count

    def each(self, visit: Optional[Callable[[Row], Any]] = None):
        """Call ``visit`` once per row, or return a fresh iterator if omitted."""
        if visit is None:
            return iter(self)
        for row in self:
            visit(row)
        return self

    def __repr__(self) -> str:
        return f"RowCollection(count={len(self)})"


__all__ = ["Row", "RowCollection"]
