"""Column views: a single column, its cells, and the collection of all columns."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

from .cell import Cell
from .grid import Grid
from .grid_utils import coerce_values


class Column:
    """A single column of a tabulation."""

    def __init__(self, grid: Grid, index: int) -> None:
        self._grid = grid
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def empty(self) -> bool:
        """Return ``True`` if the column index is at or past the column count."""
        return self._index >= self._grid.columns_count

    @property
    def rows(self) -> "Column.CellCollection":
        """Return the cells of this column, one per row."""
        return Column.CellCollection(self._grid, self._index)

    def row(self, row: int) -> Cell:
        return Cell(self._grid, row, self._index)

    def values(self) -> List[Any]:
        return [cell.value for cell in self.rows]

    def __repr__(self) -> str:
        return f"Column(index={self._index})"

    class CellCollection:
        """Lazy sequence of the cells along one column."""

        def __init__(self, grid: Grid, column: int) -> None:
            self._grid = grid
            self._column = column

        def __iter__(self) -> Iterator[Cell]:
            for row in range(self._grid.rows_count):
                yield Cell(self._grid, row, self._column)

        def __len__(self) -> int:
            return self._grid.rows_count

        def each(self, visit: Optional[Callable[[Cell], Any]] = None):
            if visit is None:
                return iter(self)
            for cell in self:
                visit(cell)
            return self


class ColumnCollection:
    """All columns of a tabulation."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    def empty(self) -> bool:
        return self._grid.columns_count <= 0

    def push(self, values: Any) -> "ColumnCollection":
        """Append a column holding ``values``.

        Rows are added when the column is longer than the current row count;
        rows past the end of ``values`` get ``None``. ``None`` or an empty
        sequence leaves the grid untouched.
        """
        values = coerce_values(values)
        if values:
            self._grid.insert_column(self._grid.columns_count, values)
        return self

    append = push

    def __lshift__(self, values: Any) -> "ColumnCollection":
        return self.push(values)

    def insert(self, index: int, values: Any) -> "ColumnCollection":
        """Insert a column holding ``values`` before column ``index``."""
        values = coerce_values(values)
        if values:
            self._grid.insert_column(index, values)
        return self

    def __iter__(self) -> Iterator[Column]:
        for index in range(self._grid.columns_count):
            yield Column(self._grid, index)

    def __len__(self) -> int:
        return self._grid.columns_count

    def each(self, visit: Optional[Callable[[Column], Any]] = None):
        """Call ``visit`` once per column, or return a fresh iterator if omitted."""
        if visit is None:
            return iter(self)
        for column in self:
            visit(column)
        return self

    def __repr__(self) -> str:
        return f"ColumnCollection(count={len(self)})"


__all__ = ["Column", "ColumnCollection"]
