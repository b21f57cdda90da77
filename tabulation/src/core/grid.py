"""Rectangular storage backing a tabulation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from .errors import ArgumentError
from .grid_utils import in_bounds, resolve_insertion_point

logger = logging.getLogger(__name__)


@dataclass
class Grid:
    """2D store of optional values shared by every view of a tabulation.

    Either the grid is empty (no rows, no columns) or every row has exactly
    ``columns_count`` slots. Unset slots hold ``None``.
    """

    values: List[List[Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.values = [list(row) for row in self.values]
        if not self.values:
            return
        row_len = len(self.values[0])
        for row in self.values:
            if len(row) != row_len:
                raise ValueError("All rows must have the same length")
        if row_len == 0:
            self.values = []

    # Dimensions ----------------------------------------------------------

    @property
    def rows_count(self) -> int:
        return len(self.values)

    @property
    def columns_count(self) -> int:
        return len(self.values[0]) if self.values else 0

    @property
    def cells_count(self) -> int:
        return self.rows_count * self.columns_count

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (rows, columns)."""
        return self.rows_count, self.columns_count

    def contains(self, row: int, column: int) -> bool:
        """Return ``True`` if ``row``, ``column`` lies within the current extent."""
        return in_bounds(row, self.rows_count) and in_bounds(column, self.columns_count)

    # Cell access ---------------------------------------------------------

    def get(self, row: int, column: int, default: Any | None = None) -> Any:
        """Return the value at ``row``, ``column`` or ``default`` if out of bounds."""
        if not self.contains(row, column):
            return default
        return self.values[row][column]

    def set(self, row: int, column: int, value: Any) -> None:
        """Store ``value`` at ``row``, ``column``, growing the grid as needed.

        Negative indices address existing slots from the end; one that reaches
        past the first row or column raises :class:`IndexError`.
        """
        if row < -self.rows_count:
            raise IndexError(f"row {row} is out of bounds")
        if column < -self.columns_count:
            raise IndexError(f"column {column} is out of bounds")
        self.expand(row + 1, column + 1)
        self.values[row][column] = value

    # Structure -----------------------------------------------------------

    def resize(self, rows: int, columns: int) -> "Grid":
        """Reallocate to exactly ``rows`` x ``columns``.

        Values at addresses present in both extents are kept. A zero dimension
        collapses the grid to 0 x 0.
        """
        if rows < 0:
            raise ArgumentError("number of rows must be greater than or equal to zero")
        if columns < 0:
            raise ArgumentError("number of columns must be greater than or equal to zero")
        if rows * columns > 0:
            resized = [[self.get(r, c) for c in range(columns)] for r in range(rows)]
        else:
            resized = []
        logger.debug("resize %s -> %s", self.shape(), (rows, columns) if resized else (0, 0))
        self.values = resized
        return self

    def expand(self, rows: int, columns: int) -> "Grid":
        """Grow to at least ``rows`` x ``columns`` without shrinking."""
        if self.rows_count < rows or self.columns_count < columns:
            self.resize(max(self.rows_count, rows), max(self.columns_count, columns))
        return self

    def insert_row(self, index: int, values: List[Any]) -> None:
        """Insert a row holding ``values`` before row ``index``.

        The grid grows so that ``index`` is a valid insertion point and every
        value fits; the new row is padded with ``None`` to the grid width.
        """
        index = resolve_insertion_point(index, self.rows_count, "row")
        self.expand(index, len(values))
        width = max(self.columns_count, len(values))
        self.values.insert(index, [values[c] if c < len(values) else None for c in range(width)])
        logger.debug("inserted row at %d, shape now %s", index, self.shape())

    def insert_column(self, index: int, values: List[Any]) -> None:
        """Insert a column holding ``values`` before column ``index``.

        Rows are materialized until every value has one; rows past the end of
        ``values`` receive ``None``.
        """
        index = resolve_insertion_point(index, self.columns_count, "column")
        self.expand(len(values), index)
        if not self.values:
            self.values = [[] for _ in values]
        for r, row in enumerate(self.values):
            row.insert(index, values[r] if r < len(values) else None)
        logger.debug("inserted column at %d, shape now %s", index, self.shape())

    def to_list(self) -> List[List[Any]]:
        """Return a deep list copy of the grid values."""
        return [row[:] for row in self.values]

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"


__all__ = ["Grid"]
