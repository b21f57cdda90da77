"""Core tabulation data structures."""

from .errors import ArgumentError
from .grid import Grid
from .cell import Cell
from .rows import Row, RowCollection
from .columns import Column, ColumnCollection
from .tabulation import Tabulation

__all__ = [
    "ArgumentError",
    "Grid",
    "Cell",
    "Row",
    "RowCollection",
    "Column",
    "ColumnCollection",
    "Tabulation",
]
