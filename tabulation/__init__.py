"""A two-dimensional, mutable table of values."""

from tabulation.src.core import ArgumentError, Cell, Column, Row, Tabulation
from tabulation.src.formatter import Formatter

__version__ = "0.1.0"

__all__ = ["ArgumentError", "Cell", "Column", "Row", "Tabulation", "Formatter"]
