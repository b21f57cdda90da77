"""Exceptions raised by the tabulation core."""

from __future__ import annotations


class ArgumentError(ValueError):
    """Raised when a requested row or column count is negative."""


__all__ = ["ArgumentError"]
