from __future__ import annotations

"""Low-level helpers shared by the grid and its views."""

from collections.abc import Iterable
from typing import Any, List


def coerce_values(values: Any) -> List[Any]:
    """Return ``values`` as a list of cell values.

    ``None`` and the empty string (or empty bytes) become an empty list,
    which callers treat as a no-op. Non-empty strings, bytes and other
    non-iterable objects are wrapped as a single value. Any other iterable is
    materialized in order.
    """
    if values is None:
        return []
    if isinstance(values, (str, bytes)):
        return [values] if values else []
    if not isinstance(values, Iterable):
        return [values]
    return list(values)


def in_bounds(index: int, count: int) -> bool:
    """Return ``True`` if ``index`` addresses one of ``count`` existing slots."""
    return -count <= index < count


def resolve_insertion_point(index: int, count: int, label: str) -> int:
    """Return a non-negative insertion point for a line of length ``count``.

    Negative indices count from the end the way :meth:`list.insert` does:
    ``-1`` places the new line before the current last one, and indices below
    ``-count`` raise :class:`IndexError`. This differs from end-relative
    insertion that places ``-1`` after the last line and accepts ``-(count + 1)``.
    """
    if index >= 0:
        return index
    if index < -count:
        raise IndexError(f"{label} {index} is out of bounds")
    return count + index


__all__ = ["coerce_values", "in_bounds", "resolve_insertion_point"]
