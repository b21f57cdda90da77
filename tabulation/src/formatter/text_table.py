"""Plain-text rendering with left-aligned columns."""

from __future__ import annotations

from typing import List

from tabulation.src.core.tabulation import Tabulation


def render_text(tabulation: Tabulation) -> str:
    """Return one line per row; unset cells are blank."""
    rows: List[List[str]] = [
        ["" if cell.value is None else str(cell.value) for cell in row.columns]
        for row in tabulation.rows
    ]
    widths = [max(len(r[c]) for r in rows) for c in range(tabulation.columns_count)]
    lines = [" ".join(text.ljust(w) for text, w in zip(r, widths)).rstrip() for r in rows]
    return "\n".join(lines) + ("\n" if lines else "")


__all__ = ["render_text"]
