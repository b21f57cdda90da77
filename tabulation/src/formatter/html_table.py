"""HTML table rendering.

The markup has a header row with one unlabeled ``<th>`` per column and one
body row per tabulation row. Unset cells render as empty ``<td></td>``.
"""

from __future__ import annotations

import html
import logging
from typing import Any, List

from tabulation.src.core.tabulation import Tabulation
from tabulation.src.utils import config_loader

logger = logging.getLogger(__name__)


def format_value(value: Any, escape: bool = True) -> str:
    """Return the display string for a cell value."""
    text = "" if value is None else str(value)
    return html.escape(text) if escape else text


def render_html(tabulation: Tabulation, indent: int | None = None, escape: bool | None = None) -> str:
    """Return ``tabulation`` as an HTML ``<table>`` fragment.

    ``indent`` and ``escape`` default to the ``html`` runtime settings.
    """
    if indent is None:
        indent = config_loader.HTML_INDENT
    if escape is None:
        escape = config_loader.HTML_ESCAPE

    lines: List[str] = []

    def emit(depth: int, text: str) -> None:
        lines.append(" " * (indent * depth) + text)

    emit(0, "<table>")
    emit(1, "<thead>")
    emit(2, "<tr>")
    for _ in tabulation.columns:
        emit(3, "<th></th>")
    emit(2, "</tr>")
    emit(1, "</thead>")
    emit(1, "<tbody>")
    for row in tabulation.rows:
        emit(2, "<tr>")
        for cell in row.columns:
            emit(3, f"<td>{format_value(cell.value, escape)}</td>")
        emit(2, "</tr>")
    emit(1, "</tbody>")
    emit(0, "</table>")

    logger.debug("rendered %s tabulation as HTML", tabulation.shape())
    return "\n".join(lines) + "\n"


__all__ = ["format_value", "render_html"]
