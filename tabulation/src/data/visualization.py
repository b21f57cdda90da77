"""Visualization utilities."""

from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from tabulation.src.core.tabulation import Tabulation
from tabulation.src.formatter.html_table import format_value
from tabulation.src.formatter.text_table import render_text


def render_figure(tabulation: Tabulation) -> Figure:
    """Return a figure drawing ``tabulation`` as a matplotlib table."""
    fig, ax = plt.subplots()
    ax.axis("off")
    if tabulation.any():
        cell_text = [
            [format_value(cell.value, escape=False) for cell in row.columns]
            for row in tabulation.rows
        ]
        ax.table(cellText=cell_text, loc="center")
    return fig


def visualize(tabulation: Tabulation) -> None:
    """Display ``tabulation`` using ``matplotlib`` if available."""
    try:
        render_figure(tabulation)
        plt.show()
    except Exception:  # pragma: no cover - fallback
        print(render_text(tabulation), end="")
