"""Serialize a :class:`~tabulation.src.core.tabulation.Tabulation`."""

from __future__ import annotations

from tabulation.src.core.tabulation import Tabulation

from .html_table import render_html
from .text_table import render_text


class Formatter:
    """Render a tabulation into one of the supported output formats."""

    def __init__(self, tabulation: Tabulation) -> None:
        self.tabulation = tabulation

    def to_html(self, indent: int | None = None, escape: bool | None = None) -> str:
        return render_html(self.tabulation, indent=indent, escape=escape)

    def to_text(self) -> str:
        return render_text(self.tabulation)


__all__ = ["Formatter", "render_html", "render_text"]
