from __future__ import annotations

"""Build tabulations from JSON, YAML or CSV files."""

from pathlib import Path
import csv
import json
from typing import Any, List

import yaml

from tabulation.src.core.tabulation import Tabulation


def _read_entries(path: Path) -> List[Any]:
    if path.suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f) or []
    if path.suffix in {".yaml", ".yml"}:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or []
    if path.suffix == ".csv":
        with open(path, "r", encoding="utf-8", newline="") as f:
            return [row for row in csv.reader(f)]
    raise ValueError(f"Unsupported data format: {path.suffix}")


def load_tabulation(path: Path | str, orientation: str = "rows") -> Tabulation:
    """Load ``path`` and push each entry as a row (or a column).

    JSON and YAML files must hold a list; each item is either a list of values
    or a single value. CSV files yield one entry per record, as strings.
    """
    if orientation not in {"rows", "columns"}:
        raise ValueError(f"orientation must be 'rows' or 'columns', got {orientation!r}")
    entries = _read_entries(Path(path))
    if not isinstance(entries, list):
        raise ValueError(f"{path} must contain a list of rows")
    if orientation == "columns":
        return Tabulation.from_columns(entries)
    return Tabulation.from_rows(entries)


__all__ = ["load_tabulation"]
