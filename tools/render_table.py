from __future__ import annotations

"""Command line renderer for tabular data files.

Reads a JSON, YAML or CSV file, builds a tabulation from it and prints the
result as HTML or plain text::

    python render_table.py data.json --format html
"""

import argparse
from pathlib import Path
from typing import List, Optional

from tabulation.src.data.loader import load_tabulation
from tabulation.src.formatter import Formatter
from tabulation.src.utils import config_loader
from tabulation.src.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a data file as a table")
    parser.add_argument("path", type=Path, help="JSON, YAML or CSV file with one entry per row")
    parser.add_argument(
        "--columns",
        action="store_true",
        help="treat each entry as a column instead of a row",
    )
    parser.add_argument("--format", choices=["html", "text"], default="html")
    parser.add_argument("--output", type=Path, help="write to this file instead of stdout")
    parser.add_argument("--config", type=Path, help="YAML/JSON settings overriding the defaults")
    parser.add_argument("--no-escape", action="store_true", help="emit cell values without HTML escaping")
    parser.add_argument("--log-file", help="also write log messages to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = config_loader.load_config(str(args.config)) if args.config else {}
    html_conf = overrides.get("html", {})
    indent = int(html_conf.get("indent", config_loader.HTML_INDENT))
    escape = bool(html_conf.get("escape", config_loader.HTML_ESCAPE)) and not args.no_escape
    logger = get_logger("render_table", args.log_file, overrides.get("log_level"))

    tabulation = load_tabulation(args.path, orientation="columns" if args.columns else "rows")
    logger.info("loaded %s with shape %s", args.path, tabulation.shape())

    formatter = Formatter(tabulation)
    if args.format == "html":
        out = formatter.to_html(indent=indent, escape=escape)
    else:
        out = formatter.to_text()

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(out, encoding="utf-8")
        logger.info("wrote %s", args.output)
    else:
        print(out, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
