"""Loads YAML/JSON configuration files and global tabulation settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package's runtime configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "tabulation_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


META_CONFIG: Dict[str, Any] = load_meta_config()
LOG_LEVEL: str = str(META_CONFIG.get("log_level", "INFO")).upper()
_HTML_CONF = META_CONFIG.get("html", {})
HTML_INDENT: int = int(_HTML_CONF.get("indent", 2))
HTML_ESCAPE: bool = bool(_HTML_CONF.get("escape", True))


def set_log_level(value: str) -> None:
    """Override the log level used by :func:`get_logger`."""
    global LOG_LEVEL
    LOG_LEVEL = str(value).upper()
    META_CONFIG["log_level"] = LOG_LEVEL


def set_html_indent(value: int) -> None:
    """Override the number of spaces per nesting level in HTML output."""
    global HTML_INDENT
    HTML_INDENT = value
    META_CONFIG.setdefault("html", {})["indent"] = value


def set_html_escape(value: bool) -> None:
    """Enable or disable HTML escaping of cell values."""
    global HTML_ESCAPE
    HTML_ESCAPE = value
    META_CONFIG.setdefault("html", {})["escape"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "log_level": LOG_LEVEL,
        "html_indent": HTML_INDENT,
        "html_escape": HTML_ESCAPE,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
