"""Logging wrapper used by the command line entry points."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tabulation.src.utils import config_loader


def get_logger(name: str, file_path: str | None = None, level: str | None = None) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided.

    Entry points log which data file was loaded, the resulting tabulation
    shape and where the rendered output went. ``level`` defaults to the
    ``log_level`` setting. A file handler is added once per distinct path.
    """

    logger = logging.getLogger(name)
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if file_path:
        target = os.path.abspath(file_path)
        if not any(
            isinstance(h, logging.FileHandler) and h.baseFilename == target
            for h in logger.handlers
        ):
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    logger.setLevel(str(level or config_loader.LOG_LEVEL).upper())
    return logger
