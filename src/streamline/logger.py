"""Logging configuration for console and rotating file logs."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger


def setup_logger(level: str = "INFO", log_dir: str | Path | None = None):
    logger.remove()
    logger.add(sys.stderr, level=level)

    if log_dir is not None:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / "streamline.log",
            level=level,
            rotation="5 MB",
            retention=5,
            encoding="utf-8",
        )
    return logger
