from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logger(level: str = "INFO") -> logging.Logger:
    level_name = level.upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    console = Console(stderr=True, highlight=False)
    handler = RichHandler(console=console, show_time=False, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    # Only the package logger is configured; the host's root logger is left alone.
    logger = logging.getLogger("commentwrap")
    logger.handlers = [handler]
    logger.propagate = False
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "commentwrap")
