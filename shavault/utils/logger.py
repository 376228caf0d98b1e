"""Centralized logging configuration.
Call setup_logging() once at application startup.
"""

import logging
import sys
from typing import Optional

from ..config import LOGGING_CONFIG, get_log_level


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with a single stderr handler."""
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    root = logging.getLogger()
    # Avoid duplicate handlers on repeated calls
    if root.handlers:
        return

    root.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(
        fmt=LOGGING_CONFIG['format'],
        datefmt=LOGGING_CONFIG['datefmt'],
    ))
    root.addHandler(handler)
