"""Logging configuration."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Replace loguru's default sink with the service sinks.

    Args:
        level: Minimum level for the console sink
        log_file: Optional path of a rotating DEBUG-level log file
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    if log_file:
        Path(log_file).expanduser().parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            Path(log_file).expanduser(),
            rotation="10 MB",
            level="DEBUG",
        )
