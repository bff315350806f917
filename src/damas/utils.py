"""
Utilities for the draughts engine.
Logging setup shared by the console driver and any embedding front end.
"""

import sys
import logging
from pathlib import Path
from typing import Optional, Union

from .config import LOG_FORMAT, LOG_FORMAT_DETAILED, LOG_DATE_FORMAT


def setup_logger(
    name: str = "damas",
    log_file: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO
) -> logging.Logger:
    """
    Setup a logger with console and optional file output.
    Uses centralized log format configuration.

    Args:
        name: Logger name
        log_file: Path to log file (optional)
        level: Logging level, as a number or a level name

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    # Console handler goes to stderr so it never mixes with the board on stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    # File handler - uses detailed format
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger
