import logging
import os
from pathlib import Path
from typing import Optional

from .constants import LOG_LEVEL_ENV


def resolve_level(level: Optional[str] = None) -> int:
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    value = logging.getLevelName(name)
    if isinstance(value, int):
        return value
    return logging.INFO


def setup_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger("favarchive")
    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(resolve_level(level))
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")
    console_handler.setFormatter(console_formatter)

    # Avoid duplicate handlers if main() is called multiple times.
    if not logger.handlers:
        logger.addHandler(console_handler)
        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
    return logger
