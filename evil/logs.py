"""
Log Setup

Rotating, structured file logging for the ``evil`` logger tree.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE_NAME = "evil.log"


def setup_logging(
    log_dir: str | Path,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
    level: int = logging.DEBUG,
) -> RotatingFileHandler:
    """Attach a rotating handler to the ``evil`` logger.

    Calling this twice for the same directory returns the existing handler
    instead of adding a duplicate.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / LOG_FILE_NAME).resolve()

    logger = logging.getLogger("evil")
    logger.setLevel(level)

    for existing in logger.handlers:
        if (
            isinstance(existing, RotatingFileHandler)
            and Path(existing.baseFilename) == log_file
        ):
            return existing

    handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    handler.setLevel(level)

    # JSON formatter
    formatter = logging.Formatter(
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
        '"message": "%(message)s", "name": "%(name)s"}'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return handler
