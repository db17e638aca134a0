"""lazydig logging configuration.

The TUI owns the terminal, so log records never go to a stream. When a level
is requested (``--log-level`` or ``LAZYDIG_LOG_LEVEL``) they are written to a
file, by default under the platform log directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "lazydig"
LOG_LEVEL_ENV = "LAZYDIG_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


def setup_logging(level: str | None = None, log_file: Path | None = None) -> logging.Logger:
    """Configure the ``lazydig`` logger.

    Args:
        level: Level name overriding ``LAZYDIG_LOG_LEVEL``. Without either,
            only a ``NullHandler`` is installed.
        log_file: Destination file; defaults to ``DEFAULT_LOG_FILE``.

    Raises:
        ValueError: if ``level`` is not a known logging level name.
    """
    logger = logging.getLogger(APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    level = level or os.environ.get(LOG_LEVEL_ENV)
    if not level:
        logger.addHandler(logging.NullHandler())
        return logger

    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {level!r}")

    path = log_file or DEFAULT_LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    logger.setLevel(numeric)
    return logger
