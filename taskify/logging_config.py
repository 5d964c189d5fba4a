"""Logging setup for Taskify.

Logs go to a rotating file under ``~/.taskify/logs``, or to the Textual
devtools console when running with ``--dev``. The level comes from the
command line, then ``TASKIFY_LOG_LEVEL``, then INFO.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Tuple

LOG_DIR = Path.home() / ".taskify" / "logs"
LOG_FILE = LOG_DIR / "taskify.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL_ENV = "TASKIFY_LOG_LEVEL"


def resolve_level(log_level: Optional[str] = None) -> Tuple[str, int]:
    """Pick the effective level name and number.

    Unknown names fall back to INFO rather than failing startup.
    """
    name = (log_level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    if name not in LOG_LEVELS:
        name = "INFO"
    return name, getattr(logging, name)


def _build_handler(dev: bool) -> logging.Handler:
    if dev:
        from textual.logging import TextualHandler

        return TextualHandler()

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        LOG_FILE,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8"
    )


def setup_logging(log_level: Optional[str] = None, dev: bool = False) -> logging.Handler:
    """Install a single handler on the root logger.

    Calling this again replaces the previous handler.

    Args:
        log_level: Level name, overrides TASKIFY_LOG_LEVEL
        dev: Log to the Textual devtools console instead of the file

    Returns:
        The installed handler
    """
    name, level = resolve_level(log_level)

    handler = _build_handler(dev)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    destination = "textual console" if dev else LOG_FILE
    logging.getLogger(__name__).info(f"Logging at {name} to {destination}")
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module, typically ``get_logger(__name__)``."""
    return logging.getLogger(name)
