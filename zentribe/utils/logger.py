# File: zentribe/utils/logger.py
"""
Logging setup for ZenTribe.

Handlers live on the package logger "zentribe"; module loggers named
"zentribe.*" propagate to it. Loggers outside the package (scripts run as
__main__) get their own copy of the handlers.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "zentribe"

CONSOLE_FORMAT = logging.Formatter(
    '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
    datefmt='%H:%M:%S'
)
FILE_FORMAT = logging.Formatter(
    '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


def _console_level() -> int:
    level = logging.getLevelName(os.getenv("ZENTRIBE_LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _file_handler() -> Optional[logging.Handler]:
    """Daily DEBUG log under $ZENTRIBE_LOG_DIR, or None when it cannot be written."""
    log_dir = Path(os.getenv("ZENTRIBE_LOG_DIR", "logs"))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(
            log_dir / f"zentribe_{datetime.now():%Y%m%d}.log", encoding='utf-8'
        )
    except OSError as e:
        sys.stderr.write(f"zentribe: file logging disabled ({log_dir}): {e}\n")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(FILE_FORMAT)
    return handler


def _attach_handlers(logger: logging.Logger, level: int) -> None:
    logger.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(CONSOLE_FORMAT)
    logger.addHandler(console)

    file_handler = _file_handler()
    if file_handler is not None:
        logger.addHandler(file_handler)


def setup_logger(name: str = PACKAGE_LOGGER, level: Optional[int] = None) -> logging.Logger:
    """
    Return the logger for `name`, configuring handlers on first use.

    Args:
        name: Usually the caller's __name__
        level: Console level; defaults to $ZENTRIBE_LOG_LEVEL (INFO)
    """
    level = level if level is not None else _console_level()

    in_package = name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
    owner = logging.getLogger(PACKAGE_LOGGER if in_package else name)
    if not owner.handlers:
        _attach_handlers(owner, level)

    return logging.getLogger(name)
