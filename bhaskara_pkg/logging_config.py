"""Logging for Bhaskara.

Every module logs under the ``bhaskara`` namespace (``bhaskara.solver``,
``bhaskara.cli``). Nothing is emitted until ``setup_logging`` attaches
handlers; the CLI calls it once from ``main_entry``.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from . import config

ROOT_LOGGER = "bhaskara"


class StructuredFormatter(logging.Formatter):
    """One line per record: timestamp, level, logger, function and message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat(
            timespec="milliseconds"
        )
        line = (
            f"{timestamp} [{record.levelname}] "
            f"{record.name}.{record.funcName}: {record.getMessage()}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the ``bhaskara`` logger.

    Calling it again replaces the previous handlers, so the CLI can be
    entered several times in one process.

    Args:
        level: DEBUG, INFO, WARNING or ERROR (default: config.LOG_LEVEL)
        log_file: Also append records to this file, UTF-8 encoded
    """
    logger = logging.getLogger(ROOT_LOGGER)
    level_name = (level or config.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    # Records must not reach the root logger's last-resort handler twice
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one package module, e.g. ``get_logger("solver")``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
