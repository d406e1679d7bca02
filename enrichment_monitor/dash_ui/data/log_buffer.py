"""
Circular in-memory buffer of recent log records for the System Logs page.

``install_log_handler`` attaches a ``DashLogHandler`` to the package logger
so every ``enrichment_monitor.*`` module logger feeds the buffer.
"""
import logging
from collections import deque
from datetime import datetime
from typing import Dict, List, Optional

from ...utils.logging import PACKAGE_LOGGER

BUFFER_SIZE = 500

LOG_BUFFER: deque = deque(maxlen=BUFFER_SIZE)

LEVEL_ORDER = {"DEBUG": 0, "INFO": 1, "WARNING": 2, "ERROR": 3, "CRITICAL": 4}


class DashLogHandler(logging.Handler):
    """Logging handler that writes records to the shared circular buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = {
                "timestamp": datetime.fromtimestamp(record.created).strftime(
                    "%Y-%m-%d %H:%M:%S"
                ),
                "level": record.levelname,
                "module": record.name,
                "message": self.format(record),
            }
        except (ValueError, KeyError, TypeError):
            self.handleError(record)
            return
        LOG_BUFFER.appendleft(entry)


def install_log_handler(logger_name: str = PACKAGE_LOGGER) -> DashLogHandler:
    """Install a DashLogHandler on ``logger_name``, replacing any earlier one."""
    handler = DashLogHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(logger_name)
    # Avoid duplicate handlers on reload
    for existing in logger.handlers[:]:
        if isinstance(existing, DashLogHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def filter_entries(entries: List[Dict[str, str]], min_level: Optional[str]) -> List[Dict[str, str]]:
    """Keep entries at or above ``min_level``; "ALL" or None keeps everything."""
    if not min_level or min_level == "ALL":
        return list(entries)
    threshold = LEVEL_ORDER.get(min_level, 0)
    return [e for e in entries if LEVEL_ORDER.get(e["level"], 0) >= threshold]


__all__ = [
    "BUFFER_SIZE",
    "DashLogHandler",
    "LOG_BUFFER",
    "filter_entries",
    "install_log_handler",
]
