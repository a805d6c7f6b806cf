"""
Logging Utility

Provides process-wide logging setup and a structured (JSON line) logger
for backend call records.
"""

import json
import logging
import sys
from datetime import datetime, timezone

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


_console_handler = None


def configure_logging(level: str = "INFO") -> None:
    """
    Install a stdout handler on the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
    """
    global _console_handler

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Prevent adding handlers multiple times
    if _console_handler is not None and _console_handler in root.handlers:
        return

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_console_handler)


class StructuredLogger:
    """Structured logger emitting one JSON object per record."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log_structured(self, level: int, message: str, **kwargs):
        """
        Log a structured message.

        Args:
            level: Logging level
            message: Log message
            **kwargs: Additional structured data
        """
        if self.logger.isEnabledFor(level):
            log_data = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": logging.getLevelName(level),
                "message": message,
                "service": self.logger.name,
            }
            log_data.update(kwargs)
            self.logger.log(level, json.dumps(log_data, default=str))

    def info(self, message: str, **kwargs):
        self._log_structured(logging.INFO, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log_structured(logging.ERROR, message, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for the given module or service name."""
    return StructuredLogger(name)
