"""
Logging utility for the Task Manager API.

Emits one JSON object per record so log lines can be shipped as-is.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Dict, Union


class StructuredLogger:
    """Structured logger writing JSON lines to stdout."""

    def __init__(self, name: str, level: Union[int, str] = logging.INFO):
        """
        Initialize structured logger.

        Args:
            name: Logger name, reported as the ``service`` field
            level: Logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Prevent adding handlers multiple times
        if not self.logger.handlers:
            self._setup_handlers()

    def _setup_handlers(self):
        """Set up logging handlers."""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        self.logger.addHandler(console_handler)

    def _build(self, level: int, message: str, **kwargs) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "message": message,
            "service": self.logger.name,
        }
        log_data.update(kwargs)
        return json.dumps(log_data, default=str)

    def _log_structured(self, level: int, message: str, **kwargs):
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._build(level, message, **kwargs))

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self._log_structured(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._log_structured(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self._log_structured(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message."""
        self._log_structured(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with traceback."""
        if self.logger.isEnabledFor(logging.ERROR):
            self.logger.exception(self._build(logging.ERROR, message, exception=True, **kwargs))

    def set_level(self, level: Union[int, str]):
        self.logger.setLevel(level)


_loggers: Dict[str, StructuredLogger] = {}
_level: Union[int, str] = logging.INFO


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger for the given component.

    Args:
        name: Component name, e.g. ``task_manager.auth``

    Returns:
        StructuredLogger instance, shared per name
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, _level)
    return _loggers[name]


def configure_logging(level: Union[int, str]):
    """Apply a log level to every component logger, present and future."""
    global _level
    _level = level
    for structured in _loggers.values():
        structured.set_level(level)
