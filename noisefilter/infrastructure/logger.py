#!/usr/bin/env python3
"""Structured logging for NoiseFilter.

This module wraps Python's logging module with:
- Log levels mirroring the standard library (DEBUG .. CRITICAL)
- Key-value context appended to each message
- Console output by default, optional rotating log file

Example:
    >>> logger = Logger(level=LogLevel.INFO)
    >>> logger.info("Added ignore pattern", pattern="favicon", line=3)
"""

import logging
import logging.handlers
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from noisefilter.core.constants import Limits

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""

    DEBUG = logging.DEBUG  # 10
    INFO = logging.INFO  # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR  # 40
    CRITICAL = logging.CRITICAL  # 50


class Logger:
    """Structured logger.

    Key-value context passed to a log call is rendered after the message
    as ``message | key=value``.
    """

    def __init__(
        self,
        name: str = "noisefilter",
        level: Union[LogLevel, str] = LogLevel.INFO,
        handlers: Optional[List[logging.Handler]] = None,
    ):
        """Initialize logger.

        Handlers a previous Logger attached under the same name are
        closed and replaced.

        Args:
            name: Logger name for identification
            level: Minimum log level to output
            handlers: Optional list of logging handlers
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.set_level(level)

        if handlers is None:
            handlers = [self._create_console_handler()]

        for old in list(self.logger.handlers):
            self.logger.removeHandler(old)
            if old not in handlers:
                old.close()
        for handler in handlers:
            self.logger.addHandler(handler)

        self.logger.propagate = False

    def _create_console_handler(self) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return handler

    def create_file_handler(
        self,
        filename: Union[str, Path],
        max_bytes: int = Limits.LOG_FILE_MAX_BYTES,
        backup_count: int = Limits.LOG_FILE_BACKUP_COUNT,
    ) -> logging.handlers.RotatingFileHandler:
        """Create rotating file handler.

        Args:
            filename: Path to log file
            max_bytes: Maximum size before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured rotating file handler
        """
        handler = logging.handlers.RotatingFileHandler(
            filename, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return handler

    def add_handler(self, handler: logging.Handler) -> None:
        """Add a new output handler."""
        self.logger.addHandler(handler)

    def remove_handler(self, handler: logging.Handler) -> None:
        """Remove an output handler."""
        self.logger.removeHandler(handler)

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Set the minimum log level.

        Args:
            level: New log level (LogLevel or string)
        """
        if isinstance(level, str):
            level = LogLevel[level.upper()]
        self.logger.setLevel(level)

    def get_level(self) -> LogLevel:
        """Get current log level."""
        return LogLevel(self.logger.level)

    def _format_message(self, msg: str, context: Dict[str, Any]) -> str:
        if context:
            ctx_str = " ".join(f"{k}={v}" for k, v in context.items())
            return f"{msg} | {ctx_str}"
        return msg

    def _log(self, level: LogLevel, msg: str, context: Dict[str, Any]) -> None:
        if self.logger.isEnabledFor(level):
            formatted_msg = self._format_message(msg, context)
            self.logger.log(int(level), formatted_msg, extra={"context": context})

    def debug(self, msg: str, **context) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, msg, context)

    def info(self, msg: str, **context) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, msg, context)

    def warning(self, msg: str, **context) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, msg, context)

    def error(self, msg: str, **context) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, msg, context)


# Global logger instance
_global_logger: Optional[Logger] = None


def get_logger(name: str = "noisefilter") -> Logger:
    """Get or create a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    global _global_logger
    if _global_logger is None or _global_logger.name != name:
        _global_logger = Logger(name=name)
    return _global_logger


def set_global_logger(logger: Optional[Logger]) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger to use globally, or None to reset
    """
    global _global_logger
    _global_logger = logger
