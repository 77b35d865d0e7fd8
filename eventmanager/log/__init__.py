"""
Structured logging on top of Python's standard logging module.

Adds to the standard library:
- A TRACE level below DEBUG
- Structured extra fields rendered as [key:value] after the message
- Colored console output with millisecond or microsecond timestamps
- Complete logging disable (level False or "false")
- Path-style logger hierarchy ("/", "/parser", "/app") with derived loggers

Example:
    >>> lg = LoggerFactory.create_root(LogConfig.from_params("debug"))
    >>> parser_lg = derive_lg(lg, "parser")
    >>> parser_lg.warning("invalid command format", extra={"command": "add"})
"""

import logging

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import TRACE, Logger

logging.addLevelName(TRACE, "TRACE")


def derive_lg(lg: Logger, tags: str | list[str]) -> Logger:
    """
    Derive a logger with tags from a parent logger.

    Example:
        >>> child_lg = derive_lg(parent_lg, "parser")
    """
    return LoggerFactory.derive(lg, tags)


__all__ = [
    "Logger",
    "LoggerFactory",
    "LogConfig",
    "LogConstants",
    "LogFormatter",
    "LogError",
    "InvalidLogLevelError",
    "TRACE",
    "derive_lg",
]
