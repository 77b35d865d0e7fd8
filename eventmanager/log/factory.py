"""
Factory for creating and deriving loggers.
"""

import logging
import sys
from typing import Any, TextIO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(
        config: LogConfig, stream: TextIO | None = None, logger_class: type[Logger] = Logger
    ) -> Logger:
        """
        Create the root ("/") logger.

        Example:
            >>> lg = LoggerFactory.create_root(LogConfig.from_params("info"))
            >>> lg.info("session started")
            [12:34:56,789] [I] session started                             [/]
        """
        return LoggerFactory.create("/", config, stream=stream, logger_class=logger_class)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        stream: TextIO | None = None,
        logger_class: type[Logger] = Logger,
        extra: dict[str, Any] | None = None,
    ) -> Logger:
        """
        Create a logger writing to ``stream`` (stderr by default).

        An already registered logger of the same name is returned unchanged.

        Args:
            name: Logger name
            config: Logger configuration
            stream: Output stream for the console handler
            logger_class: Logger class to use
            extra: Fields included in every record

        Returns:
            Configured logger instance
        """
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing

        lg = logger_class(name, config, extra)

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(logging.CRITICAL + 1 if config.level is False else config.level)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root

        logging.root.manager.loggerDict[name] = lg
        lg.trace("created logger", extra={"level": logging.getLevelName(lg.level)})
        return lg

    @staticmethod
    def derive(
        parent: Logger, tags: str | list[str], extra: dict[str, Any] | None = None
    ) -> Logger:
        """
        Derive a child logger that shares the parent's handlers and config.

        Args:
            parent: Parent logger
            tags: Name component(s) appended to the parent's name
            extra: Fields added on top of the parent's fields

        Returns:
            Derived logger named e.g. "/app/parser"

        Example:
            >>> parser_lg = LoggerFactory.derive(root_lg, "parser")
            >>> parser_lg.name
            '/parser'
        """
        if isinstance(tags, str):
            tags = [tags]
        name = parent.name.rstrip("/") + "/" + "/".join(tags)

        fields = parent.extra
        if extra:
            fields.update(extra)

        lg = parent.__class__(name, parent.config, fields)
        lg._root_logger = parent._root_logger or parent
        lg.propagate = False
        lg.parent = parent
        return lg
