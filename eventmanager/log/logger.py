"""
Logger class with structured extra fields.

Extends the standard Python logger with:
- Pre-populated extra fields merged into every record
- A TRACE level below DEBUG
- A disabled mode (level False) that drops every record
- Derived "view" loggers that share their root logger's handlers
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants
from .formatters import EXTRA_ATTR

TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]


class Logger(logging.Logger):
    """
    Logger that attaches structured fields to its records.

    Fields passed via ``extra=`` are not set as record attributes; they are
    merged with the logger's own fields and rendered by LogFormatter, so any
    key (including ``name`` or ``message``) may be used.

    Example:
        lg.warning("invalid command format", extra={"command": "add"})
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name (path style, e.g. "/parser")
            config: Logger configuration, defaults to LogConfig()
            extra: Fields included in every record of this logger
        """
        if config is None:
            config = LogConfig()

        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
        else:
            super().__init__(name, config.level)
        self._logging_disabled = config.level is False

        self._config = config
        self._extra: dict[str, Any] = dict(extra or {})
        self._root_logger: Logger | None = None

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self._extra)

    @property
    def disabled(self) -> bool:  # type: ignore[override]
        """Check if logging is disabled."""
        return getattr(self, "_logging_disabled", False)

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._logging_disabled = value

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create a record carrying the merged structured fields."""
        merged = dict(self._extra)
        if extra:
            merged.update(extra)
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, extra=None, sinfo=sinfo
        )
        setattr(record, EXTRA_ATTR, merged)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a TRACE level message."""
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    def _log(self, level: int, msg: object, args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        if self._logging_disabled:
            return
        super()._log(level, msg, args, **kwargs)

    def findCaller(
        self, stack_info: bool = False, stacklevel: int = 1
    ) -> tuple[str, int, str, str | None]:
        """Report the first frame outside the logging machinery and this module."""
        f = logging.currentframe()
        while f is not None and f.f_code.co_filename in (logging.__file__, __file__):
            f = f.f_back
        if f is None:
            return "(unknown file)", 0, "(unknown function)", None
        return f.f_code.co_filename, f.f_lineno, f.f_code.co_name, None

    def callHandlers(self, record: logging.LogRecord) -> None:
        """Derived loggers emit through their root logger's handlers."""
        if self._root_logger is None:
            super().callHandlers(record)
            return
        for handler in self._root_logger.handlers:
            if record.levelno >= handler.level:
                handler.handle(record)
