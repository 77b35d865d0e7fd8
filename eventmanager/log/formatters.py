"""
Log record formatting.

Records are rendered as a fixed header, the message padded to a rule column,
the structured extra fields, and the logger name:

    [12:34:56,789] [W] invalid command format       [command:add] [/parser]
"""

import logging
import time
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants

# Record attribute holding the merged extra fields (set by Logger)
EXTRA_ATTR = "_em_extra"


def _render_value(value: Any) -> str:
    if isinstance(value, BaseException):
        return value.__class__.__name__
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


class LogFormatter(logging.Formatter):
    """Formatter for Logger records, with optional ANSI colors."""

    def __init__(self, config: LogConfig) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    @property
    def config(self) -> LogConfig:
        return self._config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        base = time.strftime("%H:%M:%S", time.localtime(record.created))
        if self._config.micros:
            micros = int((record.created - int(record.created)) * 1_000_000)
            return f"{base},{micros:06d}"
        return f"{base},{int(record.msecs):03d}"

    def _rule(self) -> int:
        if self._config.micros:
            return LogConstants.MICRO_RULE_WIDTH
        return LogConstants.DEFAULT_RULE_WIDTH

    def _fields(self, record: logging.LogRecord) -> list[tuple[str, str]]:
        extra = getattr(record, EXTRA_ATTR, None) or {}
        return [(key, _render_value(extra[key])) for key in sorted(extra)]

    def format(self, record: logging.LogRecord) -> str:
        asctime = self.formatTime(record)
        level = record.levelname[:1]
        message = record.getMessage()
        fields = self._fields(record)

        if self._config.colors:
            line = self._format_colored(record, asctime, level, message, fields)
        else:
            line = self._format_plain(record, asctime, level, message, fields)

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line

    def _header_width(self, asctime: str, message: str) -> int:
        return len(f"[{asctime}] [X] {message}")

    def _tail(self, record: logging.LogRecord) -> list[str]:
        tail = [f"[{record.name}]"]
        if self._config.location:
            tail.append(f"[{record.filename}:{record.lineno}]")
        return tail

    def _format_plain(
        self,
        record: logging.LogRecord,
        asctime: str,
        level: str,
        message: str,
        fields: list[tuple[str, str]],
    ) -> str:
        line = f"[{asctime}] [{level}] {message}"
        line += " " * max(1, self._rule() - self._header_width(asctime, message))
        parts = [f"[{key}:{value}]" for key, value in fields]
        parts.extend(self._tail(record))
        return line + " ".join(parts)

    def _format_colored(
        self,
        record: logging.LogRecord,
        asctime: str,
        level: str,
        message: str,
        fields: list[tuple[str, str]],
    ) -> str:
        prefix = ColorManager.get_color_for_level(record.levelno)
        col = ColorManager.plain(prefix)
        bold = ColorManager.bold(prefix)
        reset = ColorManager.RESET

        line = f"{col}[{asctime}] [{bold}{level}{reset}{col}]{reset} {bold}{message}{reset}"
        line += " " * max(1, self._rule() - self._header_width(asctime, message))
        parts = [f"{col}[{key}:{bold}{value}{reset}{col}]{reset}" for key, value in fields]
        gray = ColorManager.plain(ColorManager.GRAY)
        parts.extend(f"{gray}{item}{reset}" for item in self._tail(record))
        return line + " ".join(parts)
