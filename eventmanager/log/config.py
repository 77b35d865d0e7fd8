"""
Immutable logger configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration shared by a root logger and the loggers derived from it.

    Attributes:
        level: Numeric log level, or False to disable logging
        location: Show the caller's file:line in each record
        micros: Microsecond precision timestamps
        colors: ANSI colored console output
    """

    level: int | bool = logging.INFO
    location: bool = False
    micros: bool = False
    colors: bool = True

    @staticmethod
    def resolve_level(level: str | int | bool) -> int | bool:
        """Resolve a level name, number or bool to an int level or False."""
        if isinstance(level, bool):
            return logging.INFO if level else False
        if isinstance(level, int):
            return level
        if level.isnumeric():
            return int(level)
        resolved = LogConstants.LEVEL_NAMES.get(level.lower())
        if resolved is None:
            raise InvalidLogLevelError(level)
        return resolved

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        location: bool | int = False,
        micros: bool = False,
        colors: bool = True,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (name, number, or False to disable logging)
            location: Whether to show file locations
            micros: Whether to show microsecond precision
            colors: Whether to enable colored output

        Returns:
            LogConfig instance
        """
        return cls(
            level=cls.resolve_level(level),
            location=bool(location),
            micros=micros,
            colors=colors,
        )

    @classmethod
    def from_config(cls, config_dict: dict[str, Any], section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary (e.g. Config.to_dict())
            section: Dotted path of the logging section

        Returns:
            LogConfig instance

        Example:
            config = Config("etc/eventmanager.yaml")
            log_config = LogConfig.from_config(config.to_dict())
        """
        current: Any = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                current = {}
                break

        level = current.get("level", "info")
        if level is None:
            level = "info"

        return cls.from_params(
            level=level,
            location=current.get("location", False),
            micros=current.get("micros", False),
            colors=current.get("colors", True),
        )
