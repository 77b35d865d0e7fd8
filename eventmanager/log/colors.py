"""
ANSI color selection for log output.
"""

import logging

from .constants import LogConstants


class ColorManager:
    """Centralized ANSI color code management."""

    RED = "\x1b[31"
    GREEN = "\x1b[32"
    YELLOW = "\x1b[33"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    DEFAULT = "\x1b[38"
    GRAY = "\x1b[38;5;244"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        LogConstants.CUSTOM_LEVELS["TRACE"]: GRAY,
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str:
        """Return the color escape prefix for a level, DEFAULT if unknown."""
        return ColorManager.COLORS.get(level, ColorManager.DEFAULT)

    @staticmethod
    def bold(color: str) -> str:
        """Return the completed bold escape sequence for a color prefix."""
        return color + ";1m"

    @staticmethod
    def plain(color: str) -> str:
        """Return the completed escape sequence for a color prefix."""
        return color + "m"
