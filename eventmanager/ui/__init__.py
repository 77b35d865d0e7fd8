"""Terminal output for the interactive session."""

from .console import EVENTMANAGER_THEME, LOGO, WELCOME_MESSAGE, Console

__all__ = ["Console", "EVENTMANAGER_THEME", "LOGO", "WELCOME_MESSAGE"]
