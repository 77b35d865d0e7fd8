"""
Console wrapper around rich with color auto-detection.

Command output, prompts and error text may contain "[" and "]", so nothing is
printed with rich markup; styles are applied explicitly.
"""

from __future__ import annotations

import os
import sys
from typing import Any

from rich.console import Console as RichConsole
from rich.text import Text
from rich.theme import Theme


def _is_interactive() -> bool:
    """Check if we're in an interactive terminal."""
    return sys.stdout.isatty() and sys.stdin.isatty()


def _should_use_color() -> bool:
    """Determine if color output should be used."""
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return _is_interactive()


EVENTMANAGER_THEME = {
    "info": "cyan",
    "error": "red bold",
    "muted": "dim",
    "banner": "bold magenta",
}

LOGO = r"""
 _____                 _   __  __
| ____|_   _____ _ __ | |_|  \/  | __ _ _ __   __ _  __ _  ___ _ __
|  _| \ \ / / _ \ '_ \| __| |\/| |/ _` | '_ \ / _` |/ _` |/ _ \ '__|
| |___ \ V /  __/ | | | |_| |  | | (_| | | | | (_| | (_| |  __/ |
|_____| \_/ \___|_| |_|\__|_|  |_|\__,_|_| |_|\__,_|\__, |\___|_|
                                                    |___/"""

WELCOME_MESSAGE = "Welcome to EventManagerCLI! Type 'menu' to see the available commands."


class Console:
    """
    Console for the interactive session.

    Example:
        console = Console()
        console.show_banner()
        line = console.input("> ")
        console.show_message("Event added successfully")
    """

    def __init__(
        self,
        *,
        force_terminal: bool | None = None,
        no_color: bool | None = None,
        file: Any = None,
    ):
        """
        Initialize the console.

        Args:
            force_terminal: Force terminal mode (True/False) or auto-detect (None)
            no_color: Disable color output (True/False) or auto-detect (None)
            file: Output file (default: sys.stdout)
        """
        if no_color is None:
            no_color = not _should_use_color()
        if force_terminal is None:
            force_terminal = _is_interactive()

        self._no_color = no_color
        self._rich_console = RichConsole(
            force_terminal=force_terminal,
            no_color=no_color,
            theme=Theme(EVENTMANAGER_THEME),
            file=file or sys.stdout,
            highlight=False,
        )

    @property
    def no_color(self) -> bool:
        return self._no_color

    def print_info(self, message: str) -> None:
        self._rich_console.print(message, style="info", markup=False)

    def print_error(self, message: str) -> None:
        self._rich_console.print(Text("Error:", style="error"), Text(message), soft_wrap=True)

    def rule(self, title: str = "") -> None:
        """Print a horizontal rule."""
        self._rich_console.rule(title, style="muted")

    def show_banner(self) -> None:
        """Print the logo and welcome line."""
        self._rich_console.print(LOGO, style="banner", markup=False)
        self.print_info(WELCOME_MESSAGE)
        self.rule()

    def show_message(self, message: str) -> None:
        """Print command output verbatim."""
        self._rich_console.print(message, markup=False, soft_wrap=True)
        self.rule()

    def input(self, prompt: str = "> ") -> str:
        """
        Read one line from the user.

        Raises:
            EOFError: At end of input
        """
        return self._rich_console.input(prompt, markup=False)
