"""
Command values produced by the parser and executed by the application.
"""

from .add import AddCommand, AddEventCommand, AddParticipantCommand
from .base import EVENT_NOT_FOUND_MESSAGE, Command, InvalidCommand
from .control import EXIT_MESSAGE, MENU_MESSAGE, ExitCommand, MenuCommand
from .mark import MarkCommand
from .remove import RemoveCommand, RemoveEventCommand, RemoveParticipantCommand
from .view import ListCommand, ViewCommand

__all__ = [
    "Command",
    "InvalidCommand",
    "AddCommand",
    "AddEventCommand",
    "AddParticipantCommand",
    "RemoveCommand",
    "RemoveEventCommand",
    "RemoveParticipantCommand",
    "ListCommand",
    "ViewCommand",
    "MarkCommand",
    "MenuCommand",
    "ExitCommand",
    "EVENT_NOT_FOUND_MESSAGE",
    "MENU_MESSAGE",
    "EXIT_MESSAGE",
]
