"""
Session control commands: menu and exit.
"""

from dataclasses import dataclass
from typing import ClassVar

from ..event import EventList
from .base import Command

MENU_MESSAGE = """Here are the possible commands:

add -e EVENT_NAME -t TIME -v VENUE: Add an event to the event list.
add -p PARTICIPANT_NAME -e EVENT_NAME: Add a participant to an event.
remove -e EVENT_NAME: Remove an event from the event list.
remove -p PARTICIPANT_NAME -e EVENT_NAME: Remove a participant from an event.
list: List events.
view -e EVENT_NAME: View the participants of an event.
mark -e EVENT_NAME -s (done|undone): Mark an event as done or not done.
menu: Display this list of commands.
exit: Exit program"""

EXIT_MESSAGE = "Thank you for using EventManagerCLI. Goodbye!"


@dataclass(frozen=True)
class MenuCommand(Command):
    """menu"""

    COMMAND_WORD: ClassVar[str] = "menu"

    def execute(self, events: EventList) -> str:
        return MENU_MESSAGE


@dataclass(frozen=True)
class ExitCommand(Command):
    """exit"""

    COMMAND_WORD: ClassVar[str] = "exit"

    @property
    def is_exit(self) -> bool:
        return True

    def execute(self, events: EventList) -> str:
        return EXIT_MESSAGE
