"""
Base command class.

Commands are immutable values produced by the parser. Executing one applies
its effect to an EventList and returns the text to show the user.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from ..event import EventList

EVENT_NOT_FOUND_MESSAGE = "Event not found!"


class Command(ABC):
    """Abstract base for every command."""

    COMMAND_WORD: ClassVar[str] = ""

    @property
    def is_exit(self) -> bool:
        """Whether the session ends after this command."""
        return False

    @abstractmethod
    def execute(self, events: EventList) -> str:
        """
        Apply the command to ``events``.

        Returns:
            Message for the user. Lookup failures are reported here
            rather than raised.
        """


@dataclass(frozen=True)
class InvalidCommand(Command):
    """Input that could not be parsed, carrying the message to show."""

    message: str

    def execute(self, events: EventList) -> str:
        return self.message
