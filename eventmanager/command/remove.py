"""
Commands that remove events and participants.
"""

from dataclasses import dataclass
from typing import ClassVar

from ..event import EventList
from ..exceptions import EventNotFoundError, ParticipantNotFoundError
from .base import EVENT_NOT_FOUND_MESSAGE, Command


class RemoveCommand(Command):
    """Base for the ``remove`` command word."""

    COMMAND_WORD: ClassVar[str] = "remove"


@dataclass(frozen=True)
class RemoveEventCommand(RemoveCommand):
    """remove -e EVENT_NAME"""

    event_name: str

    def execute(self, events: EventList) -> str:
        try:
            events.remove_event(self.event_name)
        except EventNotFoundError:
            return EVENT_NOT_FOUND_MESSAGE
        return "Event removed successfully"


@dataclass(frozen=True)
class RemoveParticipantCommand(RemoveCommand):
    """remove -p PARTICIPANT_NAME -e EVENT_NAME"""

    participant_name: str
    event_name: str

    def execute(self, events: EventList) -> str:
        try:
            events.remove_participant(self.participant_name, self.event_name)
        except EventNotFoundError:
            return EVENT_NOT_FOUND_MESSAGE
        except ParticipantNotFoundError:
            return "Participant not found!"
        return "Participant removed successfully"
