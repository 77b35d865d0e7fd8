"""
Commands that add events and participants.
"""

from dataclasses import dataclass
from typing import ClassVar

from ..event import EventList
from ..exceptions import DuplicateEventError, DuplicateParticipantError, EventNotFoundError
from .base import EVENT_NOT_FOUND_MESSAGE, Command


class AddCommand(Command):
    """Base for the ``add`` command word."""

    COMMAND_WORD: ClassVar[str] = "add"


@dataclass(frozen=True)
class AddEventCommand(AddCommand):
    """add -e EVENT_NAME -t TIME -v VENUE"""

    event_name: str
    time: str
    venue: str

    def execute(self, events: EventList) -> str:
        try:
            events.add_event(self.event_name, self.time, self.venue)
        except DuplicateEventError:
            return f'Event "{self.event_name}" already exists!'
        return "Event added successfully"


@dataclass(frozen=True)
class AddParticipantCommand(AddCommand):
    """add -p PARTICIPANT_NAME -e EVENT_NAME"""

    participant_name: str
    event_name: str

    def execute(self, events: EventList) -> str:
        try:
            events.add_participant(self.participant_name, self.event_name)
        except EventNotFoundError:
            return EVENT_NOT_FOUND_MESSAGE
        except DuplicateParticipantError:
            return f'Participant "{self.participant_name}" is already in {self.event_name}!'
        return "Participant added successfully"
