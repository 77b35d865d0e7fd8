"""
Read-only commands: list all events, view one event's participants.
"""

from dataclasses import dataclass
from typing import ClassVar

from ..event import EventList
from ..exceptions import EventNotFoundError
from .base import EVENT_NOT_FOUND_MESSAGE, Command


@dataclass(frozen=True)
class ListCommand(Command):
    """list"""

    COMMAND_WORD: ClassVar[str] = "list"

    def execute(self, events: EventList) -> str:
        lines = [
            f"There are {len(events)} events in your list! "
            "Here are your scheduled events:"
        ]
        lines.extend(f"{i}. {event}" for i, event in enumerate(events, start=1))
        return "\n".join(lines)


@dataclass(frozen=True)
class ViewCommand(Command):
    """view -e EVENT_NAME"""

    COMMAND_WORD: ClassVar[str] = "view"

    event_name: str

    def execute(self, events: EventList) -> str:
        try:
            event = events.get_event(self.event_name)
        except EventNotFoundError:
            return EVENT_NOT_FOUND_MESSAGE

        lines = [
            f"There are {len(event.participants)} participants in {event.name}! "
            "Here are your participants:"
        ]
        lines.extend(f"{i}. {name}" for i, name in enumerate(event.participants, start=1))
        return "\n".join(lines)
