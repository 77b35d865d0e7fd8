"""
Command that marks an event done or undone.
"""

from dataclasses import dataclass
from typing import ClassVar

from ..event import EventList
from ..exceptions import EventNotFoundError
from .base import EVENT_NOT_FOUND_MESSAGE, Command


@dataclass(frozen=True)
class MarkCommand(Command):
    """mark -e EVENT_NAME -s (done|undone)"""

    COMMAND_WORD: ClassVar[str] = "mark"

    event_name: str
    is_done: bool

    def execute(self, events: EventList) -> str:
        try:
            events.mark_event(self.event_name, self.is_done)
        except EventNotFoundError:
            return EVENT_NOT_FOUND_MESSAGE
        if self.is_done:
            return f"Event marked as done: {self.event_name}"
        return f"Event marked as not done: {self.event_name}"
