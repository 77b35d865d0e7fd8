"""
In-memory event store.
"""

from collections.abc import Iterator

from ..exceptions import DuplicateEventError, EventNotFoundError
from .event import Event


class EventList:
    """
    Ordered collection of events keyed by exact event name.

    Lookups that miss raise EventNotFoundError; callers that face the user
    (commands) turn these into messages.

    Example:
        events = EventList()
        events.add_event("Party", "5pm", "Hall")
        events.add_participant("Alice", "Party")
        events.get_event("Party").participants   # ["Alice"]
    """

    def __init__(self) -> None:
        self._events: dict[str, Event] = {}

    def add_event(self, name: str, time: str, venue: str) -> Event:
        """
        Add a new event.

        Raises:
            DuplicateEventError: If an event with the same name exists
        """
        if name in self._events:
            raise DuplicateEventError(name)
        event = Event(name, time, venue)
        self._events[name] = event
        return event

    def get_event(self, name: str) -> Event:
        """
        Return the event with the given name.

        Raises:
            EventNotFoundError: If no such event exists
        """
        try:
            return self._events[name]
        except KeyError:
            raise EventNotFoundError(name) from None

    def remove_event(self, name: str) -> Event:
        """
        Remove and return the event with the given name.

        Raises:
            EventNotFoundError: If no such event exists
        """
        event = self.get_event(name)
        del self._events[name]
        return event

    def add_participant(self, participant_name: str, event_name: str) -> None:
        self.get_event(event_name).add_participant(participant_name)

    def remove_participant(self, participant_name: str, event_name: str) -> None:
        self.get_event(event_name).remove_participant(participant_name)

    def mark_event(self, name: str, is_done: bool) -> Event:
        event = self.get_event(name)
        event.mark_done(is_done)
        return event

    def __contains__(self, name: object) -> bool:
        return name in self._events

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events.values())

    def __len__(self) -> int:
        return len(self._events)
