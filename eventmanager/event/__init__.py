"""Event records and the in-memory event store."""

from .event import Event
from .event_list import EventList

__all__ = ["Event", "EventList"]
