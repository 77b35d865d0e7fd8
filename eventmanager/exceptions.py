"""
Exception hierarchy for the event manager.

Malformed user input is never an exception: the parser turns it into an
InvalidCommand. The classes here cover failures inside the application itself
(configuration problems) and lookups against the event store, which commands
catch and convert into user-facing messages.
"""

from typing import Any


class EventManagerError(Exception):
    """
    Base exception for all event manager errors.

    Example:
        try:
            events.remove_event("Party")
        except EventManagerError as e:
            lg.warning("remove failed", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(EventManagerError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or too large
        - Invalid YAML syntax
        - Value rejected by schema validation
    """

    pass


class EventError(EventManagerError):
    """Base class for event store errors."""

    pass


class EventNotFoundError(EventError):
    """Raised when no event with the given name exists."""

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        super().__init__("Event not found", event=event_name)


class DuplicateEventError(EventError):
    """Raised when adding an event whose name is already taken."""

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        super().__init__("Event already exists", event=event_name)


class ParticipantNotFoundError(EventError):
    """Raised when a participant is not registered for an event."""

    def __init__(self, participant_name: str, event_name: str) -> None:
        self.participant_name = participant_name
        self.event_name = event_name
        super().__init__(
            "Participant not found", participant=participant_name, event=event_name
        )


class DuplicateParticipantError(EventError):
    """Raised when a participant is already registered for an event."""

    def __init__(self, participant_name: str, event_name: str) -> None:
        self.participant_name = participant_name
        self.event_name = event_name
        super().__init__(
            "Participant already registered",
            participant=participant_name,
            event=event_name,
        )
