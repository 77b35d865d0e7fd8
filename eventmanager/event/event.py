"""
Event record.
"""

from dataclasses import dataclass, field

from ..exceptions import DuplicateParticipantError, ParticipantNotFoundError


@dataclass
class Event:
    """An event with its schedule details and participant names."""

    name: str
    time: str
    venue: str
    participants: list[str] = field(default_factory=list)
    is_done: bool = False

    def has_participant(self, participant_name: str) -> bool:
        return participant_name in self.participants

    def add_participant(self, participant_name: str) -> None:
        """
        Register a participant.

        Raises:
            DuplicateParticipantError: If the participant is already registered
        """
        if self.has_participant(participant_name):
            raise DuplicateParticipantError(participant_name, self.name)
        self.participants.append(participant_name)

    def remove_participant(self, participant_name: str) -> None:
        """
        Unregister a participant.

        Raises:
            ParticipantNotFoundError: If the participant is not registered
        """
        if not self.has_participant(participant_name):
            raise ParticipantNotFoundError(participant_name, self.name)
        self.participants.remove(participant_name)

    def mark_done(self, is_done: bool) -> None:
        self.is_done = is_done

    def __str__(self) -> str:
        done = "Y" if self.is_done else "N"
        return (
            f"Event name: {self.name} / Event time: {self.time} / "
            f"Event venue: {self.venue} / Done: {done}"
        )
