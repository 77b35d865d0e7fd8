"""
Command parser.

Turns one line of user input into a Command. The first space-delimited word
selects a handler; the handler cuts the rest of the line at its flags and
builds the matching command. Malformed input never raises: every failure
becomes an InvalidCommand carrying the usage message of the attempted command.

Grammar:
    add -e EVENT_NAME -t TIME -v VENUE
    add -p PARTICIPANT_NAME -e EVENT_NAME
    remove -e EVENT_NAME
    remove -p PARTICIPANT_NAME -e EVENT_NAME
    list
    view -e EVENT_NAME
    mark -e EVENT_NAME -s (done|undone)
    menu
    exit
"""

from collections.abc import Callable
from typing import Any

from ..command import (
    AddCommand,
    AddEventCommand,
    AddParticipantCommand,
    Command,
    ExitCommand,
    InvalidCommand,
    ListCommand,
    MarkCommand,
    MenuCommand,
    RemoveCommand,
    RemoveEventCommand,
    RemoveParticipantCommand,
    ViewCommand,
)
from ..log import LogConfig, Logger
from .flags import MissingFieldError, split_on_flags, take_fields
from .messages import (
    ADD_USAGE_MESSAGE,
    INVALID_COMMAND_MESSAGE,
    MARK_USAGE_MESSAGE,
    REMOVE_USAGE_MESSAGE,
    STATUS_USAGE_MESSAGE,
    VIEW_USAGE_MESSAGE,
)

Handler = Callable[[str, list[str]], Command]


def _flag(parts: list[str]) -> str | None:
    return parts[1] if len(parts) > 1 else None


class Parser:
    """
    Parser for event manager command lines.

    Stateless apart from its logger, so one instance may serve any number
    of callers.

    Example:
        parser = Parser(lg)
        parser.parse_command("add -e Party -t 5pm -v Hall")
        # AddEventCommand(event_name='Party', time='5pm', venue='Hall')
    """

    def __init__(self, lg: Logger | None = None):
        """
        Initialize the parser.

        Args:
            lg: Logger for parse diagnostics; logging is disabled when omitted
        """
        self._lg = lg if lg is not None else Logger("/parser", LogConfig(level=False))
        self._handlers: dict[str, Handler] = {
            AddCommand.COMMAND_WORD: self.parse_add_command,
            RemoveCommand.COMMAND_WORD: self.parse_remove_command,
            ListCommand.COMMAND_WORD: lambda line, parts: ListCommand(),
            ViewCommand.COMMAND_WORD: self.parse_view_command,
            MenuCommand.COMMAND_WORD: lambda line, parts: MenuCommand(),
            ExitCommand.COMMAND_WORD: lambda line, parts: ExitCommand(),
            MarkCommand.COMMAND_WORD: self.parse_mark_command,
        }

    @property
    def command_words(self) -> list[str]:
        return list(self._handlers)

    def parse_command(self, line: str) -> Command:
        """
        Parse a full input line.

        Args:
            line: Raw input line, command word first

        Returns:
            The parsed command, or InvalidCommand
        """
        parts = line.split(" ")
        handler = self._handlers.get(parts[0])
        if handler is None:
            return self._invalid(INVALID_COMMAND_MESSAGE, command=parts[0])

        command = handler(line, parts)
        self._lg.trace("parsed command", extra={"type": type(command).__name__})
        return command

    def parse_add_command(self, line: str, parts: list[str]) -> Command:
        """Parse ``add -e ... -t ... -v ...`` or ``add -p ... -e ...``."""
        flag = _flag(parts)
        try:
            if flag == "-e":
                name, time, venue = take_fields(split_on_flags(line, "-e", "-t", "-v"), 3)
                self._lg.debug(
                    "creating add event command",
                    extra={"event": name, "time": time, "venue": venue},
                )
                return AddEventCommand(name, time, venue)
            if flag == "-p":
                participant, event = take_fields(split_on_flags(line, "-p", "-e"), 2)
                self._lg.debug(
                    "creating add participant command",
                    extra={"participant": participant, "event": event},
                )
                return AddParticipantCommand(participant, event)
        except MissingFieldError as e:
            return self._invalid(ADD_USAGE_MESSAGE, command="add", field=e.index)
        return self._invalid(ADD_USAGE_MESSAGE, command="add", flag=flag)

    def parse_remove_command(self, line: str, parts: list[str]) -> Command:
        """Parse ``remove -e ...`` or ``remove -p ... -e ...``."""
        flag = _flag(parts)
        try:
            if flag == "-e":
                (name,) = take_fields(split_on_flags(line, "-e"), 1)
                return RemoveEventCommand(name)
            if flag == "-p":
                participant, event = take_fields(split_on_flags(line, "-p", "-e"), 2)
                return RemoveParticipantCommand(participant, event)
        except MissingFieldError as e:
            return self._invalid(REMOVE_USAGE_MESSAGE, command="remove", field=e.index)
        return self._invalid(REMOVE_USAGE_MESSAGE, command="remove", flag=flag)

    def parse_view_command(self, line: str, parts: list[str]) -> Command:
        """Parse ``view -e ...``."""
        flag = _flag(parts)
        if flag != "-e":
            return self._invalid(VIEW_USAGE_MESSAGE, command="view", flag=flag)
        try:
            (name,) = take_fields(split_on_flags(line, "-e"), 1)
        except MissingFieldError as e:
            return self._invalid(VIEW_USAGE_MESSAGE, command="view", field=e.index)
        return ViewCommand(name)

    def parse_mark_command(self, line: str, parts: list[str]) -> Command:
        """Parse ``mark -e ... -s ...``; the ``-e`` flag matches in any case."""
        flag = _flag(parts)
        if flag is None or flag.lower() != "-e":
            return self._invalid(MARK_USAGE_MESSAGE, command="mark", flag=flag)
        try:
            name, status = take_fields(split_on_flags(line, "-e", "-s"), 2)
        except MissingFieldError as e:
            return self._invalid(MARK_USAGE_MESSAGE, command="mark", field=e.index)
        return self.mark_command_for_status(name, status)

    def mark_command_for_status(self, event_name: str, status: str) -> Command:
        """Map a status keyword (done/undone, any case) to a MarkCommand."""
        keyword = status.lower()
        if keyword == "done":
            return MarkCommand(event_name, True)
        if keyword == "undone":
            return MarkCommand(event_name, False)
        return self._invalid(STATUS_USAGE_MESSAGE, command="mark", status=status)

    def _invalid(self, message: str, **fields: Any) -> InvalidCommand:
        self._lg.warning("invalid command format", extra=fields)
        return InvalidCommand(message)
