from importlib.metadata import PackageNotFoundError, version

from .command import (
    AddEventCommand,
    AddParticipantCommand,
    Command,
    ExitCommand,
    InvalidCommand,
    ListCommand,
    MarkCommand,
    MenuCommand,
    RemoveEventCommand,
    RemoveParticipantCommand,
    ViewCommand,
)
from .config import Config
from .dot_dict import DotDict
from .event import Event, EventList
from .exceptions import (
    ConfigError,
    DuplicateEventError,
    DuplicateParticipantError,
    EventError,
    EventManagerError,
    EventNotFoundError,
    ParticipantNotFoundError,
)
from .parser import Parser

# Version is read from package metadata (setup.py)
try:
    __version__ = version("eventmanager-cli")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    # Parsing
    "Parser",
    # Commands
    "Command",
    "AddEventCommand",
    "AddParticipantCommand",
    "RemoveEventCommand",
    "RemoveParticipantCommand",
    "ListCommand",
    "ViewCommand",
    "MarkCommand",
    "MenuCommand",
    "ExitCommand",
    "InvalidCommand",
    # Event store
    "Event",
    "EventList",
    # Configuration
    "Config",
    "DotDict",
    # Exceptions
    "EventManagerError",
    "ConfigError",
    "EventError",
    "EventNotFoundError",
    "DuplicateEventError",
    "ParticipantNotFoundError",
    "DuplicateParticipantError",
]
