"""Parsing of user input lines into commands."""

from .flags import MissingFieldError, split_on_flags, take_fields
from .messages import (
    ADD_USAGE_MESSAGE,
    INVALID_COMMAND_MESSAGE,
    MARK_USAGE_MESSAGE,
    REMOVE_USAGE_MESSAGE,
    STATUS_USAGE_MESSAGE,
    VIEW_USAGE_MESSAGE,
)
from .parser import Parser

__all__ = [
    "Parser",
    "split_on_flags",
    "take_fields",
    "MissingFieldError",
    "INVALID_COMMAND_MESSAGE",
    "ADD_USAGE_MESSAGE",
    "REMOVE_USAGE_MESSAGE",
    "VIEW_USAGE_MESSAGE",
    "MARK_USAGE_MESSAGE",
    "STATUS_USAGE_MESSAGE",
]
