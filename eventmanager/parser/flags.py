"""
Flag-delimited field splitting.

A command line such as ``add -e Party -t 5pm -v Hall`` is cut at every
occurrence of its flags, giving ``["add ", " Party ", " 5pm ", " Hall"]``.
Field 0 is the command word; the remaining fields are positional and order
sensitive. Flag text inside an argument value also splits, so such values
are not supported.
"""

import re
from functools import lru_cache


class MissingFieldError(ValueError):
    """Raised when a split line has fewer non-blank fields than required."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Missing field {index}")


@lru_cache(maxsize=None)
def _flag_pattern(flags: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(flag) for flag in flags))


def split_on_flags(line: str, *flags: str) -> list[str]:
    """
    Split ``line`` at every occurrence of any of ``flags``.

    Trailing empty fields are dropped, so a flag at the very end of the line
    does not produce a field.

    Example:
        >>> split_on_flags("remove -p Alice -e Party", "-p", "-e")
        ['remove ', ' Alice ', ' Party']
    """
    fields = _flag_pattern(flags).split(line)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def take_fields(fields: list[str], count: int) -> list[str]:
    """
    Return fields 1..count stripped of surrounding whitespace.

    Raises:
        MissingFieldError: If a field is absent or blank
    """
    values = []
    for index in range(1, count + 1):
        if index >= len(fields) or not fields[index].strip():
            raise MissingFieldError(index)
        values.append(fields[index].strip())
    return values
