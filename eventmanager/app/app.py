"""
Interactive read-parse-execute loop.
"""

import time
from collections.abc import Callable

from ..command import Command
from ..config import Config
from ..event import EventList
from ..log import Logger, derive_lg
from ..parser import Parser
from ..ui import Console

# Exit code after Ctrl-C, as for SIGINT
INTERRUPTED_RETURN_CODE = 130


class EventManagerApp:
    """
    One interactive session over an in-memory event list.

    Each input line is stripped, parsed into a command, executed against the
    event list, and its message printed. The session ends after an exit
    command, at end of input, or on Ctrl-C.

    Example:
        app = EventManagerApp(config, lg, Console())
        return_code = app.run()
    """

    def __init__(
        self,
        config: Config,
        lg: Logger,
        console: Console,
        events: EventList | None = None,
        parser: Parser | None = None,
    ):
        """
        Initialize the session.

        Args:
            config: Application configuration
            lg: Session logger
            console: Output console
            events: Event store (a new empty one if omitted)
            parser: Command parser (one logging under this logger if omitted)
        """
        self.config = config
        self.console = console
        self.events = events if events is not None else EventList()
        self.parser = parser if parser is not None else Parser(derive_lg(lg, "parser"))
        self._lg = lg

    @property
    def lg(self) -> Logger:
        return self._lg

    def run(self, read_line: Callable[[], str] | None = None) -> int:
        """
        Run the session until exit.

        Args:
            read_line: Source of input lines; reads from the console when omitted.
                Raising EOFError ends the session.

        Returns:
            int: Exit code (0 normally, 130 when interrupted)
        """
        reader = read_line if read_line is not None else self._console_reader()
        if self.config.get("ui.banner", True):
            self.console.show_banner()

        start = time.monotonic()
        count = 0
        return_code = 0
        self._lg.info("session started")

        while True:
            try:
                line = reader()
            except EOFError:
                self._lg.debug("end of input")
                break
            except KeyboardInterrupt:
                self._lg.info("... interrupted by user")
                return_code = INTERRUPTED_RETURN_CODE
                break

            command = self.execute_line(line)
            count += 1
            if command.is_exit:
                break

        self._lg.info(
            "session ended",
            extra={
                "commands": count,
                "events": len(self.events),
                "after": f"{time.monotonic() - start:.1f}s",
            },
        )
        return return_code

    def _console_reader(self) -> Callable[[], str]:
        prompt = self.config.get("ui.prompt", "> ")
        return lambda: self.console.input(prompt)

    def execute_line(self, line: str) -> Command:
        """Parse and execute one input line, printing its message."""
        command = self.parser.parse_command(line.strip())
        try:
            message = command.execute(self.events)
        except Exception as e:
            self._lg.error(
                "command failed",
                extra={"command": type(command).__name__, "exception": e},
            )
            raise
        self._lg.debug("executed command", extra={"command": type(command).__name__})
        self.console.show_message(message)
        return command
