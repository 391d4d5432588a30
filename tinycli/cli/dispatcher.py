from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from loguru import logger as log
from rich.console import Console
from rich.markup import escape

from tinycli.cli.args import ParsedInvocation, parse_args
from tinycli.cli.commands.base import Command
from tinycli.cli.registry import CommandRegistry
from tinycli.core.errors import (
    CommandExecutionError,
    CommandNotFoundError,
    NoCommandError,
    UserInputError,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


class Dispatcher:
    def __init__(self, registry: CommandRegistry, err_console: Optional[Console] = None) -> None:
        self.registry = registry
        self.err_console = err_console or Console(stderr=True)

    def resolve(self, argv: Sequence[str]) -> Tuple[Command, ParsedInvocation]:
        argv = list(argv)
        if not argv:
            raise NoCommandError()
        token = argv[0].lower()
        cmd = self.registry.find_command(token)
        if cmd is None:
            raise CommandNotFoundError(token)
        return cmd, parse_args(argv[1:], cmd.options)

    def run(self, argv: Sequence[str]) -> None:
        """Dispatch ``argv`` and let every failure propagate as an exception."""
        cmd, parsed = self.resolve(argv)
        log.debug(f"Executing '{cmd.name}' args={parsed.args} options={parsed.options}")
        try:
            cmd.execute(parsed.args, parsed.options)
        except (UserInputError, KeyboardInterrupt, EOFError):
            raise
        except Exception as e:
            raise CommandExecutionError(cmd.name, e) from e

    def execute(self, argv: List[str]) -> int:
        """Dispatch ``argv`` (program name excluded) and return an exit code."""
        try:
            self.run(argv)
        except UserInputError as e:
            self._error(str(e))
            return EXIT_USAGE
        except CommandExecutionError as e:
            log.opt(exception=e.original).debug(f"Command '{e.command_name}' raised")
            self._error(str(e))
            return EXIT_FAILURE
        except (KeyboardInterrupt, EOFError):
            self._error("Cancelled.")
            return EXIT_INTERRUPTED
        return EXIT_OK

    def _error(self, message: str) -> None:
        self.err_console.print(f"[red]{escape(message)}[/red]")
