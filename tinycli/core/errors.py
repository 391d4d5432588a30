from __future__ import annotations

from typing import Optional


class TinyCliError(Exception):
    """Base class for every error raised by tinycli itself."""


class UserInputError(TinyCliError):
    pass


class NoCommandError(UserInputError):
    def __init__(self) -> None:
        super().__init__("No command provided. Use 'help' to see the list of available commands.")


class CommandNotFoundError(UserInputError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Command not found: {token}")


class DiscoveryError(TinyCliError):
    pass


class InvalidCommandError(DiscoveryError):
    pass


class DuplicateCommandError(DiscoveryError):
    def __init__(self, token: str, existing: str, incoming: str) -> None:
        self.token = token
        self.existing = existing
        self.incoming = incoming
        super().__init__(f"'{token}' is already claimed by command '{existing}' (while registering '{incoming}')")


class ConfigError(TinyCliError):
    pass


class ConfigValueError(ConfigError):
    pass


class CommandExecutionError(TinyCliError):
    """Raised by ``Dispatcher.run`` when a command's own logic fails."""

    def __init__(self, command_name: str, original: Optional[BaseException] = None) -> None:
        self.command_name = command_name
        self.original = original
        detail = f": {original}" if original is not None else ""
        super().__init__(f"Command '{command_name}' failed{detail}")
