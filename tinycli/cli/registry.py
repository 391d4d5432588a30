from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from loguru import logger as log

from tinycli.cli.commands.base import Command
from tinycli.core.errors import DuplicateCommandError, InvalidCommandError

CommandFactory = Callable[[Dict[str, Any]], Command]


class CommandRegistry:
    """Ordered list of command factories, instantiated on every enumeration.

    Factories are usually ``Command`` subclasses. They must expose ``name``
    and ``aliases`` so collisions can be rejected when registering rather
    than silently shadowed at lookup time.
    """

    def __init__(
        self,
        factories: Optional[Iterable[CommandFactory]] = (),
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.context: Dict[str, Any] = context if context is not None else {}
        self._factories: Optional[List[CommandFactory]] = None
        self._claimed: Dict[str, str] = {}
        if factories is not None:
            self._factories = []
            for factory in factories:
                self.register(factory)

    def register(self, factory: CommandFactory) -> CommandFactory:
        name = getattr(factory, "name", None)
        if not isinstance(name, str) or not name:
            raise InvalidCommandError(f"{factory!r} does not declare a command name")
        tokens = [name, *getattr(factory, "aliases", [])]
        for token in tokens:
            owner = self._claimed.get(token)
            if owner is not None:
                raise DuplicateCommandError(token, owner, name)
        if len(set(tokens)) != len(tokens):
            raise InvalidCommandError(f"Command '{name}' repeats its own name or alias")
        if self._factories is None:
            self._factories = []
        self._factories.append(factory)
        for token in tokens:
            self._claimed[token] = name
        log.debug(f"Registered command '{name}' ({', '.join(tokens[1:]) or 'no aliases'})")
        return factory

    def __len__(self) -> int:
        return len(self._factories or [])

    def __iter__(self) -> Iterator[CommandFactory]:
        return iter(list(self._factories or []))

    def names(self) -> List[str]:
        return [factory.name for factory in self]  # type: ignore[attr-defined]

    def list_commands(self) -> List[Command]:
        if self._factories is None:
            log.warning("No command source configured; no commands available.")
            return []
        commands: List[Command] = []
        for factory in self._factories:
            try:
                cmd = factory(self.context)
            except Exception as e:
                log.warning(f"Skipping command '{getattr(factory, 'name', factory)}': construction failed: {e}")
                continue
            if not isinstance(cmd, Command):
                log.warning(f"Skipping {factory!r}: factory returned {type(cmd).__name__}, not a Command")
                continue
            commands.append(cmd)
        return commands

    def find_command(self, token: str) -> Optional[Command]:
        """First command whose name or one of its aliases equals ``token``.

        Comparison is case-sensitive; the dispatcher lower-cases first.
        """
        for cmd in self.list_commands():
            if cmd.matches(token):
                return cmd
        return None
