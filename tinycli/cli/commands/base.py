from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AbstractSet, Any, Callable, Dict, Iterable, List, Sequence

from rich.console import Console

Handler = Callable[[List[str], Dict[str, str], Dict[str, Any]], None]


class Command(ABC):
    name: str = ""
    aliases: Sequence[str] = ()
    # Declared option names, without leading dashes
    options: AbstractSet[str] = frozenset()
    description: str = ""

    def __init__(self, context: Dict[str, Any]):
        self.context = context

    @property
    def console(self) -> Console:
        return self.context.get("console") or Console()

    @abstractmethod
    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        ...

    def matches(self, token: str) -> bool:
        return token == self.name or token in self.aliases

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class FunctionCommand(Command):
    """A command whose behaviour is a plain function instead of a subclass body."""

    handler: Handler

    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        self.handler(args, options, self.context)


def command(
    name: str,
    *,
    aliases: Iterable[str] = (),
    options: Iterable[str] = (),
    description: str = "",
) -> Callable[[Handler], type]:
    """Turn ``func(args, options, context)`` into a registrable command class.

    Example::

        @registry.register
        @command("greet", options=["name"], description="Say hi")
        def greet(args, options, context):
            print(f"Hi {options.get('name', 'there')}")
    """

    def decorator(func: Handler) -> type:
        return type(
            func.__name__,
            (FunctionCommand,),
            {
                "name": name,
                "aliases": tuple(aliases),
                "options": frozenset(options),
                "description": description or (func.__doc__ or "").strip(),
                "handler": staticmethod(func),
                "__module__": func.__module__,
                "__doc__": func.__doc__,
            },
        )

    return decorator
