from __future__ import annotations

from typing import Dict, List

from rich.markup import escape

from .base import Command


class HelloCommand(Command):
    name = "hello"
    aliases = ["greet"]
    options = {"greeting", "name"}
    description = "A basic greeting command."

    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        greeting, name = "Hello", "World"
        store = self.context.get("config")
        if store is not None:
            settings = store.get_all()
            greeting, name = settings.default_greeting, settings.default_name
        greeting = options.get("greeting", greeting)
        name = options.get("name", name)
        self.console.print(escape(f"{greeting}, {name}!"), highlight=False)
