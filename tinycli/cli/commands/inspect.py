from __future__ import annotations

from typing import Dict, List

from rich.markup import escape

from .base import Command


class InspectCommand(Command):
    """Echo what the parser produced; handy when checking flag behaviour."""

    name = "inspect"
    aliases = ["test"]
    options = {"name", "verbose", "no-verbose"}
    description = "Print the positional arguments and options it receives."

    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        self.console.print(escape(f"args: {args}"), highlight=False)
        self.console.print(escape(f"options: {options}"), highlight=False)
