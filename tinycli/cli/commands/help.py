from __future__ import annotations

from typing import Dict, List

from rich.markup import escape
from rich.table import Table

from .base import Command


class HelpCommand(Command):
    name = "help"
    aliases = ["h"]
    description = "See the list of available commands."

    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        registry = self.context["registry"]
        table = Table(title="Available Commands:", title_justify="left", show_header=False, box=None)
        for cmd in registry.list_commands():
            table.add_row(
                f"[bold cyan]{escape(cmd.name)}[/bold cyan]",
                f"[yellow]{escape(', '.join(cmd.aliases))}[/yellow]",
                escape(cmd.description),
            )
        self.console.print(table)
