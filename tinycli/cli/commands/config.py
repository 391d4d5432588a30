from __future__ import annotations

from typing import Dict, List

from rich.markup import escape
from rich.table import Table

from tinycli.core.errors import ConfigError, UserInputError

from .base import Command

USAGE = "Usage: config [list | get <key> | set <key> <value> | reset [--yes]]"


class ConfigCommand(Command):
    name = "config"
    aliases = ["cfg"]
    options = {"yes", "y"}
    description = "Show or change the persisted settings."

    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        store = self.context.get("config")
        if store is None:
            raise ConfigError("No configuration store available.")

        subcommand = args[0].lower() if args else "list"
        if subcommand in {"list", "show"}:
            self._show_config(store)
        elif subcommand == "get" and len(args) == 2:
            self._get(store, args[1])
        elif subcommand == "set" and len(args) == 3:
            self._set(store, args[1], args[2])
        elif subcommand == "reset":
            self._reset(store, options)
        else:
            raise UserInputError(USAGE)

    def _show_config(self, store) -> None:
        table = Table(title=f"[cyan]{escape(str(store.path))}[/cyan]", show_header=False, box=None)
        for key, value in store.get_all().model_dump().items():
            table.add_row(f"[yellow]{escape(key)}[/yellow]", escape(str(value)))
        self.console.print(table)

    def _get(self, store, key: str) -> None:
        try:
            value = store.get(key)
        except KeyError:
            raise UserInputError(f"Unknown setting: {key}") from None
        self.console.print(escape(str(value)), highlight=False)

    def _set(self, store, key: str, value: str) -> None:
        try:
            saved = store.set(key, value)
        except KeyError:
            raise UserInputError(f"Unknown setting: {key}") from None
        if not saved:
            raise ConfigError(f"Failed to write configuration file {store.path}")
        self.console.print(f"[green]✓ {escape(key)} = {escape(str(store.get(key)))}[/green]")

    def _reset(self, store, options: Dict[str, str]) -> None:
        confirmed = options.get("yes", options.get("y")) == "true"
        if not confirmed:
            prompter = self.context["prompter"]
            confirmed = prompter.confirm_with_default("Reset configuration to defaults?", default_yes=False)
        if not confirmed:
            self.console.print("[yellow]Configuration unchanged.[/yellow]")
            return
        if not store.reset():
            raise ConfigError(f"Failed to write configuration file {store.path}")
        self.console.print("[green]✓ Configuration reset to defaults[/green]")
