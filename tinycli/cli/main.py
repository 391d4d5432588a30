from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console

from tinycli.cli.commands.config import ConfigCommand
from tinycli.cli.commands.hello import HelloCommand
from tinycli.cli.commands.help import HelpCommand
from tinycli.cli.commands.inspect import InspectCommand
from tinycli.cli.commands.version import VersionCommand
from tinycli.cli.dispatcher import Dispatcher
from tinycli.cli.prompt import Prompter
from tinycli.cli.registry import CommandRegistry
from tinycli.core.config import AppSettings, ConfigStore, default_config_path
from tinycli.core.env import load_local_environment
from tinycli.core.logging import setup_logging

BUILTIN_COMMANDS = [
    HelpCommand,
    VersionCommand,
    HelloCommand,
    InspectCommand,
    ConfigCommand,
]


def build_consoles(settings: AppSettings) -> Tuple[Console, Console]:
    """Stdout and stderr consoles, both honouring the `color` setting."""
    return Console(no_color=not settings.color), Console(stderr=True, no_color=not settings.color)


def build_context(
    config: Optional[ConfigStore] = None,
    prompter: Optional[Prompter] = None,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> Dict[str, Any]:
    console = console or Console()
    err_console = err_console or Console(stderr=True)
    return {
        "console": console,
        "err_console": err_console,
        "config": config,
        "prompter": prompter or Prompter(console=console, err_console=err_console),
    }


def build_registry(context: Dict[str, Any], extra_commands: Optional[List[Any]] = None) -> CommandRegistry:
    registry = CommandRegistry(BUILTIN_COMMANDS + list(extra_commands or []), context=context)
    context["registry"] = registry
    return registry


def main(argv: Optional[List[str]] = None) -> None:  # pragma: no cover - entrypoint
    load_local_environment()
    setup_logging()

    store = ConfigStore(default_config_path(), AppSettings())
    settings = store.get_all()
    setup_logging(level=settings.log_level)

    console, err_console = build_consoles(settings)
    context = build_context(config=store, console=console, err_console=err_console)
    dispatcher = Dispatcher(build_registry(context), err_console=err_console)
    sys.exit(dispatcher.execute(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":  # pragma: no cover
    main()
