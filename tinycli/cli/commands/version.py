from __future__ import annotations

from typing import Dict, List

from tinycli.core.version import get_version

from .base import Command


class VersionCommand(Command):
    name = "version"
    aliases = ["--version", "-v"]
    description = "Print the installed tinycli version."

    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        self.console.print(get_version() or "unknown", highlight=False)
