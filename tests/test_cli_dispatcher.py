from __future__ import annotations

import io
from typing import Any, Dict, List

import pytest
from rich.console import Console

from tinycli.cli.commands.base import Command, command
from tinycli.cli.commands.version import VersionCommand
from tinycli.cli.dispatcher import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USAGE,
    Dispatcher,
)
from tinycli.cli.registry import CommandRegistry
from tinycli.core.errors import CommandExecutionError, CommandNotFoundError, NoCommandError, UserInputError


class GreetCommand(Command):
    name = "greet"
    options = {"greeting", "name"}

    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        self.context["calls"].append(("greet", args, options))


class BuildCommand(Command):
    name = "build"
    options = {"no-verbose"}

    def execute(self, args: List[str], options: Dict[str, str]) -> None:
        self.context["calls"].append(("build", args, options))


@command("explode")
def explode(args, options, context) -> None:
    raise ValueError("boom")


@command("strict")
def strict(args, options, context) -> None:
    raise UserInputError("Usage: strict <target>")


@command("abort")
def abort(args, options, context) -> None:
    raise EOFError()


def make_dispatcher() -> tuple[Dispatcher, Dict[str, Any], io.StringIO]:
    context: Dict[str, Any] = {"calls": [], "console": Console(file=io.StringIO())}
    registry = CommandRegistry([GreetCommand, BuildCommand, VersionCommand, explode, strict, abort], context=context)
    errors = io.StringIO()
    dispatcher = Dispatcher(registry, err_console=Console(file=errors, width=200))
    return dispatcher, context, errors


def test_greet_with_options() -> None:
    dispatcher, context, _ = make_dispatcher()
    code = dispatcher.execute(["greet", "--greeting", "Hi", "--name", "Ana"])
    assert code == EXIT_OK
    assert context["calls"] == [("greet", [], {"greeting": "Hi", "name": "Ana"})]


def test_greet_without_options() -> None:
    dispatcher, context, _ = make_dispatcher()
    assert dispatcher.execute(["greet"]) == EXIT_OK
    assert context["calls"] == [("greet", [], {})]


def test_no_command_provided() -> None:
    dispatcher, context, errors = make_dispatcher()
    assert dispatcher.execute([]) == EXIT_USAGE
    assert "No command provided" in errors.getvalue()
    assert context["calls"] == []


def test_command_not_found() -> None:
    dispatcher, context, errors = make_dispatcher()
    assert dispatcher.execute(["unknown-cmd"]) == EXIT_USAGE
    assert "Command not found: unknown-cmd" in errors.getvalue()
    assert context["calls"] == []


def test_negated_flag_end_to_end() -> None:
    dispatcher, context, _ = make_dispatcher()
    dispatcher.execute(["build", "src/main", "--no-verbose"])
    assert context["calls"] == [("build", ["src/main"], {"no-verbose": "false"})]


def test_version_aliases_resolve_to_same_command() -> None:
    dispatcher, _, _ = make_dispatcher()
    resolved = [dispatcher.resolve([token])[0] for token in ("version", "--version", "-v")]
    assert all(isinstance(cmd, VersionCommand) for cmd in resolved)


def test_command_token_is_lower_cased() -> None:
    dispatcher, context, _ = make_dispatcher()
    assert dispatcher.execute(["GREET", "--name", "Bo"]) == EXIT_OK
    assert context["calls"] == [("greet", [], {"name": "Bo"})]


def test_only_the_command_token_is_lower_cased() -> None:
    dispatcher, context, _ = make_dispatcher()
    dispatcher.execute(["Build", "SRC"])
    assert context["calls"] == [("build", ["SRC"], {})]


def test_command_failure_reported_with_name() -> None:
    dispatcher, _, errors = make_dispatcher()
    assert dispatcher.execute(["explode"]) == EXIT_FAILURE
    assert "Command 'explode' failed: boom" in errors.getvalue()


def test_interrupted_command() -> None:
    dispatcher, _, errors = make_dispatcher()
    assert dispatcher.execute(["abort"]) == EXIT_INTERRUPTED
    assert "Cancelled." in errors.getvalue()


def test_run_raises_distinct_errors() -> None:
    dispatcher, _, _ = make_dispatcher()
    with pytest.raises(NoCommandError):
        dispatcher.run([])
    with pytest.raises(CommandNotFoundError) as not_found:
        dispatcher.run(["nope"])
    assert not_found.value.token == "nope"
    with pytest.raises(CommandExecutionError) as failed:
        dispatcher.run(["explode"])
    assert failed.value.command_name == "explode"
    assert isinstance(failed.value.__cause__, ValueError)


def test_resolve_does_not_execute() -> None:
    dispatcher, context, _ = make_dispatcher()
    cmd, parsed = dispatcher.resolve(["greet", "x", "--name", "Ana", "--loud"])
    assert cmd.name == "greet"
    assert parsed.args == ["x"]
    assert parsed.options == {"name": "Ana"}
    assert context["calls"] == []


def test_usage_error_from_command_is_not_wrapped() -> None:
    dispatcher, _, errors = make_dispatcher()
    with pytest.raises(UserInputError) as excinfo:
        dispatcher.run(["strict"])
    assert not isinstance(excinfo.value, CommandExecutionError)
    assert dispatcher.execute(["strict"]) == EXIT_USAGE
    assert "Usage: strict <target>" in errors.getvalue()
    assert "failed" not in errors.getvalue()
