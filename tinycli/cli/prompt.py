from __future__ import annotations

from typing import Any, List, Optional, Sequence, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, InvalidResponse, Prompt
from rich.text import Text, TextType

YES = {"y", "yes"}
NO = {"n", "no"}


class _LinePrompt:
    """Shared behaviour of the prompts below.

    Answers are trimmed, an exhausted input stream raises ``EOFError``
    instead of looping, and complaints go to the error console.
    """

    prompt_suffix = " "

    def __init__(self, prompt: TextType = "", *, err_console: Optional[Console] = None, **kwargs: Any) -> None:
        super().__init__(prompt, **kwargs)  # type: ignore[call-arg]
        self.err_console = err_console or self.console  # type: ignore[attr-defined]

    @classmethod
    def get_input(cls, console: Console, prompt: TextType, password: bool, stream: Optional[TextIO] = None) -> str:
        line = console.input(prompt, password=password, stream=stream)
        if stream is not None and line == "":
            raise EOFError("no more input")
        return line.strip()

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        self.err_console.print(error, style="red", highlight=False)


class YesNoPrompt(_LinePrompt, Confirm):
    validate_error_message = "Invalid input. Please answer 'y' or 'n'."

    def process_response(self, value: str) -> bool:
        answer = value.strip().lower()
        if answer in YES:
            return True
        if answer in NO:
            return False
        raise InvalidResponse(self.validate_error_message)


class MenuPrompt(_LinePrompt, IntPrompt):
    validate_error_message = "Invalid input. Please enter a valid number corresponding to the options listed."
    illegal_choice_message = validate_error_message

    def __init__(self, options: Sequence[str], **kwargs: Any) -> None:
        super().__init__(
            Text("Enter the number of your choice:"),
            choices=[str(index) for index in range(1, len(options) + 1)],
            show_choices=False,
            **kwargs,
        )
        self.options: List[str] = list(options)

    def pre_prompt(self) -> None:
        self.console.print("Please choose one of the following options:", highlight=False)
        for index, option in enumerate(self.options, start=1):
            self.console.print(escape(f"{index}: {option}"), highlight=False)


class TextPrompt(_LinePrompt, Prompt):
    pass


class Prompter:
    """Blocking line-based questions for interactive commands.

    Reads from ``stream`` (stdin by default) so tests can feed answers from a
    ``StringIO``. Running out of input raises ``EOFError`` instead of looping.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ) -> None:
        self._stream = stream
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def _consoles(self) -> dict:
        return {"console": self.console, "err_console": self.err_console}

    def confirm(self, question: str) -> bool:
        prompt = YesNoPrompt(Text(f"{question} (y/n)"), show_choices=False, **self._consoles())
        return prompt(stream=self._stream)

    def confirm_with_default(self, question: str, default_yes: bool = True) -> bool:
        suffix = "[Y/n]" if default_yes else "[y/N]"
        prompt = YesNoPrompt(Text(f"{question} {suffix}"), show_choices=False, show_default=False, **self._consoles())
        return prompt(default=default_yes, stream=self._stream)

    def select_option(self, choices: Sequence[str]) -> str:
        if not choices:
            raise ValueError("select_option() needs at least one choice")
        selected = MenuPrompt(choices, **self._consoles())(stream=self._stream)
        return choices[selected - 1]

    def input(self, question: str) -> str:
        return TextPrompt(Text(question), **self._consoles())(stream=self._stream)
