"""
openfn-tools — Line-based prompts for the project wizard.

Labels are rendered through a rich Console; answers are read one line at a
time from stdin, or from `stream` when one is given (tests feed a StringIO).
"""

from __future__ import annotations

from typing import Sequence, TextIO

from rich.console import Console
from rich.markup import escape

LABEL_STYLE = "bright_cyan"


class Prompter:
    """Ask questions, re-asking until the answer is acceptable."""

    def __init__(self, console: Console | None = None, stream: TextIO | None = None):
        self.console = console or Console(highlight=False)
        self.stream = stream

    def _read(self, prompt: str) -> str:
        if self.stream is None:
            return self.console.input(prompt).strip()
        line = self.console.input(prompt, stream=self.stream)
        if not line:
            raise EOFError("input closed")
        return line.strip()

    def say(self, text: str, style: str | None = None) -> None:
        self.console.print(escape(text), style=style)

    def verbatim(self, text: str) -> None:
        """Write text exactly as given: no markup, emoji codes or wrapping."""
        self.console.out(text, highlight=False, end="")

    def ask(
        self,
        label: str,
        default: str | None = None,
        choices: Sequence[str] | None = None,
        required: bool = True,
        message: str | None = None,
    ) -> str:
        prompt = f"[{LABEL_STYLE}]{escape(label)}[/]"
        if choices:
            prompt += f" ({' | '.join(choices)})"
        if default is not None:
            prompt += f" [dim]{escape(f'[{default}]')}[/]"
        prompt += ": "

        while True:
            value = self._read(prompt)
            if not value and default is not None:
                value = default
            if not value:
                if not required:
                    return ""
                self.say(message or f"{label} is required.", style="red")
                continue
            if choices and value not in choices:
                self.say(message or f"Please enter one of: {', '.join(choices)}", style="red")
                continue
            return value

    def confirm(self, label: str) -> bool:
        prompt = f"[{LABEL_STYLE}]{escape(label)}[/] "
        while True:
            value = self._read(prompt).lower()
            if value in ("y", "n"):
                return value == "y"
            self.say('please enter "y" or "n"', style="red")
