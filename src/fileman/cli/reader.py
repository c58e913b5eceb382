"""Line readers for interactive input.

Two implementations of :class:`~fileman.core.protocols.LineReader`:

* :class:`ConsoleLineReader`: plain line input through Rich (or the
  builtin ``input`` when Rich is missing).  Works with piped stdin.
* :class:`QuestionaryLineReader`: questionary prompts for a real
  terminal, with filesystem tab-completion on path prompts.

A reader is built once per session by :func:`build_reader` and passed
explicitly to the dispatcher and every handler.
"""

from __future__ import annotations

import sys
from typing import Any

from fileman.cli.console import get_rich_console
from fileman.exceptions import EnvironmentError, InputClosedError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Plain console reader
# ---------------------------------------------------------------------------

class ConsoleLineReader:
    """Read raw lines from stdin, printing the prompt without a newline."""

    def read_line(self, prompt: str) -> str:
        try:
            try:
                rich_console = get_rich_console()
            except EnvironmentError:
                return input(prompt)
            return rich_console.input(prompt, markup=False, emoji=False)
        except EOFError as exc:
            raise InputClosedError(
                "Input stream closed.",
                hint="Choose option 8 to leave the file manager.",
            ) from exc

    def read_path(self, prompt: str) -> str:
        return self.read_line(prompt)


# ---------------------------------------------------------------------------
# Questionary reader
# ---------------------------------------------------------------------------

class QuestionaryLineReader:
    """Interactive terminal prompts backed by questionary.

    Raises
    ------
    KeyboardInterrupt
        When the user cancels a prompt (questionary returns ``None``).
    InputClosedError
        When the terminal signals end-of-file.
    """

    def __init__(self) -> None:
        self._questionary: Any = _import_questionary()

    def _ask(self, question: Any) -> str:
        try:
            answer: str | None = question.ask()
        except EOFError as exc:
            raise InputClosedError("Input stream closed.") from exc
        if answer is None:
            raise KeyboardInterrupt
        return answer

    def read_line(self, prompt: str) -> str:
        return self._ask(self._questionary.text(prompt.rstrip(), qmark=""))

    def read_path(self, prompt: str) -> str:
        return self._ask(self._questionary.path(prompt.rstrip(), qmark=""))


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def build_reader(*, plain: bool = False) -> ConsoleLineReader | QuestionaryLineReader:
    """Pick the best reader for the current stdin.

    questionary is used only on a real terminal, when it is installed
    and ``plain`` was not requested.
    """
    if plain or not sys.stdin.isatty():
        return ConsoleLineReader()
    try:
        return QuestionaryLineReader()
    except EnvironmentError:
        return ConsoleLineReader()
