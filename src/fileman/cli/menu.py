"""Command dispatcher: the interactive menu loop.

Each iteration prints the fixed menu, reads a validated choice, runs
the mapped handler and renders the :class:`OperationResult` it returns.
Operation failures are reported and the loop continues; only the Exit
option (or a closed input stream) ends the session.
"""

from __future__ import annotations

from dataclasses import dataclass

from fileman.cli import exit_codes, handlers
from fileman.cli.console import console
from fileman.cli.handlers import Handler
from fileman.core.file_service import FileService
from fileman.core.models import OperationResult, Outcome
from fileman.core.protocols import LineReader
from fileman.exceptions import FilemanError, InputClosedError


# ---------------------------------------------------------------------------
# Menu definition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MenuOption:
    """One numbered line of the main menu."""

    number: int
    label: str


MENU_TITLE = "--- File Manager Menu ---"
CHOICE_PROMPT = "Enter your choice: "
FAREWELL = "Thank you for using File Manager. Goodbye!"

MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption(1, "List Directory"),
    MenuOption(2, "Copy File"),
    MenuOption(3, "Move File"),
    MenuOption(4, "Delete File"),
    MenuOption(5, "Search Files"),
    MenuOption(6, "Create Directory"),
    MenuOption(7, "Delete Directory"),
    MenuOption(8, "Exit"),
)

MIN_CHOICE = MENU_OPTIONS[0].number
EXIT_CHOICE = MENU_OPTIONS[-1].number

HANDLERS: dict[int, Handler] = {
    1: handlers.list_directory,
    2: handlers.copy_file,
    3: handlers.move_file,
    4: handlers.delete_file,
    5: handlers.search_files,
    6: handlers.create_directory,
    7: handlers.delete_directory,
}


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

def display_menu() -> None:
    console.print()
    console.print(MENU_TITLE, markup=False, style="bold cyan")
    for option in MENU_OPTIONS:
        console.print(f"{option.number}. {option.label}", markup=False)


def render_result(result: OperationResult) -> None:
    """Print the final line(s) of an operation according to its outcome."""
    if result.outcome is Outcome.SUCCESS:
        console.print(result.message, markup=False, style="green")
    elif result.outcome is Outcome.REJECTED:
        console.print(result.message, markup=False, style="yellow")
    else:
        console.print(f"An error occurred: {result.message}", markup=False, style="bold red")
        if result.hint:
            console.print(f"Hint: {result.hint}", markup=False, style="yellow")
        console.print("Please try again or choose a different operation.")


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------

def read_menu_choice(reader: LineReader) -> int:
    """Read lines until one parses as an integer within the menu range.

    Malformed input is discarded and never reaches the dispatcher.
    """
    while True:
        raw = reader.read_line(CHOICE_PROMPT)
        try:
            choice = int(raw.strip())
        except ValueError:
            console.print(
                f"Invalid input. Please enter a number between {MIN_CHOICE} and {EXIT_CHOICE}.",
                style="yellow",
            )
            continue
        if MIN_CHOICE <= choice <= EXIT_CHOICE:
            return choice
        console.print("Invalid option. Please try again.", style="yellow")


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def dispatch(choice: int, reader: LineReader, service: FileService) -> OperationResult:
    """Run the handler mapped to *choice* and return its result.

    A :class:`FilemanError` escaping the handler becomes a failed result
    so the loop survives it; a closed input stream still ends the session.
    """
    handler = HANDLERS[choice]
    try:
        return handler(reader, service)
    except InputClosedError:
        raise
    except FilemanError as exc:
        return OperationResult.failed(str(exc), hint=exc.hint)


def run_menu(reader: LineReader, service: FileService) -> int:
    """Run the menu loop until the Exit option is chosen.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`.

    Raises
    ------
    InputClosedError
        When *reader* runs out of input before Exit is chosen.
    """
    while True:
        display_menu()
        choice = read_menu_choice(reader)
        if choice == EXIT_CHOICE:
            console.print(FAREWELL, markup=False)
            return exit_codes.SUCCESS
        render_result(dispatch(choice, reader, service))
