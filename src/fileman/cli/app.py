"""CLI application entry point for fileman.

This module is the **sole process-level error boundary** for the
application.  It catches :class:`~fileman.exceptions.FilemanError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; the session is delegated to the menu
  dispatcher, which drives the core service.
* This module wires the concrete reader, filesystem and service together.
* It is the only place that translates between the domain world and the
  OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from fileman.cli import exit_codes
from fileman.cli.console import console
from fileman.exceptions import FilemanError
from fileman.version import __version__

WELCOME = "Welcome to the File Manager!"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The file operations themselves are interactive only; the command
    line carries global switches:
    * ``fileman``            start the menu
    * ``fileman --verbose``  log every filesystem call to stderr
    * ``fileman --plain``    plain line input even on a terminal
    * ``fileman --version``
    """
    parser = argparse.ArgumentParser(
        prog="fileman",
        description="Interactive console file manager.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every filesystem operation to stderr.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Use plain line input instead of interactive prompts.",
    )
    return parser


# ---------------------------------------------------------------------------
# Session wiring
# ---------------------------------------------------------------------------

def _run_session(*, plain: bool) -> int:
    """Build the reader and service, then hand over to the menu loop."""
    from fileman.cli.menu import run_menu
    from fileman.cli.reader import build_reader
    from fileman.core.file_service import FileService
    from fileman.infra.local_fs import LocalFileSystem

    reader = build_reader(plain=plain)
    service = FileService(LocalFileSystem())

    console.print(WELCOME, markup=False, style="bold")
    return run_menu(reader, service)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the fileman CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from fileman.cli.logging_setup import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)
    return _run_session(plain=args.plain)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FilemanError as exc:
        console.print(f"Error: {exc}", markup=False, style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", markup=False, style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] Please report this issue.",
        )
        console.print(f"  {type(exc).__name__}: {exc}", markup=False)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
