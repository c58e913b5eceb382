"""Menu operation handlers.

Each handler reads the inputs it needs from the injected reader, runs
exactly one :class:`~fileman.core.file_service.FileService` operation
and returns its :class:`~fileman.core.models.OperationResult`.  Status
lines and entries are streamed to the console while the operation runs;
the final message is rendered by the dispatcher.

Handlers never call each other and never catch exceptions.
"""

from __future__ import annotations

from collections.abc import Callable

from fileman.cli.console import console
from fileman.core.file_service import FileService
from fileman.core.models import OperationResult
from fileman.core.protocols import LineReader

Handler = Callable[[LineReader, FileService], OperationResult]

SOURCE_PROMPT = "Enter source file path: "
DESTINATION_PROMPT = "Enter destination file path (including filename): "


def _emit(line: str) -> None:
    console.print(line, markup=False)


def list_directory(reader: LineReader, service: FileService) -> OperationResult:
    path = reader.read_path("Enter directory path to list: ")
    return service.list_directory(path, emit=_emit)


def copy_file(reader: LineReader, service: FileService) -> OperationResult:
    source = reader.read_path(SOURCE_PROMPT)
    destination = reader.read_path(DESTINATION_PROMPT)
    return service.copy_file(source, destination, emit=_emit)


def move_file(reader: LineReader, service: FileService) -> OperationResult:
    source = reader.read_path(SOURCE_PROMPT)
    destination = reader.read_path(DESTINATION_PROMPT)
    return service.move_file(source, destination, emit=_emit)


def delete_file(reader: LineReader, service: FileService) -> OperationResult:
    path = reader.read_path("Enter path of file to delete: ")
    return service.delete_file(path, emit=_emit)


def search_files(reader: LineReader, service: FileService) -> OperationResult:
    """Prompt for a root and a term; matches print as they are found."""
    root = reader.read_path("Enter directory path to search: ")
    term = reader.read_line("Enter file name or extension to search for: ")
    return service.search_files(root, term, emit=_emit)


def create_directory(reader: LineReader, service: FileService) -> OperationResult:
    path = reader.read_path(
        "Enter path of directory to create (Include the name of directory): ",
    )
    return service.create_directory(path, emit=_emit)


def delete_directory(reader: LineReader, service: FileService) -> OperationResult:
    path = reader.read_path("Enter path of directory to delete: ")
    return service.delete_directory(path, emit=_emit)
