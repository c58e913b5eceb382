"""Core file service: validated filesystem operations.

This service delegates every filesystem call to a
:class:`~fileman.core.protocols.FileSystem` injected at construction
time.  It is responsible for:

* Checking preconditions explicitly before any mutating call.
* Delegating exactly one filesystem operation per invocation.
* Mapping every ending to an :class:`~fileman.core.models.OperationResult`
  so callers never rely on stack unwinding.

Guarantees
----------
* No ``print()``; status lines and entries go through the optional
  ``emit`` callback, in the order they happen.
* No direct ``os`` / ``shutil`` access.
* A rejected operation never mutates the filesystem.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from fileman.core.models import OperationResult
from fileman.core.name_filter import filter_matches
from fileman.core.protocols import FileSystem
from fileman.exceptions import FilemanError

Emit = Callable[[str], None]

NOT_A_DIRECTORY = "Directory does not exist or is not a directory."
SOURCE_NOT_A_FILE = "Source file does not exist or is not a file."
NOT_A_FILE = "File does not exist or is not a file."
DESTINATION_IS_DIRECTORY = "Destination path must include a filename."
ALREADY_EXISTS = "Directory already exists."
NOT_EMPTY = "Directory is not empty. Cannot delete."


def _discard(_line: str) -> None:
    return None


def _failure(exc: Exception) -> OperationResult:
    """Convert an operational failure into a ``FAILED`` result."""
    hint = exc.hint if isinstance(exc, FilemanError) else None
    return OperationResult.failed(str(exc), hint=hint)


class FileService:
    """Stateless service that validates and performs file operations.

    Parameters
    ----------
    filesystem:
        Any object satisfying the :class:`FileSystem` protocol.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        self._fs: FileSystem = filesystem

    # ------------------------------------------------------------------
    # Precondition helpers
    # ------------------------------------------------------------------

    def _is_existing_dir(self, path: Path) -> bool:
        return self._fs.exists(path) and self._fs.is_dir(path)

    def _is_existing_file(self, path: Path) -> bool:
        return self._fs.exists(path) and self._fs.is_file(path)

    # ------------------------------------------------------------------
    # Read-only operations
    # ------------------------------------------------------------------

    def list_directory(self, path: str, *, emit: Emit | None = None) -> OperationResult:
        """Emit every immediate child of *path*, unsorted."""
        out = emit or _discard
        directory = Path(path)
        if not self._is_existing_dir(directory):
            return OperationResult.rejected(NOT_A_DIRECTORY)

        out(f"Listing contents of directory: {directory}")
        try:
            for child in self._fs.iter_dir(directory):
                out(str(child))
        except (FilemanError, OSError) as exc:
            return _failure(exc)
        return OperationResult.success("Directory listing complete.")

    def search_files(
        self,
        root: str,
        term: str,
        *,
        emit: Emit | None = None,
    ) -> OperationResult:
        """Emit every entry under *root* whose base name contains *term*.

        Matches are emitted as the traversal finds them; the order is
        whatever the backend's walk produces.
        """
        out = emit or _discard
        directory = Path(root)
        if not self._is_existing_dir(directory):
            return OperationResult.rejected(NOT_A_DIRECTORY)

        out(f"Searching for files in {directory} with term: {term}")
        try:
            for match in filter_matches(self._fs.walk(directory), term):
                out(str(match))
        except (FilemanError, OSError) as exc:
            return _failure(exc)
        return OperationResult.success("Search complete.")

    # ------------------------------------------------------------------
    # File mutations
    # ------------------------------------------------------------------

    def copy_file(
        self,
        source: str,
        destination: str,
        *,
        emit: Emit | None = None,
    ) -> OperationResult:
        """Copy *source* over *destination*, replacing it without warning."""
        out = emit or _discard
        src, dst = Path(source), Path(destination)
        if not self._is_existing_file(src):
            return OperationResult.rejected(SOURCE_NOT_A_FILE)

        out(f"Copying file from {src} to {dst}")
        try:
            self._fs.copy_file(src, dst)
        except (FilemanError, OSError) as exc:
            return _failure(exc)
        return OperationResult.success("File copied successfully.")

    def move_file(
        self,
        source: str,
        destination: str,
        *,
        emit: Emit | None = None,
    ) -> OperationResult:
        """Move *source* to the full file path *destination*.

        A destination that is an existing directory is rejected; the
        file name is never inferred.
        """
        out = emit or _discard
        src, dst = Path(source), Path(destination)
        if not self._is_existing_file(src):
            return OperationResult.rejected(SOURCE_NOT_A_FILE)
        if self._fs.is_dir(dst):
            return OperationResult.rejected(DESTINATION_IS_DIRECTORY)

        out(f"Moving file from {src} to {dst}")
        try:
            self._fs.move_file(src, dst)
        except (FilemanError, OSError) as exc:
            return _failure(exc)
        return OperationResult.success("File moved successfully.")

    def delete_file(self, path: str, *, emit: Emit | None = None) -> OperationResult:
        """Delete a single regular file, immediately and irreversibly."""
        out = emit or _discard
        target = Path(path)
        if not self._is_existing_file(target):
            return OperationResult.rejected(NOT_A_FILE)

        out(f"Attempting to delete file: {target}")
        try:
            self._fs.delete_file(target)
        except (FilemanError, OSError) as exc:
            return _failure(exc)
        return OperationResult.success("File deleted successfully.")

    # ------------------------------------------------------------------
    # Directory mutations
    # ------------------------------------------------------------------

    def create_directory(self, path: str, *, emit: Emit | None = None) -> OperationResult:
        """Create one directory level at *path* when nothing exists there."""
        out = emit or _discard
        target = Path(path)
        if self._fs.exists(target):
            return OperationResult.rejected(ALREADY_EXISTS)

        out(f"Attempting to create directory: {target}")
        try:
            self._fs.create_directory(target)
        except (FilemanError, OSError) as exc:
            return _failure(exc)
        return OperationResult.success("Directory created successfully.")

    def delete_directory(self, path: str, *, emit: Emit | None = None) -> OperationResult:
        """Delete *path* only if it is an empty directory."""
        out = emit or _discard
        target = Path(path)
        if not self._is_existing_dir(target):
            return OperationResult.rejected(NOT_A_DIRECTORY)

        try:
            if not self._fs.is_empty_dir(target):
                return OperationResult.rejected(NOT_EMPTY)
            out(f"Attempting to delete directory: {target}")
            self._fs.delete_directory(target)
        except (FilemanError, OSError) as exc:
            return _failure(exc)
        return OperationResult.success("Directory deleted successfully.")
