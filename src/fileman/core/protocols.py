"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that infrastructure adapters and input
sources must satisfy.  Core code depends ONLY on these protocols,
never on concrete implementations, preserving the dependency
inversion principle.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol


class LineReader(Protocol):
    """Contract for interactive input sources.

    A reader is created once per session and threaded explicitly through
    the dispatcher and every handler.
    """

    def read_line(self, prompt: str) -> str:
        """Show *prompt* and return the next line without its newline.

        Raises
        ------
        InputClosedError
            When the input stream has reached end-of-file.
        """
        ...  # pragma: no cover

    def read_path(self, prompt: str) -> str:
        """Like :meth:`read_line`, for prompts that expect a path.

        Implementations may offer path completion; the returned text is
        still the raw line as typed.
        """
        ...  # pragma: no cover


class FileSystem(Protocol):
    """Contract for filesystem backends.

    Query methods (``exists``, ``is_file``, ``is_dir``) never raise.
    Every other method must map backend failures to
    :class:`~fileman.exceptions.FileOperationError` subclasses.
    """

    def exists(self, path: Path) -> bool:
        ...  # pragma: no cover

    def is_file(self, path: Path) -> bool:
        ...  # pragma: no cover

    def is_dir(self, path: Path) -> bool:
        ...  # pragma: no cover

    def iter_dir(self, path: Path) -> Iterator[Path]:
        """Yield the immediate children of *path* in native order."""
        ...  # pragma: no cover

    def is_empty_dir(self, path: Path) -> bool:
        """Return ``True`` when *path* has no immediate children."""
        ...  # pragma: no cover

    def walk(self, root: Path) -> Iterator[Path]:
        """Yield *root* and every descendant entry.

        Unreadable subtrees are skipped rather than aborting the walk.
        """
        ...  # pragma: no cover

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy bytes of *source* to *destination*, replacing it if present."""
        ...  # pragma: no cover

    def move_file(self, source: Path, destination: Path) -> None:
        """Move *source* to *destination*, replacing it if present."""
        ...  # pragma: no cover

    def delete_file(self, path: Path) -> None:
        ...  # pragma: no cover

    def create_directory(self, path: Path) -> None:
        """Create exactly one directory level; parents must exist."""
        ...  # pragma: no cover

    def delete_directory(self, path: Path) -> None:
        """Remove an empty directory."""
        ...  # pragma: no cover
