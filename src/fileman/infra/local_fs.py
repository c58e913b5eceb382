"""Local-disk implementation of :class:`~fileman.core.protocols.FileSystem`.

This module is the **only** place in the codebase that invokes ``os``
and ``shutil`` filesystem calls.  Every ``OSError``, and the
``ValueError`` raised for unusable paths, is caught here and re-raised
as a :class:`~fileman.exceptions.FileOperationError` subclass.

Rules
-----
* Directory handles are opened with ``with`` blocks and released on
  both success and error paths.
* Symbolic links are followed for type checks but never descended
  into during a walk.
* No ``print()``; diagnostics go to the module logger.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fileman.exceptions import (
    FileOperationError,
    PathVanishedError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

def _describe(exc: OSError, path: Path) -> str:
    reason = exc.strerror or str(exc)
    target = exc.filename if exc.filename is not None else path
    if exc.filename2 is not None:
        return f"{reason}: {target} -> {exc.filename2}"
    return f"{reason}: {target}"


@contextmanager
def _translate_os_errors(action: str, path: Path) -> Iterator[None]:
    """Re-raise any ``OSError`` from the block as a typed fileman error.

    ``ValueError`` is translated too: ``os`` raises it for paths the
    platform can never accept, such as ones holding a NUL byte.
    """
    try:
        yield
    except ValueError as exc:
        raise FileOperationError(
            f"Invalid path: {exc}",
            hint="Paths cannot contain NUL characters.",
        ) from exc
    except PermissionError as exc:
        raise PermissionDeniedError(
            _describe(exc, path),
            hint=f"Check that you are allowed to {action} this path.",
        ) from exc
    except FileNotFoundError as exc:
        raise PathVanishedError(
            _describe(exc, path),
            hint="The path or one of its parents does not exist (or was removed meanwhile).",
        ) from exc
    except OSError as exc:
        raise FileOperationError(_describe(exc, path)) from exc


# ---------------------------------------------------------------------------
# Concrete backend
# ---------------------------------------------------------------------------

class LocalFileSystem:
    """Concrete :class:`FileSystem` backed by the host operating system.

    This class satisfies the :class:`~fileman.core.protocols.FileSystem`
    protocol structurally, with no explicit inheritance required.
    """

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def iter_dir(self, path: Path) -> Iterator[Path]:
        with _translate_os_errors("list", path):
            with os.scandir(path) as entries:
                for entry in entries:
                    yield path / entry.name

    def is_empty_dir(self, path: Path) -> bool:
        with _translate_os_errors("list", path):
            with os.scandir(path) as entries:
                return next(entries, None) is None

    def walk(self, root: Path) -> Iterator[Path]:
        """Yield *root*, then every descendant, top-down.

        Directories that cannot be read are logged and skipped; the walk
        carries on with their siblings.
        """

        def _skip(exc: OSError) -> None:
            logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc.strerror)

        yield root
        for current, dirnames, filenames in os.walk(root, onerror=_skip):
            base = Path(current)
            for name in dirnames:
                yield base / name
            for name in filenames:
                yield base / name

    # ------------------------------------------------------------------
    # File mutations
    # ------------------------------------------------------------------

    def copy_file(self, source: Path, destination: Path) -> None:
        logger.debug("copy %s -> %s", source, destination)
        with _translate_os_errors("copy", source):
            try:
                shutil.copyfile(source, destination)
            except shutil.SameFileError:
                logger.debug("copy skipped, %s and %s are the same file", source, destination)

    def move_file(self, source: Path, destination: Path) -> None:
        """Rename atomically; fall back to copy + delete across devices."""
        logger.debug("move %s -> %s", source, destination)
        with _translate_os_errors("move", source):
            try:
                os.replace(source, destination)
            except OSError as exc:
                if exc.errno != errno.EXDEV:
                    raise
                logger.debug("cross-device move, copying %s then removing it", source)
                shutil.copy2(source, destination)
                os.unlink(source)

    def delete_file(self, path: Path) -> None:
        logger.debug("delete file %s", path)
        with _translate_os_errors("delete", path):
            os.unlink(path)

    # ------------------------------------------------------------------
    # Directory mutations
    # ------------------------------------------------------------------

    def create_directory(self, path: Path) -> None:
        logger.debug("create directory %s", path)
        with _translate_os_errors("create", path):
            os.mkdir(path)

    def delete_directory(self, path: Path) -> None:
        logger.debug("delete directory %s", path)
        with _translate_os_errors("delete", path):
            os.rmdir(path)
