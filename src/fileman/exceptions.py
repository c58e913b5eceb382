"""Custom exception hierarchy for fileman.

All exceptions that cross layer boundaries must inherit from
:class:`FilemanError`.  Raw ``OSError`` instances must NEVER propagate
beyond the infrastructure layer; they are caught there and re-raised
as a typed subclass defined here.

Precondition violations (missing path, wrong type, non-empty directory)
are *not* exceptions; they are reported as rejected
:class:`~fileman.core.models.OperationResult` values.

Hierarchy
---------
FilemanError
├── FileOperationError
│   ├── PermissionDeniedError
│   └── PathVanishedError
├── InputClosedError
└── EnvironmentError
"""

from __future__ import annotations


class FilemanError(Exception):
    """Base exception for all fileman errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Filesystem operations -------------------------------------------------

class FileOperationError(FilemanError):
    """Raised when a filesystem call fails after its preconditions passed."""


class PermissionDeniedError(FileOperationError):
    """Raised when the operating system refuses access to a path."""


class PathVanishedError(FileOperationError):
    """Raised when a path disappears between the check and the call."""


# --- Console input ---------------------------------------------------------

class InputClosedError(FilemanError):
    """Raised when the input stream reaches end-of-file."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(FilemanError):
    """Raised when an optional runtime dependency is not available."""
