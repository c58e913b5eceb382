"""Core / service layer: precondition checks and result mapping.

Rules
-----
* No ``print()`` calls.
* No direct ``os`` / ``shutil`` access; filesystem work goes through
  the injected :class:`~fileman.core.protocols.FileSystem`.
* No imports from ``cli`` or ``infra``.
"""

from fileman.core.file_service import FileService
from fileman.core.models import OperationResult, Outcome
from fileman.core.protocols import FileSystem, LineReader

__all__: list[str] = [
    "FileService",
    "FileSystem",
    "LineReader",
    "OperationResult",
    "Outcome",
]
