"""Infrastructure layer: host operating system integration.

This layer wraps all interaction with ``os`` and ``shutil``.  Every raw
``OSError`` must be caught here and re-raised as a
:class:`~fileman.exceptions.FileOperationError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from fileman.infra.local_fs import LocalFileSystem

__all__: list[str] = ["LocalFileSystem"]
