"""Shared pytest fixtures and configuration for the fileman test suite.

Guidelines
----------
* Filesystem tests run against ``tmp_path`` only.
* Console input is scripted through :class:`ScriptedReader`, no TTY needed.
* Failure paths are injected by mocking the ``FileSystem`` boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest

from fileman.core.file_service import FileService
from fileman.exceptions import InputClosedError
from fileman.infra.local_fs import LocalFileSystem


class ScriptedReader:
    """:class:`LineReader` test double replaying a fixed list of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: list[str] = list(lines)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise InputClosedError("Input stream closed.")
        return self._lines.pop(0)

    def read_path(self, prompt: str) -> str:
        return self.read_line(prompt)

    @property
    def remaining(self) -> list[str]:
        return list(self._lines)


@pytest.fixture
def service() -> FileService:
    return FileService(LocalFileSystem())


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create ``a.txt``, ``b.log`` and ``sub/a.csv`` under a fresh root."""
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("alpha")
    (root / "b.log").write_text("bravo")
    (root / "sub" / "a.csv").write_text("1,2,3")
    return root


@pytest.fixture
def scripted() -> type[ScriptedReader]:
    """Return the :class:`ScriptedReader` class for building readers inline."""
    return ScriptedReader


@pytest.fixture(autouse=True)
def _reset_fileman_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so ``caplog`` sees records in every test."""
    yield
    logger = logging.getLogger("fileman")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
