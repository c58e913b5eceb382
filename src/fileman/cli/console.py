"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

The interactive protocol (menu, prompts, listings) is written to
stdout; logging owns stderr.
"""

from __future__ import annotations

import os
from typing import Any

from fileman.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout (or stderr)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def printable(text: str) -> str:
	"""Return *text* with undecodable file-name bytes shown as ``\\xNN``.

	Names read from the filesystem may carry surrogate escapes, which
	cannot be encoded for the terminal.
	"""
	try:
		return os.fsencode(text).decode("utf-8", "backslashreplace")
	except UnicodeError:
		return text.encode("utf-8", "backslashreplace").decode("utf-8")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(
		self,
		*objects: object,
		markup: bool = True,
		style: str | None = None,
	) -> None:
		"""Render with Rich when available, else plain stdout print.

		Long lines are never wrapped so printed paths stay intact.  Pass
		``markup=False`` for user-supplied text such as paths; *style*
		colours the whole line and is ignored without Rich.
		"""
		objects = tuple(
			printable(obj) if isinstance(obj, str) else obj for obj in objects
		)
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects)
			return
		rich_console.print(
			*objects,
			markup=markup,
			emoji=False,
			style=style,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
