"""Process exit statuses returned by the ``fileman`` command.

``cli()`` is the only caller of :func:`sys.exit`; every status it can
produce is listed here.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: the user chose Exit from the menu, or ``--version``."""

GENERAL_ERROR: int = 1
"""A known FilemanError reached the boundary (e.g. input stream closed)."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C or a cancelled prompt ended the session (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""A bug: some other exception got past the menu loop."""
