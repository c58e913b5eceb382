"""Logging configuration for the CLI layer.

Lower layers only ever call ``logging.getLogger(__name__)``; this module
decides where those records go.  Records are rendered on stderr through
Rich when it is installed, so they never interleave with the
interactive protocol on stdout.
"""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "fileman"
_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler

    from fileman.cli.console import get_rich_console

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single handler to the ``fileman`` logger.

    Parameters
    ----------
    verbose:
        ``True`` logs at DEBUG (every filesystem mutation); otherwise
        only warnings such as skipped search subtrees are shown.

    Calling this more than once replaces the previous handler instead
    of stacking duplicates.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
