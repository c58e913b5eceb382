"""Allow ``python -m fileman`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m fileman`` behaves identically to the ``fileman``
console script.
"""

from __future__ import annotations

from fileman.cli.app import cli

if __name__ == "__main__":
    cli()
