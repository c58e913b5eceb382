"""fileman: interactive console file manager.

Lists, copies, moves, deletes and searches files on the local
filesystem through a numbered menu, with a strict layered architecture.
"""

from fileman.version import __version__

__all__: list[str] = ["__version__"]
