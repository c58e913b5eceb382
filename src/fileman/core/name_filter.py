"""Pure search-term matching against entry base names.

Every function in this module is pure: no I/O and no side effects.
Matching is a literal, case-sensitive substring test on the entry's
base name only, never on the full path.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import PurePath


def entry_name(path: PurePath) -> str:
    """Return the base name used for matching.

    Paths without a final component (``.``, ``/``) fall back to their
    full textual form so the search root itself can still be matched.
    """
    return path.name or str(path)


def matches_search_term(path: PurePath, term: str) -> bool:
    """Return ``True`` when *term* occurs in the base name of *path*."""
    return term in entry_name(path)


def filter_matches(paths: Iterable[PurePath], term: str) -> Iterator[PurePath]:
    """Lazily yield the paths whose base name contains *term*.

    Order of *paths* is preserved and nothing is buffered, so matches
    can be reported while the traversal is still running.
    """
    for path in paths:
        if matches_search_term(path, term):
            yield path
