"""Domain models for fileman.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access and construction helpers.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Outcome classification
# ---------------------------------------------------------------------------

class Outcome(Enum):
    """How a single operation invocation ended."""

    SUCCESS = "success"
    """The filesystem call completed."""

    REJECTED = "rejected"
    """A precondition was not met; nothing was touched."""

    FAILED = "failed"
    """The filesystem call itself failed despite passing its checks."""


# ---------------------------------------------------------------------------
# Operation result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OperationResult:
    """Result of one menu operation, rendered by the dispatcher."""

    outcome: Outcome
    """Which of the three disjoint endings occurred."""

    message: str
    """User-facing text describing the ending."""

    hint: str | None = None
    """Optional actionable guidance, only set for failures."""

    @classmethod
    def success(cls, message: str) -> OperationResult:
        return cls(Outcome.SUCCESS, message)

    @classmethod
    def rejected(cls, message: str) -> OperationResult:
        return cls(Outcome.REJECTED, message)

    @classmethod
    def failed(cls, message: str, *, hint: str | None = None) -> OperationResult:
        return cls(Outcome.FAILED, message, hint)

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS
