"""Probe outcome classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sandbox.listing import DirectoryListing


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    BLOCKED = "blocked"
    UNEXPECTED_ACCESS = "unexpected_access"
    ERROR = "error"
    TIMEOUT = "timeout"


def _error_type(exc: BaseException) -> str:
    return exc.__class__.__name__


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    message: str
    error_type: str | None = None
    listing: DirectoryListing | None = None
    status_code: int | None = None

    @classmethod
    def success(cls, message: str, status_code: int | None = None) -> "Outcome":
        return cls(OutcomeKind.SUCCESS, message, status_code=status_code)

    @classmethod
    def blocked(cls, message: str, exc: BaseException | None = None) -> "Outcome":
        """Operation failed, which is the evidence that confinement works.

        Permission denied, not-found and other I/O errors all fold into this
        kind; ``error_type`` keeps the exception class for diagnosis only.
        """
        return cls(
            OutcomeKind.BLOCKED,
            message,
            error_type=_error_type(exc) if exc is not None else None,
        )

    @classmethod
    def unexpected_access(
        cls, message: str, listing: DirectoryListing | None = None
    ) -> "Outcome":
        return cls(OutcomeKind.UNEXPECTED_ACCESS, message, listing=listing)

    @classmethod
    def error(cls, message: str, exc: BaseException | None = None) -> "Outcome":
        return cls(
            OutcomeKind.ERROR,
            message,
            error_type=_error_type(exc) if exc is not None else None,
        )

    @classmethod
    def timeout(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.TIMEOUT, message)

    @property
    def is_confinement_gap(self) -> bool:
        return self.kind is OutcomeKind.UNEXPECTED_ACCESS
