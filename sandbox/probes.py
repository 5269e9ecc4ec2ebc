"""
Filesystem probes.

Each probe attempts exactly one operation and maps the result to an Outcome.
Probes never let an exception escape for the failures they are designed to
observe.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from sandbox.listing import DEFAULT_SAMPLE_LIMIT, list_directory
from sandbox.outcomes import Outcome

logger = logging.getLogger(__name__)

WRITE_TEST_FILENAME = "test-write.txt"
WRITE_TEST_CONTENT = "Sandbox test successful!"


class Probe(ABC):
    """A named unit of work executed once by the harness."""

    name: str

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def run(self) -> Outcome:
        """Attempt the operation and classify what happened."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"


class WriteProbe(Probe):
    """Round-trip a small file through the sandbox home."""

    target: Path
    content: str

    def __init__(
        self,
        sandbox_home: Path,
        filename: str = WRITE_TEST_FILENAME,
        content: str = WRITE_TEST_CONTENT,
    ) -> None:
        super().__init__("write")
        self.target = sandbox_home / filename
        self.content = content

    def run(self) -> Outcome:  # pyright: ignore[reportImplicitOverride]
        try:
            with open(self.target, "w", encoding="utf-8") as f:
                f.write(self.content)
            with open(self.target, "r", encoding="utf-8") as f:
                read_back = f.read()
            self.target.unlink()
        except OSError as exc:
            logger.debug("write probe failed at %s: %s", self.target, exc)
            return Outcome.error(f"Write test failed: {exc}", exc)

        if read_back != self.content:
            return Outcome.error(
                f"Write test failed: read back {read_back!r}, expected {self.content!r}"
            )
        return Outcome.success(f"Write test: {read_back}")


class SensitiveFileProbe(Probe):
    """Try to read a file that a confined process must not see.

    The content is discarded; only the fact that it was readable is reported.
    """

    target: Path

    def __init__(self, target: Path) -> None:
        super().__init__(f"read:{target}")
        self.target = target

    def run(self) -> Outcome:  # pyright: ignore[reportImplicitOverride]
        try:
            _ = self.target.read_bytes()
        except Exception as exc:  # noqa: BLE001 - any failure means protected
            return Outcome.blocked(f"Protected: {self.target.name}", exc)
        logger.warning("sensitive file is readable: %s", self.target)
        return Outcome.unexpected_access(f"Security issue: Can read {self.target.name}!")


class DirectoryProbe(Probe):
    """Try to list a directory outside the sandbox home."""

    target: Path
    label: str
    sample_limit: int

    def __init__(
        self,
        target: Path,
        label: str,
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
    ) -> None:
        super().__init__(f"list:{target}")
        self.target = target
        self.label = label
        self.sample_limit = sample_limit

    def run(self) -> Outcome:  # pyright: ignore[reportImplicitOverride]
        try:
            listing = list_directory(self.target, self.sample_limit)
        except Exception as exc:  # noqa: BLE001 - any failure means blocked
            return Outcome.blocked(f"{self.label} blocked: {self.target}", exc)
        logger.warning("directory is listable: %s (%d entries)", self.target, listing.total_count)
        return Outcome.unexpected_access(
            f"Can access {self.label.lower()}: {self.target} ({listing.total_count} entries)",
            listing=listing,
        )
