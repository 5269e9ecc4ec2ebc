"""
Directory listing with a bounded, stat-annotated sample of entries.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_LIMIT = 20


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    kind: EntryKind
    size_bytes: int | None = None


@dataclass(frozen=True)
class DirectoryListing:
    path: Path
    total_count: int
    entries: list[DirectoryEntry] = field(default_factory=list)

    @property
    def remaining(self) -> int:
        """Entries that exist but were left out of the sample."""
        return self.total_count - len(self.entries)


def stat_entry(directory: Path, name: str) -> DirectoryEntry:
    """Classify one entry; a failed stat yields UNKNOWN instead of raising."""
    try:
        info = (directory / name).stat()
    except OSError as exc:
        logger.debug("stat failed for %s/%s: %s", directory, name, exc)
        return DirectoryEntry(name=name, kind=EntryKind.UNKNOWN)
    if stat.S_ISDIR(info.st_mode):
        return DirectoryEntry(name=name, kind=EntryKind.DIRECTORY)
    return DirectoryEntry(name=name, kind=EntryKind.FILE, size_bytes=info.st_size)


def list_directory(path: str | Path, sample_limit: int = DEFAULT_SAMPLE_LIMIT) -> DirectoryListing:
    """List ``path`` and stat at most ``sample_limit`` entries in name order.

    Raises whatever ``os.listdir`` raises; callers decide what a failure means.
    """
    if sample_limit < 0:
        raise ValueError("sample_limit must be non-negative")
    directory = Path(path)
    names = sorted(os.listdir(directory))
    entries = [stat_entry(directory, name) for name in names[:sample_limit]]
    return DirectoryListing(path=directory, total_count=len(names), entries=entries)
