"""Human-readable status lines for probe outcomes."""

from __future__ import annotations

import threading
from collections.abc import Callable

import typer

from sandbox.listing import DirectoryEntry, DirectoryListing, EntryKind
from sandbox.outcomes import Outcome, OutcomeKind

MARKERS: dict[OutcomeKind, str] = {
    OutcomeKind.SUCCESS: "✅",
    OutcomeKind.BLOCKED: "✅",
    OutcomeKind.UNEXPECTED_ACCESS: "⚠️ ",
    OutcomeKind.ERROR: "❌",
    OutcomeKind.TIMEOUT: "⏱️ ",
}

ENTRY_ICONS: dict[EntryKind, str] = {
    EntryKind.FILE: "📄",
    EntryKind.DIRECTORY: "📁",
    EntryKind.UNKNOWN: "❓",
}


def format_entry(entry: DirectoryEntry) -> str:
    icon = ENTRY_ICONS[entry.kind]
    if entry.kind is EntryKind.DIRECTORY:
        return f"    {icon} {entry.name}/"
    if entry.kind is EntryKind.FILE and entry.size_bytes is not None:
        return f"    {icon} {entry.name} ({entry.size_bytes} bytes)"
    return f"    {icon} {entry.name}"


def format_listing(listing: DirectoryListing) -> list[str]:
    lines = [format_entry(entry) for entry in listing.entries]
    if listing.remaining > 0:
        lines.append(f"    ... and {listing.remaining} more")
    return lines


def format_outcome(outcome: Outcome) -> list[str]:
    lines = [f"{MARKERS[outcome.kind]} {outcome.message}"]
    if outcome.listing is not None:
        lines.extend(format_listing(outcome.listing))
    return lines


class Reporter:
    """Writes status lines; one outcome's lines are never split by another's."""

    def __init__(self, echo: Callable[[str], None] | None = None) -> None:
        self._echo = echo or typer.echo
        self._lock = threading.Lock()

    def line(self, text: str = "") -> None:
        with self._lock:
            self._echo(text)

    def outcome(self, outcome: Outcome) -> None:
        lines = format_outcome(outcome)
        with self._lock:
            for text in lines:
                self._echo(text)
