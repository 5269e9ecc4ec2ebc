"""Probe runner: sequential filesystem probes, background network probe."""

from __future__ import annotations

import logging
import os
import platform
from dataclasses import dataclass, field

from sandbox.network import NetworkProbe, NetworkTask
from sandbox.outcomes import Outcome
from sandbox.paths import SandboxPaths
from sandbox.probes import Probe

from harness.report import Reporter

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    results: list[tuple[str, Outcome]] = field(default_factory=list)
    background: list[NetworkTask] = field(default_factory=list)

    def wait_background(self, timeout: float | None = None) -> list[Outcome | None]:
        """Block until every background task has settled."""
        return [task.wait(timeout) for task in self.background]

    @property
    def confinement_gaps(self) -> list[str]:
        return [name for name, outcome in self.results if outcome.is_confinement_gap]


class ProbeHarness:
    """
    Run an ordered list of probes to completion.

    Filesystem probes run one after another and each blocks until done. The
    network probe is started and left running; its line is printed whenever it
    settles, usually after the closing banner.
    """

    def __init__(
        self,
        paths: SandboxPaths,
        reporter: Reporter | None = None,
        title: str = "Sandbox probe",
    ) -> None:
        self.paths = paths
        self.reporter = reporter or Reporter()
        self.title = title

    def run(self, probes: list[Probe | NetworkProbe]) -> RunSummary:
        summary = RunSummary()
        self._print_header()

        for probe in probes:
            if isinstance(probe, NetworkProbe):
                task = self._start_background(probe)
                if task is not None:
                    summary.background.append(task)
                continue
            outcome = self._run_one(probe)
            summary.results.append((probe.name, outcome))
            self.reporter.outcome(outcome)

        self.reporter.line()
        self.reporter.line(f"🎯 {self.title} complete!")
        return summary

    def _print_header(self) -> None:
        heading = f"🔍 Python {self.title}"
        self.reporter.line(heading)
        self.reporter.line("=" * len(heading))
        self.reporter.line(f"Python version: {platform.python_version()}")
        self.reporter.line(f"Home directory: {self.paths.sandbox_home}")
        self.reporter.line(f"Real home: {self.paths.real_home}")
        self.reporter.line(f"Current directory: {os.getcwd()}")

    def _run_one(self, probe: Probe) -> Outcome:
        logger.debug("running probe %s", probe.name)
        try:
            return probe.run()
        except Exception as exc:  # noqa: BLE001 - one probe never aborts the run
            logger.warning("probe %s raised %s: %s", probe.name, exc.__class__.__name__, exc)
            return Outcome.error(f"{probe.name} failed: {exc}", exc)

    def _start_background(self, probe: NetworkProbe) -> NetworkTask | None:
        logger.debug("starting background probe %s", probe.name)
        try:
            return probe.start(on_complete=self._on_background_complete)
        except Exception as exc:  # noqa: BLE001 - one probe never aborts the run
            logger.warning("probe %s failed to start: %s", probe.name, exc)
            self.reporter.outcome(Outcome.error(f"{probe.name} failed: {exc}", exc))
            return None

    def _on_background_complete(self, name: str, outcome: Outcome) -> None:
        self.reporter.outcome(outcome)
