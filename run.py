#!/usr/bin/env python3
"""
Sandbox probe quick-start script.

Runs the full probe profile with default settings and no arguments:
  python run.py
"""

from sandbox.paths import SandboxPaths

from harness.config import HarnessConfig
from harness.profiles import PROFILE_TITLES, build_probes
from harness.runner import ProbeHarness


def main():
    config = HarnessConfig()
    paths = SandboxPaths.from_environment()
    harness = ProbeHarness(paths, title=PROFILE_TITLES[config.profile])
    summary = harness.run(build_probes(config, paths))
    summary.wait_background()


if __name__ == "__main__":
    main()
