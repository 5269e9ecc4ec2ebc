"""Probe registry for the quick and full profiles."""

from __future__ import annotations

from pathlib import Path

from sandbox.network import NetworkProbe
from sandbox.paths import SandboxPaths
from sandbox.probes import DirectoryProbe, Probe, SensitiveFileProbe, WriteProbe

from harness.config import HarnessConfig, ProfileName

QUICK_SAMPLE_LIMIT = 3
FULL_SAMPLE_LIMIT = 20

QUICK_SENSITIVE_FILES = [".ssh/id_rsa"]
FULL_SENSITIVE_FILES = [
    ".ssh/id_rsa",
    ".ssh/id_ed25519",
    ".bashrc",
    ".zshrc",
    ".profile",
]
SYSTEM_DIRECTORIES = ["/etc", "/var", "/tmp", "/root"]

PROFILE_TITLES: dict[str, str] = {
    "quick": "Quick test",
    "full": "Sandbox probe",
}


def default_sample_limit(profile: ProfileName) -> int:
    return QUICK_SAMPLE_LIMIT if profile == "quick" else FULL_SAMPLE_LIMIT


def build_probes(config: HarnessConfig, paths: SandboxPaths) -> list[Probe | NetworkProbe]:
    """Return the ordered probe list for ``config.profile``."""
    sample_limit = (
        config.sample_limit
        if config.sample_limit is not None
        else default_sample_limit(config.profile)
    )
    quick = config.profile == "quick"
    sensitive = QUICK_SENSITIVE_FILES if quick else FULL_SENSITIVE_FILES

    probes: list[Probe | NetworkProbe] = [WriteProbe(paths.sandbox_home)]
    probes.extend(SensitiveFileProbe(paths.real_home / rel) for rel in sensitive)
    probes.append(DirectoryProbe(paths.real_home, "Real home directory", sample_limit))
    if not quick:
        probes.extend(
            DirectoryProbe(Path(directory), "System directory", sample_limit)
            for directory in SYSTEM_DIRECTORIES
        )
        if config.network:
            probes.append(NetworkProbe(config.network_url, config.network_timeout_s))
    return probes
