"""
Base paths shared by every probe.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_USER = "user"
REAL_HOME_ROOT = Path("/home")


@dataclass(frozen=True)
class SandboxPaths:
    """Sandbox home and real (unconfined) home, resolved once at startup."""

    sandbox_home: Path
    real_home: Path
    user: str

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str] | None = None,
        sandbox_home: Path | None = None,
    ) -> "SandboxPaths":
        env = os.environ if env is None else env
        # An empty USER counts as unset.
        user = env.get("USER") or DEFAULT_USER
        home = sandbox_home if sandbox_home is not None else Path.home()
        return cls(sandbox_home=home, real_home=REAL_HOME_ROOT / user, user=user)
