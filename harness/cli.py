"""CLI interface for running sandbox probes."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from sandbox.network import NetworkProbe
from sandbox.paths import SandboxPaths

from harness.config import HarnessConfig, load_config
from harness.profiles import PROFILE_TITLES, build_probes
from harness.runner import ProbeHarness

app = typer.Typer(help="Sandbox confinement probe CLI")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(
    config_path: Optional[str],
    profile: Optional[str],
    sample_limit: Optional[int],
    no_network: bool,
) -> HarnessConfig:
    config = load_config(config_path) if config_path else HarnessConfig()
    overrides: dict[str, object] = {}
    if profile is not None:
        overrides["profile"] = profile.lower()
    if sample_limit is not None:
        overrides["sample_limit"] = sample_limit
    if no_network:
        overrides["network"] = False
    if not overrides:
        return config
    return HarnessConfig.from_dict({**config.to_dict(), **overrides})


@app.command()
def run(
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="Probe profile (quick or full)",
        case_sensitive=False,
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to YAML config"),
    sample_limit: Optional[int] = typer.Option(
        None, "--sample-limit", help="Directory entries shown per listing"
    ),
    no_network: bool = typer.Option(False, "--no-network", help="Skip the outbound network probe"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Run every probe of a profile and print one status line per probe."""
    _configure_logging(verbose)

    if profile is not None and profile.lower() not in PROFILE_TITLES:
        typer.secho(f"❌ Invalid profile: {profile}. Must be quick or full.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    try:
        config = _resolve_config(config_path, profile, sample_limit, no_network)
    except FileNotFoundError as e:
        typer.secho(f"❌ Config file not found: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.secho(f"❌ Invalid config: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    paths = SandboxPaths.from_environment()
    harness = ProbeHarness(paths, title=PROFILE_TITLES[config.profile])
    summary = harness.run(build_probes(config, paths))
    # Keep the process alive until the network probe settles, like an event loop would.
    summary.wait_background()


@app.command()
def list_probes(
    profile: str = typer.Option("full", "--profile", help="Probe profile (quick or full)"),
) -> None:
    """List the probes a profile would run, in order."""
    if profile.lower() not in PROFILE_TITLES:
        typer.secho(f"❌ Invalid profile: {profile}. Must be quick or full.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    config = HarnessConfig.from_dict({"profile": profile.lower()})
    paths = SandboxPaths.from_environment()
    probes = build_probes(config, paths)

    typer.secho(f"\n🔍 {len(probes)} probe(s) in profile '{config.profile}':\n", fg=typer.colors.BLUE)
    for index, probe in enumerate(probes, start=1):
        suffix = " (background)" if isinstance(probe, NetworkProbe) else ""
        typer.echo(f"  {index:2d}. {probe.name}{suffix}")


if __name__ == "__main__":
    app()
