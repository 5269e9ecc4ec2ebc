"""Tests for harness configuration and profiles."""

from pathlib import Path

import pytest
import yaml

from harness.config import HarnessConfig, load_config
from harness.profiles import (
    FULL_SAMPLE_LIMIT,
    QUICK_SAMPLE_LIMIT,
    SYSTEM_DIRECTORIES,
    build_probes,
)
from sandbox.network import NetworkProbe
from sandbox.paths import SandboxPaths
from sandbox.probes import DirectoryProbe, SensitiveFileProbe, WriteProbe


@pytest.fixture
def paths(tmp_path: Path) -> SandboxPaths:
    return SandboxPaths(sandbox_home=tmp_path, real_home=Path("/home/alice"), user="alice")


def test_defaults():
    config = HarnessConfig()
    assert config.profile == "full"
    assert config.sample_limit is None
    assert config.network is True
    assert config.network_timeout_s == 5.0


def test_load_config_from_yaml(tmp_path: Path):
    config_file = tmp_path / "probe.yaml"
    with open(config_file, "w") as f:
        yaml.dump({"profile": "quick", "sample_limit": 7, "network": False}, f)

    config = load_config(config_file)

    assert config.profile == "quick"
    assert config.sample_limit == 7
    assert config.network is False


def test_empty_yaml_gives_defaults(tmp_path: Path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert load_config(config_file) == HarnessConfig()


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        _ = load_config(tmp_path / "absent.yaml")


def test_invalid_values_raise_value_error(tmp_path: Path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("profile: paranoid\n")

    with pytest.raises(ValueError, match="Invalid configuration"):
        _ = load_config(config_file)


def test_non_mapping_yaml_raises(tmp_path: Path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- quick\n- full\n")

    with pytest.raises(ValueError):
        _ = load_config(config_file)


def test_negative_sample_limit_rejected():
    with pytest.raises(ValueError):
        _ = HarnessConfig.from_dict({"sample_limit": -1})


def test_quick_profile_matches_original_probe_list(paths: SandboxPaths):
    probes = build_probes(HarnessConfig(profile="quick"), paths)

    assert [type(p) for p in probes] == [WriteProbe, SensitiveFileProbe, DirectoryProbe]
    assert probes[1].target == Path("/home/alice/.ssh/id_rsa")
    assert probes[2].sample_limit == QUICK_SAMPLE_LIMIT


def test_full_profile_adds_targets_and_network(paths: SandboxPaths):
    probes = build_probes(HarnessConfig(), paths)

    directories = [p for p in probes if isinstance(p, DirectoryProbe)]
    assert [p.target for p in directories[1:]] == [Path(d) for d in SYSTEM_DIRECTORIES]
    assert all(p.sample_limit == FULL_SAMPLE_LIMIT for p in directories)
    assert len([p for p in probes if isinstance(p, SensitiveFileProbe)]) == 5
    assert isinstance(probes[-1], NetworkProbe)
    assert probes[-1].timeout_seconds == 5.0


def test_full_profile_without_network(paths: SandboxPaths):
    probes = build_probes(HarnessConfig(network=False, sample_limit=2), paths)

    assert not any(isinstance(p, NetworkProbe) for p in probes)
    assert all(p.sample_limit == 2 for p in probes if isinstance(p, DirectoryProbe))
