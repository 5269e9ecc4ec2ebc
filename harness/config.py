"""Harness configuration with YAML support."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Literal, TypeVar

import yaml
from pydantic import BaseModel, Field

from sandbox.network import DEFAULT_NETWORK_URL, DEFAULT_TIMEOUT_SECONDS

TBaseSchema = TypeVar("TBaseSchema", bound="BaseSchema")

ProfileName = Literal["quick", "full"]


class BaseSchema(BaseModel):
    def to_dict(self) -> dict[str, object]:
        return self.model_dump()

    @classmethod
    def from_dict(cls: type[TBaseSchema], data: Mapping[str, object]) -> TBaseSchema:
        return cls.model_validate(data)


class HarnessConfig(BaseSchema):
    """Knobs for a probe run. Probe targets themselves are fixed per profile."""

    profile: ProfileName = "full"

    # None means the profile's own default (3 for quick, 20 for full)
    sample_limit: int | None = Field(default=None, ge=0)

    # Network probe; the quick profile never runs it
    network: bool = True
    network_url: str = DEFAULT_NETWORK_URL
    network_timeout_s: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)


def load_config(yaml_path: str | Path) -> HarnessConfig:
    """Load harness configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        HarnessConfig instance

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is invalid or has bad values
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

    if data is None:
        return HarnessConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {yaml_path}, got {type(data).__name__}")

    try:
        return HarnessConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {yaml_path}: {e}") from e
