"""Configuration models and helpers for the Jyotish engine."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..errors import SettingsError

__all__ = [
    "AspectMode",
    "DrishtiCfg",
    "YogaCfg",
    "Settings",
    "default_settings",
    "load_settings",
    "settings_from_mapping",
]

AspectMode = Literal["sign_based", "degree_based", "hybrid"]

# Orbs wider than a full sign would let every kind match its neighbours.
MAX_ORB_DEG = 30.0


class DrishtiCfg(BaseModel):
    """Aspect (drishti) matching configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: AspectMode = "hybrid"
    degree_orb: float = Field(default=12.0, gt=0.0, le=MAX_ORB_DEG)
    conjunction_orb: float = Field(default=10.0, gt=0.0, le=MAX_ORB_DEG)
    include_outer_planets: bool = False
    include_node_aspects: bool = False

    def orb_for(self, kind_name: str) -> float:
        if kind_name == "conjunction":
            return self.conjunction_orb
        return self.degree_orb


class YogaCfg(BaseModel):
    """Primitive tolerances used by the yoga detectors."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    conjunction_orb: float = Field(default=8.0, gt=0.0, le=MAX_ORB_DEG)


class Settings(BaseModel):
    """Top-level settings model."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    drishti: DrishtiCfg = Field(default_factory=DrishtiCfg)
    yogas: YogaCfg = Field(default_factory=YogaCfg)


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def settings_from_mapping(data: object) -> Settings:
    """Validate ``data`` (usually parsed YAML) into :class:`Settings`."""

    if data is None:
        return default_settings()
    if not isinstance(data, dict):
        raise SettingsError(
            f"Settings document must be a mapping, got {type(data).__name__}"
        )
    return Settings(**data)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a YAML file, falling back to defaults when absent."""

    if path is None:
        return default_settings()
    source_path = Path(path)
    if not source_path.exists():
        return default_settings()
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    return settings_from_mapping(raw)
