"""Configuration entry points for the Jyotish engine."""

from __future__ import annotations

from .settings import (
    AspectMode,
    DrishtiCfg,
    Settings,
    YogaCfg,
    default_settings,
    load_settings,
    settings_from_mapping,
)

__all__ = [
    "AspectMode",
    "DrishtiCfg",
    "YogaCfg",
    "Settings",
    "default_settings",
    "load_settings",
    "settings_from_mapping",
]
