"""Vedic aspect (drishti) and yoga inference engine."""

from __future__ import annotations

from .chart import Chart, PlanetPosition
from .config import DrishtiCfg, Settings, YogaCfg, default_settings, load_settings
from .errors import ChartError, JyotishError, SettingsError
from .jyotish import (
    AspectMatrix,
    AspectRelation,
    PlanetaryAspectStrength,
    cancellation_factor,
    compute_argala,
    compute_aspect_matrix,
    compute_house_aspects,
    compute_planetary_aspect_strength,
    evaluate_aspect,
)
from .yogas import Yoga, YogaAnalysis, compute_yoga_analysis

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Chart",
    "PlanetPosition",
    "DrishtiCfg",
    "YogaCfg",
    "Settings",
    "default_settings",
    "load_settings",
    "JyotishError",
    "ChartError",
    "SettingsError",
    "AspectMatrix",
    "AspectRelation",
    "PlanetaryAspectStrength",
    "compute_aspect_matrix",
    "compute_planetary_aspect_strength",
    "compute_house_aspects",
    "compute_argala",
    "evaluate_aspect",
    "cancellation_factor",
    "Yoga",
    "YogaAnalysis",
    "compute_yoga_analysis",
]
