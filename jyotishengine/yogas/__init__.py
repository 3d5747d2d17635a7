"""Yoga (planetary combination) detection."""

from __future__ import annotations

from .analysis import DETECTORS, compute_yoga_analysis, dominant_category, overall_strength
from .models import DOMINANT_CANDIDATES, YOGA_CATEGORIES, Yoga, YogaAnalysis, strength_band
from .primitives import YogaContext

__all__ = [
    "DETECTORS",
    "DOMINANT_CANDIDATES",
    "YOGA_CATEGORIES",
    "Yoga",
    "YogaAnalysis",
    "YogaContext",
    "compute_yoga_analysis",
    "dominant_category",
    "overall_strength",
    "strength_band",
]
