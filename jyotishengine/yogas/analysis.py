"""Run every yoga detector over a chart and summarise the result."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..config.settings import Settings, default_settings
from . import additional, chandra, dhana, mahapurusha, nabhasa, negative, raja, solar, special
from .models import DOMINANT_CANDIDATES, Yoga, YogaAnalysis
from .primitives import Detector, YogaContext

if TYPE_CHECKING:
    from ..chart.models import Chart

__all__ = [
    "DETECTORS",
    "NEUTRAL_OVERALL_STRENGTH",
    "NEGATIVE_PENALTY",
    "compute_yoga_analysis",
    "dominant_category",
    "overall_strength",
]

LOG = logging.getLogger(__name__)

NEUTRAL_OVERALL_STRENGTH = 50.0
NEGATIVE_PENALTY = 0.1

DETECTORS: tuple[Detector, ...] = (
    *raja.DETECTORS,
    *dhana.DETECTORS,
    *mahapurusha.DETECTORS,
    *nabhasa.DETECTORS,
    *chandra.DETECTORS,
    *solar.DETECTORS,
    *negative.DETECTORS,
    *additional.DETECTORS,
    *special.DETECTORS,
)


def dominant_category(yogas: Sequence[Yoga]) -> str:
    """Most frequent category among the non-negative families.

    Ties resolve to the earlier entry of :data:`DOMINANT_CANDIDATES`, so a
    chart with no eligible yoga reports ``"raja"``.
    """

    counts = Counter(y.category for y in yogas if y.category in DOMINANT_CANDIDATES)
    return max(DOMINANT_CANDIDATES, key=lambda category: counts.get(category, 0))


def overall_strength(yogas: Sequence[Yoga]) -> float:
    """Mean auspicious strength, discounted by 10% per negative yoga."""

    auspicious = [y.strength for y in yogas if y.auspicious]
    if not auspicious:
        return NEUTRAL_OVERALL_STRENGTH
    negatives = sum(1 for y in yogas if y.category == "negative")
    score = (sum(auspicious) / len(auspicious)) * (1.0 - NEGATIVE_PENALTY * negatives)
    return min(max(score, 0.0), 100.0)


def compute_yoga_analysis(chart: Chart, settings: Settings | None = None) -> YogaAnalysis:
    """Detect every yoga in ``chart`` and aggregate the findings."""

    cfg = settings or default_settings()
    ctx = YogaContext.build(chart, conjunction_orb=cfg.yogas.conjunction_orb)
    found: list[Yoga] = []
    for detector in DETECTORS:
        found.extend(detector(ctx))
    analysis = YogaAnalysis(
        yogas=tuple(found),
        dominant_category=dominant_category(found),
        overall_strength=overall_strength(found),
    )
    LOG.debug(
        "yoga analysis: %d yogas, dominant=%s, overall=%.1f",
        len(found),
        analysis.dominant_category,
        analysis.overall_strength,
    )
    return analysis
