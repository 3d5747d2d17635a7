"""Value objects produced by the yoga detectors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = [
    "YOGA_CATEGORIES",
    "DOMINANT_CANDIDATES",
    "Yoga",
    "YogaAnalysis",
    "strength_band",
]

YOGA_CATEGORIES: tuple[str, ...] = (
    "raja",
    "dhana",
    "mahapurusha",
    "nabhasa",
    "chandra",
    "solar",
    "negative",
    "special",
)

# Categories eligible to be reported as the chart's dominant theme.
DOMINANT_CANDIDATES: tuple[str, ...] = (
    "raja",
    "dhana",
    "mahapurusha",
    "nabhasa",
    "chandra",
    "solar",
    "special",
)

_BANDS: tuple[tuple[float, str], ...] = (
    (85.0, "extremely_strong"),
    (70.0, "strong"),
    (50.0, "moderate"),
    (30.0, "weak"),
)


def strength_band(percentage: float) -> str:
    for threshold, band in _BANDS:
        if percentage >= threshold:
            return band
    return "very_weak"


@dataclass(frozen=True)
class Yoga:
    """Structured description of a triggered yoga."""

    name: str
    sanskrit_name: str
    category: str
    planets: tuple[str, ...]
    houses: tuple[int, ...]
    description: str
    effects: str
    strength: float
    auspicious: bool
    activation_period: str
    cancellation_factors: tuple[str, ...] = ()

    @property
    def band(self) -> str:
        return strength_band(self.strength)


@dataclass(frozen=True)
class YogaAnalysis:
    """Every yoga detected for one chart plus the derived summary."""

    yogas: tuple[Yoga, ...]
    dominant_category: str
    overall_strength: float

    def __len__(self) -> int:
        return len(self.yogas)

    def by_category(self) -> Mapping[str, tuple[Yoga, ...]]:
        return {
            category: tuple(y for y in self.yogas if y.category == category)
            for category in YOGA_CATEGORIES
        }

    def of_category(self, category: str) -> tuple[Yoga, ...]:
        return tuple(y for y in self.yogas if y.category == category)

    def names(self) -> tuple[str, ...]:
        return tuple(y.name for y in self.yogas)

    @property
    def auspicious(self) -> tuple[Yoga, ...]:
        return tuple(y for y in self.yogas if y.auspicious)

    @property
    def negative(self) -> tuple[Yoga, ...]:
        return self.of_category("negative")
