"""Shared primitives and strength formulas for the yoga detectors."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..jyotish.affliction import (
    benefic_aspect_boost,
    cancellation_factor,
    combustion_factor,
    is_papakartari,
    malefic_affliction_factor,
)
from ..jyotish.data import DUSTHANA_HOUSES, KENDRA_HOUSES, SIGN_LORDS, ZODIAC_SIGNS
from ..jyotish.dignity import (
    has_directional_strength,
    is_debilitated,
    is_exalted,
    is_in_friend_sign,
    is_in_own_sign,
)
from ..jyotish.utils import circular_separation, house_from
from .models import Yoga

if TYPE_CHECKING:
    from ..chart.models import Chart, PlanetPosition

__all__ = [
    "DEFAULT_CONJUNCTION_ORB",
    "GOOD_HOUSES",
    "WEALTH_HOUSES",
    "UNAFFLICTED",
    "YogaContext",
    "Detector",
    "are_conjunct",
    "are_mutually_aspecting",
    "are_in_exchange",
    "are_connected",
    "house_lords",
    "house_from_position",
    "is_strong",
    "base_yoga_strength",
    "yoga_strength",
    "scaled_strength",
    "mahapurusha_strength",
]

DEFAULT_CONJUNCTION_ORB = 8.0
GOOD_HOUSES: frozenset[int] = frozenset({1, 4, 5, 7, 9, 10})
WEALTH_HOUSES: frozenset[int] = frozenset({2, 11})
UNAFFLICTED = "None - yoga is unafflicted"

_RETROGRADE_ADJUSTMENTS: Mapping[str, float] = {
    "Jupiter": 5.0,
    "Venus": 5.0,
    "Mercury": 5.0,
    "Saturn": 3.0,
    "Mars": -2.0,
}

_MAHAPURUSHA_HOUSE_BONUS: Mapping[int, float] = {1: 15.0, 10: 12.0, 7: 10.0, 4: 8.0}


def are_conjunct(
    first: PlanetPosition, second: PlanetPosition, orb: float = DEFAULT_CONJUNCTION_ORB
) -> bool:
    return circular_separation(first.longitude, second.longitude) <= orb


def are_mutually_aspecting(first: PlanetPosition, second: PlanetPosition) -> bool:
    """Opposition band test: 170°-190° apart."""

    return circular_separation(first.longitude, second.longitude) >= 170.0


def are_in_exchange(first: PlanetPosition, second: PlanetPosition) -> bool:
    """Parivartana: each planet occupies a sign ruled by the other."""

    return (
        SIGN_LORDS[first.sign] == second.planet and SIGN_LORDS[second.sign] == first.planet
    )


def house_lords(chart: Chart) -> dict[int, str]:
    """Map each whole-sign house to its ruling planet."""

    asc = chart.ascendant_sign_index
    return {house: SIGN_LORDS[ZODIAC_SIGNS[(asc + house - 1) % 12]] for house in range(1, 13)}


def house_from_position(target: PlanetPosition, reference: PlanetPosition) -> int:
    return house_from(target.sign_index, reference.sign_index)


def is_strong(position: PlanetPosition) -> bool:
    return is_exalted(position.planet, position.sign) or is_in_own_sign(
        position.planet, position.sign
    )


@dataclass(frozen=True)
class YogaContext:
    """Per-chart lookups shared by every detector in one analysis pass."""

    chart: Chart
    conjunction_orb: float = DEFAULT_CONJUNCTION_ORB
    lords: Mapping[int, str] = field(default_factory=dict)

    @classmethod
    def build(cls, chart: Chart, *, conjunction_orb: float = DEFAULT_CONJUNCTION_ORB) -> YogaContext:
        return cls(chart=chart, conjunction_orb=conjunction_orb, lords=house_lords(chart))

    def pos(self, planet: str) -> PlanetPosition | None:
        return self.chart.position(planet)

    def lord(self, house: int) -> str:
        return self.lords[house]

    def lord_position(self, house: int) -> PlanetPosition | None:
        return self.chart.position(self.lords[house])

    def conjunct(
        self, first: PlanetPosition, second: PlanetPosition, orb: float | None = None
    ) -> bool:
        return are_conjunct(first, second, self.conjunction_orb if orb is None else orb)

    def positions_in(self, planets: Iterable[str]) -> list[PlanetPosition]:
        found = []
        for planet in planets:
            position = self.chart.position(planet)
            if position is not None:
                found.append(position)
        return found


def are_connected(ctx: YogaContext, first: PlanetPosition, second: PlanetPosition) -> str | None:
    """Return how two positions are linked: conjunction, aspect or exchange."""

    if ctx.conjunct(first, second):
        return "conjunction"
    if are_mutually_aspecting(first, second):
        return "mutual aspect"
    if are_in_exchange(first, second):
        return "exchange"
    return None


Detector = Callable[[YogaContext], Sequence[Yoga]]


def base_yoga_strength(positions: Iterable[PlanetPosition]) -> float:
    """Additive dignity and placement score before any affliction."""

    score = 50.0
    for position in positions:
        planet, sign, house = position.planet, position.sign, position.house
        if is_exalted(planet, sign):
            score += 15.0
        if is_in_own_sign(planet, sign):
            score += 12.0
        if is_in_friend_sign(planet, sign):
            score += 6.0
        if house in GOOD_HOUSES:
            score += 8.0
        if house in WEALTH_HOUSES:
            score += 4.0
        if is_debilitated(planet, sign):
            score -= 15.0
        if house in DUSTHANA_HOUSES:
            score -= 10.0
        if position.retrograde:
            score += _RETROGRADE_ADJUSTMENTS.get(planet, 0.0)
        if has_directional_strength(position):
            score += 7.0
    return score


def scaled_strength(
    base: float, positions: Sequence[PlanetPosition], chart: Chart
) -> tuple[float, tuple[str, ...]]:
    """Apply the cancellation pipeline to ``base`` and clamp to [10, 100]."""

    result = cancellation_factor(positions, chart)
    return min(max(base * result.factor, 10.0), 100.0), result.notes


def yoga_strength(
    positions: Sequence[PlanetPosition], chart: Chart, *, multiplier: float = 1.0
) -> tuple[float, tuple[str, ...]]:
    return scaled_strength(base_yoga_strength(positions) * multiplier, positions, chart)


def mahapurusha_strength(
    position: PlanetPosition, chart: Chart
) -> tuple[float, tuple[str, ...]]:
    """Variant formula for the five great-person yogas, clamped to [30, 100]."""

    notes: list[str] = []
    strength = 70.0 + _MAHAPURUSHA_HOUSE_BONUS.get(position.house, 0.0)
    if has_directional_strength(position):
        strength += 5.0

    combustion = combustion_factor(position, chart)
    if combustion < 1.0:
        strength *= combustion
        if combustion < 0.6:
            notes.append(f"{position.planet} is combust - yoga significantly weakened")

    strength *= benefic_aspect_boost(position, chart)

    affliction = malefic_affliction_factor(position, chart)
    if affliction < 0.85:
        strength *= affliction
        notes.append("Malefic aspects reduce yoga results")

    if is_papakartari(position, chart):
        strength *= 0.75
        notes.append("Planet hemmed between malefics")

    moon = chart.position("Moon")
    if moon is not None and position.planet != "Moon":
        from_moon = house_from_position(position, moon)
        if from_moon in DUSTHANA_HOUSES:
            strength *= 0.85
            notes.append("Weak position from Moon")
        elif from_moon in KENDRA_HOUSES:
            strength *= 1.1
    return min(max(strength, 30.0), 100.0), tuple(notes)
