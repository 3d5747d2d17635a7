"""Affliction and boost modifiers reused by the yoga strength formulas.

Each modifier is a pure function of one position and the whole chart and
returns a multiplier (or flag).  :func:`cancellation_factor` runs them as an
ordered pipeline, combustion first, then hemming, malefic aspects,
debilitation, enemy sign and finally the benefic boost, and multiplies the
results together.  Missing positions leave a modifier neutral.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .data import (
    COMBUSTION_ORBS,
    EXALTATION_SIGNS,
    KENDRA_HOUSES,
    NATURAL_MALEFICS,
    NODE_ASPECT_OFFSETS,
    RETROGRADE_COMBUSTION_ORBS,
    SIGN_LORDS,
    SPECIAL_ASPECT_OFFSETS,
)
from .dignity import is_debilitated, is_exalted, is_in_enemy_sign
from .utils import circular_separation, forward_angle, house_from, orb_from

if TYPE_CHECKING:
    from ..chart.models import Chart, PlanetPosition

__all__ = [
    "CancellationResult",
    "MALEFIC_WEIGHTS",
    "BENEFIC_WEIGHTS",
    "combustion_factor",
    "is_papakartari",
    "is_vedic_aspecting",
    "malefic_affliction_factor",
    "moon_phase_strength",
    "benefic_aspect_boost",
    "neecha_bhanga_reasons",
    "has_neecha_bhanga",
    "cancellation_factor",
]

VEDIC_ASPECT_ORB = 5.0
DEEP_COMBUSTION_DEG = 3.0

MALEFIC_WEIGHTS: Mapping[str, float] = {
    "Saturn": 0.25,
    "Mars": 0.20,
    "Rahu": 0.18,
    "Ketu": 0.12,
    "Sun": 0.08,
}
MAX_AFFLICTION = 0.6

BENEFIC_WEIGHTS: Mapping[str, float] = {
    "Jupiter": 0.15,
    "Venus": 0.10,
    "Mercury": 0.08,
    "Moon": 0.05,
}
MAX_BOOST = 0.3

_NODES = frozenset({"Rahu", "Ketu"})

# Exact angle of the glance cast onto the n-th house from the caster.  Angles
# are measured forward from the caster through 360, so the 8th, 9th and 10th
# house glances match near 210, 240 and 270 rather than their 180-folded
# separations.
_OFFSET_ANGLES: Mapping[int, float] = {
    3: 60.0,
    4: 90.0,
    5: 120.0,
    7: 180.0,
    8: 210.0,
    9: 240.0,
    10: 270.0,
}


def combustion_factor(position: PlanetPosition, chart: Chart) -> float:
    """Return the Asta multiplier for ``position``.

    1.0 beyond the planet's orb from the Sun, 0.2 within 3° of it, and a
    linear ramp from 0.4 up to 1.0 in between.
    """

    orb = COMBUSTION_ORBS.get(position.planet)
    if orb is None:
        return 1.0
    sun = chart.position("Sun")
    if sun is None:
        return 1.0
    if position.retrograde:
        orb = RETROGRADE_COMBUSTION_ORBS.get(position.planet, orb)
    distance = circular_separation(position.longitude, sun.longitude)
    if distance >= orb:
        return 1.0
    if distance <= DEEP_COMBUSTION_DEG:
        return 0.2
    return 1.0 - (1.0 - distance / orb) * 0.6


def is_papakartari(position: PlanetPosition, chart: Chart) -> bool:
    """``True`` when natural malefics occupy both houses flanking ``position``."""

    before = 12 if position.house == 1 else position.house - 1
    after = 1 if position.house == 12 else position.house + 1
    flank_before = any(
        other.house == before and other.planet in NATURAL_MALEFICS for other in chart.positions
    )
    flank_after = any(
        other.house == after and other.planet in NATURAL_MALEFICS for other in chart.positions
    )
    return flank_before and flank_after


def is_vedic_aspecting(aspecting: PlanetPosition, target: PlanetPosition) -> bool:
    """Directional graha drishti test with a 5° orb around the exact angle.

    Rahu and Ketu also glance on the houses in
    :data:`~jyotishengine.jyotish.data.NODE_ASPECT_OFFSETS` with no orb.
    """

    offset = house_from(target.sign_index, aspecting.sign_index)
    if aspecting.planet in _NODES and offset in NODE_ASPECT_OFFSETS:
        return True
    allowed = (7, *SPECIAL_ASPECT_OFFSETS.get(aspecting.planet, ()))
    if offset not in allowed:
        return False
    angle = forward_angle(aspecting.longitude, target.longitude)
    return orb_from(angle, _OFFSET_ANGLES[offset]) <= VEDIC_ASPECT_ORB


def malefic_affliction_factor(position: PlanetPosition, chart: Chart) -> float:
    total = 0.0
    for planet, weight in MALEFIC_WEIGHTS.items():
        if planet == position.planet:
            continue
        malefic = chart.position(planet)
        if malefic is not None and is_vedic_aspecting(malefic, position):
            total += weight
    return 1.0 - min(total, MAX_AFFLICTION)


def moon_phase_strength(chart: Chart) -> float:
    """Return 0 at new Moon rising to 1 at full Moon; 0.5 when unknown."""

    moon = chart.position("Moon")
    sun = chart.position("Sun")
    if moon is None or sun is None:
        return 0.5
    elongation = forward_angle(sun.longitude, moon.longitude)
    if elongation <= 180.0:
        return elongation / 180.0
    return (360.0 - elongation) / 180.0


def benefic_aspect_boost(position: PlanetPosition, chart: Chart) -> float:
    total = 0.0
    for planet, weight in BENEFIC_WEIGHTS.items():
        if planet == position.planet:
            continue
        benefic = chart.position(planet)
        if benefic is None:
            continue
        if planet == "Moon" and moon_phase_strength(chart) < 0.5:
            continue
        if planet == "Mercury" and combustion_factor(benefic, chart) < 0.6:
            continue
        if is_vedic_aspecting(benefic, position):
            total += weight
    return 1.0 + min(total, MAX_BOOST)


def neecha_bhanga_reasons(position: PlanetPosition, chart: Chart) -> tuple[str, ...]:
    """Return the debilitation-cancellation conditions met by ``position``."""

    if not is_debilitated(position.planet, position.sign):
        return ()
    reasons: list[str] = []
    if position.house in KENDRA_HOUSES:
        reasons.append("kendra_placement")
    sign_lord = chart.position(SIGN_LORDS[position.sign])
    if sign_lord is not None and sign_lord.house in KENDRA_HOUSES:
        reasons.append("sign_lord_in_kendra")
    exaltation_sign = EXALTATION_SIGNS.get(position.planet)
    if exaltation_sign is not None:
        exaltation_lord = chart.position(SIGN_LORDS[exaltation_sign])
        if exaltation_lord is not None and exaltation_lord.house in KENDRA_HOUSES:
            reasons.append("exaltation_lord_in_kendra")
    if any(
        other.planet != position.planet
        and other.house == position.house
        and is_exalted(other.planet, other.sign)
        for other in chart.positions
    ):
        reasons.append("conjunct_exalted_planet")
    return tuple(reasons)


def has_neecha_bhanga(position: PlanetPosition, chart: Chart) -> bool:
    return bool(neecha_bhanga_reasons(position, chart))


@dataclass(frozen=True)
class CancellationResult:
    factor: float
    notes: tuple[str, ...]


def cancellation_factor(
    positions: Iterable[PlanetPosition], chart: Chart
) -> CancellationResult:
    """Combine every modifier over ``positions`` into one clamped multiplier."""

    factor = 1.0
    notes: list[str] = []
    for position in positions:
        name = position.planet
        combustion = combustion_factor(position, chart)
        if combustion < 0.9:
            factor *= combustion
            if combustion < 0.5:
                notes.append(f"{name} is deeply combust")
            elif combustion < 0.8:
                notes.append(f"{name} is combust")

        if is_papakartari(position, chart):
            factor *= 0.7
            notes.append(f"{name} hemmed between malefics")

        affliction = malefic_affliction_factor(position, chart)
        if affliction < 0.9:
            factor *= affliction
            if affliction < 0.7:
                notes.append(f"{name} severely afflicted by malefics")

        if is_debilitated(name, position.sign) and not has_neecha_bhanga(position, chart):
            factor *= 0.5
            notes.append(f"{name} debilitated without cancellation")

        if is_in_enemy_sign(name, position.sign):
            factor *= 0.85
            notes.append(f"{name} in enemy sign")

        boost = benefic_aspect_boost(position, chart)
        if boost > 1.0:
            factor *= boost
    return CancellationResult(factor=min(max(factor, 0.1), 1.5), notes=tuple(notes))
