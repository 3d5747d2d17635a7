"""Graha drishti (planetary aspect) engine.

Every graha glances fully on the 7th sign from itself.  Mars additionally
aspects the 4th and 8th, Jupiter the 5th and 9th and Saturn the 3rd and 10th;
optionally the nodes borrow Jupiter's special glances.  Conjunction (the 1st
from itself) is treated as an aspect kind of its own so the matrix reports
every relationship in one pass.

Three matching modes are supported:

``sign_based``
    Whole-sign distance from caster to receiver equals the kind's house
    distance.  Strength is always the full classical weight.
``degree_based``
    The forward angle from caster to receiver lies within the configured orb
    of the kind's exact angle.  Strength decays linearly from 1.0 to 0.5 at
    the orb limit.
``hybrid``
    Accept a sign match, or a degree match whose sign distance is at most one
    sign away from the nominal house distance (12 wraps onto 1).  Sign
    matches score 1.0 inside the orb and 0.9 outside it; degree-only matches
    decay from 0.8 to 0.5.

The resulting Drishti Bala is the classical strength of the kind multiplied
by that orb factor.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config.settings import DrishtiCfg
from .data import (
    NATURAL_BENEFICS,
    NATURAL_MALEFICS,
    OUTER_PLANETS,
    PLANET_ORDER,
    ZODIAC_SIGNS,
)
from .utils import forward_angle, house_from, norm360, orb_from, sign_distance, sign_index

if TYPE_CHECKING:
    from ..chart.models import Chart, PlanetPosition

__all__ = [
    "AspectKind",
    "AspectRelation",
    "AspectMatrix",
    "PlanetaryAspectStrength",
    "HouseAspect",
    "ArgalaInfluence",
    "ArgalaAnalysis",
    "ASPECT_KINDS",
    "applicable_kinds",
    "can_cast_aspect",
    "evaluate_aspect",
    "strength_label",
    "compute_aspect_matrix",
    "compute_planetary_aspect_strength",
    "compute_house_aspects",
    "compute_argala",
]

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class AspectKind:
    name: str
    label: str
    house_distance: int
    angle: float
    nature: str
    classical_strength: float


ASPECT_KINDS: Mapping[str, AspectKind] = {
    kind.name: kind
    for kind in (
        AspectKind("conjunction", "Conjunction", 1, 0.0, "variable", 1.0),
        AspectKind("seventh_house", "7th House Aspect", 7, 180.0, "significant", 1.0),
        AspectKind("mars_4th", "Mars 4th House Aspect", 4, 90.0, "challenging", 0.75),
        AspectKind("mars_8th", "Mars 8th House Aspect", 8, 210.0, "challenging", 1.0),
        AspectKind("jupiter_5th", "Jupiter 5th House Aspect", 5, 120.0, "harmonious", 0.5),
        AspectKind("jupiter_9th", "Jupiter 9th House Aspect", 9, 240.0, "harmonious", 1.0),
        AspectKind("saturn_3rd", "Saturn 3rd House Aspect", 3, 60.0, "challenging", 0.75),
        AspectKind("saturn_10th", "Saturn 10th House Aspect", 10, 270.0, "challenging", 1.0),
    )
}

_UNIVERSAL_KINDS = ("conjunction", "seventh_house")
_SPECIAL_KINDS: Mapping[str, tuple[str, ...]] = {
    "Mars": ("mars_4th", "mars_8th"),
    "Jupiter": ("jupiter_5th", "jupiter_9th"),
    "Saturn": ("saturn_3rd", "saturn_10th"),
}
_NODE_KINDS = ("jupiter_5th", "jupiter_9th")

_STRENGTH_LABELS: tuple[tuple[float, str], ...] = (
    (0.95, "Exact (Purna)"),
    (0.75, "Strong (Adhika)"),
    (0.5, "Medium (Madhya)"),
    (0.25, "Weak (Alpa)"),
)


def strength_label(strength: float) -> str:
    for threshold, label in _STRENGTH_LABELS:
        if strength >= threshold:
            return label
    return "Negligible (Sunya)"


def can_cast_aspect(planet: str, config: DrishtiCfg) -> bool:
    return config.include_outer_planets or planet not in OUTER_PLANETS


def applicable_kinds(planet: str, config: DrishtiCfg) -> tuple[AspectKind, ...]:
    """Return the aspect kinds ``planet`` may cast under ``config``."""

    names = list(_UNIVERSAL_KINDS)
    names.extend(_SPECIAL_KINDS.get(planet, ()))
    if config.include_node_aspects and planet in {"Rahu", "Ketu"}:
        names.extend(_NODE_KINDS)
    return tuple(ASPECT_KINDS[name] for name in names)


@dataclass(frozen=True)
class AspectRelation:
    """One caster → receiver drishti under a specific aspect kind."""

    caster: str
    receiver: str
    kind: AspectKind
    forward_angle: float
    orb: float
    strength: float
    applying: bool
    sign_based: bool
    caster_sign: str
    receiver_sign: str

    @property
    def nature(self) -> str:
        return self.kind.nature

    @property
    def strength_label(self) -> str:
        return strength_label(self.strength)

    @property
    def is_full_aspect(self) -> bool:
        return self.kind.classical_strength >= 1.0

    def describe(self) -> str:
        motion = "Applying" if self.applying else "Separating"
        return (
            f"{self.caster} casts {self.kind.label} on {self.receiver} ({motion}) - "
            f"{self.strength_label} [{self.strength * 100:.2f}% Drishti Bala]"
        )


def _adjacent_sign_distance(actual: int, nominal: int) -> bool:
    gap = abs(actual - nominal)
    return gap <= 1 or gap == 11


def _orb_factor(mode: str, orb: float, limit: float, sign_match: bool) -> float:
    within = orb <= limit
    if mode == "sign_based":
        return 1.0
    if mode == "degree_based":
        return 1.0 - (orb / limit) * 0.5 if within else 0.0
    if sign_match:
        return 1.0 if within else 0.9
    return 0.8 - (orb / limit) * 0.3 if within else 0.0


def evaluate_aspect(
    caster: PlanetPosition,
    receiver: PlanetPosition,
    kind: AspectKind,
    config: DrishtiCfg,
) -> AspectRelation | None:
    """Return the relation ``caster`` forms on ``receiver`` via ``kind``, if any."""

    caster_idx = sign_index(caster.longitude)
    receiver_idx = sign_index(receiver.longitude)
    distance = sign_distance(caster_idx, receiver_idx)
    fwd = forward_angle(caster.longitude, receiver.longitude)
    orb = orb_from(fwd, kind.angle)
    limit = config.orb_for(kind.name)

    sign_match = distance == kind.house_distance
    degree_match = orb <= limit
    if config.mode == "sign_based":
        matched = sign_match
    elif config.mode == "degree_based":
        matched = degree_match
    else:
        matched = sign_match or (
            degree_match and _adjacent_sign_distance(distance, kind.house_distance)
        )
    if not matched:
        return None

    factor = _orb_factor(config.mode, orb, limit, sign_match)
    future_fwd = forward_angle(
        caster.longitude + caster.speed, receiver.longitude + receiver.speed
    )
    applying = orb_from(future_fwd, kind.angle) < orb
    return AspectRelation(
        caster=caster.planet,
        receiver=receiver.planet,
        kind=kind,
        forward_angle=fwd,
        orb=orb,
        strength=kind.classical_strength * factor,
        applying=applying,
        sign_based=sign_match,
        caster_sign=ZODIAC_SIGNS[caster_idx],
        receiver_sign=ZODIAC_SIGNS[receiver_idx],
    )


_ORDINALS: Mapping[str, int] = {planet: idx for idx, planet in enumerate(PLANET_ORDER)}


def _pair_key(a: str, b: str) -> tuple[str, str]:
    if _ORDINALS.get(a, 99) <= _ORDINALS.get(b, 99):
        return (a, b)
    return (b, a)


def _mutual_pairs(
    aspects: Sequence[AspectRelation],
) -> tuple[tuple[AspectRelation, AspectRelation], ...]:
    processed: set[tuple[str, str]] = set()
    pairs: list[tuple[AspectRelation, AspectRelation]] = []
    for aspect in aspects:
        key = _pair_key(aspect.caster, aspect.receiver)
        if key in processed:
            continue
        reverse = next(
            (
                other
                for other in aspects
                if other.caster == aspect.receiver and other.receiver == aspect.caster
            ),
            None,
        )
        if reverse is not None:
            pairs.append((aspect, reverse))
            processed.add(key)
    return tuple(pairs)


@dataclass(frozen=True)
class AspectMatrix:
    """Read-only view over the relations found in one chart."""

    aspects: tuple[AspectRelation, ...]
    mutual_pairs: tuple[tuple[AspectRelation, AspectRelation], ...]

    def __len__(self) -> int:
        return len(self.aspects)

    def by_caster(self) -> dict[str, tuple[AspectRelation, ...]]:
        grouped: dict[str, list[AspectRelation]] = {}
        for aspect in self.aspects:
            grouped.setdefault(aspect.caster, []).append(aspect)
        return {planet: tuple(items) for planet, items in grouped.items()}

    def by_receiver(self) -> dict[str, tuple[AspectRelation, ...]]:
        grouped: dict[str, list[AspectRelation]] = {}
        for aspect in self.aspects:
            grouped.setdefault(aspect.receiver, []).append(aspect)
        return {planet: tuple(items) for planet, items in grouped.items()}

    def cast_by(self, planet: str) -> tuple[AspectRelation, ...]:
        return tuple(aspect for aspect in self.aspects if aspect.caster == planet)

    def received_by(self, planet: str) -> tuple[AspectRelation, ...]:
        return tuple(aspect for aspect in self.aspects if aspect.receiver == planet)

    @property
    def conjunctions(self) -> tuple[AspectRelation, ...]:
        return tuple(a for a in self.aspects if a.kind.name == "conjunction")

    @property
    def seventh_house(self) -> tuple[AspectRelation, ...]:
        return tuple(a for a in self.aspects if a.kind.name == "seventh_house")

    @property
    def special(self) -> tuple[AspectRelation, ...]:
        return tuple(
            a for a in self.aspects if a.kind.name not in ("conjunction", "seventh_house")
        )

    def aspect_between(self, caster: str, receiver: str) -> AspectRelation | None:
        for aspect in self.aspects:
            if aspect.caster == caster and aspect.receiver == receiver:
                return aspect
        return None

    def has_mutual_aspect(self, planet_a: str, planet_b: str) -> bool:
        wanted = {planet_a, planet_b}
        return any({first.caster, first.receiver} == wanted for first, _ in self.mutual_pairs)

    def total_drishti_bala_on(self, planet: str) -> float:
        return sum(aspect.strength for aspect in self.received_by(planet))


def compute_aspect_matrix(chart: Chart, config: DrishtiCfg | None = None) -> AspectMatrix:
    """Evaluate every ordered planet pair of ``chart`` and build the matrix."""

    config = config or DrishtiCfg()
    participants = [p for p in chart.positions if can_cast_aspect(p.planet, config)]
    relations: list[AspectRelation] = []
    for caster in participants:
        kinds = applicable_kinds(caster.planet, config)
        for receiver in participants:
            if receiver.planet == caster.planet:
                continue
            for kind in kinds:
                relation = evaluate_aspect(caster, receiver, kind, config)
                if relation is not None:
                    relations.append(relation)
    relations.sort(key=lambda relation: relation.strength, reverse=True)
    ordered = tuple(relations)
    matrix = AspectMatrix(aspects=ordered, mutual_pairs=_mutual_pairs(ordered))
    LOG.debug(
        "Drishti matrix (%s): %d relations, %d mutual pairs",
        config.mode,
        len(matrix.aspects),
        len(matrix.mutual_pairs),
    )
    return matrix


@dataclass(frozen=True)
class PlanetaryAspectStrength:
    """Benefic/malefic drishti summary for a single planet."""

    planet: str
    aspects_cast: tuple[AspectRelation, ...]
    aspects_received: tuple[AspectRelation, ...]
    benefic_aspects: tuple[AspectRelation, ...]
    malefic_aspects: tuple[AspectRelation, ...]
    total_drishti_bala_received: float
    net_influence: float
    strongest_received: AspectRelation | None

    @property
    def is_under_benefic_influence(self) -> bool:
        return self.net_influence > 0


def _is_benefic_aspect(aspect: AspectRelation) -> bool:
    return aspect.caster in NATURAL_BENEFICS and aspect.nature == "harmonious"


def _is_malefic_aspect(aspect: AspectRelation) -> bool:
    return aspect.caster in NATURAL_MALEFICS and aspect.nature == "challenging"


def compute_planetary_aspect_strength(
    planet: str, chart: Chart, config: DrishtiCfg | None = None
) -> PlanetaryAspectStrength:
    """Summarise the drishti ``planet`` casts and receives in ``chart``."""

    matrix = compute_aspect_matrix(chart, config)
    received = matrix.received_by(planet)
    benefic = tuple(a for a in received if _is_benefic_aspect(a))
    malefic = tuple(a for a in received if _is_malefic_aspect(a))
    net = sum(a.strength for a in benefic) - sum(a.strength for a in malefic)
    strongest = max(received, key=lambda a: a.strength) if received else None
    return PlanetaryAspectStrength(
        planet=planet,
        aspects_cast=matrix.cast_by(planet),
        aspects_received=received,
        benefic_aspects=benefic,
        malefic_aspects=malefic,
        total_drishti_bala_received=matrix.total_drishti_bala_on(planet),
        net_influence=net,
        strongest_received=strongest,
    )


@dataclass(frozen=True)
class HouseAspect:
    planet: str
    house: int
    kind: AspectKind
    forward_angle: float
    orb: float
    strength: float


def compute_house_aspects(
    house: int, chart: Chart, config: DrishtiCfg | None = None
) -> tuple[HouseAspect, ...]:
    """Return planets glancing at whole-sign ``house`` by sign distance.

    Angles are measured to the middle of the house sign; strength is the full
    classical weight of the aspect kind.
    """

    config = config or DrishtiCfg()
    house_idx = (chart.ascendant_sign_index + house - 1) % 12
    midpoint = norm360(house_idx * 30.0 + 15.0)
    found: list[HouseAspect] = []
    for position in chart.positions:
        if not can_cast_aspect(position.planet, config):
            continue
        distance = sign_distance(position.sign_index, house_idx)
        for kind in applicable_kinds(position.planet, config):
            if distance != kind.house_distance:
                continue
            fwd = forward_angle(position.longitude, midpoint)
            found.append(
                HouseAspect(
                    planet=position.planet,
                    house=house,
                    kind=kind,
                    forward_angle=fwd,
                    orb=orb_from(fwd, kind.angle),
                    strength=kind.classical_strength,
                )
            )
    found.sort(key=lambda item: item.strength, reverse=True)
    return tuple(found)


@dataclass(frozen=True)
class ArgalaInfluence:
    planet: str
    house_from: int
    role: str
    obstructed: bool


@dataclass(frozen=True)
class ArgalaAnalysis:
    planet: str
    primary: tuple[ArgalaInfluence, ...]
    secondary: tuple[ArgalaInfluence, ...]
    obstructions: tuple[ArgalaInfluence, ...]

    @property
    def net_unobstructed(self) -> int:
        return sum(1 for item in (*self.primary, *self.secondary) if not item.obstructed)


# Argala house -> the house that obstructs it (Virodhargala).
_ARGALA_OBSTRUCTION: Mapping[int, int] = {2: 12, 4: 10, 11: 3, 5: 9}
_PRIMARY_ARGALA = (2, 4, 11)


def compute_argala(planet: str, chart: Chart) -> ArgalaAnalysis:
    """Return the Argala (intervention) on ``planet`` and its obstructions."""

    position = chart.position(planet)
    if position is None:
        return ArgalaAnalysis(planet, (), (), ())
    occupants: dict[int, list[str]] = {}
    for other in chart.positions:
        if other.planet == planet:
            continue
        offset = house_from(other.sign_index, position.sign_index)
        occupants.setdefault(offset, []).append(other.planet)

    primary: list[ArgalaInfluence] = []
    secondary: list[ArgalaInfluence] = []
    obstructions: list[ArgalaInfluence] = []
    for argala_house, blocking_house in _ARGALA_OBSTRUCTION.items():
        sources = occupants.get(argala_house, [])
        blockers = occupants.get(blocking_house, [])
        if not sources:
            continue
        obstructed = len(blockers) >= len(sources)
        role = "primary" if argala_house in _PRIMARY_ARGALA else "secondary"
        target = primary if role == "primary" else secondary
        target.extend(
            ArgalaInfluence(name, argala_house, role, obstructed) for name in sources
        )
        obstructions.extend(
            ArgalaInfluence(name, blocking_house, "obstruction", False) for name in blockers
        )
    return ArgalaAnalysis(planet, tuple(primary), tuple(secondary), tuple(obstructions))

