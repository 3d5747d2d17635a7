"""Nabhasa (pattern) yogas keyed on how the planets are distributed.

Three families are evaluated:

* shape (Akriti) yogas look at which houses are occupied: Yava, Shringataka,
  Gada and Shakata;
* modality (Ashraya) yogas fire when every occupied sign shares a modality:
  Rajju (movable), Musala (fixed) and Nala (dual);
* count (Sankhya) yogas count the occupied signs: Gola (1), Yuga (2),
  Shoola (3), Kedara (4) and Veena (7).

A shape yoga overrides both other families; modality and count yogas may
hold together.  Each detector evaluates the precedence check itself, so the
detectors stay independent of each other.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..jyotish.data import MAIN_PLANETS, SIGN_MODALITIES
from .models import Yoga
from .primitives import YogaContext

__all__ = ["DETECTORS", "NABHASA_STRENGTH"]

LOG = logging.getLogger(__name__)

NABHASA_STRENGTH = 60.0

# The nodes always sit in opposite signs, so the patterns use the seven grahas.
_PATTERN_PLANETS = MAIN_PLANETS - {"Rahu", "Ketu"}

_ADJACENT_KENDRAS: tuple[tuple[int, int], ...] = ((1, 4), (4, 7), (7, 10), (10, 1))


@dataclass(frozen=True)
class _Occupancy:
    planets: tuple[str, ...]
    houses: frozenset[int]
    signs: frozenset[str]


def _occupancy(ctx: YogaContext) -> _Occupancy | None:
    positions = [p for p in ctx.chart.positions if p.planet in _PATTERN_PLANETS]
    if not positions:
        return None
    return _Occupancy(
        planets=tuple(p.planet for p in positions),
        houses=frozenset(p.house for p in positions),
        signs=frozenset(p.sign for p in positions),
    )


def _is_yava(occ: _Occupancy) -> bool:
    return occ.houses == {4, 10}


def _is_shakata(occ: _Occupancy) -> bool:
    return occ.houses == {1, 7}


def _is_shringataka(occ: _Occupancy) -> bool:
    return occ.houses == {1, 5, 9}


def _is_gada(occ: _Occupancy) -> bool:
    return any(occ.houses == {first, second} for first, second in _ADJACENT_KENDRAS)


def _all_in_modality(occ: _Occupancy, modality: str) -> bool:
    return all(SIGN_MODALITIES[sign] == modality for sign in occ.signs)


def _shape_matched(occ: _Occupancy) -> bool:
    return _is_yava(occ) or _is_shakata(occ) or _is_shringataka(occ) or _is_gada(occ)


def _nabhasa(occ: _Occupancy, name: str, description: str, effects: str) -> Yoga:
    lowered = effects.lower()
    return Yoga(
        name=name,
        sanskrit_name=name,
        category="nabhasa",
        planets=occ.planets,
        houses=tuple(sorted(occ.houses)),
        description=description,
        effects=effects,
        strength=NABHASA_STRENGTH,
        auspicious="poor" not in lowered and "dirty" not in lowered,
        activation_period="Throughout life",
    )


def _shape_detector(
    predicate: Callable[[_Occupancy], bool], name: str, description: str, effects: str
) -> Callable[[YogaContext], Sequence[Yoga]]:
    def detect(ctx: YogaContext) -> list[Yoga]:
        occ = _occupancy(ctx)
        if occ is None or not predicate(occ):
            return []
        return [_nabhasa(occ, name, description, effects)]

    detect.__name__ = f"_collect_{name.split()[0].lower()}"
    return detect


def _modality_detector(
    modality: str, name: str, description: str, effects: str
) -> Callable[[YogaContext], Sequence[Yoga]]:
    def detect(ctx: YogaContext) -> list[Yoga]:
        occ = _occupancy(ctx)
        if occ is None or _shape_matched(occ) or not _all_in_modality(occ, modality):
            return []
        return [_nabhasa(occ, name, description, effects)]

    detect.__name__ = f"_collect_{name.split()[0].lower()}"
    return detect


def _count_detector(
    count: int, name: str, description: str, effects: str
) -> Callable[[YogaContext], Sequence[Yoga]]:
    def detect(ctx: YogaContext) -> list[Yoga]:
        occ = _occupancy(ctx)
        if occ is None or len(occ.signs) != count:
            return []
        if _shape_matched(occ):
            LOG.debug("%s suppressed by a shape pattern", name)
            return []
        return [_nabhasa(occ, name, description, effects)]

    detect.__name__ = f"_collect_{name.split()[0].lower()}"
    return detect


DETECTORS = (
    _shape_detector(
        _is_yava,
        "Yava Yoga",
        "All planets in the 4th and 10th houses",
        "Medium wealth initially, prosperity in middle age, decline in old age",
    ),
    _shape_detector(
        _is_shringataka,
        "Shringataka Yoga",
        "All planets in the Trikona houses (1, 5, 9)",
        "Fond of quarrels initially, happiness in middle age, wandering in old age",
    ),
    _shape_detector(
        _is_gada,
        "Gada Yoga",
        "Planets in two adjacent Kendra houses",
        "Wealthy through ceremonies, always engaged in auspicious activities",
    ),
    _shape_detector(
        _is_shakata,
        "Shakata Yoga",
        "All planets in the 1st and 7th houses (like cart wheels)",
        "Fluctuating fortune, hardship followed by wealth in cycles",
    ),
    _modality_detector(
        "movable",
        "Rajju Yoga",
        "All planets in movable signs (Chara Rashi)",
        "Fond of travel, living in foreign lands, restless nature",
    ),
    _modality_detector(
        "fixed",
        "Musala Yoga",
        "All planets in fixed signs (Sthira Rashi)",
        "Proud, wealthy, learned, famous, many children",
    ),
    _modality_detector(
        "dual",
        "Nala Yoga",
        "All planets in dual signs (Dwiswabhava Rashi)",
        "Handsome, skilled in arts, wealthy through multiple sources",
    ),
    _count_detector(
        4,
        "Kedara Yoga",
        "All planets in exactly 4 signs",
        "Agricultural wealth, helpful to others, truthful",
    ),
    _count_detector(
        3,
        "Shoola Yoga",
        "All planets in exactly 3 signs",
        "Sharp intellect, quarrelsome, cruel, poor",
    ),
    _count_detector(
        2,
        "Yuga Yoga",
        "All planets in exactly 2 signs",
        "Heretic, poor, rejected by family",
    ),
    _count_detector(
        1,
        "Gola Yoga",
        "All planets in exactly 1 sign",
        "Poor, dirty, ignorant, idle",
    ),
    _count_detector(
        7,
        "Veena Yoga",
        "All planets spread across 7 signs",
        "Fond of music, dance, leader, wealthy, happy",
    ),
)
