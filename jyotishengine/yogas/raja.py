"""Raja (authority) yogas."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..jyotish.affliction import (
    benefic_aspect_boost,
    combustion_factor,
    is_papakartari,
    malefic_affliction_factor,
    neecha_bhanga_reasons,
)
from ..jyotish.data import KENDRA_HOUSES, MAIN_PLANETS, TRIKONA_HOUSES
from ..jyotish.dignity import is_debilitated
from .models import Yoga
from .primitives import (
    UNAFFLICTED,
    YogaContext,
    are_in_exchange,
    are_mutually_aspecting,
    base_yoga_strength,
    house_from_position,
    is_strong,
    yoga_strength,
)

if TYPE_CHECKING:
    from ..chart.models import PlanetPosition

__all__ = ["DETECTORS"]

LOG = logging.getLogger(__name__)


def _kendra_trikona_yoga(
    kendra: PlanetPosition, trikona: PlanetPosition, link: str, multiplier: float, ctx: YogaContext
) -> Yoga:
    strength, notes = yoga_strength([kendra, trikona], ctx.chart, multiplier=multiplier)
    return Yoga(
        name="Kendra-Trikona Raja Yoga",
        sanskrit_name="Kendra-Trikona Raja Yoga",
        category="raja",
        planets=(kendra.planet, trikona.planet),
        houses=(kendra.house, trikona.house),
        description=(
            f"{kendra.planet} (Kendra lord) and {trikona.planet} (Trikona lord) in {link}"
        ),
        effects="Rise to power and authority, leadership position, recognition from government",
        strength=strength,
        auspicious=True,
        activation_period=f"{kendra.planet}-{trikona.planet} Dasha/Antardasha",
        cancellation_factors=notes or (UNAFFLICTED,),
    )


def _collect_kendra_trikona(ctx: YogaContext) -> list[Yoga]:
    yogas: list[Yoga] = []
    seen: set[tuple[str, frozenset[str]]] = set()
    for kendra_house in sorted(KENDRA_HOUSES):
        for trikona_house in sorted(TRIKONA_HOUSES):
            kendra_lord = ctx.lord(kendra_house)
            trikona_lord = ctx.lord(trikona_house)
            if kendra_lord == trikona_lord:
                continue
            kendra = ctx.pos(kendra_lord)
            trikona = ctx.pos(trikona_lord)
            if kendra is None or trikona is None:
                continue
            pair = frozenset({kendra_lord, trikona_lord})
            if ctx.conjunct(kendra, trikona) and ("conjunction", pair) not in seen:
                seen.add(("conjunction", pair))
                yogas.append(_kendra_trikona_yoga(kendra, trikona, "conjunction", 1.0, ctx))
            if are_mutually_aspecting(kendra, trikona) and ("aspect", pair) not in seen:
                seen.add(("aspect", pair))
                yogas.append(_kendra_trikona_yoga(kendra, trikona, "aspect", 0.8, ctx))
            if are_in_exchange(kendra, trikona) and ("exchange", pair) not in seen:
                seen.add(("exchange", pair))
                strength, notes = yoga_strength([kendra, trikona], ctx.chart, multiplier=1.2)
                yogas.append(
                    Yoga(
                        name="Parivartana Raja Yoga",
                        sanskrit_name="Parivartana Raja Yoga",
                        category="raja",
                        planets=(kendra.planet, trikona.planet),
                        houses=(kendra.house, trikona.house),
                        description=f"Exchange between {kendra.planet} and {trikona.planet}",
                        effects=(
                            "Strong Raja Yoga through mutual exchange, stable rise to power, "
                            "lasting authority"
                        ),
                        strength=strength,
                        auspicious=True,
                        activation_period=f"{kendra.planet} and {trikona.planet} Dashas",
                        cancellation_factors=notes or (UNAFFLICTED,),
                    )
                )
    return yogas


def _collect_viparita(ctx: YogaContext) -> list[Yoga]:
    yogas: list[Yoga] = []
    lords: list[str] = []
    for house in (6, 8, 12):
        lord = ctx.lord(house)
        if lord not in lords:
            lords.append(lord)
    for idx, first_lord in enumerate(lords):
        for second_lord in lords[idx + 1 :]:
            first = ctx.pos(first_lord)
            second = ctx.pos(second_lord)
            if first is None or second is None:
                continue
            if not (are_in_exchange(first, second) or ctx.conjunct(first, second)):
                continue
            strength, notes = yoga_strength([first, second], ctx.chart, multiplier=0.7)
            reasons = list(notes)
            for position in (first, second):
                if is_strong(position):
                    reasons.append(
                        f"{position.planet} is strong - Viparita results may be modified"
                    )
            yogas.append(
                Yoga(
                    name="Viparita Raja Yoga",
                    sanskrit_name="Viparita Raja Yoga",
                    category="raja",
                    planets=(first.planet, second.planet),
                    houses=(first.house, second.house),
                    description="Lords of Dusthanas (6, 8, 12) connected",
                    effects=(
                        "Rise through fall of enemies, sudden fortune from unexpected sources, "
                        "gains through others' losses"
                    ),
                    strength=strength,
                    auspicious=True,
                    activation_period=f"{first.planet}-{second.planet} periods",
                    cancellation_factors=tuple(reasons) or (UNAFFLICTED,),
                )
            )
    return yogas


def _neecha_bhanga_strength(
    position: PlanetPosition, ctx: YogaContext
) -> tuple[float, list[str]]:
    chart = ctx.chart
    strength = base_yoga_strength([position])
    notes: list[str] = []
    combustion = combustion_factor(position, chart)
    if combustion < 0.9:
        strength *= combustion
        if combustion < 0.6:
            notes.append(f"{position.planet} is combust - Neecha Bhanga weakened")
    affliction = malefic_affliction_factor(position, chart)
    if affliction < 0.85:
        strength *= affliction
        notes.append("Malefic aspects reduce yoga effectiveness")
    if is_papakartari(position, chart):
        strength *= 0.8
        notes.append("Planet hemmed between malefics")
    strength *= benefic_aspect_boost(position, chart)
    return min(max(strength, 10.0), 100.0), notes


_BHANGA_NOTES = {
    "kendra_placement": "Neecha Bhanga via Kendra placement",
    "sign_lord_in_kendra": "Neecha Bhanga via sign lord in Kendra",
    "exaltation_lord_in_kendra": "Neecha Bhanga via exaltation lord in Kendra",
    "conjunct_exalted_planet": "Neecha Bhanga via exalted planet in the same house",
}


def _collect_neecha_bhanga(ctx: YogaContext) -> list[Yoga]:
    yogas: list[Yoga] = []
    for position in ctx.chart.positions:
        if position.planet not in MAIN_PLANETS:
            continue
        if not is_debilitated(position.planet, position.sign):
            continue
        reasons = neecha_bhanga_reasons(position, ctx.chart)
        if not reasons:
            continue
        strength, notes = _neecha_bhanga_strength(position, ctx)
        notes.insert(0, _BHANGA_NOTES[reasons[0]])
        yogas.append(
            Yoga(
                name="Neecha Bhanga Raja Yoga",
                sanskrit_name="Neecha Bhanga Raja Yoga",
                category="raja",
                planets=(position.planet,),
                houses=(position.house,),
                description=f"{position.planet} debilitated but with cancellation",
                effects=(
                    "Rise from humble beginnings, success after initial struggles, "
                    "respected leader"
                ),
                strength=strength,
                auspicious=True,
                activation_period=f"{position.planet} Dasha",
                cancellation_factors=tuple(notes),
            )
        )
    return yogas


def _collect_maha_raja(ctx: YogaContext) -> list[Yoga]:
    moon, jupiter, venus = ctx.pos("Moon"), ctx.pos("Jupiter"), ctx.pos("Venus")
    if moon is None or jupiter is None or venus is None:
        LOG.debug("Maha Raja Yoga skipped: Moon, Jupiter or Venus missing")
        return []
    if house_from_position(jupiter, moon) not in KENDRA_HOUSES:
        return []
    if house_from_position(venus, moon) not in KENDRA_HOUSES:
        return []
    strength, notes = yoga_strength([jupiter, venus, moon], ctx.chart)
    return [
        Yoga(
            name="Maha Raja Yoga",
            sanskrit_name="Maha Raja Yoga",
            category="raja",
            planets=("Jupiter", "Venus", "Moon"),
            houses=(jupiter.house, venus.house),
            description="Jupiter and Venus in Kendra from Moon",
            effects="Exceptional fortune, royal status, widespread fame, great wealth and power",
            strength=strength,
            auspicious=True,
            activation_period="Jupiter and Venus Dashas",
            cancellation_factors=notes,
        )
    ]


DETECTORS = (
    _collect_kendra_trikona,
    _collect_viparita,
    _collect_neecha_bhanga,
    _collect_maha_raja,
)
