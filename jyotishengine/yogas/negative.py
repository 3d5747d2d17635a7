"""Negative (challenging) yogas.

These carry fixed strengths rather than the additive formula: each yoga has
an uncancelled strength and, where classical texts list mitigations, a lower
strength once any mitigation is present.  Notes record which mitigations
were found.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..jyotish.affliction import is_vedic_aspecting
from ..jyotish.data import (
    DUSTHANA_HOUSES,
    KENDRA_HOUSES,
    MAIN_PLANETS,
    NATURAL_MALEFICS,
    UPACHAYA_HOUSES,
)
from .models import Yoga
from .primitives import (
    YogaContext,
    are_conjunct,
    are_mutually_aspecting,
    house_from_position,
    is_strong,
)

if TYPE_CHECKING:
    from ..chart.models import PlanetPosition

__all__ = ["DETECTORS", "KALA_SARPA_TYPES", "KALA_SARPA_NODE_ORB"]

LOG = logging.getLogger(__name__)

KALA_SARPA_NODE_ORB = 3.0

# Rahu's house -> (type name, life area delayed)
KALA_SARPA_TYPES: Mapping[int, tuple[str, str]] = {
    1: ("Anant", "self/health matters"),
    2: ("Kulik", "wealth/family matters"),
    3: ("Vasuki", "siblings/courage matters"),
    4: ("Shankhpal", "home/mother/property matters"),
    5: ("Padma", "children/education matters"),
    6: ("Mahapadma", "health/enemies matters"),
    7: ("Takshak", "marriage/partnership matters"),
    8: ("Karkotak", "longevity/inheritance matters"),
    9: ("Shankhachud", "fortune/father matters"),
    10: ("Ghatak", "career/reputation matters"),
    11: ("Vishdhar", "gains/elder siblings matters"),
    12: ("Sheshnag", "expenses/spirituality matters"),
}

_NONE_IDENTIFIED = ("None identified",)


def _negative(
    name: str,
    planets: tuple[str, ...],
    houses: tuple[int, ...],
    description: str,
    effects: str,
    strength: float,
    activation: str,
    notes: tuple[str, ...],
) -> Yoga:
    return Yoga(
        name=name,
        sanskrit_name=name,
        category="negative",
        planets=planets,
        houses=houses,
        description=description,
        effects=effects,
        strength=strength,
        auspicious=False,
        activation_period=activation,
        cancellation_factors=notes,
    )


def _jupiter_supports(moon: PlanetPosition, jupiter: PlanetPosition | None, ctx: YogaContext) -> bool:
    if jupiter is None:
        return False
    return ctx.conjunct(moon, jupiter) or are_mutually_aspecting(moon, jupiter)


def _collect_kemadruma(ctx: YogaContext) -> list[Yoga]:
    moon = ctx.pos("Moon")
    if moon is None:
        LOG.debug("Kemadruma Yoga skipped: Moon missing")
        return []
    flanking = [
        p
        for p in ctx.chart.positions
        if p.planet in MAIN_PLANETS
        and p.planet not in ("Sun", "Moon")
        and house_from_position(p, moon) in (2, 12)
    ]
    if flanking:
        return []
    cancellations: list[str] = []
    if moon.house in KENDRA_HOUSES:
        cancellations.append(f"Moon in Kendra ({moon.house}th house)")
    if _jupiter_supports(moon, ctx.pos("Jupiter"), ctx):
        cancellations.append("Jupiter aspects/conjoins Moon")
    if any(
        p.planet in MAIN_PLANETS
        and p.planet != "Moon"
        and house_from_position(p, moon) in KENDRA_HOUSES
        for p in ctx.chart.positions
    ):
        cancellations.append("Planet(s) in Kendra from Moon")
    effects = (
        "Kemadruma effects significantly reduced due to cancellation factors"
        if cancellations
        else "Poverty, suffering, struggles, lack of support, lonely, menial work"
    )
    return [
        _negative(
            "Kemadruma Yoga",
            ("Moon",),
            (moon.house,),
            "No planets in 2nd and 12th from Moon",
            effects,
            20.0 if cancellations else 80.0,
            "Moon Dasha if uncancelled",
            tuple(cancellations),
        )
    ]


def _collect_daridra(ctx: YogaContext) -> list[Yoga]:
    lord = ctx.lord(11)
    position = ctx.pos(lord)
    if position is None or position.house not in DUSTHANA_HOUSES:
        return []
    return [
        _negative(
            "Daridra Yoga",
            (lord,),
            (position.house,),
            f"11th lord ({lord}) in {position.house}th house (Dusthana)",
            "Obstacles to gains, financial struggles, unfulfilled desires",
            60.0,
            f"{lord} Dasha",
            ("If aspected by Jupiter or lord is strong",),
        )
    ]


def _collect_shakata(ctx: YogaContext) -> list[Yoga]:
    moon, jupiter = ctx.pos("Moon"), ctx.pos("Jupiter")
    if moon is None or jupiter is None:
        return []
    from_jupiter = house_from_position(moon, jupiter)
    if from_jupiter not in DUSTHANA_HOUSES:
        return []
    return [
        _negative(
            "Shakata Yoga",
            ("Moon", "Jupiter"),
            (moon.house, jupiter.house),
            f"Moon in {from_jupiter}th from Jupiter",
            "Fluctuating fortune, periods of poverty alternating with wealth",
            50.0,
            "Moon-Jupiter periods",
            ("Moon in Kendra from Lagna", "Jupiter strong"),
        )
    ]


def _collect_guru_chandal(ctx: YogaContext) -> list[Yoga]:
    jupiter, rahu = ctx.pos("Jupiter"), ctx.pos("Rahu")
    if jupiter is None or rahu is None or not ctx.conjunct(jupiter, rahu):
        return []
    return [
        _negative(
            "Guru-Chandal Yoga",
            ("Jupiter", "Rahu"),
            (jupiter.house,),
            "Jupiter conjunct Rahu",
            "Unorthodox beliefs, breaks from tradition, possible disgrace through teachers",
            65.0,
            "Jupiter-Rahu periods",
            ("Jupiter in own/exalted sign", "Aspect from benefics"),
        )
    ]


def _collect_surya_grahan(ctx: YogaContext) -> list[Yoga]:
    sun, rahu = ctx.pos("Sun"), ctx.pos("Rahu")
    if sun is None or rahu is None or not ctx.conjunct(sun, rahu):
        return []
    cancellations: list[str] = []
    if sun.house in UPACHAYA_HOUSES:
        cancellations.append("Sun in Upachaya house - effects reduced")
    if is_strong(sun):
        cancellations.append("Sun is strong - mitigates negative effects")
    return [
        _negative(
            "Surya Grahan Yoga",
            ("Sun", "Rahu"),
            (sun.house,),
            "Sun conjunct Rahu (solar eclipse combination)",
            "Father-related troubles, ego issues, problems with authority, head or eye health",
            35.0 if cancellations else 75.0,
            "Sun-Rahu periods",
            tuple(cancellations) or _NONE_IDENTIFIED,
        )
    ]


def _collect_surya_ketu(ctx: YogaContext) -> list[Yoga]:
    sun, ketu = ctx.pos("Sun"), ctx.pos("Ketu")
    if sun is None or ketu is None or not ctx.conjunct(sun, ketu):
        return []
    return [
        _negative(
            "Surya-Ketu Grahan Yoga",
            ("Sun", "Ketu"),
            (sun.house,),
            "Sun conjunct Ketu",
            "Spiritual detachment, low self-esteem, father troubles, karmic issues",
            55.0,
            "Sun-Ketu periods",
            ("Jupiter aspect", "Sun in own/exalted sign"),
        )
    ]


def _collect_chandra_grahan(ctx: YogaContext) -> list[Yoga]:
    moon, rahu = ctx.pos("Moon"), ctx.pos("Rahu")
    if moon is None or rahu is None or not ctx.conjunct(moon, rahu):
        return []
    cancellations: list[str] = []
    if is_strong(moon):
        cancellations.append("Moon is strong - reduces negative effects")
    if _jupiter_supports(moon, ctx.pos("Jupiter"), ctx):
        cancellations.append("Jupiter aspects/conjoins Moon")
    return [
        _negative(
            "Chandra Grahan Yoga",
            ("Moon", "Rahu"),
            (moon.house,),
            "Moon conjunct Rahu (lunar eclipse combination)",
            "Mental restlessness, mother troubles, emotional instability, obsessive tendencies",
            30.0 if cancellations else 70.0,
            "Moon-Rahu periods",
            tuple(cancellations) or _NONE_IDENTIFIED,
        )
    ]


def _collect_chandra_ketu(ctx: YogaContext) -> list[Yoga]:
    moon, ketu = ctx.pos("Moon"), ctx.pos("Ketu")
    if moon is None or ketu is None or not ctx.conjunct(moon, ketu):
        return []
    return [
        _negative(
            "Chandra-Ketu Yoga",
            ("Moon", "Ketu"),
            (moon.house,),
            "Moon conjunct Ketu",
            "Detachment from emotions, psychic sensitivity, mother karma",
            50.0,
            "Moon-Ketu periods",
            ("Jupiter aspect", "Moon in own/exalted sign", "Benefics in Kendra"),
        )
    ]


def _collect_angarak(ctx: YogaContext) -> list[Yoga]:
    mars, rahu = ctx.pos("Mars"), ctx.pos("Rahu")
    if mars is None or rahu is None or not ctx.conjunct(mars, rahu):
        return []
    cancellations: list[str] = []
    if is_strong(mars):
        cancellations.append("Mars is strong - can channel energy positively")
    if mars.house in UPACHAYA_HOUSES:
        cancellations.append("Mars in Upachaya - aggression becomes drive")
    return [
        _negative(
            "Angarak Yoga",
            ("Mars", "Rahu"),
            (mars.house,),
            "Mars conjunct Rahu (fiery combination)",
            "Accidents, surgery, aggression, sibling troubles, litigation, sudden events",
            50.0 if cancellations else 80.0,
            "Mars-Rahu periods",
            tuple(cancellations) or _NONE_IDENTIFIED,
        )
    ]


def _collect_shrapit(ctx: YogaContext) -> list[Yoga]:
    saturn, rahu = ctx.pos("Saturn"), ctx.pos("Rahu")
    if saturn is None or rahu is None or not ctx.conjunct(saturn, rahu):
        return []
    return [
        _negative(
            "Shrapit Yoga",
            ("Saturn", "Rahu"),
            (saturn.house,),
            "Saturn conjunct Rahu",
            "Karma manifesting as chronic obstacles, delays, fear, ancestral issues",
            75.0,
            "Saturn-Rahu periods",
            ("Jupiter aspect", "Saturn in own/exalted sign", "Proper remedial measures"),
        )
    ]


def _on_rahu_arc(longitude: float, rahu: float, ketu: float) -> bool:
    # Inclusive at both ends: a planet exactly on a node counts toward the Rahu arc.
    if rahu < ketu:
        return rahu <= longitude <= ketu
    return longitude >= rahu or longitude <= ketu


def _collect_kala_sarpa(ctx: YogaContext) -> list[Yoga]:
    rahu, ketu = ctx.pos("Rahu"), ctx.pos("Ketu")
    if rahu is None or ketu is None:
        return []
    bodies = [
        p for p in ctx.chart.positions if p.planet in MAIN_PLANETS and p.planet not in ("Rahu", "Ketu")
    ]
    if not bodies:
        return []
    sides = {_on_rahu_arc(p.longitude, rahu.longitude, ketu.longitude) for p in bodies}
    if len(sides) > 1:
        return []
    ascending = sides == {True}
    type_name, area = KALA_SARPA_TYPES[rahu.house]
    direction = "Ascending (Rahu moving)" if ascending else "Descending (Ketu moving)"

    cancellations: list[str] = []
    for body in bodies:
        if are_conjunct(body, rahu, KALA_SARPA_NODE_ORB) or are_conjunct(
            body, ketu, KALA_SARPA_NODE_ORB
        ):
            cancellations.append(f"{body.planet} closely conjunct node - partial cancellation")
    jupiter = ctx.pos("Jupiter")
    if jupiter is not None and (is_vedic_aspecting(jupiter, rahu) or is_vedic_aspecting(jupiter, ketu)):
        cancellations.append("Jupiter aspects nodal axis")

    return [
        Yoga(
            name=f"{type_name} Kala Sarpa Yoga",
            sanskrit_name=f"Kala Sarpa Yoga - {type_name}",
            category="negative",
            planets=("Rahu", "Ketu"),
            houses=(rahu.house, ketu.house),
            description=f"All planets between Rahu-Ketu axis ({direction})",
            effects=(
                "Karmic life patterns, sudden ups and downs, spiritual transformation "
                f"potential, delays in {area}"
            ),
            strength=55.0 if cancellations else 85.0,
            auspicious=False,
            activation_period="Rahu and Ketu Mahadashas especially impactful",
            cancellation_factors=tuple(cancellations) or ("No cancellation factors present",),
        )
    ]


def _collect_lagna_papakartari(ctx: YogaContext) -> list[Yoga]:
    second = [p for p in ctx.chart.planets_in_house(2) if p.planet in NATURAL_MALEFICS]
    twelfth = [p for p in ctx.chart.planets_in_house(12) if p.planet in NATURAL_MALEFICS]
    if not (second and twelfth):
        return []
    planets = tuple(dict.fromkeys(p.planet for p in second + twelfth))
    return [
        _negative(
            "Papakartari Yoga",
            planets,
            (1, 2, 12),
            "Ascendant hemmed between malefics in 2nd and 12th houses",
            "Obstacles in self-expression, health challenges, restricted opportunities",
            60.0,
            "Throughout life, especially during malefic Dashas",
            ("Strong Lagna lord", "Benefics aspecting Lagna", "Jupiter in Kendra"),
        )
    ]


DETECTORS = (
    _collect_kemadruma,
    _collect_daridra,
    _collect_shakata,
    _collect_guru_chandal,
    _collect_surya_grahan,
    _collect_surya_ketu,
    _collect_chandra_grahan,
    _collect_chandra_ketu,
    _collect_angarak,
    _collect_shrapit,
    _collect_kala_sarpa,
    _collect_lagna_papakartari,
)
